class UnreadableDocumentError(ValueError):
    """Raised when a document yields too little text to extract anything from."""

    def __init__(self, message: str = "PDF appears to be empty or unreadable"):
        super().__init__(message)
