"""
Runtime settings for the resume import service.

Values come from the environment (or a local .env file) and fall back to the
defaults below.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Normalized text shorter than this is treated as an empty/corrupt document
MIN_TEXT_LENGTH = int(os.getenv("MIN_TEXT_LENGTH", "100"))

# Upload size limit for the /parse route (10MB)
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# When enabled, summary/experience/education scans stop at the next section header
# instead of running to the end of the document.
SECTION_BOUNDARIES = _env_bool("SECTION_BOUNDARIES", False)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
