from io import BytesIO
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from resume_import.core.errors import UnreadableDocumentError


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Paragraph text of a DOCX in document order, one paragraph per line.
    Table cells are appended row by row, cells separated by " | ".
    """
    try:
        doc = Document(BytesIO(docx_bytes))
    except (PackageNotFoundError, BadZipFile, KeyError, ValueError) as exc:
        raise UnreadableDocumentError("DOCX appears to be empty or unreadable") from exc

    lines = [p.text.strip() for p in doc.paragraphs if p.text and p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text and c.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)
