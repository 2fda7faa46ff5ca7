from io import BytesIO

import pytest
from docx import Document

from conftest import make_docx, make_pdf
from resume_import.core.docx_extractor import extract_docx_text
from resume_import.core.errors import UnreadableDocumentError
from resume_import.core.pdf_extractor import extract_pdf_text


def test_pdf_lines_preserved():
    text = extract_pdf_text(make_pdf(["Jane Doe", "jane.doe@example.com | (555) 123-4567", "Skills: Python, Go"]))
    assert text.splitlines() == ["Jane Doe", "jane.doe@example.com | (555) 123-4567", "Skills: Python, Go"]


def test_pdf_without_text_layer_is_empty():
    assert extract_pdf_text(make_pdf([])) == ""


def test_corrupt_pdf_raises():
    with pytest.raises(UnreadableDocumentError):
        extract_pdf_text(b"%PDF-1.4 truncated")


def test_docx_paragraphs():
    text = extract_docx_text(make_docx(["Jane Doe", "", "Skills: Python, Go"]))
    assert text == "Jane Doe\nSkills: Python, Go"


def test_docx_tables_appended():
    doc = Document()
    doc.add_paragraph("Experience")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Engineer at Acme Corp"
    table.rows[0].cells[1].text = "2019 - Present"
    buf = BytesIO()
    doc.save(buf)

    assert extract_docx_text(buf.getvalue()) == "Experience\nEngineer at Acme Corp | 2019 - Present"


def test_corrupt_docx_raises():
    with pytest.raises(UnreadableDocumentError):
        extract_docx_text(b"not a zip archive")
