from io import BytesIO

import pytest
from docx import Document


SAMPLE_RESUME = """JANE DOE
Senior Backend Engineer
jane.doe@example.com | (555) 123-4567 | Portland, OR
linkedin.com/in/janedoe | https://janedoe.dev

Summary
Backend engineer with eight years of experience building APIs and data pipelines.

Experience
Senior Backend Engineer at Acme Corp 2019 - Present
- Built the billing platform serving two million customers
Software Engineer | Globex | Seattle, WA | 01/2016 - 12/2018
- Migrated the monolith to services

Education
Bachelor of Science in Computer Science
Oregon State University, Corvallis, OR | 2012 - 2016

Skills
Languages: Python, Go, SQL
Tools: Docker, Kubernetes, PostgreSQL
"""


def make_docx(lines):
    doc = Document()
    for line in lines:
        doc.add_paragraph(line)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def _pdf_escape(s):
    return s.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(lines):
    """Single-page PDF with one Helvetica text line per entry (blank entries skipped)."""
    content = "BT /F1 11 Tf 72 740 Td 14 TL\n"
    content += "".join(f"({_pdf_escape(line)}) Tj T*\n" for line in lines if line.strip())
    content += "ET"

    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        "/Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(content)} >>\nstream\n{content}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = b"%PDF-1.4\n"
    offsets = []
    for i, obj in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{i} 0 obj\n{obj}\nendobj\n".encode("latin-1")

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("latin-1")
    out += "".join(f"{off:010d} 00000 n \n" for off in offsets).encode("latin-1")
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode("latin-1")
    return out


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME
