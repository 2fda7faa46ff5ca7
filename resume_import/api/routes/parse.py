import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from resume_import.core import config
from resume_import.core.confidence_calculator import ConfidenceCalculator
from resume_import.core.docx_extractor import extract_docx_text
from resume_import.core.errors import UnreadableDocumentError
from resume_import.core.pdf_extractor import extract_pdf_text
from resume_import.core.resume_parser import parse_resume_text
from resume_import.core.schemas import ExtractionResult, ParseResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPES = {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}


def _extract_text(raw: bytes, filename: str, content_type: str) -> str:
    if filename.endswith(".docx") or content_type in DOCX_CONTENT_TYPES:
        return extract_docx_text(raw)
    if filename.endswith(".pdf") or content_type == "application/pdf":
        return extract_pdf_text(raw)
    if content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
        return raw.decode("utf-8", errors="replace")
    raise HTTPException(status_code=415, detail=f"Unsupported content type: {content_type or 'unknown'}")


def _extract_and_parse(raw: bytes, filename: str, content_type: str) -> ExtractionResult:
    return parse_resume_text(_extract_text(raw, filename, content_type))


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume",
    description="Extract structured resume data (personal info, summary, experience, education, skills) from a PDF, DOCX or TXT file, with a completeness confidence score.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "personalInfo": {
                            "name": "Jane Doe",
                            "role": "Senior Backend Engineer",
                            "email": "jane.doe@example.com",
                            "phone": "(555) 123-4567",
                            "location": "Portland, OR",
                            "linkedinUrl": "https://www.linkedin.com/in/janedoe",
                            "portfolioUrl": "https://janedoe.dev",
                        },
                        "summary": {"content": "Backend engineer with eight years of experience building APIs."},
                        "experiences": [
                            {
                                "id": 1,
                                "company": "Acme Corp",
                                "role": "Senior Backend Engineer",
                                "location": "",
                                "startDate": "2019-01",
                                "endDate": None,
                                "isCurrent": True,
                                "description": "Built the billing platform",
                                "order": 0,
                            }
                        ],
                        "education": None,
                        "skills": [{"id": 1, "name": "Python", "category": "General", "order": 0}],
                        "confidence": 0.78,
                        "fileName": "resume.pdf",
                        "fileSize": 48213,
                        "parseQuality": "high",
                        "warnings": [],
                    }
                }
            },
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File larger than the upload limit"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"},
    },
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT format)")
):
    """
    Parse a resume file and extract structured data.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - DOCX (.docx)
    - TXT / Markdown (.txt, .md)
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large: {len(raw)} bytes (limit {config.MAX_UPLOAD_BYTES}).",
        )

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    try:
        result = await run_in_threadpool(_extract_and_parse, raw, filename, content_type)
    except UnreadableDocumentError as exc:
        logger.info(f"Unreadable upload {file.filename!r}: {exc}")
        raise HTTPException(status_code=422, detail=str(exc))

    warnings = []
    if result.personal_info is None:
        warnings.append("No contact details found")
    if not result.experiences:
        warnings.append("No work experience section found")

    return ParseResponse(
        **result.model_dump(),
        file_name=file.filename,
        file_size=len(raw),
        parse_quality=ConfidenceCalculator.parse_quality(result.confidence),
        warnings=warnings,
    )
