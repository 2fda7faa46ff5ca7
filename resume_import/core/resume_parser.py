"""
Resume extraction entry point.

buffer -> text -> normalized text -> field/section extraction -> scored result.

Extractors never raise; the only failure is UnreadableDocumentError for text
too short to hold a resume.
"""

import logging
from typing import Optional

from resume_import.core import config
from resume_import.core.confidence_calculator import ConfidenceCalculator
from resume_import.core.education_parser import extract_education
from resume_import.core.email_extractor import extract_email
from resume_import.core.errors import UnreadableDocumentError
from resume_import.core.experience_parser import extract_experiences
from resume_import.core.field_extractors import (
    extract_linkedin,
    extract_location,
    extract_name,
    extract_phone,
    extract_portfolio,
    extract_role,
)
from resume_import.core.schemas import ExtractionResult, PersonalInfoGuess, SummaryGuess
from resume_import.core.skills_parser import extract_skills
from resume_import.core.summary_parser import extract_summary
from resume_import.core.text_normalization import normalize

logger = logging.getLogger(__name__)


def extract_personal_info(text: str) -> Optional[PersonalInfoGuess]:
    info = PersonalInfoGuess(
        name=extract_name(text),
        role=extract_role(text),
        email=extract_email(text),
        phone=extract_phone(text),
        location=extract_location(text),
        linkedin_url=extract_linkedin(text),
        portfolio_url=extract_portfolio(text),
    )
    return None if info.is_empty() else info


def parse_resume_text(raw_text: str, section_boundaries: Optional[bool] = None) -> ExtractionResult:
    """
    Extract structured resume data from raw document text.

    section_boundaries overrides the SECTION_BOUNDARIES setting: when true, the
    summary, experience and education scans stop at the next section header.

    Raises:
        UnreadableDocumentError: normalized text is shorter than MIN_TEXT_LENGTH.
    """
    text = normalize(raw_text)
    if len(text) < config.MIN_TEXT_LENGTH:
        logger.debug(f"Normalized text too short: {len(text)} chars")
        raise UnreadableDocumentError()

    # Inline bullets stay as separators for list splitting
    list_text = normalize(raw_text, keep_separators=True)

    summary = extract_summary(text, section_boundaries)
    experiences = extract_experiences(text, section_boundaries)
    education = extract_education(text, section_boundaries)
    skills = extract_skills(list_text)

    result = ExtractionResult(
        personal_info=extract_personal_info(text),
        summary=SummaryGuess(content=summary) if summary else None,
        experiences=experiences or None,
        education=education or None,
        skills=skills or None,
    )
    result.confidence = ConfidenceCalculator.score(result)

    logger.debug(
        f"Extracted {len(experiences)} experience(s), {len(education)} education entr(ies), "
        f"{len(skills)} skill(s); confidence {result.confidence:.2f}"
    )
    return result


def parse_resume(buffer: bytes, section_boundaries: Optional[bool] = None) -> ExtractionResult:
    """Parse a buffer of UTF-8 text (undecodable bytes are replaced, never fatal)."""
    return parse_resume_text(buffer.decode("utf-8", errors="replace"), section_boundaries)
