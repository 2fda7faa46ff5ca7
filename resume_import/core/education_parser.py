"""
Education parsing module for extracting degree entries from resumes.

Deterministic, rule-based: a degree line carries a degree keyword followed by
"in"/"of" and the field of study; the institution is looked up on the next
line, the degree line itself, then the line above it.
"""

import logging
import re
from typing import List, Optional, Tuple

from resume_import.core.field_extractors import DASHES, find_locations
from resume_import.core.schemas import EducationEntry
from resume_import.core.section_scan import section_lines
from resume_import.core.vocabulary import EDUCATION_KEYWORDS

logger = logging.getLogger(__name__)

MAX_EDUCATION = 5
GRADUATION_MONTH = "05"


# ===== DEGREE KEYWORDS (Strong Signal) =====

WORD_DEGREE = r"Bachelor(?:'s|s)?|Master(?:'s|s)?|Doctorate|Associate(?:'s)?"
ABBREVIATED_DEGREE = (
    r"Ph\.?\s?D\.?|B\.\s?S\.?|B\.\s?A\.?|M\.\s?S\.?|M\.\s?A\.?|B\.?\s?Tech|M\.?\s?Tech|MBA"
)
DEGREE_RE = re.compile(
    r"\b(?:(?P<word>" + WORD_DEGREE + r")|(?P<abbr>" + ABBREVIATED_DEGREE + r"))(?![A-Za-z])"
)

# "in" wins over "of": "Bachelor of Science in Computer Science"
IN_CONNECTOR_RE = re.compile(r"\s+in\s+", re.IGNORECASE)
OF_CONNECTOR_RE = re.compile(r"\s+of\s+", re.IGNORECASE)

# Field of study ends at a delimiter, a date, or an institution clause
FIELD_END_RE = re.compile(r"[,|(\d;" + DASHES[1:] + r"]|\s-\s|\s(?:at|from)\s", re.IGNORECASE)

# ===== INSTITUTION DETECTION =====

INSTITUTION_RE = re.compile(r"\b(?:University|College|Institute|School|Academy|Polytechnic)\b")
INSTITUTION_SPLIT_RE = re.compile(r"\s*(?:[|,;]|\s[" + DASHES + r"]\s)\s*")

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def split_degree_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a degree line into (degree, field).

    Examples:
        "Bachelor of Science in Computer Science, 2018"
            -> ("Bachelor of Science", "Computer Science")
        "Master of Business Administration" -> ("Master", "Business Administration")
        "B.S. Computer Science | 2016" -> ("B.S.", "Computer Science")
        "Bachelor's degree" -> None
    """
    m = DEGREE_RE.search(line)
    if not m:
        return None

    tail = line[m.start():]
    connector = IN_CONNECTOR_RE.search(tail) or OF_CONNECTOR_RE.search(tail)
    if connector:
        degree = tail[:connector.start()]
        rest = tail[connector.end():]
    elif m.group("abbr"):
        degree = m.group(0)
        rest = tail[len(degree):].lstrip(" ,:" + DASHES)
    else:
        return None

    end = FIELD_END_RE.search(rest)
    field = (rest[:end.start()] if end else rest).strip(" .,:")
    degree = re.sub(r"\s+", " ", degree).strip(" ,:")
    # "MBA, Harvard Business School" names the school, not a field
    if not field or INSTITUTION_RE.search(field):
        return None
    return degree, field


def institution_from_line(line: str) -> Optional[str]:
    """'Stanford University | Stanford, CA | 2014 - 2018' -> 'Stanford University'"""
    if not INSTITUTION_RE.search(line):
        return None
    for part in INSTITUTION_SPLIT_RE.split(line):
        if INSTITUTION_RE.search(part) and not DEGREE_RE.search(part):
            return part.strip()
    return None


def _graduation_date(*lines: str) -> str:
    for line in lines:
        years = YEAR_RE.findall(line)
        if years:
            return f"{max(years)}-{GRADUATION_MONTH}"
    return ""


def parse_education_lines(lines: List[str]) -> List[EducationEntry]:
    entries: List[EducationEntry] = []

    for i, line in enumerate(lines):
        if len(entries) >= MAX_EDUCATION:
            break

        split = split_degree_line(line)
        if not split:
            continue
        degree, field = split

        institution, institution_line = None, ""
        # Next line, same line, previous line; a neighbouring degree line belongs to another entry
        for j in (i + 1, i, i - 1):
            if j < 0 or j >= len(lines):
                continue
            candidate = lines[j]
            if j != i and DEGREE_RE.search(candidate):
                continue
            institution = institution_from_line(candidate)
            if institution:
                institution_line = candidate
                break

        location = ""
        if institution_line:
            locations = find_locations(institution_line)
            if locations:
                location = locations[0]

        graduation_date = _graduation_date(line, institution_line)
        logger.debug(f"Education entry: {degree!r} in {field!r} at {institution!r} ({graduation_date})")
        entries.append(
            EducationEntry(
                id=len(entries) + 1,
                institution=institution or "",
                degree=degree,
                field=field,
                graduation_date=graduation_date,
                location=location,
                order=len(entries),
            )
        )

    return entries


def extract_education(text: str, stop_at_next_section: Optional[bool] = None) -> List[EducationEntry]:
    """Degree entries from the Education section, at most 5."""
    lines = section_lines(text, EDUCATION_KEYWORDS, stop_at_next_section, include_entry=True)
    return parse_education_lines(lines)
