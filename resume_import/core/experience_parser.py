"""
Work experience extraction.

The Experience section is scanned line by line as a fold with one pending
record. A record-start line (contains " at ", " | " or a date) closes the
pending record and opens the next one; other substantial lines become the
pending record's description.

Supported record-start shapes:
    Senior Backend Engineer at Acme Corp 2019 - Present
    Software Engineer | Acme Corp | Seattle, WA | 01/2018 - 03/2020
    Acme Corp | Data Analyst | Jan 2016 - Dec 2017
    Acme Corp, Portland, OR          (company with trailing location)
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from resume_import.core.field_extractors import DASHES, ROLE_RE
from resume_import.core.schemas import ExperienceEntry
from resume_import.core.section_scan import section_lines
from resume_import.core.text_normalization import SEPARATOR
from resume_import.core.vocabulary import EXPERIENCE_KEYWORDS

logger = logging.getLogger(__name__)

MAX_EXPERIENCES = 10
MAX_DESCRIPTION_LENGTH = 2000
MIN_DESCRIPTION_LINE = 10
MAX_HEADLINE_WORDS = 14  # Longer " at " lines are prose, not job headlines


# ============================================================================
# Date patterns
# ============================================================================

MONTH_NUMBERS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

MONTH_NAME = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?"
DATE_TOKEN = r"(?:\d{1,2}/\d{4}|" + MONTH_NAME + r"\s+\d{4}|\d{4})"

DATE_RANGE_RE = re.compile(
    r"(" + DATE_TOKEN + r")\s*(?:[" + DASHES + r"]|\bto\b)\s*(" + DATE_TOKEN + r"|Present|Current|Now)",
    re.IGNORECASE,
)
SINGLE_DATE_RE = re.compile(r"\b\d{1,2}/\d{4}\b|\b" + MONTH_NAME + r"\s+\d{4}\b", re.IGNORECASE)

CURRENT_WORDS = {"present", "current", "now"}

# "Acme Corp, Seattle, WA" -> company "Acme Corp", location "Seattle, WA"
TRAILING_LOCATION_RE = re.compile(
    r"^(?P<company>.+?),\s*(?P<location>[A-Z][A-Za-z.' -]*[A-Za-z.],\s*(?:[A-Z]{2}|[A-Z][a-z]+(?: [A-Z][a-z]+)?))$"
)

BULLET_PREFIX_RE = re.compile(r"^[-*>" + SEPARATOR + r"]+\s*")


def normalize_date(token: str) -> str:
    """
    Normalize a date token to YYYY-MM.

    Examples:
        "3/2019" -> "2019-03"
        "Sept 2020" -> "2020-09"
        "2019" -> "2019-01"
        "13/2019" -> "2019-01"  (month out of range, year kept)
    """
    token = token.strip()
    if "/" in token:
        month, year = token.split("/")
        if not 1 <= int(month) <= 12:
            return f"{year}-01"
        return f"{year}-{int(month):02d}"
    parts = token.split()
    if len(parts) == 2:
        month = MONTH_NUMBERS.get(parts[0][:3].lower(), 1)
        return f"{parts[1]}-{month:02d}"
    return f"{token}-01"


# ============================================================================
# Pending record
# ============================================================================

@dataclass(frozen=True)
class PendingExperience:
    role: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    is_current: bool = False
    description: Tuple[str, ...] = ()

    def is_complete(self) -> bool:
        return bool(re.search(r"[A-Za-z]", self.role) and re.search(r"[A-Za-z]", self.company))

    def complements(self, other: "PendingExperience") -> bool:
        """
        True when other only fills fields still empty here, e.g. a date-only
        line under "Engineer at Acme", and no description has accumulated yet.
        """
        if self.description:
            return False
        for field in ("role", "company", "start_date"):
            if getattr(self, field) and getattr(other, field):
                return False
        return True

    def merged(self, other: "PendingExperience") -> "PendingExperience":
        changes = {
            field: getattr(other, field)
            for field in ("role", "company", "location", "start_date", "end_date", "is_current")
            if getattr(other, field) and not getattr(self, field)
        }
        return replace(self, **changes)

    def with_description(self, line: str) -> "PendingExperience":
        return replace(self, description=self.description + (line,))

    def to_entry(self, index: int) -> ExperienceEntry:
        return ExperienceEntry(
            id=index + 1,
            company=self.company,
            role=self.role,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            is_current=self.is_current,
            description="\n".join(self.description)[:MAX_DESCRIPTION_LENGTH],
            order=index,
        )


# ============================================================================
# Line classification and parsing
# ============================================================================

def is_bullet_line(line: str) -> bool:
    return bool(BULLET_PREFIX_RE.match(line))


def is_record_start(line: str) -> bool:
    """
    Record-start lines: " at ", " | ", or a date.

    Bullet lines and long sentences that merely contain " at " stay description.
    """
    if is_bullet_line(line):
        return False
    if DATE_RANGE_RE.search(line) or SINGLE_DATE_RE.search(line) or " | " in line:
        return True
    if " at " in line:
        return len(line.split()) <= MAX_HEADLINE_WORDS and not line.rstrip().endswith(".")
    return False


def _split_trailing_location(company: str) -> Tuple[str, str]:
    m = TRAILING_LOCATION_RE.match(company)
    if m:
        return m.group("company").strip(), m.group("location").strip()
    return company, ""


def parse_record_line(line: str) -> PendingExperience:
    """
    Parse a record-start line into a partial record.

    Examples:
        "Senior Backend Engineer at Acme Corp 2019 - Present"
            -> role="Senior Backend Engineer", company="Acme Corp",
               start_date="2019-01", is_current=True
        "Acme Corp | Data Analyst | Jan 2016 - Dec 2017"
            -> role="Data Analyst", company="Acme Corp",
               start_date="2016-01", end_date="2017-12"
    """
    start_date, end_date, is_current = "", None, False
    m = DATE_RANGE_RE.search(line)
    if m:
        start_date = normalize_date(m.group(1))
        if m.group(2).lower() in CURRENT_WORDS:
            is_current = True
        else:
            end_date = normalize_date(m.group(2))
        line = line[:m.start()] + " " + line[m.end():]
    else:
        single = SINGLE_DATE_RE.search(line)
        if single:
            start_date = normalize_date(single.group(0))
            line = line[:single.start()] + " " + line[single.end():]

    strip_chars = " ,|()" + DASHES
    rest = re.sub(r"\s+", " ", line).strip(strip_chars)
    rest = re.sub(r"(?:\s*\|\s*)+$", "", rest)

    role, company, location = "", "", ""
    if " at " in rest:
        role, company = (part.strip(strip_chars) for part in rest.split(" at ", 1))
    elif "|" in rest:
        parts = [p.strip(strip_chars) for p in rest.split("|") if p.strip(strip_chars)]
        if len(parts) >= 2:
            first, second = parts[0], parts[1]
            if ROLE_RE.search(second) and not ROLE_RE.search(first):
                company, role = first, second
            else:
                role, company = first, second
            if len(parts) > 2:
                location = parts[2]
        elif parts:
            role, company = (parts[0], "") if ROLE_RE.search(parts[0]) else ("", parts[0])
    elif rest:
        if ROLE_RE.search(rest):
            role = rest
        else:
            company = rest

    if company and not location:
        company, location = _split_trailing_location(company)

    return PendingExperience(
        role=role,
        company=company,
        location=location,
        start_date=start_date,
        end_date=end_date,
        is_current=is_current,
    )


# ============================================================================
# Public API
# ============================================================================

def parse_experience_lines(lines: List[str]) -> List[ExperienceEntry]:
    """Fold the body lines of an Experience section into entries (at most 10)."""
    entries: List[ExperienceEntry] = []
    pending: Optional[PendingExperience] = None

    def flush(record: Optional[PendingExperience]) -> None:
        if record is not None and record.is_complete() and len(entries) < MAX_EXPERIENCES:
            entries.append(record.to_entry(len(entries)))
            logger.debug(f"Experience entry closed: {record.role!r} at {record.company!r}")

    for line in lines:
        if len(entries) >= MAX_EXPERIENCES:
            break

        if is_record_start(line):
            partial = parse_record_line(line)
            if pending is not None and pending.complements(partial):
                pending = pending.merged(partial)
                continue
            flush(pending)
            pending = partial
            continue

        if pending is not None and len(line) > MIN_DESCRIPTION_LINE:
            pending = pending.with_description(BULLET_PREFIX_RE.sub("", line).strip())

    flush(pending)
    return entries


def extract_experiences(text: str, stop_at_next_section: Optional[bool] = None) -> List[ExperienceEntry]:
    lines = section_lines(text, EXPERIENCE_KEYWORDS, stop_at_next_section)
    if not lines:
        return []
    return parse_experience_lines(lines)
