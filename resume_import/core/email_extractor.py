"""
Email extraction with a tiered recovery cascade.

PDF text extraction mangles emails in a handful of recurring ways:
- spaces injected around "@" and "." ("jane . doe @ example . com")
- the TLD dot read as a comma ("jane@gmail,com")
- the address glued to the phone number before it ("555-123-4567jane@x.com")
- the address glued to the next word ("jane@x.comLinkedIn")

Tiers run from strictest to most permissive. The first tier that yields a
valid address wins, so a clean address elsewhere in the text always beats a
repaired one. Every candidate goes through the same sanitizer.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from resume_import.core.field_extractors import PHONE_RE

logger = logging.getLogger(__name__)


# ============================================================================
# Patterns
# ============================================================================

LOCAL = r"[A-Za-z0-9._%+-]+"
STRICT_EMAIL_RE = re.compile(LOCAL + r"@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
VALID_EMAIL_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._%+-]*@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")

# Tier 2: whitespace around "@" and dots, in the local part too
SPACED_EMAIL_RE = re.compile(
    r"[A-Za-z0-9_%+-]+(?:\s*\.\s*[A-Za-z0-9_%+-]+)*" r"\s*@\s*[A-Za-z0-9-]+(?:\s*\.\s*[A-Za-z0-9-]+)*\s*\.\s*[A-Za-z]{2,}"
)

# Tier 3: comma/semicolon read in place of the TLD dot
COMMA_TLD_EMAIL_RE = re.compile(LOCAL + r"@[A-Za-z0-9.-]+[,;][A-Za-z]{2,}")

# Tier 4: any of . , ; as separator, with whitespace anywhere around them
PERMISSIVE_EMAIL_RE = re.compile(
    r"[A-Za-z0-9._%+,;-]+\s*@\s*[A-Za-z0-9-]+(?:\s*[.,;]\s*[A-Za-z0-9-]+)*\s*[.,;]\s*[A-Za-z]{2,}"
)

# Tier 5 inspects a compacted window around each "@"
WINDOW_BEFORE = 30
WINDOW_AFTER = 20

# "4567.jane@x.com" -> "jane@x.com"; digits with no letter after them stay
LEADING_DIGITS_RE = re.compile(r"^\d{4,}[^A-Za-z@]*(?=[A-Za-z])")
COMMA_TLD_RE = re.compile(r"[,;]([A-Za-z]{2,})$")
# "gmail.comLinkedIn" -> "gmail.com"
CAMEL_TLD_RE = re.compile(r"(\.[a-z]{2,})[A-Z][A-Za-z]*$")


@dataclass(frozen=True)
class Candidate:
    text: str
    start: Optional[int]  # Offset in the source text; None when taken from a compacted window
    at: Optional[int]  # Offset of "@" in the source text


# ============================================================================
# Sanitizer
# ============================================================================

def sanitize_email(raw: str) -> Optional[str]:
    """
    Repair a candidate address and validate it.

    Examples:
    - "jane . doe @ example . com" -> "jane.doe@example.com"
    - "jane@gmail,com" -> "jane@gmail.com"
    - "4567jane@x.com" -> "jane@x.com"
    - "jane@x.comGitHub" -> "jane@x.com"
    """
    email = re.sub(r"\s+", "", raw)
    email = "".join(c for c in email if 32 <= ord(c) <= 126)
    email = LEADING_DIGITS_RE.sub("", email)
    if email.count("@") != 1:
        return None

    email = COMMA_TLD_RE.sub(r".\1", email)
    local, domain = email.split("@")
    local = re.sub(r"[,;]", ".", local).lstrip("._-+%")
    domain = re.sub(r"[,;]", ".", domain)
    domain = re.sub(r"\.{2,}", ".", domain).strip(".")
    domain = CAMEL_TLD_RE.sub(r"\1", domain)

    email = f"{local}@{domain}"
    return email if VALID_EMAIL_RE.fullmatch(email) else None


# ============================================================================
# Phone contamination
# ============================================================================

def _strip_phone_prefix(text: str, cand: Candidate) -> Optional[Candidate]:
    """
    Remove a phone number that the candidate's local part swallowed, together
    with anything before it.

    Examples:
    - "555-123-4567timaz.dev@gmail,com" -> "timaz.dev@gmail,com"
    - "tel.555-123-4567jane@x.com" -> "jane@x.com"

    Returns None when nothing but the phone remains in the local part.
    """
    if cand.start is None or cand.at is None:
        return cand

    for phone in PHONE_RE.finditer(text):
        # Phone overlaps the local part and ends before "@"
        if phone.start() < cand.at and cand.start < phone.end() <= cand.at:
            prefix = text[cand.start:phone.end()]
            logger.debug(f"Email candidate {cand.text!r} carries phone digits {prefix!r}")
            rest = cand.text[len(prefix):]
            local = rest.split("@")[0]
            if not re.search(r"[A-Za-z]", local):
                return None
            return Candidate(rest, phone.end(), cand.at)
    return cand


# ============================================================================
# Tiers
# ============================================================================

def _regex_tier(pattern: re.Pattern) -> Callable[[str], List[Candidate]]:
    def tier(text: str) -> List[Candidate]:
        return [
            Candidate(m.group(0), m.start(), m.start() + m.group(0).index("@"))
            for m in pattern.finditer(text)
        ]
    return tier


def _window_tier(text: str) -> List[Candidate]:
    candidates = []
    for m in re.finditer("@", text):
        window = re.sub(r"\s+", "", text[max(0, m.start() - WINDOW_BEFORE): m.start() + WINDOW_AFTER])
        found = STRICT_EMAIL_RE.search(window) or PERMISSIVE_EMAIL_RE.search(window)
        if found:
            candidates.append(Candidate(found.group(0), None, None))
    return candidates


TIERS = (
    ("strict", _regex_tier(STRICT_EMAIL_RE)),
    ("spaced", _regex_tier(SPACED_EMAIL_RE)),
    ("comma-tld", _regex_tier(COMMA_TLD_EMAIL_RE)),
    ("permissive", _regex_tier(PERMISSIVE_EMAIL_RE)),
    ("window", _window_tier),
)


def extract_email(text: str) -> Optional[str]:
    """Return the first valid email address recovered by the strictest tier that finds one."""
    if not text or "@" not in text:
        return None

    for tier_name, tier in TIERS:
        for cand in tier(text):
            cleaned = _strip_phone_prefix(text, cand)
            if cleaned is None:
                continue
            email = sanitize_email(cleaned.text)
            if email and PHONE_RE.fullmatch(email.split("@")[0]):
                continue
            if email:
                logger.debug(f"Email recovered by {tier_name} tier: {email}")
                return email
    return None
