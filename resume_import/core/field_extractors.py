"""
Field-level extractors over normalized resume text.

Every extractor has the same contract: text -> Optional[str]. None means the
field was not found; no extractor raises on unexpected input.
"""

import logging
import re
from typing import List, Optional

from resume_import.core.text_normalization import SEPARATOR
from resume_import.core.vocabulary import (
    HEADER_BLACKLIST,
    LOCATION_KEYWORDS,
    MULTI_WORD_REGIONS,
    NON_PLACE_WORDS,
    ROLE_KEYWORDS,
    TECH_NAMES,
    US_STATES,
)

logger = logging.getLogger(__name__)

HEAD_LINES = 8  # Name and role live at the top of the document


# ============================================================================
# Patterns
# ============================================================================

# Phone: optional country code, optional parens around area code, -./ or space separators
# Handles: (555) 123-4567, 555-123-4567, +1 555 123 4567, 555.123.4567, 555/123/4567
PHONE_RE = re.compile(
    r"(?<!\d)"
    r"(?:\+?\d{1,3}[-./ ]?)?"  # Optional country code
    r"\(?\d{3}\)?"  # Area code
    r"[-./ ]?"
    r"\d{3}"  # Exchange
    r"[-./ ]?"
    r"\d{4}"  # Line number
    r"(?!\d)"
)

LINKEDIN_MARKER = "linkedin.com/in/"
LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/([A-Za-z0-9_%-]+)/?",
    re.IGNORECASE,
)
# Line break inside a profile URL: after URL punctuation, or before a lowercase fragment
# that is not itself another URL/email.
LINKEDIN_BREAK_RE = re.compile(r"(?<=[/\-_])\s+|\n\s*(?=[a-z0-9][^\s@.:/]*(?:\s|$))")

URL_START_RE = re.compile(r"https?://|www\.", re.IGNORECASE)
# Whitespace that splits a URL across lines: after URL punctuation, or before a path/domain piece
URL_BREAK_RE = re.compile(r"(?<=[/\-_=?&#:])\s+(?=\S)|\s+(?=[/.][A-Za-z0-9])")
URL_STOP_RE = re.compile(r"[\s()<>\[\]{}\"'|,;]")
URL_SCAN_LIMIT = 200

PORTFOLIO_EXCLUDED = ("linkedin", "github", "gmail", "google", "facebook", "twitter")
PORTFOLIO_PREFERRED = ("vercel.app", "netlify.app", "portfolio", ".dev", ".io")

# Name: letters plus name punctuation only (accented letters allowed)
NAME_RE = re.compile(r"[^\W\d_]+(?:[ .'-]+[^\W\d_]+)*\.?")

ROLE_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in ROLE_KEYWORDS) + r")s?\b",
    re.IGNORECASE,
)

# ASCII hyphen, en dash, em dash
DASHES = "-" + chr(0x2013) + chr(0x2014)

MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)[a-z]*\.?"
DATE_FRAGMENT_RE = re.compile(
    r"(?:" + MONTHS + r"\s+)?\d{4}\s*[" + DASHES + r"]\s*(?:(?:" + MONTHS + r"\s+)?\d{4}|Present|Current|Now)"
    r"|\d{1,2}/\d{4}"
    r"|" + MONTHS + r"\s+\d{4}"
    r"|\b(?:19|20)\d{2}\b",
    re.IGNORECASE,
)

# City tail of one comma-separated part, region head of the next:
# "City, ST" / "City, Country" / "City, Two Word Region"
CITY_TAIL_RE = re.compile(r"([A-Z][A-Za-z.'-]+(?:[ -][A-Z][A-Za-z.'-]+)*)\s*$")
REGION_HEAD_RE = re.compile(r"^\s*([A-Z]{2}(?![A-Za-z])|[A-Z][a-z]+(?: [A-Z][a-z]+)?)")
MAX_CITY_WORDS = 3


# ============================================================================
# Shared helpers
# ============================================================================

def _lines(text: str) -> List[str]:
    return [ln.strip() for ln in text.split("\n") if ln.strip()]


def _is_header_line(line: str) -> bool:
    key = re.sub(r"\s+", " ", line.strip().rstrip(":")).lower()
    return key in HEADER_BLACKLIST


def rejoin_url_breaks(segment: str) -> str:
    """Remove whitespace that a PDF line wrap inserted inside a URL."""
    return URL_BREAK_RE.sub("", segment)


# ============================================================================
# Extractors
# ============================================================================

def extract_phone(text: str) -> Optional[str]:
    m = PHONE_RE.search(text)
    return m.group(0).strip() if m else None


def extract_linkedin(text: str) -> Optional[str]:
    """
    Extract a LinkedIn profile URL, normalized to https://www.linkedin.com/in/<slug>.

    PDF wrapping often breaks the URL across lines:
    - "linkedin.com/in/\\njane-doe" -> "https://www.linkedin.com/in/jane-doe"
    - "linkedin.com/in/jane-\\ndoe-42/" -> "https://www.linkedin.com/in/jane-doe-42"
    """
    idx = text.lower().find(LINKEDIN_MARKER)
    if idx != -1:
        window = text[max(0, idx - 100): idx + 150]
        m = LINKEDIN_RE.search(LINKEDIN_BREAK_RE.sub("", window))
        if m:
            return f"https://www.linkedin.com/in/{m.group(1).rstrip('-')}"

    # Fallback: marker itself was split ("linkedin . com / in / jane")
    collapsed = re.sub(r"\s*([./])\s*", r"\1", text)
    m = LINKEDIN_RE.search(collapsed)
    if m:
        return f"https://www.linkedin.com/in/{m.group(1).rstrip('-')}"
    return None


def extract_portfolio(text: str) -> Optional[str]:
    """
    Extract a personal website URL.

    Every http(s):// or www. occurrence is reconstructed across line breaks and
    cut at the first whitespace/bracket. Social, mail and code-hosting domains
    are excluded; hosting/portfolio-looking URLs win over the rest.
    """
    candidates: List[str] = []
    for m in URL_START_RE.finditer(text):
        start = m.start()
        if m.group(0).lower() == "www." and (text[max(0, start - 3):start] == "://" or (start and text[start - 1].isalnum())):
            continue

        segment = rejoin_url_breaks(text[start:start + URL_SCAN_LIMIT])
        stop = URL_STOP_RE.search(segment)
        url = (segment[:stop.start()] if stop else segment).rstrip(".,;:!?)")

        host = re.sub(r"^(?:https?://)?(?:www\.)?", "", url, flags=re.IGNORECASE)
        if "." not in host:
            continue
        if any(domain in url.lower() for domain in PORTFOLIO_EXCLUDED):
            continue
        if url.lower().startswith("www."):
            url = f"https://{url}"
        if url not in candidates:
            candidates.append(url)

    if not candidates:
        return None
    for url in candidates:
        if any(marker in url.lower() for marker in PORTFOLIO_PREFERRED):
            return url
    return candidates[0]


def extract_name(text: str) -> Optional[str]:
    """
    Name is usually one of the first lines: 2-4 words, no contact data.
    ALL-CAPS names are re-cased ("JANE DOE" -> "Jane Doe").
    """
    for line in _lines(text)[:HEAD_LINES]:
        if "@" in line or line[0].isdigit() or "http" in line.lower():
            continue
        if _is_header_line(line) or ROLE_RE.search(line):
            continue
        if not NAME_RE.fullmatch(line):
            continue
        if 2 <= len(line.split()) <= 4:
            return line.title() if line.isupper() else line
    return None


def extract_role(text: str) -> Optional[str]:
    """
    Professional title near the top: "Senior Frontend Developer".

    Headline lines like "Backend Engineer | Portland, OR" are split on "|" and
    the segment carrying a role keyword is used; date fragments are dropped.
    """
    name = extract_name(text)
    for line in _lines(text)[:HEAD_LINES]:
        if line == name or "@" in line or "http" in line.lower():
            continue
        for segment in re.split(r"\s*[|" + SEPARATOR + r"]\s*", line):
            cleaned = DATE_FRAGMENT_RE.sub(" ", segment)
            cleaned = re.sub(r"\s+", " ", cleaned).strip(" ,|:" + DASHES)
            if not cleaned or _is_header_line(cleaned):
                continue
            words = cleaned.split()
            if 1 <= len(words) <= 6 and ROLE_RE.search(cleaned):
                return cleaned
    return None


def _location_candidate(city_part: str, region: str) -> Optional[str]:
    city_words = city_part.replace("-", " - ").split()
    city_words = [w for w in city_words if w != "-"][-MAX_CITY_WORDS:]
    while city_words and city_words[0].lower().strip(".") in NON_PLACE_WORDS:
        city_words.pop(0)
    if not city_words:
        return None
    # "Acme Corp, Seattle" is a company, not a city
    if any(w.lower().strip(".") in NON_PLACE_WORDS for w in city_words):
        return None

    region_words = region.split()
    if len(region_words) == 2 and region.lower() not in MULTI_WORD_REGIONS:
        region = region_words[0]
    if region not in US_STATES and region.lower() in NON_PLACE_WORDS:
        return None

    words = [w.lower().strip(".") for w in city_words] + [region.lower()]
    if any(w in TECH_NAMES for w in words):
        return None
    return f"{' '.join(city_words)}, {region}"


def _is_known_location(candidate: str) -> bool:
    city, _, region = candidate.rpartition(", ")
    return (
        region in US_STATES
        or region.lower() in LOCATION_KEYWORDS
        or city.lower() in LOCATION_KEYWORDS
    )


def find_locations(text: str) -> List[str]:
    """All plausible "City, Region" spans in text order, technology false positives removed."""
    found: List[str] = []
    for line in _lines(text):
        parts = line.split(",")
        # Pairwise so "Acme, Seattle, WA" still yields "Seattle, WA"
        for left, right in zip(parts, parts[1:]):
            city = CITY_TAIL_RE.search(left)
            region = REGION_HEAD_RE.match(right)
            if not city or not region:
                continue
            candidate = _location_candidate(city.group(1), region.group(1))
            if candidate and candidate not in found:
                found.append(candidate)
    return found


def extract_location(text: str) -> Optional[str]:
    """
    First "City, Region" whose region is a US state code or a known place wins,
    otherwise the longest candidate. "React, Vue" style lists are never locations.
    """
    candidates = find_locations(text)
    if not candidates:
        return None
    for candidate in candidates:
        if _is_known_location(candidate):
            return candidate
    logger.debug(f"No known location keyword among {candidates}; using longest")
    return max(candidates, key=len)
