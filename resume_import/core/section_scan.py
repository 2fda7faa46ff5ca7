"""
Section detection shared by the summary, experience, education and skills scanners.

A section is entered on the first header-like line containing one of its
keywords. By default a scanner then runs to the end of the text; with
section boundaries enabled, the next recognised section header ends it.
"""

import re
from typing import Iterable, List, Optional

from resume_import.core import config
from resume_import.core.vocabulary import HEADER_BLACKLIST

MAX_HEADER_WORDS = 5


def split_lines(text: str) -> List[str]:
    """Non-empty, trimmed lines."""
    return [ln.strip() for ln in text.split("\n") if ln.strip()]


def header_key(line: str) -> str:
    """'  WORK  Experience: ' -> 'work experience'"""
    return re.sub(r"\s+", " ", line.strip().rstrip(":").strip()).lower()


def is_section_entry(line: str, keywords: Iterable[str]) -> bool:
    """
    True when line looks like a header for a section with these keywords.

    Substring match, limited to short lines or text before a colon so that
    prose mentioning "experience" does not open the Experience section.

    Examples:
        "PROFESSIONAL EXPERIENCE" -> True for experience keywords
        "Skills: Python, Go" -> True for skills keywords
        "5 years of experience building web apps" -> False
    """
    lowered = line.lower()
    head = lowered.split(":", 1)[0] if ":" in lowered else lowered
    if len(head.split()) > MAX_HEADER_WORDS:
        return False
    return any(k in head for k in keywords)


def is_other_section_header(line: str, keywords: Iterable[str]) -> bool:
    """A known section header that does not belong to the given keyword set."""
    key = header_key(line)
    if key not in HEADER_BLACKLIST:
        return False
    return not any(k in key for k in keywords)


def use_boundaries(stop_at_next_section: Optional[bool]) -> bool:
    if stop_at_next_section is None:
        return config.SECTION_BOUNDARIES
    return stop_at_next_section


def section_lines(
    text: str,
    keywords: Iterable[str],
    stop_at_next_section: Optional[bool] = None,
    include_entry: bool = False,
) -> List[str]:
    """
    Lines after the first section entry, up to the end of text (default) or
    the next other section header (boundaries enabled). Empty when the
    section is never entered.

    include_entry keeps the entry line itself, for sections whose keywords
    also match content ("Stanford University" opens Education).
    """
    keywords = tuple(keywords)
    lines = split_lines(text)
    bounded = use_boundaries(stop_at_next_section)

    for i, line in enumerate(lines):
        if is_section_entry(line, keywords):
            body = lines[i + 1:]
            if bounded:
                for j, candidate in enumerate(body):
                    if is_other_section_header(candidate, keywords):
                        body = body[:j]
                        break
            return [line] + body if include_entry else body
    return []
