"""
Professional summary extraction.
"""

import logging
from typing import Optional

from resume_import.core.section_scan import (
    is_other_section_header,
    is_section_entry,
    split_lines,
    use_boundaries,
)
from resume_import.core.vocabulary import SUMMARY_KEYWORDS

logger = logging.getLogger(__name__)

SUMMARY_WINDOW = 5  # Lines inspected after the header
MIN_LINE_LENGTH = 20  # Shorter lines are headers, contact bits, stray words
MAX_SUMMARY_LENGTH = 500


def extract_summary(text: str, stop_at_next_section: Optional[bool] = None) -> Optional[str]:
    """
    Join the substantial lines that follow a Summary/Objective/Profile header.

    A header whose following lines are all too short does not end the search;
    the next header-like keyword line is tried.
    """
    lines = split_lines(text)
    bounded = use_boundaries(stop_at_next_section)

    for i, line in enumerate(lines):
        if "@" in line or "http" in line.lower():
            continue
        if not is_section_entry(line, SUMMARY_KEYWORDS):
            continue

        picked = []
        for following in lines[i + 1:i + 1 + SUMMARY_WINDOW]:
            if bounded and is_other_section_header(following, SUMMARY_KEYWORDS):
                break
            if len(following) > MIN_LINE_LENGTH:
                picked.append(following)

        if picked:
            logger.debug(f"Summary taken from {len(picked)} line(s) after header {line!r}")
            return " ".join(picked)[:MAX_SUMMARY_LENGTH].rstrip()
        logger.debug(f"Summary header {line!r} had no content; continuing")

    return None
