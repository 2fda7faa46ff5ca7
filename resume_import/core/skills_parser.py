"""
Skills extraction.

The Skills section is the only one with an explicit end: the next section
header, or a long prose line (summary text that leaked below the list).

Supported layouts:
    Skills: Python, Go, Docker
    Frontend:
    React, Vue | Tailwind
    Backend: Node.js; Django; PostgreSQL
"""

import logging
import re
from typing import List, Optional, Tuple

from resume_import.core.experience_parser import DATE_RANGE_RE, DATE_TOKEN
from resume_import.core.schemas import SkillEntry
from resume_import.core.section_scan import header_key, is_other_section_header, is_section_entry, split_lines
from resume_import.core.text_normalization import SEPARATOR
from resume_import.core.vocabulary import (
    HEADER_BLACKLIST,
    SENTENCE_CONNECTIVES,
    SKILL_STOP_WORDS,
    SKILLS_KEYWORDS,
    TECH_KEYWORDS,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"
MAX_SKILLS = 30
MIN_SKILL_LENGTH = 2
MAX_SKILL_LENGTH = 30
MAX_CATEGORY_WORDS = 4
PROSE_MIN_LENGTH = 80
PROSE_MIN_CONNECTIVES = 2

# Token separators: , ; | bullet * and hyphens used as separators (not "front-end")
SKILL_SPLIT_RE = re.compile(r"\s*[,;|*" + SEPARATOR + r"]\s*|\s+-\s+|^-\s*")

# "Frontend:" or "Cloud & DevOps: AWS, Docker"
CATEGORY_RE = re.compile(r"^(?P<category>[A-Za-z][A-Za-z0-9 &/+.#-]*?)\s*:\s*(?P<rest>.*)$")

# ===== EXCLUSION PATTERNS =====

URL_RE = re.compile(r"https?://|www\.", re.IGNORECASE)
PAGE_NUMBER_RE = re.compile(r"^(?:page\s*)?\d+(?:\s*(?:of|/)\s*\d+)?$", re.IGNORECASE)
FOOTER_RE = re.compile(
    r"\b(?:references available|available upon request|confidential|curriculum vitae|last updated)\b",
    re.IGNORECASE,
)
DATE_LINE_RE = re.compile(r"^\W*(?:" + DATE_RANGE_RE.pattern + r"|" + DATE_TOKEN + r")\W*$", re.IGNORECASE)

# ===== SKILL VALIDATION =====

SENTENCE_START_RE = re.compile(
    r"^(?:the|a|an|i|we|my|our|this|that|these|those|it|is|are|was|were|to|for|with|and|or|in|on)\s",
    re.IGNORECASE,
)
# Node.js, JavaScript, C++, C#, AWS
FRAMEWORK_RE = re.compile(r"\w+\.js\b|\b[A-Z][a-z]+[A-Z]\w*|[+#]|\b[A-Z]{2,}\b")


def is_excluded_line(line: str) -> bool:
    """Lines inside the Skills section that never hold skills."""
    if URL_RE.search(line) or "@" in line:
        return True
    if PAGE_NUMBER_RE.match(line) or FOOTER_RE.search(line) or DATE_LINE_RE.match(line):
        return True
    # Pure-uppercase header ("ADDITIONAL QUALIFICATIONS"), not an acronym list
    letters = [c for c in line if c.isalpha()]
    if line.isupper() and len(line.split()) >= 2 and len(letters) >= 10 and not SKILL_SPLIT_RE.search(line):
        return True
    return False


def is_prose_line(line: str) -> bool:
    """A long comma-free sentence: summary text, not a skill list."""
    if len(line) <= PROSE_MIN_LENGTH or "," in line:
        return False
    words = re.findall(r"[a-z]+", line.lower())
    return sum(1 for w in words if w in SENTENCE_CONNECTIVES) >= PROSE_MIN_CONNECTIVES


def is_valid_skill(token: str) -> bool:
    """
    Examples:
        "React" -> True
        "Machine Learning" -> True
        "Amazon Web Services" -> True (technology keyword)
        "the art of clean code" -> False (sentence starter)
        "Led a team." -> False (trailing punctuation)
    """
    token = token.strip()
    if not MIN_SKILL_LENGTH <= len(token) <= MAX_SKILL_LENGTH:
        return False
    if token.lower() in SKILL_STOP_WORDS:
        return False
    if token[-1] in ".,;:!?":
        return False
    if SENTENCE_START_RE.match(token):
        return False
    if "@" in token or "http" in token.lower():
        return False
    digits = sum(c.isdigit() for c in token)
    if digits * 2 > len(token):
        return False

    words = token.split()
    if len(words) >= 3:
        has_tech_word = any(w.lower().strip("(),") in TECH_KEYWORDS for w in words)
        return has_tech_word or bool(FRAMEWORK_RE.search(token))
    return True


def split_skill_tokens(line: str) -> List[str]:
    tokens = []
    for token in SKILL_SPLIT_RE.split(line):
        token = token.strip()
        # "Go." at the end of a list
        if token.endswith(".") and len(token.split()) == 1 and not token.endswith(".."):
            token = token[:-1]
        if token:
            tokens.append(token)
    return tokens


def parse_skill_lines(lines: List[str], category: str = DEFAULT_CATEGORY) -> List[SkillEntry]:
    """
    Scan the body of a Skills section.

    Stops at the next section header or at a prose line; category lines
    ("Frontend:") switch the category for the tokens that follow.
    """
    found: List[Tuple[str, str]] = []
    seen = set()

    for line in lines:
        if is_other_section_header(line, SKILLS_KEYWORDS):
            logger.debug(f"Skills section ended at header {line!r}")
            break
        if is_excluded_line(line):
            continue
        if is_prose_line(line):
            logger.debug(f"Skills section ended at prose line {line[:40]!r}")
            break

        # Sub-header such as "Soft Skills" without a colon
        if header_key(line) in HEADER_BLACKLIST:
            category = line.strip().rstrip(":")
            continue

        m = CATEGORY_RE.match(line)
        if m and len(m.group("category").split()) <= MAX_CATEGORY_WORDS:
            category = m.group("category").strip()
            line = m.group("rest")
            if not line:
                continue

        for token in split_skill_tokens(line):
            key = token.lower()
            if key in seen or not is_valid_skill(token):
                continue
            seen.add(key)
            found.append((token, category))

    return [
        SkillEntry(id=i + 1, name=name, category=cat, order=i)
        for i, (name, cat) in enumerate(found[:MAX_SKILLS])
    ]


def extract_skills(text: str) -> List[SkillEntry]:
    """Skills from the first Skills section, including content on the header line itself."""
    lines = split_lines(text)
    for i, line in enumerate(lines):
        if not is_section_entry(line, SKILLS_KEYWORDS):
            continue
        body: List[str] = []
        if ":" in line:
            inline = line.split(":", 1)[1].strip()
            if inline:
                body.append(inline)
        body.extend(lines[i + 1:])
        return parse_skill_lines(body)
    return []
