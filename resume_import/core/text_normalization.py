"""
Text normalization for raw PDF/DOCX extraction output.

Line breaks are the only structural signal left after text extraction, so
everything here works per line and never joins lines together:
- control characters, zero-width code points and variation selectors are removed
- icon/emoji/dingbat glyphs (including icon-font Private Use Area glyphs) are removed
- bullet glyphs become a space
- runs of spaces/tabs collapse to one space and each line is trimmed

normalize() never raises and is idempotent.
"""

import re
from typing import Iterable, Tuple, Union


CodePoints = Union[int, Tuple[int, int]]


def _char_class(points: Iterable[CodePoints], extra: str = "") -> str:
    """Build a regex character class body from code points and (start, end) ranges."""
    parts = []
    for p in points:
        if isinstance(p, tuple):
            parts.append(f"{re.escape(chr(p[0]))}-{re.escape(chr(p[1]))}")
        else:
            parts.append(re.escape(chr(p)))
    return extra + "".join(parts)


# ============================================================================
# Character classes
# ============================================================================

BULLET_POINTS = (
    0x2022, 0x25CF, 0x25CB, 0x25E6, 0x25AA, 0x25AB, 0x25A0, 0x25A1,  # round and square bullets
    0x25B6, 0x25BA, 0x25B8, 0x25B9, 0x2023, 0x2043, 0x2219, 0x00B7,  # triangles, hyphen bullet, dots
    0x27A2, 0x27A4, 0x2713, 0x2714, 0x2756, 0x25C6, 0x25C7, 0x2605, 0x2606,  # arrows, checks, diamonds, stars
)
BULLET_RE = re.compile("[" + _char_class(BULLET_POINTS) + "]")
LEADING_BULLET_RE = re.compile("^[" + _char_class(BULLET_POINTS, extra=r"\s") + "]+")

# Canonical inline separator kept by normalize(..., keep_separators=True)
SEPARATOR = chr(0x2022)
SEPARATOR_RUN_RE = re.compile(r"\s*" + SEPARATOR + r"[\s" + SEPARATOR + "]*")

# Vertical tab, form feed (page breaks), NEL and line/paragraph separators act as newlines
LINE_BREAK_RE = re.compile(r"\r\n|[" + _char_class((0x0D, 0x0B, 0x0C, 0x85, 0x2028, 0x2029)) + "]")

# Unicode space separators that should read as a plain space
UNICODE_SPACE_RE = re.compile("[" + _char_class((0x00A0, 0x1680, (0x2000, 0x200A), 0x202F, 0x205F, 0x3000)) + "]")

# C0/C1 controls except newline (tabs are converted to spaces before this runs)
CONTROL_RE = re.compile(r"[\x00-\x09\x0b-\x1f\x7f-\x9f]")

# Zero-width characters, joiners, BOM, variation selectors, tag characters
INVISIBLE_RE = re.compile("[" + _char_class((
    0x00AD,  # soft hyphen
    (0x200B, 0x200F),  # zero-width space/joiners, directional marks
    (0x2060, 0x2064),  # word joiner, invisible operators
    (0xFE00, 0xFE0F),  # variation selectors
    0xFEFF,  # BOM / zero-width no-break space
    (0xE0000, 0xE007F),  # tag characters
    (0xE0100, 0xE01EF),  # variation selectors supplement
)) + "]")

# Arrows, technical symbols, shapes, dingbats, emoji, icon-font glyphs
SYMBOL_RE = re.compile("[" + _char_class((
    (0x2190, 0x21FF),  # arrows
    (0x2300, 0x23FF),  # miscellaneous technical
    (0x2400, 0x243F),  # control pictures
    (0x25A0, 0x25FF),  # geometric shapes
    (0x2600, 0x26FF),  # miscellaneous symbols
    (0x2700, 0x27BF),  # dingbats
    (0x27F0, 0x27FF),  # supplemental arrows-A
    (0x2900, 0x297F),  # supplemental arrows-B
    (0x2B00, 0x2BFF),  # miscellaneous symbols and arrows
    (0xE000, 0xF8FF),  # private use area (icon fonts)
    (0x1F000, 0x1FAFF),  # emoji, pictographs, playing cards, etc.
    (0xF0000, 0xFFFFD),  # supplementary private use area
)) + "]")

HORIZONTAL_WS_RE = re.compile(r"[ \t]+")


# ============================================================================
# Public API
# ============================================================================

def normalize_line(line: str, keep_separators: bool = False) -> str:
    """
    Clean a single line (no newlines expected).

    With keep_separators, bullets used as inline list separators
    ("Python * Go * Docker" with bullet glyphs) become a single canonical
    SEPARATOR instead of a space, so list-aware consumers can still split on
    them. Leading list markers are always dropped.
    """
    line = line.replace("\t", " ")
    line = UNICODE_SPACE_RE.sub(" ", line)
    line = LEADING_BULLET_RE.sub("", line)
    line = BULLET_RE.sub(SEPARATOR if keep_separators else " ", line)
    line = CONTROL_RE.sub("", line)
    line = INVISIBLE_RE.sub("", line)
    line = SYMBOL_RE.sub("", line)
    line = HORIZONTAL_WS_RE.sub(" ", line)
    if keep_separators:
        line = SEPARATOR_RUN_RE.sub(f" {SEPARATOR} ", line).strip(f" {SEPARATOR}")
    return line.strip()


def normalize(raw: str, keep_separators: bool = False) -> str:
    """
    Normalize raw extracted text into newline-delimited, clean lines.

    Examples:
    - "Jane<zero-width space> Doe<tab><tab>Engineer" -> "Jane Doe Engineer"
    - "<bullet> Python<CR><LF><bullet> Go" -> "Python<LF>Go"
    - "<envelope emoji> jane@x.com" -> "jane@x.com"
    """
    if not raw:
        return ""

    text = LINE_BREAK_RE.sub("\n", raw)
    return "\n".join(normalize_line(line, keep_separators) for line in text.split("\n"))
