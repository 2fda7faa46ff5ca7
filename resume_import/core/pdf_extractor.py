import logging
import re
from io import BytesIO
from typing import Any, List, Optional, Tuple

import pdfplumber
from pdfplumber.utils.exceptions import PdfminerException
from pdfminer.pdfparser import PDFSyntaxError
from pdfminer.psparser import PSException

from resume_import.core.errors import UnreadableDocumentError

logger = logging.getLogger(__name__)

# x_tolerance values tried per page; the cleanest text wins
X_TOLERANCES = (1.5, 2, 2.5, 3)
LINE_Y_TOLERANCE = 3


def _words_to_text(page: Any, *, x_tolerance: float = 3, line_y_tolerance: float = LINE_Y_TOLERANCE) -> str:
    """
    Rebuild page text from pdfplumber word objects.

    Words are bucketed into lines by their rounded 'top' coordinate and joined
    with single spaces, which avoids both glued words and letter-spaced words
    that character-level layout extraction produces.
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=2,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    if not words:
        return ""

    words.sort(key=lambda w: (round(w["top"] / line_y_tolerance), w["x0"]))
    lines: List[str] = []
    current_key = None
    current_words: List[str] = []

    for w in words:
        key = round(w["top"] / line_y_tolerance)
        if current_key is not None and key != current_key:
            lines.append(" ".join(current_words))
            current_words = []
        current_words.append(w["text"])
        current_key = key

    if current_words:
        lines.append(" ".join(current_words))

    return "\n".join(lines)


def _score_text(s: str) -> float:
    """
    Lower is better.

    18+ letter tokens mean words were glued together; more than ten one-letter
    tokens mean a word was split into letters.
    """
    tokens = re.findall(r"[A-Za-z]+", s)
    if not tokens:
        return 1e9
    glued = sum(1 for t in tokens if len(t) >= 18)
    singles = max(0, sum(1 for t in tokens if len(t) == 1) - 10)
    return glued * 10 + singles * 3


def _extract_best(page: Any) -> Tuple[str, Optional[float]]:
    best_text, best_xt, best_score = "", None, None
    for xt in X_TOLERANCES:
        text = _words_to_text(page, x_tolerance=xt)
        score = _score_text(text)
        if best_score is None or score < best_score:
            best_text, best_xt, best_score = text, xt, score
    return best_text, best_xt


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extract newline-delimited text from every page of a PDF (text layer only, no OCR).

    Raises:
        UnreadableDocumentError: the bytes are not a parseable PDF.
    """
    pages: List[str] = []
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            for page_i, page in enumerate(pdf.pages, start=1):
                text, used_xt = _extract_best(page)
                logger.debug(f"PDF page {page_i}: {len(text)} chars (x_tolerance={used_xt})")
                pages.append(text)
    except (PdfminerException, PDFSyntaxError, PSException, ValueError, KeyError, TypeError) as exc:
        raise UnreadableDocumentError("PDF appears to be empty or unreadable") from exc

    return "\n".join(p for p in pages if p)
