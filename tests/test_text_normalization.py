"""Tests for raw text normalization."""

from resume_import.core.text_normalization import SEPARATOR, normalize, normalize_line

BULLET = chr(0x2022)
ZERO_WIDTH_SPACE = chr(0x200B)
NBSP = chr(0x00A0)
ENVELOPE_EMOJI = chr(0x1F4E7)
ICON_FONT_GLYPH = chr(0xF0E0)
VARIATION_SELECTOR = chr(0xFE0F)


def test_zero_width_and_tabs_removed():
    assert normalize("Jane" + ZERO_WIDTH_SPACE + " Doe\t\tEngineer") == "Jane Doe Engineer"


def test_bullets_and_crlf():
    raw = BULLET + " Python\r\n" + BULLET + " Go"
    assert normalize(raw) == "Python\nGo"


def test_lone_carriage_return_is_newline():
    assert normalize("Jane Doe\rEngineer") == "Jane Doe\nEngineer"


def test_emoji_and_icon_font_glyphs_removed():
    assert normalize(ENVELOPE_EMOJI + " jane@x.com") == "jane@x.com"
    assert normalize(ICON_FONT_GLYPH + " Portland, OR") == "Portland, OR"
    assert normalize("Star" + VARIATION_SELECTOR + " Performer") == "Star Performer"


def test_control_characters_removed():
    assert normalize("a\x00b\x07c\x7f") == "abc"


def test_unicode_spaces_become_plain_space():
    assert normalize("Jane" + NBSP + "Doe") == "Jane Doe"


def test_line_structure_preserved():
    assert normalize("Skills\n\n  Python  ,   Go  ") == "Skills\n\nPython , Go"


def test_empty_input():
    assert normalize("") == ""
    assert normalize("   ") == ""


def test_idempotent():
    raw = (
        ENVELOPE_EMOJI + " jane@x.com\r\n"
        + BULLET + " Built\t\tAPIs" + ZERO_WIDTH_SPACE + "\n"
        + "Python " + BULLET + " Go " + BULLET + " Rust"
    )
    once = normalize(raw)
    assert normalize(once) == once

    once_kept = normalize(raw, keep_separators=True)
    assert normalize(once_kept, keep_separators=True) == once_kept


def test_inline_bullets_kept_as_separators():
    line = "Python " + BULLET + " Go" + BULLET + "Docker"
    assert normalize_line(line, keep_separators=True) == f"Python {SEPARATOR} Go {SEPARATOR} Docker"
    assert normalize_line(line) == "Python Go Docker"


def test_leading_bullet_dropped_even_when_keeping_separators():
    assert normalize_line(BULLET + " Python", keep_separators=True) == "Python"
