"""Tests for the tiered email recovery cascade."""

import pytest

from resume_import.core.email_extractor import TIERS, extract_email, sanitize_email
from resume_import.core.text_normalization import normalize


def test_clean_email_next_to_initials():
    text = "Jane Q. Public jane.public@example.com"
    assert extract_email(text) == "jane.public@example.com"


def test_phone_prefix_stripped_and_comma_tld_fixed():
    text = "Contact 555-123-4567timaz.dev@gmail,com Portland"
    assert extract_email(text) == "timaz.dev@gmail.com"


def test_parenthesized_phone_prefix_stripped():
    assert extract_email("(555) 123-4567jane@example.com") == "jane@example.com"


def test_phone_glued_after_leading_punctuation():
    assert extract_email("...555-123-4567timaz.dev@gmail,com...") == "timaz.dev@gmail.com"


def test_phone_glued_after_label():
    assert extract_email("tel.555-123-4567timaz.dev@gmail.com") == "timaz.dev@gmail.com"


def test_spaces_around_at_and_dots():
    assert extract_email("Email: jane . doe @ example . com") == "jane.doe@example.com"


def test_email_split_across_lines():
    assert extract_email("jane.doe@\nexample.com") == "jane.doe@example.com"


def test_semicolon_tld():
    assert extract_email("jane@example;org") == "jane@example.org"


def test_glued_next_word_cut_at_case_boundary():
    assert extract_email("jane@x.comLinkedIn") == "jane@x.com"


def test_strict_match_beats_repaired_candidate():
    text = "old: jane@gmail,com\nbackup: jd@example.com"
    assert extract_email(text) == "jd@example.com"


def _earlier_tiers_find_nothing(text, upto):
    return all(not tier(text) for _, tier in TIERS[:upto])


def test_spaced_comma_tld_recovered_by_permissive_tier():
    text = "Email: jane @ gmail , com"
    assert _earlier_tiers_find_nothing(text, 3)
    assert extract_email(text) == "jane@gmail.com"


def test_domain_broken_mid_word_recovered_from_window():
    text = "jane.doe@gmai\nl.com"
    assert _earlier_tiers_find_nothing(text, 4)
    assert extract_email(text) == "jane.doe@gmail.com"


def test_phone_only_local_part_rejected():
    assert extract_email("555-123-4567@example.com") is None


@pytest.mark.parametrize("text", ["", "no address here", "follow @handle on social", "a @ b"])
def test_no_email(text):
    assert extract_email(text) is None


def test_renormalizing_clean_text_gives_same_email():
    raw = "Jane Doe\r\n" + chr(0x1F4E7) + " jane.doe@example.com\t\t(555) 123-4567"
    first = normalize(raw)
    assert extract_email(normalize(first)) == extract_email(first) == "jane.doe@example.com"


class TestSanitizeEmail:
    def test_whitespace_removed(self):
        assert sanitize_email("jane . doe @ example . com") == "jane.doe@example.com"

    def test_leading_digit_run_dropped(self):
        assert sanitize_email("4567jane@x.com") == "jane@x.com"

    def test_leading_digit_run_dropped_through_punctuation(self):
        assert sanitize_email("4567.jane@x.com") == "jane@x.com"

    def test_digit_only_local_part_kept(self):
        assert sanitize_email("4567@x.com") == "4567@x.com"

    def test_short_digit_prefix_kept(self):
        assert sanitize_email("jd42@x.com") == "jd42@x.com"

    def test_comma_in_local_part(self):
        assert sanitize_email("jane,doe@x.com") == "jane.doe@x.com"

    def test_non_ascii_dropped(self):
        assert sanitize_email("jane" + chr(0x00E9) + "@x.com") == "jane@x.com"

    def test_invalid_returns_none(self):
        assert sanitize_email("jane@localhost") is None
        assert sanitize_email("a@b@c.com") is None
