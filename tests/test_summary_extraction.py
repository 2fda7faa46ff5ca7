from resume_import.core.summary_parser import extract_summary


def test_lines_after_header_joined():
    text = (
        "Jane Doe\n"
        "Summary\n"
        "Backend engineer with eight years of experience.\n"
        "Short\n"
        "I build reliable APIs and data pipelines."
    )
    assert extract_summary(text) == (
        "Backend engineer with eight years of experience. I build reliable APIs and data pipelines."
    )


def test_truncated_to_500_characters():
    long_line = "Designed and operated large scale distributed systems for payments " * 5
    text = "Professional Summary\n" + "\n".join([long_line] * 5)

    summary = extract_summary(text)
    assert summary is not None
    assert len(summary) <= 500


def test_empty_header_does_not_stop_search():
    text = "Profile\nPython\nGo\nRust\nJava\nSQL\nAbout Me\nI design and ship distributed systems at scale."
    assert extract_summary(text) == "I design and ship distributed systems at scale."


def test_missing_header():
    assert extract_summary("Jane Doe\nI design and ship distributed systems at scale.") is None


def test_contact_lines_are_not_headers():
    text = "Email: profile@janedoe.dev\nI design and ship distributed systems at scale."
    assert extract_summary(text) is None


class TestSectionBoundary:
    TEXT = "Summary\nExperience\nEngineer at Acme Corp 2019 - Present"

    def test_window_runs_past_next_header_by_default(self):
        assert extract_summary(self.TEXT, stop_at_next_section=False) == "Engineer at Acme Corp 2019 - Present"

    def test_stops_at_next_header_when_enabled(self):
        assert extract_summary(self.TEXT, stop_at_next_section=True) is None
