"""Comprehensive tests for skills extraction."""

import pytest

from resume_import.core.skills_parser import extract_skills, is_valid_skill, parse_skill_lines
from resume_import.core.text_normalization import normalize

BULLET = chr(0x2022)


def names(skills):
    return [s.name for s in skills]


def test_category_line_and_sentence_fragment_rejected():
    skills = parse_skill_lines(["Frontend:", "React, Vue, the art of clean code"])

    assert names(skills) == ["React", "Vue"]
    assert all(s.category == "Frontend" for s in skills)


def test_same_input_through_section_scan():
    skills = extract_skills("Skills\nFrontend:\nReact, Vue, the art of clean code")
    assert names(skills) == ["React", "Vue"]
    assert skills[0].category == "Frontend"


def test_inline_skills_on_header_line():
    skills = extract_skills("Jane Doe\nSkills: Python, JavaScript, SQL")

    assert names(skills) == ["Python", "JavaScript", "SQL"]
    assert all(s.category == "General" for s in skills)
    assert [s.id for s in skills] == [1, 2, 3]
    assert [s.order for s in skills] == [0, 1, 2]


def test_category_with_inline_list():
    skills = extract_skills("Technical Skills\nBackend: Node.js; Django; PostgreSQL\nCloud: AWS | GCP")

    assert [(s.name, s.category) for s in skills] == [
        ("Node.js", "Backend"),
        ("Django", "Backend"),
        ("PostgreSQL", "Backend"),
        ("AWS", "Cloud"),
        ("GCP", "Cloud"),
    ]


def test_bullet_lists():
    raw = "Skills\n" + BULLET + " Python\n" + BULLET + " Go\nRust " + BULLET + " Docker " + BULLET + " Kubernetes"
    skills = extract_skills(normalize(raw, keep_separators=True))
    assert names(skills) == ["Python", "Go", "Rust", "Docker", "Kubernetes"]


def test_spaced_hyphens_split_but_compound_words_kept():
    skills = extract_skills("Skills\nPython - Go - Rust\n- front-end testing")
    assert names(skills) == ["Python", "Go", "Rust", "front-end testing"]


def test_next_section_header_ends_section():
    skills = extract_skills("Skills\nPython, Go\nExperience\nEngineer at Acme, Kafka")
    assert names(skills) == ["Python", "Go"]


def test_prose_line_ends_section():
    prose = (
        "I am a backend engineer who has worked with the payments team for years "
        "and enjoys mentoring new hires"
    )
    skills = extract_skills(f"Skills\nPython, Go\n{prose}\nRust")
    assert names(skills) == ["Python", "Go"]


def test_excluded_lines_skipped():
    text = "Skills\nPage 2 of 3\nhttps://janedoe.dev\n2019 - 2021\nADDITIONAL TECHNICAL QUALIFICATIONS\nPython, Go"
    assert names(extract_skills(text)) == ["Python", "Go"]


def test_case_insensitive_dedupe():
    assert names(extract_skills("Skills: Python, python, PYTHON, Go")) == ["Python", "Go"]


def test_capped_at_thirty():
    tools = ", ".join(f"Tool{chr(65 + i // 26)}{chr(65 + i % 26)}" for i in range(40))
    skills = extract_skills(f"Skills: {tools}")
    assert len(skills) == 30
    assert skills[-1].id == 30


def test_trailing_period_on_list_end():
    assert names(extract_skills("Skills: Python, Go.")) == ["Python", "Go"]


def test_no_skills_section():
    assert extract_skills("Jane Doe\nPython, Go") == []


@pytest.mark.parametrize(
    "token,expected",
    [
        ("React", True),
        ("C++", True),
        ("Machine Learning", True),
        ("Amazon Web Services", True),
        ("Google Cloud Platform", True),
        ("the art of clean code", False),
        ("Led a team.", False),
        ("communicating with clients", False),
        ("a", False),
        ("experience", False),
        ("x" * 31, False),
        ("2019", False),
        ("jane@x.com", False),
    ],
)
def test_is_valid_skill(token, expected):
    assert is_valid_skill(token) is expected
