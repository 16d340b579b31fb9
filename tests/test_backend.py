import re

import pytest

from logic.backend import DEFAULT_TITLE, case_links, case_title, normalize_email, slugify


@pytest.mark.parametrize("raw, expected", [
    ("  SKIMS Case!! ", "skims-case"),
    ("skims", "skims"),
    ("Intro to   Ethics\t2024", "intro-to-ethics-2024"),
    ("already-a-slug", "already-a-slug"),
    ("Café Noir", "caf-noir"),
    ("!!!", ""),
    ("   ", ""),
    ("", ""),
])
def test_slugify(raw, expected):
    assert slugify(raw) == expected


@pytest.mark.parametrize("raw", ["  SKIMS Case!! ", "a_b.c/d", "ÄÖÜ xyz", "--x--", "\n\tmixed CASE 42  "])
def test_slugify_only_slug_characters_and_idempotent(raw):
    slug = slugify(raw)
    assert re.fullmatch(r"[a-z0-9-]*", slug)
    assert slugify(raw) == slug
    assert slugify(slug) == slug


def test_case_title_defaults_when_blank():
    assert case_title("   ") == DEFAULT_TITLE
    assert case_title("") == "New Case"
    assert case_title("  Skims  ") == "Skims"


def test_normalize_email():
    assert normalize_email("  Prof@School.EDU ") == "prof@school.edu"
    assert normalize_email(" \t ") == ""


def test_case_links_in_page_order():
    links = case_links("skims", base_url="https://board.example.edu/")
    assert links == [
        ("Setup", "https://board.example.edu/c/skims/setup"),
        ("Student", "https://board.example.edu/c/skims"),
        ("Board", "https://board.example.edu/c/skims/board"),
        ("Instructor", "https://board.example.edu/c/skims/instructor"),
    ]


def test_case_links_use_environment_base(monkeypatch):
    monkeypatch.setenv("CASE_BOARD_BASE_URL", "http://127.0.0.1:8080")
    assert case_links("x")[1] == ("Student", "http://127.0.0.1:8080/c/x")
