import pytest

from jobboard.services.text import normalize_text


def test_removes_soft_hyphens():
    assert normalize_text("Pro\u00adgramming") == "Programming"


def test_rejoins_hyphenated_line_breaks():
    assert normalize_text("Software Develop-\nment") == "Software Development"
    assert normalize_text("Projekt-\r\nmanagement") == "Projektmanagement"


def test_bullets_and_newlines_become_spaces():
    raw = "Skills:\n• Python\n▪ Docker\r\n◦ SQL · Git"
    assert normalize_text(raw) == "Skills: Python Docker SQL Git"


def test_collapses_whitespace_and_trims():
    assert normalize_text("   React \t\t and   Node.js \n\n ") == "React and Node.js"


@pytest.mark.parametrize("raw", ["", None])
def test_empty_input(raw):
    assert normalize_text(raw) == ""


@pytest.mark.parametrize("raw", [
    "",
    "plain text",
    "Develop-\nment\r\n• item\u00ad one",
    "a -\n- b \r\r c",
    "··· \n\t ",
    "trailing hyphen-",
])
def test_idempotent(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once
