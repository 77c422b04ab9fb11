"""Tests for indentation and newline detection."""

import pytest

from devseed.core.formatting import ManifestFormat, detect_format, detect_indent, detect_newline


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('{"name":"x"}', None),
        ('{"name":"x"}\n', "\n"),
        ('{\r\n  "name": "x"\r\n}\r\n', "\r\n"),
        ('{\n  "name": "x"\r\n}\r\n', "\r\n"),
        ('{\r\n  "name": "x"\n}\n', "\n"),
        ("a\r\nb\n", "\n"),
    ],
)
def test_detect_newline(text: str, expected: str | None) -> None:
    assert detect_newline(text) == expected


def test_detect_indent_two_spaces() -> None:
    text = '{\n  "name": "x",\n  "devDependencies": {\n    "eslint": "^8.36.0"\n  }\n}\n'

    assert detect_indent(text) == "  "


def test_detect_indent_four_spaces() -> None:
    text = '{\n    "name": "x",\n    "scripts": {\n        "test": "jest"\n    }\n}\n'

    assert detect_indent(text) == "    "


def test_detect_indent_tabs() -> None:
    text = '{\r\n\t"name": "x",\r\n\t"scripts": {\r\n\t\t"test": "jest"\r\n\t}\r\n}\r\n'

    assert detect_indent(text) == "\t"


def test_detect_indent_none() -> None:
    assert detect_indent('{"name":"x","version":"1.0.0"}\n') == ""


def test_detect_indent_empty_text() -> None:
    assert detect_indent("") == ""


def test_detect_indent_ignores_single_spaces_when_others_exist() -> None:
    text = '{\n  "a": 1,\n  "b": 2,\n "c": 3,\n  "d": 4\n}\n'

    assert detect_indent(text) == "  "


def test_detect_indent_single_space_only() -> None:
    text = '{\n "a": 1,\n "b": 2\n}\n'

    assert detect_indent(text) == " "


def test_detect_format_combines_both() -> None:
    text = '{\r\n\t"name": "x"\r\n}\r\n'

    assert detect_format(text) == ManifestFormat(indent="\t", newline="\r\n")
