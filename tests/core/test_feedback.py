"""Tests for console feedback."""

import pytest

from devseed.core.feedback import InteractiveFeedback


def test_info_and_success_go_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    feedback = InteractiveFeedback()

    feedback.info("🛠️  Skipped .gitignore (already present)")
    feedback.success("🚚 Created .eslintrc")

    captured = capsys.readouterr()
    assert captured.out == "🛠️  Skipped .gitignore (already present)\n🚚 Created .eslintrc\n"
    assert captured.err == ""


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    InteractiveFeedback().error("Error: git bootstrap failed")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: git bootstrap failed\n"
