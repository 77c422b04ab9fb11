"""Tests for the git bootstrap step."""

from pathlib import Path

from devseed.core.vcs import bootstrap_vcs
from tests.fakes.context import create_test_context
from tests.fakes.feedback import FakeUserFeedback
from tests.fakes.git import FakeGit


def test_initializes_and_stages_without_repository(tmp_path: Path) -> None:
    git = FakeGit()
    feedback = FakeUserFeedback()

    result = bootstrap_vcs(create_test_context(tmp_path, git=git, feedback=feedback))

    assert result.success is True
    assert result.initialized is True
    assert git.init_calls == [tmp_path]
    assert git.add_calls == [tmp_path]
    assert feedback.by_level("success") == ["🚚 Git repository initialized and files staged"]


def test_only_stages_in_existing_repository(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    git = FakeGit()
    feedback = FakeUserFeedback()

    result = bootstrap_vcs(create_test_context(tmp_path, git=git, feedback=feedback))

    assert result.success is True
    assert result.initialized is False
    assert git.init_calls == []
    assert git.add_calls == [tmp_path]
    assert feedback.by_level("success") == ["🚚 Files staged in existing git repository"]


def test_init_failure_is_reported_and_skips_add(tmp_path: Path) -> None:
    git = FakeGit(init_error="Failed to initialize git repository")
    feedback = FakeUserFeedback()

    result = bootstrap_vcs(create_test_context(tmp_path, git=git, feedback=feedback))

    assert result.success is False
    assert result.error_message == "Failed to initialize git repository"
    assert git.add_calls == []
    assert "Failed to initialize git repository" in feedback.by_level("error")[0]


def test_add_failure_is_reported(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    git = FakeGit(add_error="Command not found while trying to stage files: git")
    feedback = FakeUserFeedback()

    result = bootstrap_vcs(create_test_context(tmp_path, git=git, feedback=feedback))

    assert result.success is False
    assert result.initialized is False
    assert feedback.by_level("success") == []
    assert len(feedback.by_level("error")) == 1
