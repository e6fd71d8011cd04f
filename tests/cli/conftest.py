"""Fixtures for gwh CLI tests against real git repositories."""

import os
import sys

import pytest
from click.testing import CliRunner

# Ensure tests/cli/ is on sys.path so test files can import git_helpers
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from git_helpers import init_git_repo  # noqa: E402


@pytest.fixture
def repo_dir(tmp_path, monkeypatch):
    """A committed git repository at tmp_path/myrepo, used as the cwd."""
    path = str(tmp_path / "myrepo")
    init_git_repo(path)
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def worktree_root(tmp_path):
    root = tmp_path / "worktrees"
    root.mkdir()
    return str(root)


@pytest.fixture
def cli(worktree_root):
    """CliRunner with the worktree root configured through the environment."""
    return CliRunner(env={"GIT_WORKTREE_DEFAULT_PATH": worktree_root, "WT_DEBUG": None})