"""Shared fixtures for worktree tests."""

import os
import sys

import pytest

# Ensure this directory is on sys.path so test files can import
# fake_git_repository unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_repository import FakeGitRepository  # noqa: E402, F401

from gwh.config import WorktreeConfig  # noqa: E402


@pytest.fixture
def worktree_root(tmp_path):
    """Directory configured as the worktree root."""
    root = tmp_path / "worktrees"
    root.mkdir()
    return str(root)


@pytest.fixture
def config(worktree_root):
    return WorktreeConfig(root=worktree_root)


@pytest.fixture
def fake_repo(tmp_path):
    """FakeGitRepository whose main worktree is tmp_path/myrepo."""
    toplevel = tmp_path / "myrepo"
    toplevel.mkdir()
    return FakeGitRepository(toplevel=str(toplevel))
