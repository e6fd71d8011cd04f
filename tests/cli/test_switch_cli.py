"""CLI integration tests for gwh switch."""

import os

import pytest

from gwh.cli import main
from gwh.commands.complete import complete_worktrees


def _real(path):
    return os.path.realpath(path)


@pytest.fixture
def two_worktrees(cli, repo_dir):
    demo = cli.invoke(main, ["new", "feat-demo"]).output.strip()
    alpine = cli.invoke(main, ["new", "feat-alpine"]).output.strip()
    return demo, alpine


@pytest.mark.unit
class TestSwitch:

    def test_exact_branch(self, cli, two_worktrees):
        demo, _ = two_worktrees

        result = cli.invoke(main, ["switch", "feat-demo"])

        assert result.exit_code == 0, result.output
        assert _real(result.output.strip()) == _real(demo)

    def test_unique_prefix(self, cli, two_worktrees):
        _, alpine = two_worktrees

        result = cli.invoke(main, ["switch", "feat-a"])

        assert result.exit_code == 0, result.output
        assert _real(result.output.strip()) == _real(alpine)

    def test_ambiguous_prefix(self, cli, two_worktrees):
        result = cli.invoke(main, ["switch", "feat"])

        assert result.exit_code == 1
        assert "Multiple worktrees match; use a longer name" in result.output

    def test_no_match(self, cli, two_worktrees):
        result = cli.invoke(main, ["switch", "missing"])

        assert result.exit_code == 1
        assert "Worktree not found: missing" in result.output

    def test_switch_ignores_stale_directories(self, cli, repo_dir, worktree_root):
        os.makedirs(os.path.join(worktree_root, "myrepo", "stale-one"))

        result = cli.invoke(main, ["switch", "stale"])

        assert result.exit_code == 1
        assert "Worktree not found" in result.output

    def test_debug_traces_go_to_stderr_output(self, cli, two_worktrees):
        result = cli.invoke(main, ["--debug", "switch", "feat-demo"])

        assert result.exit_code == 0
        assert "[gwh] exact match" in result.output


@pytest.mark.unit
class TestWorktreeCompletion:

    def test_offers_branch_names_matching_incomplete(self, cli, two_worktrees):
        assert sorted(complete_worktrees(None, None, "feat-")) == ["feat-alpine", "feat-demo"]

    def test_outside_repository_offers_nothing(self, tmp_path, monkeypatch):
        plain = tmp_path / "plain"
        plain.mkdir()
        monkeypatch.chdir(plain)

        assert complete_worktrees(None, None, "") == []
