"""Click command for listing worktrees."""

import os
import sys

import click

from gwh.errors import WorktreeError
from gwh.git_repository import GitRepository
from gwh.worktree.registry import DETACHED, list_candidates


def format_worktree_lines(candidates, current_root):
    """Format branch worktrees as lines, marking the current one with '*'.

    Detached worktrees are not listed.
    """
    current = os.path.realpath(current_root)
    lines = []
    for candidate in candidates:
        if candidate.branch == DETACHED:
            continue
        marker = "*" if os.path.realpath(candidate.path) == current else " "
        lines.append(f"{marker} {candidate.branch:<12} {candidate.path}")
    return lines


@click.command("list")
def list_cmd():
    """List worktrees for the current repository."""
    try:
        git_repo = GitRepository.discover()
        lines = format_worktree_lines(list_candidates(git_repo), git_repo.toplevel)
    except WorktreeError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
    for line in lines:
        click.echo(line)
