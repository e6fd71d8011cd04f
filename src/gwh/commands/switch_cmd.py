"""Click command for printing the path of an existing worktree."""

import sys

import click

from gwh.commands.complete import complete_worktrees
from gwh.errors import WorktreeError
from gwh.git_repository import GitRepository
from gwh.worktree.registry import list_candidates
from gwh.worktree.resolver import resolve_worktree_path


@click.command("switch")
@click.argument("target", shell_complete=complete_worktrees)
def switch_cmd(target):
    """Print the path to an existing worktree.

    TARGET is a branch name, a path, or a unique prefix of either.
    """
    try:
        candidates = list_candidates(GitRepository.discover())
        worktree_path = resolve_worktree_path(target, candidates)
    except WorktreeError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
    click.echo(worktree_path)
