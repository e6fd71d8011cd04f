"""Click command for creating a worktree."""

import sys

import click

from gwh.errors import WorktreeError
from gwh.git_repository import GitRepository
from gwh.worktree.lifecycle import create_worktree


@click.command("new")
@click.argument("branch")
@click.pass_context
def new_cmd(ctx, branch):
    """Create a new worktree and print its path."""
    config = ctx.obj
    try:
        git_repo = GitRepository.discover()
        worktree_path = create_worktree(
            git_repo, config, branch, prog_name=ctx.find_root().info_name
        )
    except WorktreeError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
    click.echo(worktree_path)
