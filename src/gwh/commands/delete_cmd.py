"""Click command for deleting a worktree."""

import sys

import click

from gwh.commands.complete import complete_worktrees
from gwh.errors import WorktreeError
from gwh.git_repository import GitRepository
from gwh.worktree.lifecycle import delete_worktree


@click.command("delete")
@click.argument("target", shell_complete=complete_worktrees)
@click.option("--force", "-f", is_flag=True, default=False, help="Delete permanently instead of trashing.")
@click.option("--keep", is_flag=True, default=False, help="Detach the worktree but leave its directory.")
@click.pass_obj
def delete_cmd(config, target, force, keep):  # noqa: FBT002
    """Delete a worktree (moved to the trash by default).

    TARGET may also name a directory git no longer tracks, either as a
    path or as a branch name under the worktree root.
    """
    try:
        git_repo = GitRepository.discover()
        delete_worktree(git_repo, config, target, force=force, keep=keep)
    except WorktreeError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
