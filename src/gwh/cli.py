"""Top-level Click group for the gwh CLI."""

import click

from gwh.commands.delete_cmd import delete_cmd
from gwh.commands.list_cmd import list_cmd
from gwh.commands.new_cmd import new_cmd
from gwh.commands.switch_cmd import switch_cmd
from gwh.completion import completion
from gwh.config import DEBUG_ENV_VAR, ROOT_ENV_VAR, WorktreeConfig
from gwh.logging_setup import configure_logging

EPILOG = f"""\b
Branch names are normalized (spaces and slashes become '-').
Worktrees are created under ${ROOT_ENV_VAR}/<repo>/<branch>.
Existing branches are reused if present.
Use: cd "$(gwh new ...)" or cd "$(gwh switch ...)"
"""


@click.group(epilog=EPILOG)
@click.option(
    "--root",
    envvar=ROOT_ENV_VAR,
    default=None,
    help=f"Directory holding all worktrees (default: ${ROOT_ENV_VAR}).",
)
@click.option(
    "--debug",
    envvar=DEBUG_ENV_VAR,
    is_flag=True,
    default=False,
    help=f"Print debug traces to stderr (default: ${DEBUG_ENV_VAR}).",
)
@click.pass_context
def main(ctx, root, debug):
    """gwh - git worktree helper."""
    configure_logging(debug)
    ctx.obj = WorktreeConfig(root=root or None, debug=debug)


main.add_command(new_cmd)
main.add_command(list_cmd)
main.add_command(switch_cmd)
main.add_command(delete_cmd)
main.add_command(completion)
