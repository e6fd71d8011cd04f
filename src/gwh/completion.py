"""Shell completion for gwh and its git-worktree-helper alias."""

import click
from click.shell_completion import get_completion_class

PROG_ALIASES = ("gwh", "git-worktree-helper")
SHELLS = ("bash", "zsh", "fish")


def complete_var_for(prog_name):
    """Environment variable click reads to trigger completion for prog_name."""
    return f"_{prog_name.upper().replace('-', '_')}_COMPLETE"


def completion_source(cli, shell, prog_names):
    """Return one completion script covering every name in prog_names."""
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.UsageError(f"Unsupported shell: {shell}")
    scripts = [
        comp_cls(cli=cli, ctx_args={}, prog_name=name, complete_var=complete_var_for(name)).source()
        for name in prog_names
    ]
    return "\n".join(scripts)


@click.command("completion")
@click.argument("shell", type=click.Choice(SHELLS), required=False)
@click.pass_context
def completion(ctx, shell):
    """Print a shell completion script.

    Worktree arguments of switch and delete complete to live branch names.
    """
    root = ctx.find_root()
    prog_names = list(dict.fromkeys([root.info_name, *PROG_ALIASES]))
    if shell is None:
        click.echo(f"Supported shells: {', '.join(SHELLS)}")
        click.echo(f"Covers: {', '.join(prog_names)}")
        click.echo()
        click.echo("To install, add to your shell config:")
        click.echo(f'  eval "$({root.info_name} completion zsh)"')
        return
    click.echo(completion_source(root.command, shell, prog_names))
