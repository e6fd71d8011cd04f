"""Configuration for gwh commands."""

from dataclasses import dataclass

from gwh.errors import ConfigMissingError

ROOT_ENV_VAR = "GIT_WORKTREE_DEFAULT_PATH"
DEBUG_ENV_VAR = "WT_DEBUG"


@dataclass(frozen=True)
class WorktreeConfig:
    """Settings threaded from the CLI into creation and resolution logic.

    Attributes:
        root: Directory under which worktrees are placed as
            <root>/<repo-name>/<normalized-branch>. None when unset.
        debug: Emit debug traces on stderr.
    """

    root: str | None = None
    debug: bool = False

    def require_root(self) -> str:
        """Return the configured root, raising ConfigMissingError if unset."""
        if not self.root:
            raise ConfigMissingError(f"{ROOT_ENV_VAR} is not set")
        return self.root
