"""Error taxonomy for worktree resolution and lifecycle operations."""


class WorktreeError(Exception):
    """Base class for errors reported to the user by gwh commands."""


class NoMatchError(WorktreeError):
    """No worktree matched the query at any resolution stage."""

    def __init__(self, query):
        super().__init__(f"Worktree not found: {query}")
        self.query = query


class AmbiguousMatchError(WorktreeError):
    """The query matched two or more distinct worktrees."""

    def __init__(self, query):
        super().__init__("Multiple worktrees match; use a longer name")
        self.query = query


class RegistryUnavailableError(WorktreeError):
    """The git worktree registry could not be read."""


class ConfigMissingError(WorktreeError):
    """The worktree root directory is not configured."""


class OperationFailedError(WorktreeError):
    """An external mutating call (git, filesystem, trash) failed."""


class TrashUnavailableError(OperationFailedError):
    """No trash mechanism is available on this system."""
