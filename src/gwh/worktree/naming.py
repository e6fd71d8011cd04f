"""Branch name normalization for worktree directories and refs."""

import re

_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-{2,}")


def normalize_branch(raw: str) -> str:
    """Lowercase a branch name and turn whitespace and slashes into single dashes.

    Leading and trailing dashes are kept:
        normalize_branch("Feat/Add Auth") == "feat-add-auth"
        normalize_branch("/wip ") == "-wip-"
    """
    result = raw.lower()
    result = _WHITESPACE.sub("-", result)
    result = result.replace("/", "-")
    result = _DASHES.sub("-", result)
    return result
