"""Shell completion callbacks for worktree arguments."""

from gwh.errors import WorktreeError
from gwh.git_repository import GitRepository
from gwh.worktree.registry import DETACHED, list_candidates


def complete_worktrees(ctx, _param, incomplete):
    """Offer branch names of live worktrees."""
    try:
        candidates = list_candidates(GitRepository.discover())
    except WorktreeError:
        return []
    return [
        candidate.branch
        for candidate in candidates
        if candidate.branch != DETACHED and candidate.branch.startswith(incomplete)
    ]
