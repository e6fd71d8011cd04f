"""Worktree registry reader: parses `git worktree list --porcelain` output."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DETACHED = "(detached)"
_HEADS_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class Candidate:
    """One live worktree as reported by git."""

    branch: str
    path: str


def _short_branch(ref: str) -> str:
    if ref.startswith(_HEADS_PREFIX):
        return ref[len(_HEADS_PREFIX):]
    return ref


def parse_worktree_list(output: str) -> list[Candidate]:
    """Parse porcelain worktree records into candidates.

    Each `branch` or `detached` line belongs to the most recent `worktree`
    line. A worktree without either (e.g. a bare repository) yields nothing.
    Empty lines, unknown markers and markers missing their value are skipped.
    """
    candidates = []
    current_path = None
    for line in output.splitlines():
        marker, _, value = line.strip().partition(" ")
        value = value.strip()
        if marker == "worktree":
            if value:
                current_path = value
        elif marker == "branch":
            if value and current_path is not None:
                candidates.append(Candidate(branch=_short_branch(value), path=current_path))
        elif marker == "detached":
            if current_path is not None:
                candidates.append(Candidate(branch=DETACHED, path=current_path))
    return candidates


def list_candidates(git_repo) -> list[Candidate]:
    """Query the live registry of git_repo and return its candidates.

    Raises:
        RegistryUnavailableError: If git cannot list worktrees.
    """
    logger.debug("listing worktrees")
    candidates = parse_worktree_list(git_repo.worktree_list_porcelain())
    logger.debug("found %d worktree(s)", len(candidates))
    return candidates


def is_registered_worktree(path: str, candidates) -> bool:
    """Return True if path, after resolving symlinks, belongs to one of the candidates."""
    real_path = os.path.realpath(path)
    return any(os.path.realpath(candidate.path) == real_path for candidate in candidates)
