"""Worktree resolver: maps a partial or stale identifier to one worktree path.

Registry resolution runs in strict stages over the live candidates:
exact path-or-branch match, then raw prefix match on branch or path.
The stale fallback ignores the registry and scans the conventional
base directory <root>/<repo-name> for a normalized-name prefix.
"""

import logging
import os

from gwh.errors import AmbiguousMatchError, NoMatchError
from gwh.worktree.naming import normalize_branch

logger = logging.getLogger(__name__)


def resolve_worktree_path(query: str, candidates) -> str:
    """Resolve query against registry candidates and return the worktree path.

    Raises:
        NoMatchError: If query is empty or matches nothing.
        AmbiguousMatchError: If query prefixes two or more distinct worktrees.
    """
    if not query:
        raise NoMatchError(query)

    # First hit in registry order wins when a path and a branch both match.
    for candidate in candidates:
        if candidate.path == query or candidate.branch == query:
            logger.debug("exact match for %r: %s", query, candidate.path)
            return candidate.path

    matches = []
    for candidate in candidates:
        if candidate.branch.startswith(query) or candidate.path.startswith(query):
            if candidate.path not in matches:
                matches.append(candidate.path)

    if len(matches) == 1:
        logger.debug("prefix match for %r: %s", query, matches[0])
        return matches[0]
    if len(matches) > 1:
        logger.debug("prefix %r matches %d worktrees", query, len(matches))
        raise AmbiguousMatchError(query)
    raise NoMatchError(query)


def repo_worktree_base(config, repo_root: str) -> str:
    """Return the conventional base directory <root>/<repo-name>.

    Raises:
        ConfigMissingError: If the worktree root is not configured.
    """
    root = config.require_root()
    repo_name = os.path.basename(os.path.normpath(repo_root))
    return os.path.join(root, repo_name)


def find_stale_worktree(query: str, base_dir_for) -> str:
    """Find a worktree directory that git no longer tracks.

    A query naming an existing directory resolves to its absolute path.
    Otherwise base_dir_for() supplies the base directory, whose immediate
    subdirectories are matched against the normalized query as a name prefix.

    Raises:
        NoMatchError: If nothing matches or the base directory is missing
            or unreadable.
        AmbiguousMatchError: If several directories match.
        ConfigMissingError: If base_dir_for needs an unset worktree root.
    """
    if not query:
        raise NoMatchError(query)
    if os.path.isdir(query):
        return os.path.abspath(query)
    base_dir = base_dir_for()
    if not os.path.isdir(base_dir):
        logger.debug("stale scan skipped, no base directory %s", base_dir)
        raise NoMatchError(query)

    try:
        entries = sorted(os.listdir(base_dir))
    except OSError as e:
        logger.debug("stale scan of %s failed: %s", base_dir, e)
        raise NoMatchError(query)

    prefix = normalize_branch(query)
    matches = [
        os.path.join(base_dir, entry)
        for entry in entries
        if entry.startswith(prefix) and os.path.isdir(os.path.join(base_dir, entry))
    ]
    logger.debug("stale scan of %s for %r: %d hit(s)", base_dir, prefix, len(matches))

    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise AmbiguousMatchError(query)
    raise NoMatchError(query)


def resolve_target(query: str, strategies) -> str:
    """Try each strategy in order until one reports something other than no match.

    Each strategy is a callable taking the query and returning a path or
    raising a WorktreeError. Errors other than NoMatchError stop the chain.
    """
    for strategy in strategies:
        try:
            return strategy(query)
        except NoMatchError:
            continue
    raise NoMatchError(query)
