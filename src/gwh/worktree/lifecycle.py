"""Worktree lifecycle: create, detach and delete worktrees."""

import logging
import os
import shutil

from gwh.errors import OperationFailedError
from gwh.worktree.naming import normalize_branch
from gwh.worktree.registry import is_registered_worktree, list_candidates
from gwh.worktree.resolver import (
    find_stale_worktree,
    repo_worktree_base,
    resolve_target,
    resolve_worktree_path,
)
from gwh.worktree.trash import move_to_trash

logger = logging.getLogger(__name__)


def worktree_path_for(config, repo_root, raw_branch):
    """Return (normalized branch, <root>/<repo-name>/<branch>) for raw_branch."""
    branch = normalize_branch(raw_branch)
    return branch, os.path.join(repo_worktree_base(config, repo_root), branch)


def create_worktree(git_repo, config, raw_branch, prog_name="gwh"):
    """Create a worktree for raw_branch under the conventional base directory.

    An existing local branch is checked out; otherwise a new branch is
    created from HEAD.

    Returns:
        The path of the new worktree.

    Raises:
        ConfigMissingError: If the worktree root is not configured.
        OperationFailedError: If the repository has no commits, the path is
            already taken, or git fails to add the worktree.
    """
    branch, worktree_path = worktree_path_for(config, git_repo.toplevel, raw_branch)
    if not branch:
        raise OperationFailedError(f"Invalid branch name: {raw_branch!r}")

    if not git_repo.has_commits():
        raise OperationFailedError(
            "Repository has no commits; create an initial commit before adding a worktree"
        )

    if os.path.exists(worktree_path):
        if is_registered_worktree(worktree_path, list_candidates(git_repo)):
            raise OperationFailedError(f"Worktree already exists: {worktree_path}")
        raise OperationFailedError(
            f"Path exists but is not a registered worktree: {worktree_path}\n"
            f"Delete it with: {prog_name} delete --force {branch}"
        )

    try:
        os.makedirs(os.path.dirname(worktree_path), exist_ok=True)
    except OSError as e:
        raise OperationFailedError(f"Unable to create {os.path.dirname(worktree_path)}: {e}")

    create_branch = not git_repo.branch_exists(branch)
    git_repo.add_worktree(worktree_path, branch, create_branch=create_branch)
    return worktree_path


def resolve_for_delete(git_repo, config, target, candidates):
    """Resolve target against the registry, then against stale directories."""

    def registry(query):
        return resolve_worktree_path(query, candidates)

    def stale(query):
        return find_stale_worktree(
            query, lambda: repo_worktree_base(config, git_repo.toplevel)
        )

    return resolve_target(target, [registry, stale])


def detach_worktree(git_repo, worktree_path):
    """Unregister a worktree by removing its .git link and its git directory.

    Raises:
        OperationFailedError: If the git directory cannot be resolved or removed.
    """
    git_dir = git_repo.git_dir_for(worktree_path)
    dot_git = os.path.join(worktree_path, ".git")
    logger.debug("detaching %s (git dir %s)", worktree_path, git_dir)
    try:
        if os.path.lexists(dot_git):
            if os.path.isdir(dot_git) and not os.path.islink(dot_git):
                raise OperationFailedError(f"Refusing to detach main worktree: {worktree_path}")
            os.remove(dot_git)
        if os.path.isdir(git_dir):
            shutil.rmtree(git_dir)
    except OSError as e:
        raise OperationFailedError(f"Unable to detach {worktree_path}: {e}")


def remove_worktree_directory(worktree_path, force=False, trash=move_to_trash):
    """Delete worktree_path permanently when force is set, else move it to the trash."""
    if force:
        try:
            shutil.rmtree(worktree_path)
        except OSError as e:
            raise OperationFailedError(f"Unable to delete {worktree_path}: {e}")
        return
    trash(worktree_path)


def _overlaps(path, other):
    common = os.path.commonpath([path, other])
    return common in (path, other)


def refuse_repository_paths(git_repo, worktree_path, candidates=()):
    """Refuse a target that overlaps the current worktree or the shared git dir.

    A registered worktree nested inside the current worktree may still be deleted.

    Raises:
        OperationFailedError: If deleting worktree_path would damage the repository.
    """
    target = os.path.realpath(worktree_path)
    toplevel = os.path.realpath(git_repo.toplevel)
    if target == toplevel:
        raise OperationFailedError("Refusing to delete the current worktree")
    nested = is_registered_worktree(worktree_path, candidates)
    for protected in (toplevel, os.path.realpath(git_repo.common_git_dir)):
        if protected == toplevel and nested and target.startswith(toplevel + os.sep):
            continue
        if _overlaps(target, protected):
            raise OperationFailedError(
                f"Refusing to delete {worktree_path}: it overlaps the repository at {protected}"
            )


def delete_worktree(git_repo, config, target, force=False, keep=False, trash=move_to_trash):
    """Delete the worktree identified by target.

    Registered worktrees are detached first. With keep, the directory is left
    in place after detaching.

    Returns:
        The path of the deleted worktree.

    Raises:
        NoMatchError, AmbiguousMatchError: If target does not resolve.
        OperationFailedError: If the target is the current worktree or a
            step of the deletion fails.
    """
    candidates = list_candidates(git_repo)
    worktree_path = resolve_for_delete(git_repo, config, target, candidates)

    refuse_repository_paths(git_repo, worktree_path, candidates)
    if not os.path.exists(worktree_path):
        raise OperationFailedError(f"Worktree path does not exist: {worktree_path}")

    if is_registered_worktree(worktree_path, candidates):
        detach_worktree(git_repo, worktree_path)

    if keep:
        return worktree_path

    try:
        remove_worktree_directory(worktree_path, force=force, trash=trash)
    except OperationFailedError as e:
        if force:
            raise
        raise OperationFailedError(f"{e}\nWorktree detached; directory left in place")
    return worktree_path
