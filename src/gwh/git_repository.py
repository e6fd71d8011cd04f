"""GitRepository: wraps GitPython Repo for worktree registry operations.

Provides an injectable interface for git operations, enabling
FakeGitRepository in tests without unittest.mock.patch.
"""

import logging
import os

from git import Git, Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from gwh.errors import OperationFailedError, RegistryUnavailableError

logger = logging.getLogger(__name__)


def _stderr_of(error):
    return (error.stderr or "").strip()


class GitRepository:
    """Wraps a GitPython Repo with the worktree operations gwh needs.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def discover(cls, path="."):
        """Open the repository containing path.

        Raises:
            RegistryUnavailableError: If path is not inside a git repository.
        """
        try:
            return cls(Repo(path, search_parent_directories=True))
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise RegistryUnavailableError("Not inside a git repository")

    @property
    def toplevel(self):
        """Root of the worktree the repository was opened from."""
        try:
            return self._repo.git.rev_parse("--show-toplevel")
        except GitCommandError as e:
            raise RegistryUnavailableError(_stderr_of(e) or "Unable to resolve repository root")

    @property
    def common_git_dir(self):
        """Absolute git directory shared by all worktrees of the repository."""
        try:
            git_dir = self._repo.git.rev_parse("--git-common-dir")
        except GitCommandError as e:
            raise RegistryUnavailableError(_stderr_of(e) or "Unable to resolve git directory")
        if not os.path.isabs(git_dir):
            git_dir = os.path.join(self._repo.working_dir, git_dir)
        return os.path.normpath(git_dir)

    def worktree_list_porcelain(self):
        """Return the output of `git worktree list --porcelain`."""
        try:
            return self._repo.git.worktree("list", "--porcelain")
        except GitCommandError as e:
            raise RegistryUnavailableError(_stderr_of(e) or "Unable to list worktrees")

    def has_commits(self):
        """Return True if HEAD points at a commit."""
        try:
            self._repo.git.rev_parse("--verify", "HEAD")
        except GitCommandError:
            return False
        return True

    def branch_exists(self, branch_name):
        """Return True if a local branch with this name exists."""
        try:
            self._repo.git.show_ref("--verify", "--quiet", f"refs/heads/{branch_name}")
        except GitCommandError:
            return False
        return True

    def add_worktree(self, worktree_path, branch_name, create_branch):
        """Create a worktree at worktree_path checked out to branch_name.

        Args:
            worktree_path: Directory for the new worktree.
            branch_name: Branch to check out.
            create_branch: When True, create branch_name from HEAD.

        Raises:
            OperationFailedError: If git refuses to add the worktree.
        """
        if create_branch:
            args = ("add", "-b", branch_name, worktree_path)
        else:
            args = ("add", worktree_path, branch_name)
        logger.debug("git worktree %s", " ".join(args))
        try:
            self._repo.git.worktree(*args)
        except GitCommandError as e:
            raise OperationFailedError(_stderr_of(e) or f"Unable to add worktree: {worktree_path}")

    def git_dir_for(self, worktree_path):
        """Return the absolute git directory of the worktree at worktree_path.

        Raises:
            OperationFailedError: If git cannot resolve the directory.
        """
        try:
            git_dir = Git(worktree_path).rev_parse("--git-dir")
        except GitCommandError:
            raise OperationFailedError(f"Unable to resolve git dir for: {worktree_path}")
        if not os.path.isabs(git_dir):
            git_dir = os.path.join(worktree_path, git_dir)
        return git_dir
