"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- EmptyContextError: Raised when there is nothing to send to the model
- SameBranchError: Raised when the PR target branch is the current branch
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class EmptyContextError(GitError):
    """Raised when the collected diff or log is empty."""

    pass


class SameBranchError(GitError):
    """Raised when the current branch and the target branch are the same."""

    pass
