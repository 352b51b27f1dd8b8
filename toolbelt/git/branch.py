"""Git branch utilities.

Contains:
- get_current_branch: Get the abbreviated name of HEAD
- list_branches: List local branch names
- target_branch_choices: Order local branches for the PR target prompt
"""

from toolbelt.git.runner import _run_git_command

DEFAULT_TARGET_BRANCH = "main"


def get_current_branch() -> str:
    """Get the current branch name.

    Returns:
        The branch name, or 'HEAD' when detached.
    """
    return _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"])


def list_branches() -> list[str]:
    """List local branch names."""
    output = _run_git_command(["branch", "--format=%(refname:short)"])
    return [line.strip() for line in output.splitlines() if line.strip()]


def target_branch_choices(current_branch: str) -> list[str]:
    """Get candidate PR target branches.

    The current branch is excluded and the default branch, when it exists,
    is listed first.

    Args:
        current_branch: The branch being merged.

    Returns:
        Ordered list of branch names.
    """
    branches = [b for b in list_branches() if b != current_branch]
    if DEFAULT_TARGET_BRANCH in branches:
        branches.remove(DEFAULT_TARGET_BRANCH)
        branches.insert(0, DEFAULT_TARGET_BRANCH)
    return branches
