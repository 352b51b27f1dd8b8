"""Git diff utilities.

Every diff is taken with a single line of context to keep prompts small.

Contains:
- get_staged_diff: Diff of the index against HEAD
- get_local_diff: Diff of the working tree against the index
- get_branch_diff: Diff between a target branch and the current branch
- get_commit_diff: Diff introduced by one commit
"""

from toolbelt.git.runner import _run_git_command

CONTEXT_LINES = "--unified=1"


def get_staged_diff() -> str:
    """Get the staged diff (may be empty)."""
    return _run_git_command(["diff", "--cached", CONTEXT_LINES])


def get_local_diff() -> str:
    """Get the unstaged changes in the working tree (may be empty)."""
    return _run_git_command(["diff", CONTEXT_LINES])


def get_branch_diff(target_branch: str, current_branch: str) -> str:
    """Get the diff between two branches.

    Args:
        target_branch: The branch the changes will be merged into.
        current_branch: The branch containing the changes.
    """
    return _run_git_command(["diff", CONTEXT_LINES, f"{target_branch}..{current_branch}"])


def get_commit_diff(commit: str, include_message: bool = False) -> str:
    """Get the changes introduced by a single commit.

    Args:
        commit: Commit hash or ref.
        include_message: Include the commit header and message before the diff.
    """
    args = ["show", CONTEXT_LINES]
    if not include_message:
        args.append("--pretty=")
    args.append(commit)
    return _run_git_command(args)
