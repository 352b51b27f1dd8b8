"""Git log utilities.

Contains:
- get_branch_log: Commit messages reachable from current but not target
- list_commits: One-line summaries of the commits on HEAD
- get_head_commit: Full hash of HEAD
- resolve_commit: Full hash of any commit-ish
"""

from toolbelt.git.runner import _run_git_command

COMMIT_SEPARATOR = "=-=-=-=-=-=-=-=-=-="
BRANCH_LOG_FORMAT = f"--pretty=format:{COMMIT_SEPARATOR}%n%h | %cd%n%s%n%b"


def get_branch_log(target_branch: str, current_branch: str) -> str:
    """Get the commit messages in target..current.

    Each commit is rendered as a separator line, "<hash> | <date>", the
    subject and the body.
    """
    return _run_git_command(
        ["log", "--no-patch", BRANCH_LOG_FORMAT, f"{target_branch}..{current_branch}"]
    )


def list_commits() -> list[str]:
    """List commits as "<short hash> <subject>" lines, newest first."""
    output = _run_git_command(["log", "--oneline"])
    return [line for line in output.splitlines() if line.strip()]


def get_head_commit() -> str:
    """Get the full hash of HEAD."""
    return _run_git_command(["rev-parse", "HEAD"])


def resolve_commit(commit: str) -> str:
    """Resolve a commit-ish to its full hash."""
    return _run_git_command(["rev-parse", "--verify", f"{commit}^{{commit}}"])
