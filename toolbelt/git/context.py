"""Context collection for the git helper.

Contains:
- collect_context: Gather the Context Blob for a resolved ContextRequest
"""

from toolbelt.git.branch import get_current_branch
from toolbelt.git.diff import (
    get_branch_diff,
    get_commit_diff,
    get_local_diff,
    get_staged_diff,
)
from toolbelt.git.exceptions import EmptyContextError, GitError, SameBranchError
from toolbelt.git.log import get_branch_log
from toolbelt.modes import ContextRequest, OperatingMode, ReviewSource


def collect_context(request: ContextRequest) -> dict[str, str]:
    """Collect the text the prompt template needs.

    Args:
        request: The resolved mode and selections.

    Returns:
        Mapping of template placeholder to non-empty text.

    Raises:
        EmptyContextError: If there is nothing to describe.
        SameBranchError: If a PR targets the current branch.
        GitError: If a git command fails or a required selection is missing.
    """
    mode = request.mode

    if mode == OperatingMode.COMMIT:
        code_changes = get_staged_diff()
        _require(code_changes, "No staged changes found. Stage your changes first with: git add <files>")
        return {"code_changes": code_changes}

    elif mode == OperatingMode.PULL_REQUEST:
        return _collect_pull_request(request.target_branch)

    elif mode == OperatingMode.REWRITE:
        if not request.commit:
            raise GitError("No commit selected to rewrite.")
        code_changes = get_commit_diff(request.commit, include_message=True)
        _require(code_changes, f"No code changes found in commit {request.commit}.")
        return {"code_changes": code_changes}

    elif mode == OperatingMode.REVIEW:
        code_changes = _collect_review_changes(request)
        _require(code_changes, "No code changes found. Please try again.")
        return {"code_changes": code_changes}

    else:
        raise ValueError(f"Unsupported mode: {mode}")


def _collect_pull_request(target_branch: str | None) -> dict[str, str]:
    current_branch = get_current_branch()
    current, target = _validate_branches(current_branch, target_branch)

    commit_messages = get_branch_log(target, current)
    code_changes = get_branch_diff(target, current)

    _require(code_changes, f"No code changes found between {target} and {current}.")
    _require(commit_messages, "No commit messages found. Please make some commits before running this script.")

    return {"commit_messages": commit_messages, "code_changes": code_changes}


def _collect_review_changes(request: ContextRequest) -> str:
    source = request.review_source

    if source == ReviewSource.LOCAL:
        return get_local_diff()
    elif source == ReviewSource.STAGED:
        return get_staged_diff()
    elif source == ReviewSource.BRANCHES:
        current, target = _validate_branches(get_current_branch(), request.target_branch)
        return get_branch_diff(target, current)
    elif source == ReviewSource.COMMIT:
        if not request.commit:
            raise GitError("No commit selected to review.")
        return get_commit_diff(request.commit)
    else:
        raise GitError("No review source selected.")


def _validate_branches(current_branch: str, target_branch: str | None) -> tuple[str, str]:
    current = (current_branch or "").strip()
    target = (target_branch or "").strip()

    if not current or not target:
        raise GitError(
            "Unable to determine the current branch or the target branch. "
            "Please check your git configuration."
        )
    if current == target:
        raise SameBranchError(
            "The current branch and the target branch are the same. "
            "Please provide a different target branch."
        )
    return current, target


def _require(text: str, message: str) -> None:
    if not text or not text.strip():
        raise EmptyContextError(message)
