"""Git access for toolbelt.

This package wraps the git CLI:
- exceptions: GitError, EmptyContextError, SameBranchError
- runner: _run_git_command, get_repo_root
- branch: get_current_branch, list_branches, target_branch_choices
- diff: get_staged_diff, get_local_diff, get_branch_diff, get_commit_diff
- log: get_branch_log, list_commits, get_head_commit, resolve_commit
- commit: commit_with_message
- context: collect_context
"""

from toolbelt.git.exceptions import (
    EmptyContextError,
    GitError,
    SameBranchError,
)
from toolbelt.git.runner import (
    _run_git_command,
    get_repo_root,
)
from toolbelt.git.branch import (
    get_current_branch,
    list_branches,
    target_branch_choices,
)
from toolbelt.git.diff import (
    get_branch_diff,
    get_commit_diff,
    get_local_diff,
    get_staged_diff,
)
from toolbelt.git.log import (
    get_branch_log,
    get_head_commit,
    list_commits,
    resolve_commit,
)
from toolbelt.git.commit import commit_with_message
from toolbelt.git.context import collect_context


__all__ = [
    # Exceptions
    "GitError",
    "EmptyContextError",
    "SameBranchError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Branch
    "get_current_branch",
    "list_branches",
    "target_branch_choices",
    # Diff
    "get_staged_diff",
    "get_local_diff",
    "get_branch_diff",
    "get_commit_diff",
    # Log
    "get_branch_log",
    "list_commits",
    "get_head_commit",
    "resolve_commit",
    # Commit
    "commit_with_message",
    # Context
    "collect_context",
]
