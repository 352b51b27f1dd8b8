"""Mutating git operations.

Contains:
- commit_with_message: Create (or amend) a commit with a given message
"""

import subprocess

from toolbelt.git.exceptions import GitError


def commit_with_message(message: str, edit: bool = False, amend: bool = False) -> int:
    """Run git commit with the given message.

    The command inherits the terminal so git can open its editor and print
    its own summary.

    Args:
        message: The full commit message.
        edit: Open git's configured editor pre-filled with the message.
        amend: Replace the message of HEAD instead of creating a new commit.
            Staged changes stay in the index and are not folded into HEAD.

    Returns:
        The git exit status.

    Raises:
        GitError: If git is not installed.
    """
    args = ["git", "commit"]
    if amend:
        # --only with no paths rewrites the message and ignores the index
        args.extend(["--amend", "--only"])
    if edit:
        args.append("--edit")
    args.extend(["--message", message])

    try:
        result = subprocess.run(args, check=False)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.returncode
