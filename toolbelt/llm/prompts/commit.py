"""Commit message prompt.

The same template serves new commits (staged changes) and rewrites (the
output of git show for an existing commit).
"""

COMMIT_FUNCTION_DESCRIPTION = "Generate a conventional commit message based on the staged changes."

COMMIT_PROMPT_TEMPLATE = """Create a conventional commit message based on these file changes:
```shell
{code_changes}
```
"""
