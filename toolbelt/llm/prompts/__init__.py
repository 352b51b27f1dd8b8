"""Prompt templates for the git helper and the ask command.

- commit: Conventional commit message from staged (or historical) changes
- pull_request: PR title and description from a branch log and diff
- review: Summary and review of a set of changes
- system: System prompt for one-shot terminal questions
"""

from toolbelt.llm.prompts.commit import (
    COMMIT_FUNCTION_DESCRIPTION,
    COMMIT_PROMPT_TEMPLATE,
)
from toolbelt.llm.prompts.pull_request import (
    PR_FUNCTION_DESCRIPTION,
    PR_PROMPT_TEMPLATE,
)
from toolbelt.llm.prompts.review import (
    REVIEW_FUNCTION_DESCRIPTION,
    REVIEW_PROMPT_TEMPLATE,
)
from toolbelt.llm.prompts.system import ASK_SYSTEM_PROMPT


__all__ = [
    "COMMIT_FUNCTION_DESCRIPTION",
    "COMMIT_PROMPT_TEMPLATE",
    "PR_FUNCTION_DESCRIPTION",
    "PR_PROMPT_TEMPLATE",
    "REVIEW_FUNCTION_DESCRIPTION",
    "REVIEW_PROMPT_TEMPLATE",
    "ASK_SYSTEM_PROMPT",
]
