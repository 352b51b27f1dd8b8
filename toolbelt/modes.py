"""Operating modes of the git helper.

Each mode is a ModeSpec record carrying everything that differs between
modes: the prompt template, the reply schema, the renderer and which
follow-up actions make sense. The pipeline dispatches on these records
instead of on subclasses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from toolbelt.formatters import (
    CommitFields,
    PullRequestFields,
    ResponseFields,
    ReviewFields,
    render_commit_message,
    render_pull_request,
    render_review,
)
from toolbelt.llm.prompts import (
    COMMIT_FUNCTION_DESCRIPTION,
    COMMIT_PROMPT_TEMPLATE,
    PR_FUNCTION_DESCRIPTION,
    PR_PROMPT_TEMPLATE,
    REVIEW_FUNCTION_DESCRIPTION,
    REVIEW_PROMPT_TEMPLATE,
)


class OperatingMode(str, Enum):
    """What the git helper generates."""

    COMMIT = "commit"
    PULL_REQUEST = "pr"
    REVIEW = "review"
    REWRITE = "rewrite"


class ReviewSource(str, Enum):
    """Which changes a code review looks at."""

    LOCAL = "local"
    STAGED = "staged"
    BRANCHES = "branches"
    COMMIT = "commit"


REVIEW_SOURCE_LABELS = {
    ReviewSource.LOCAL: "Current changes",
    ReviewSource.STAGED: "Staged changes",
    ReviewSource.BRANCHES: "Changes between branches",
    ReviewSource.COMMIT: "Specific commit",
}


@dataclass(frozen=True)
class ContextRequest:
    """Fully resolved description of what context to collect.

    Interactive choices (target branch, review source, commit) are made
    before the pipeline starts, so regenerating reuses them.

    Attributes:
        mode: The operating mode.
        target_branch: PR target, or the base branch of a branch review.
        review_source: Which changes to review (review mode only).
        commit: Selected commit hash (rewrite, or review of a commit).
    """

    mode: OperatingMode
    target_branch: Optional[str] = None
    review_source: Optional[ReviewSource] = None
    commit: Optional[str] = None


@dataclass(frozen=True)
class ModeSpec:
    """Per-mode behavior.

    Attributes:
        mode: The operating mode this record describes.
        label: Menu label used when the mode is chosen interactively.
        noun: What the rendered message is, for status lines.
        function_description: Sent with the reply schema.
        template: Prompt template with named placeholders.
        fields_model: Pydantic model declaring the reply fields.
        render: Turns validated fields into the rendered message.
        commit_actions: Whether submit / edit actions are offered.
    """

    mode: OperatingMode
    label: str
    noun: str
    function_description: str
    template: str
    fields_model: type[ResponseFields]
    render: Callable[[ResponseFields], str]
    commit_actions: bool


MODE_SPECS = {
    OperatingMode.COMMIT: ModeSpec(
        mode=OperatingMode.COMMIT,
        label="Generate a commit message for the currently staged changes",
        noun="commit message",
        function_description=COMMIT_FUNCTION_DESCRIPTION,
        template=COMMIT_PROMPT_TEMPLATE,
        fields_model=CommitFields,
        render=render_commit_message,
        commit_actions=True,
    ),
    OperatingMode.PULL_REQUEST: ModeSpec(
        mode=OperatingMode.PULL_REQUEST,
        label="Generate a Pull Request message",
        noun="PR description",
        function_description=PR_FUNCTION_DESCRIPTION,
        template=PR_PROMPT_TEMPLATE,
        fields_model=PullRequestFields,
        render=render_pull_request,
        commit_actions=False,
    ),
    OperatingMode.REWRITE: ModeSpec(
        mode=OperatingMode.REWRITE,
        label="Rewrite a commit message",
        noun="commit message",
        function_description=COMMIT_FUNCTION_DESCRIPTION,
        template=COMMIT_PROMPT_TEMPLATE,
        fields_model=CommitFields,
        render=render_commit_message,
        commit_actions=True,
    ),
    OperatingMode.REVIEW: ModeSpec(
        mode=OperatingMode.REVIEW,
        label="Review code changes",
        noun="code review",
        function_description=REVIEW_FUNCTION_DESCRIPTION,
        template=REVIEW_PROMPT_TEMPLATE,
        fields_model=ReviewFields,
        render=render_review,
        commit_actions=False,
    ),
}


def get_mode_spec(mode: OperatingMode) -> ModeSpec:
    """Look up the ModeSpec for a mode."""
    return MODE_SPECS[mode]


def parse_mode(value: str) -> OperatingMode:
    """Parse a CLI mode argument (case-insensitive).

    Raises:
        ValueError: If the value names no mode.
    """
    try:
        return OperatingMode(value.strip().lower())
    except ValueError:
        valid = ", ".join(m.value for m in OperatingMode)
        raise ValueError(f"Invalid operation type: [{value}]. Valid types: {valid}")
