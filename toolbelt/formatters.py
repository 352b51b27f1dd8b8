"""Response field models and message rendering.

Each operating mode declares its reply as a pydantic model. The field
descriptions are sent to the model as the structured-output schema, and the
same model validates what comes back.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResponseFields(BaseModel):
    """Base model for structured reply fields.

    Every declared field is a required, non-empty string.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def field_must_not_be_empty(cls, v, info):
        """Reject missing, non-string and blank values."""
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string")
        if not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v


class CommitFields(ResponseFields):
    """Commit message reply."""

    subject: str = Field(
        description=(
            "The subject line of the commit message. Briefly summarize the changes. "
            "Concise, under 50 characters. Follows conventional commit message format, so the "
            "message must start with `feat:`, `fix:`, `refactor:`, etc.. Does not use generic "
            "summaries like 'Updated files'. Does not include filenames in the subject line."
        )
    )
    body: str = Field(
        description=(
            "The body of the commit message. Use multiple lines in a bulleted list to "
            "succinctly describe the changes. Lines wrap at 72 characters"
        )
    )


class PullRequestFields(ResponseFields):
    """Pull request reply."""

    title: str = Field(description="The title of the pull request.")
    description: str = Field(description="The description of the pull request.")


class ReviewFields(ResponseFields):
    """Code review reply."""

    summary: str = Field(
        description=(
            "A summary of the changes made in the code. Include the purpose of the changes "
            "and the high-level impact."
        )
    )
    review: str = Field(
        description="The code review message. Include any issues found and suggestions for improvement."
    )


def render_commit_message(data: CommitFields) -> str:
    """Render commit fields into a commit message.

    Example output:
        fix: handle nil input

        - guard against nil
        - add test
    """
    return f"{data.subject}\n\n{data.body}\n"


def render_pull_request(data: PullRequestFields) -> str:
    """Render pull request fields into a title and description block."""
    return f"PR Title: {data.title}\n\nPR Description:\n{data.description}\n"


def render_review(data: ReviewFields) -> str:
    """Render review fields into a summary and review block."""
    return f"Summary:\n{data.summary}\n\nReview:\n{data.review}\n"
