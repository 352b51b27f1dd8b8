"""Chat-completion access for toolbelt.

- exceptions: error taxonomy for requests and replies
- prompts: per-mode templates
- payload: prompt assembly and request payloads
- dispatcher: retrying request dispatch
- parsing: structured-arguments extraction
- chat: one-shot questions
"""

from toolbelt.llm.exceptions import (
    ApiError,
    LLMError,
    MalformedResponseError,
    MissingAPIKeyError,
    MissingFieldsError,
    NetworkError,
)


__all__ = [
    "LLMError",
    "MissingAPIKeyError",
    "NetworkError",
    "ApiError",
    "MalformedResponseError",
    "MissingFieldsError",
]
