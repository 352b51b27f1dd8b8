"""LLM-related exception classes.

Contains all exception classes for chat-completion operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no API key is configured
- NetworkError: Raised when every transport attempt failed
- ApiError: Raised when the endpoint answered with an error
- MalformedResponseError: Raised when a reply cannot be parsed as JSON
- MissingFieldsError: Raised when a reply does not fill the requested schema
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class NetworkError(LLMError):
    """Raised when the request could not be delivered after all attempts."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


class ApiError(LLMError):
    """Raised when the endpoint returned a non-2xx status or an error object.

    Attributes:
        status_code: HTTP status, when known.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(LLMError):
    """Raised when the response body (or its arguments payload) is not valid JSON."""

    pass


class MissingFieldsError(LLMError):
    """Raised when the structured arguments are absent or incomplete.

    Attributes:
        fields: Names of the declared fields that were missing or empty.
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []
