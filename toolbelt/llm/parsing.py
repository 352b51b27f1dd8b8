"""Response extraction and validation.

Contains:
- extract_arguments: Find the structured-arguments payload in a response body
- parse_arguments: Decode the structured-arguments payload
- validate_fields: Check the decoded arguments against the declared fields
- extract_fields: All three steps in order
"""

import json
from typing import Any, TypeVar

from pydantic import ValidationError

from toolbelt.formatters import ResponseFields
from toolbelt.llm.exceptions import MalformedResponseError, MissingFieldsError

FieldsT = TypeVar("FieldsT", bound=ResponseFields)


def extract_arguments(body: str) -> str:
    """Locate the structured-arguments string in a chat-completion body.

    Looks at choices[0].message.tool_calls[0].function.arguments first, then
    the legacy choices[0].message.function_call.arguments.

    Args:
        body: The raw response body.

    Returns:
        The JSON-encoded arguments string.

    Raises:
        MalformedResponseError: If the body is not valid JSON.
        MissingFieldsError: If no arguments payload is present.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            f"Failed to parse API response as JSON.\n"
            f"Error: {e}\n"
            f"Raw response:\n{body}"
        )

    message = _first_message(data)

    tool_calls = message.get("tool_calls") or []
    for call in tool_calls:
        arguments = ((call or {}).get("function") or {}).get("arguments")
        if arguments:
            return arguments

    function_call = message.get("function_call") or {}
    arguments = function_call.get("arguments")
    if arguments:
        return arguments

    raise MissingFieldsError(
        "API response does not contain the expected function response.\n"
        f"Message: {json.dumps(message, indent=2)}"
    )


def parse_arguments(arguments: str) -> dict[str, Any]:
    """Decode the structured-arguments payload.

    Raises:
        MalformedResponseError: If the payload is not valid JSON.
        MissingFieldsError: If the payload is not a JSON object.
    """
    try:
        parsed = json.loads(arguments)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            f"Failed to parse function arguments as JSON.\n"
            f"Error: {e}\n"
            f"Arguments:\n{arguments}"
        )

    if not isinstance(parsed, dict):
        raise MissingFieldsError(f"Function arguments are not an object: {arguments}")
    return parsed


def validate_fields(parsed: dict[str, Any], fields_model: type[FieldsT]) -> FieldsT:
    """Validate decoded arguments against the declared fields.

    Raises:
        MissingFieldsError: If any declared field is absent, not a string or empty.
    """
    try:
        return fields_model.model_validate(parsed)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise MissingFieldsError(
            f"API response is missing or has empty fields: {', '.join(missing)}\n"
            f"Arguments: {parsed}",
            fields=missing,
        )


def extract_fields(body: str, fields_model: type[FieldsT]) -> tuple[FieldsT, str]:
    """Extract and validate the reply fields from a response body.

    Returns:
        The validated fields and the raw arguments string.
    """
    arguments = extract_arguments(body)
    parsed = parse_arguments(arguments)
    return validate_fields(parsed, fields_model), arguments


def _first_message(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise MissingFieldsError(f"API response is not an object: {data!r}")

    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        raise MissingFieldsError("API response does not contain any choices.")

    message = choices[0].get("message")
    if not isinstance(message, dict):
        raise MissingFieldsError("API response choice does not contain a message.")
    return message
