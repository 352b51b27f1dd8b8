"""Prompt assembly and request payload construction.

Contains:
- collapse_newlines: Replace every line break with a single space
- assemble_prompt: Fill a template with the Context Blob
- build_function_schema: Describe the expected reply fields
- build_request_payload: Combine prompt, schema and settings for one request
"""

import re
from typing import Any

from toolbelt.formatters import ResponseFields

RESPONSE_FUNCTION_NAME = "chatgpt_response_data"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def collapse_newlines(text: str) -> str:
    """Replace each line break with a single space.

    The prompt travels as one logical line. Applying this twice gives the
    same result as applying it once.
    """
    return _LINE_BREAK.sub(" ", text)


def assemble_prompt(template: str, context: dict[str, str]) -> str:
    """Substitute the context into the template and collapse line breaks.

    Args:
        template: Template with named placeholders such as {code_changes}.
        context: Placeholder values collected from git.

    Returns:
        The single-line prompt.

    Raises:
        KeyError: If the template names a placeholder the context lacks.
    """
    return collapse_newlines(template.format(**context))


def build_function_schema(description: str, fields_model: type[ResponseFields]) -> dict[str, Any]:
    """Build the function definition the model must fill in.

    Args:
        description: What the function produces.
        fields_model: Model whose fields (and their descriptions) define the reply.

    Returns:
        A function definition with a JSON-schema object of required strings.
    """
    properties = {
        name: {"type": "string", "description": field.description or name}
        for name, field in fields_model.model_fields.items()
    }
    return {
        "name": RESPONSE_FUNCTION_NAME,
        "description": description,
        "parameters": {
            "type": "object",
            "properties": properties,
            "required": list(properties),
        },
    }


def build_request_payload(
    model: str,
    prompt: str,
    function_schema: dict[str, Any],
    temperature: float,
) -> dict[str, Any]:
    """Build the chat-completion request body.

    The single user message carries the prompt; the schema is attached as the
    only tool and the model is forced to call it.
    """
    return {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "tools": [{"type": "function", "function": function_schema}],
        "tool_choice": {"type": "function", "function": {"name": function_schema["name"]}},
        "temperature": temperature,
    }
