"""The git helper pipeline.

Collect -> assemble -> dispatch -> extract -> render, strictly in order.
Nothing here prompts the user; the CLI resolves every interactive choice
into a ContextRequest first and owns the action menu afterwards.
"""

from dataclasses import dataclass
from typing import Optional

import typer
from openai import OpenAI

from toolbelt.config import HelperConfig
from toolbelt.formatters import ResponseFields
from toolbelt.git.context import collect_context
from toolbelt.llm.dispatcher import send_request
from toolbelt.llm.parsing import extract_fields
from toolbelt.llm.payload import (
    assemble_prompt,
    build_function_schema,
    build_request_payload,
)
from toolbelt.modes import ContextRequest, ModeSpec, get_mode_spec


@dataclass
class GenerationResult:
    """Everything produced by one pass through the pipeline.

    Attributes:
        spec: The mode that produced the result.
        fields: Validated reply fields.
        message: The rendered message.
        prompt: The single-line prompt that was sent.
        arguments: The raw structured-arguments string from the reply.
        elapsed: Seconds spent waiting for the endpoint.
        attempts: Number of request attempts used.
    """

    spec: ModeSpec
    fields: ResponseFields
    message: str
    prompt: str
    arguments: str
    elapsed: float
    attempts: int


def generate(
    config: HelperConfig,
    request: ContextRequest,
    client: Optional[OpenAI] = None,
) -> GenerationResult:
    """Run the pipeline once.

    Args:
        config: Resolved configuration.
        request: The resolved mode and selections.
        client: Client to dispatch with (created from config when omitted).

    Returns:
        A GenerationResult with the rendered message.

    Raises:
        GitError: If context collection fails (EmptyContextError, SameBranchError).
        LLMError: If dispatch or extraction fails (NetworkError, ApiError,
            MalformedResponseError, MissingFieldsError).
    """
    spec = get_mode_spec(request.mode)

    typer.echo("Collecting git context...", err=True)
    context = collect_context(request)

    prompt = assemble_prompt(spec.template, context)
    schema = build_function_schema(spec.function_description, spec.fields_model)
    payload = build_request_payload(config.model, prompt, schema, config.temperature)

    typer.echo(f"Sending request to {config.base_url} ({config.model})...", err=True)
    dispatch = send_request(config, payload, client=client)

    fields, arguments = extract_fields(dispatch.body, spec.fields_model)

    return GenerationResult(
        spec=spec,
        fields=fields,
        message=spec.render(fields),
        prompt=prompt,
        arguments=arguments,
        elapsed=dispatch.elapsed,
        attempts=dispatch.attempts,
    )
