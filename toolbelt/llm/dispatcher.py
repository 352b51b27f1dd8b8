"""Request dispatch to the chat-completion endpoint.

Contains:
- DispatchResult: Raw response body plus timing information
- create_client: Build an OpenAI-compatible client from the configuration
- send_request: Send one payload with bounded retry on transport failures
- raise_for_error_body: Surface an error object embedded in a 2xx body
"""

import json
import random
import time
from dataclasses import dataclass
from typing import Any, Optional

import typer
from openai import APIConnectionError, APIStatusError, OpenAI

from toolbelt.config import HelperConfig
from toolbelt.llm.exceptions import ApiError, NetworkError


@dataclass
class DispatchResult:
    """Result of a successful dispatch.

    Attributes:
        body: The raw response body text.
        elapsed: Seconds from the first attempt to the response.
        attempts: Number of attempts used (1 when nothing failed).
    """

    body: str
    elapsed: float
    attempts: int


def create_client(config: HelperConfig, timeout: Optional[float] = None) -> OpenAI:
    """Create a client for the configured endpoint.

    The SDK's own retries are disabled; send_request owns the retry policy.
    """
    return OpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=timeout if timeout is not None else config.timeout,
        max_retries=0,
    )


def send_request(
    config: HelperConfig,
    payload: dict[str, Any],
    client: Optional[OpenAI] = None,
) -> DispatchResult:
    """Send the payload, retrying only transport failures.

    Up to config.max_attempts attempts are made in total, with a random
    sleep of config.backoff_range seconds between them.

    Args:
        config: Resolved configuration.
        payload: Request body from build_request_payload().
        client: Client to use (created from config when omitted).

    Returns:
        A DispatchResult holding the raw body.

    Raises:
        NetworkError: If every attempt failed to reach the endpoint.
        ApiError: If the endpoint answered with an error (never retried).
    """
    client = client or create_client(config)
    max_attempts = max(1, config.max_attempts)
    start = time.monotonic()

    attempt = 0
    while True:
        attempt += 1
        try:
            raw = client.chat.completions.with_raw_response.create(**payload)
        except APIStatusError as e:
            raise ApiError(_status_error_message(e), status_code=e.status_code) from e
        except APIConnectionError as e:
            if attempt >= max_attempts:
                raise NetworkError(
                    f"Request failed after {attempt} attempt(s): {type(e).__name__}: {e}",
                    attempts=attempt,
                ) from e
            typer.echo(f"\nAttempt {attempt} of {max_attempts} failed:", err=True)
            typer.echo(f"{type(e).__name__}: {e}", err=True)
            time.sleep(random.randint(*config.backoff_range))
            continue

        body = raw.http_response.text
        raise_for_error_body(body)
        return DispatchResult(body=body, elapsed=time.monotonic() - start, attempts=attempt)


def raise_for_error_body(body: str) -> None:
    """Raise ApiError if a successful response carries an error object.

    Bodies that are not JSON are left for the response extractor to report.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return

    if isinstance(data, dict) and data.get("error"):
        raise ApiError(_describe_error(data["error"]))


def _status_error_message(error: APIStatusError) -> str:
    if isinstance(error.body, dict):
        # The SDK unwraps {"error": {...}} into body
        inner = error.body.get("error", error.body)
        return f"HTTP {error.status_code}: {_describe_error(inner)}"
    return error.message


def _describe_error(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        if message:
            return str(message)
        return json.dumps(error, indent=2)
    return str(error)
