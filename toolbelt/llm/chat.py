"""One-shot chat questions.

Contains:
- ask_question: Send a question and return the assistant's answer
"""

from typing import Optional

from openai import APIConnectionError, APIStatusError, OpenAI

from toolbelt.config import HelperConfig
from toolbelt.llm.dispatcher import _status_error_message, create_client
from toolbelt.llm.exceptions import ApiError, MissingFieldsError, NetworkError
from toolbelt.llm.prompts import ASK_SYSTEM_PROMPT

ASK_MODEL = "gpt-4o-mini"
ASK_MAX_TOKENS = 500
ASK_TEMPERATURE = 0.7
ASK_TIMEOUT = 15.0


def ask_question(
    config: HelperConfig,
    question: str,
    model: str = ASK_MODEL,
    client: Optional[OpenAI] = None,
) -> str:
    """Ask a single question and return the answer text.

    There is no retry: a failed request is reported straight away.

    Raises:
        NetworkError: If the endpoint could not be reached.
        ApiError: If the endpoint answered with an error.
        MissingFieldsError: If the answer is empty.
    """
    client = client or create_client(config, timeout=ASK_TIMEOUT)

    try:
        response = client.chat.completions.create(
            model=model,
            max_tokens=ASK_MAX_TOKENS,
            temperature=ASK_TEMPERATURE,
            messages=[
                {"role": "system", "content": ASK_SYSTEM_PROMPT},
                {"role": "user", "content": question},
            ],
        )
    except APIStatusError as e:
        raise ApiError(_status_error_message(e), status_code=e.status_code) from e
    except APIConnectionError as e:
        raise NetworkError(f"{type(e).__name__}: {e}", attempts=1) from e

    answer = response.choices[0].message.content if response.choices else None
    if not answer or not answer.strip():
        raise MissingFieldsError("Received an empty response from the API.", fields=["content"])
    return answer.strip()
