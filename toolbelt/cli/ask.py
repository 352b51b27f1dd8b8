"""CLI command for one-shot chat questions."""

import os
import textwrap
from dataclasses import replace
from typing import List, Optional

import typer

from toolbelt.cli.utils import report_error
from toolbelt.config import BASE_URLS, HelperConfig, LLMProvider, load_config
from toolbelt.global_config import GlobalConfigError
from toolbelt.llm import LLMError
from toolbelt.llm.chat import ASK_MODEL, ask_question

PERSONAL_KEY_ENV_VAR = "OPENAI_API_KEY_PERSONAL"
LINE_WIDTH = 100
SPACER = "=" * LINE_WIDTH


def ask_command(
    question: Optional[List[str]] = typer.Argument(
        None,
        help="The question to ask (prompted if omitted)",
    ),
    model: str = typer.Option(
        ASK_MODEL,
        "--model",
        "-m",
        help="Model to answer with",
    ),
) -> None:
    """Ask a quick question from the terminal."""
    text = " ".join(question or []).strip()
    if not text:
        text = typer.prompt("Please enter your question").strip()

    try:
        config = load_ask_config(model)
        answer = ask_question(config, text, model=config.model)
    except (LLMError, GlobalConfigError) as e:
        report_error(e)
        raise typer.Exit(1)

    typer.echo()
    typer.echo(SPACER)
    typer.echo("Answer:")
    for paragraph in answer.splitlines():
        typer.echo(textwrap.fill(paragraph, width=LINE_WIDTH) if paragraph else "")
    typer.echo(SPACER)
    typer.echo()


def load_ask_config(model: str) -> HelperConfig:
    """Resolve the configuration for ask.

    The personal key is an OpenAI key, so when it is used the request goes to
    OpenAI whatever provider the git helper is configured for.
    """
    config = load_config(model=model, api_key_env_var=PERSONAL_KEY_ENV_VAR)
    if os.getenv(PERSONAL_KEY_ENV_VAR):
        config = replace(config, provider=LLMProvider.OPENAI, base_url=BASE_URLS[LLMProvider.OPENAI])
    return config
