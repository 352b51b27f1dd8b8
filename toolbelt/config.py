"""Configuration for the toolbelt chat-completion clients.

Settings are resolved once at startup by load_config() and passed
explicitly to the pipeline. Persistent values live in ~/.toolbelt/config.yaml;
use 'toolbelt config' commands to modify them.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv


class LLMProvider(Enum):
    """Supported OpenAI-compatible chat-completion endpoints."""

    OPENAI = "openai"
    OPENROUTER = "openrouter"
    GROQ = "groq"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.toolbelt/config.yaml doesn't set them

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.25
DEFAULT_TIMEOUT = 180.0
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_RANGE = (1, 5)


# ============================================================
# PROVIDER ENDPOINTS AND API KEY ENVIRONMENT VARIABLES
# ============================================================

BASE_URLS = {
    LLMProvider.OPENAI: "https://api.openai.com/v1",
    LLMProvider.OPENROUTER: "https://openrouter.ai/api/v1",
    LLMProvider.GROQ: "https://api.groq.com/openai/v1",
}

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
    LLMProvider.GROQ: "GROQ_API_KEY",
}

AVAILABLE_MODELS = {
    LLMProvider.OPENAI: [
        "gpt-4o-mini",
        "gpt-4o",
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4.1-nano",
    ],
    LLMProvider.OPENROUTER: [
        "openai/gpt-4o",
        "openai/gpt-4o-mini",
        "anthropic/claude-sonnet-4",
        "meta-llama/llama-3.3-70b-instruct",
    ],
    LLMProvider.GROQ: [
        "llama-3.3-70b-versatile",
        "llama-3.1-8b-instant",
    ],
}


@dataclass(frozen=True)
class HelperConfig:
    """Resolved settings for one invocation.

    Attributes:
        provider: The endpoint family being talked to.
        model: Model identifier sent with every request.
        api_key: Bearer token for the endpoint.
        base_url: Chat-completion API base URL.
        temperature: Sampling temperature (kept low for structured replies).
        timeout: Per-request timeout in seconds.
        max_attempts: Total number of attempts on transport failure.
        backoff_range: Inclusive bounds, in seconds, of the random sleep between attempts.
    """

    provider: LLMProvider
    model: str
    api_key: str
    base_url: str
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff_range: tuple[int, int] = DEFAULT_BACKOFF_RANGE


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


def resolve_api_key(provider: LLMProvider, env_var: Optional[str] = None) -> str:
    """Get the API key from environment or credentials file.

    Checks in order:
    1. The explicit env_var, if given
    2. The provider's environment variable
    3. ~/.toolbelt/credentials

    Raises:
        MissingAPIKeyError: If the API key is not found.
    """
    from toolbelt import global_config
    from toolbelt.llm.exceptions import MissingAPIKeyError

    provider_var = get_api_key_env_var(provider)
    for name in (env_var, provider_var):
        if name and os.getenv(name):
            return os.environ[name]

    api_key = global_config.get_credential(provider_var)
    if api_key:
        return api_key

    raise MissingAPIKeyError(
        f"{provider.value} API key not found. Set it using:\n"
        f"  1. Environment variable: export {provider_var}=your_key_here\n"
        f"  2. Run: toolbelt config set-key {provider.value}\n"
        f"  3. Manually add to ~/.toolbelt/credentials"
    )


def load_config(
    model: Optional[str] = None,
    api_key_env_var: Optional[str] = None,
) -> HelperConfig:
    """Build the configuration for this invocation.

    Precedence: defaults < ~/.toolbelt/config.yaml < environment < arguments.

    Args:
        model: Explicit model override.
        api_key_env_var: Extra environment variable to check first for the key.

    Returns:
        A frozen HelperConfig.

    Raises:
        MissingAPIKeyError: If no API key can be found.
        GlobalConfigError: If config.yaml cannot be read or holds an invalid value.
    """
    from toolbelt import global_config

    # Load environment variables from .env file
    load_dotenv()

    provider = global_config.get_active_provider() or DEFAULT_PROVIDER

    resolved_model = (
        model
        or os.getenv("OPENAI_MODEL")
        or global_config.get_model()
        or DEFAULT_MODEL
    )
    base_url = os.getenv("OPENAI_BASE_URL") or global_config.get_base_url() or BASE_URLS[provider]

    return HelperConfig(
        provider=provider,
        model=resolved_model,
        api_key=resolve_api_key(provider, api_key_env_var),
        base_url=base_url,
        temperature=_setting_or_default(global_config.get_temperature(), DEFAULT_TEMPERATURE),
        timeout=_setting_or_default(global_config.get_timeout(), DEFAULT_TIMEOUT),
        max_attempts=max(1, _setting_or_default(global_config.get_max_attempts(), DEFAULT_MAX_ATTEMPTS)),
    )


def _setting_or_default(value, default):
    # 0 is a real setting, so only None falls back
    return default if value is None else value
