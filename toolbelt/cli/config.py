"""CLI commands for global configuration management."""

import typer

from toolbelt import global_config
from toolbelt.config import (
    API_KEY_ENV_VARS,
    AVAILABLE_MODELS,
    BASE_URLS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    LLMProvider,
)
from toolbelt.global_config import GlobalConfigError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global toolbelt configuration in ~/.toolbelt/",
    add_completion=False,
)

VALID_PROVIDERS = ", ".join(provider.value for provider in LLMProvider)


def mask_key(api_key: str) -> str:
    """Mask an API key for display."""
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


def parse_provider(provider: str) -> LLMProvider:
    """Convert a provider name to LLMProvider, exiting on unknown names."""
    try:
        return LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {VALID_PROVIDERS}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo("No configuration found. Run 'toolbelt config set-provider <provider>' to set up.")
            return

        provider = global_config.get_active_provider()
        base_url = global_config.get_base_url() or (BASE_URLS[provider] if provider else None)
        temperature = global_config.get_temperature()
        timeout = global_config.get_timeout()
        max_attempts = global_config.get_max_attempts()

        typer.echo("Current toolbelt configuration (~/.toolbelt/config.yaml):")
        typer.echo()
        typer.echo(f"  Provider: {provider.value if provider else 'not set'}")
        typer.echo(f"  Model: {global_config.get_model() or 'not set'}")
        typer.echo(f"  Base URL: {base_url or 'not set'}")
        typer.echo(f"  Temperature: {DEFAULT_TEMPERATURE if temperature is None else temperature}")
        typer.echo(f"  Timeout: {DEFAULT_TIMEOUT if timeout is None else timeout}")
        typer.echo(f"  Max Attempts: {DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts}")
        typer.echo()

        if provider:
            env_var = API_KEY_ENV_VARS[provider]
            api_key = global_config.get_credential(env_var)
            if api_key:
                typer.echo(f"  API Key ({env_var}): {mask_key(api_key)}")
            else:
                typer.echo(f"  API Key ({env_var}): not set")

    except GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(
        ...,
        help=f"Provider name ({VALID_PROVIDERS})",
    )
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = parse_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(
        ...,
        help=f"Provider name ({VALID_PROVIDERS})",
    ),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (optional, will prompt if not provided)",
    ),
) -> None:
    """Set the active provider and model."""
    llm_provider = parse_provider(provider)
    models = AVAILABLE_MODELS[llm_provider]

    if not model:
        typer.echo(f"Available models for {llm_provider.value}:")
        for i, m in enumerate(models, 1):
            typer.echo(f"  {i}. {m}")

        model_choice = typer.prompt(f"Select a model (1-{len(models)})", type=int, default=1)
        if model_choice < 1 or model_choice > len(models):
            typer.echo("Invalid choice. Aborting.", err=True)
            raise typer.Exit(1)

        model = models[model_choice - 1]
    elif model not in models:
        typer.echo(f"Warning: {model} is not in the list of known models for {llm_provider.value}")
        if not typer.confirm("Continue anyway?", default=False):
            raise typer.Exit(0)

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to: {llm_provider.value}")
    typer.echo(f"✓ Model set to: {model}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List all available providers and their known models."""
    for llm_provider in LLMProvider:
        typer.echo(f"{llm_provider.value} ({BASE_URLS[llm_provider]}):")
        for model in AVAILABLE_MODELS[llm_provider]:
            typer.echo(f"  • {model}")
        typer.echo()
