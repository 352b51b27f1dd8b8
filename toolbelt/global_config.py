"""User-level settings stored in ~/.toolbelt/.

Two files live there:
- config.yaml: provider, model and request tuning for the chat-completion clients
- credentials: API keys as KEY=value lines, readable by the owner only

load_config() reads the request settings through the typed accessors below;
a key that is present but empty counts as unset.
"""

import os
import stat
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar

import yaml

from toolbelt.config import LLMProvider

T = TypeVar("T")


class GlobalConfigError(Exception):
    """Raised when ~/.toolbelt/ cannot be read, written or understood."""


_CONFIG_DIR = Path.home() / ".toolbelt"

CREDENTIALS_HEADER = "# toolbelt API credentials\n# Format: PROVIDER_API_KEY=your_key_here\n\n"


def get_global_config_dir() -> Path:
    """Directory holding config.yaml and credentials (~/.toolbelt/)."""
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Create ~/.toolbelt/ if needed and return it."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    return get_global_config_dir() / "credentials"


def is_configured() -> bool:
    """Check whether config.yaml has been written."""
    return get_config_file_path().exists()


# ============================================================
# config.yaml
# ============================================================


def load_global_config() -> Dict[str, Any]:
    """Read config.yaml.

    Returns:
        The settings mapping, empty when the file does not exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a YAML mapping.
    """
    config_file = get_config_file_path()
    if not config_file.exists():
        return {}

    try:
        config = yaml.safe_load(config_file.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Write the whole settings mapping to config.yaml."""
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        config_file.write_text(yaml.dump(config, default_flow_style=False, sort_keys=False))
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def update_global_config(**values: Any) -> None:
    """Merge values into config.yaml, keeping every other setting."""
    config = load_global_config()
    config.update(values)
    save_global_config(config)


def _get_setting(key: str, convert: Callable[[Any], T], check: Callable[[T], bool], expected: str) -> Optional[T]:
    """Read one setting, converting and checking it.

    Returns:
        The converted value, or None if the key is missing or empty.

    Raises:
        GlobalConfigError: If the value cannot be converted or fails the check.
    """
    value = load_global_config().get(key)
    if value is None or value == "":
        return None

    invalid = GlobalConfigError(f"Invalid '{key}' in {get_config_file_path()}: {value!r} is not {expected}")
    # YAML turns yes/no into booleans; never read those as numbers
    if isinstance(value, bool):
        raise invalid
    try:
        converted = convert(value)
    except (TypeError, ValueError):
        raise invalid
    if not check(converted):
        raise invalid
    return converted


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(value)
    return value.strip()


def _to_int(value: Any) -> int:
    # Reject 2.5 rather than truncating it
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(value)
    return int(value)


def get_active_provider() -> Optional[LLMProvider]:
    """The configured provider, or None if unset or not one we support."""
    provider = load_global_config().get("provider")
    if not provider:
        return None

    try:
        return LLMProvider(str(provider).lower())
    except ValueError:
        return None


def get_model() -> Optional[str]:
    return _get_setting("model", _to_str, bool, "a model name")


def get_base_url() -> Optional[str]:
    """Endpoint override for the chat-completion API."""
    return _get_setting("base_url", _to_str, lambda url: url.startswith(("http://", "https://")), "an http(s) URL")


def get_temperature() -> Optional[float]:
    """Sampling temperature, between 0 and 2."""
    return _get_setting("temperature", float, lambda t: 0 <= t <= 2, "a number between 0 and 2")


def get_timeout() -> Optional[float]:
    """Per-request timeout in seconds."""
    return _get_setting("timeout", float, lambda t: t > 0, "a positive number of seconds")


def get_max_attempts() -> Optional[int]:
    """Total attempts per request on transport failure."""
    return _get_setting("max_attempts", _to_int, lambda n: n >= 0, "a whole number")


def set_provider_and_model(provider: LLMProvider, model: str) -> None:
    """Make provider and model the active pair."""
    update_global_config(provider=provider.value, model=model)


# ============================================================
# credentials
# ============================================================


def _parse_credentials(text: str) -> Dict[str, str]:
    credentials = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Read the credentials file.

    Returns:
        Mapping of environment variable name to API key.
    """
    credentials_file = get_credentials_file_path()
    if not credentials_file.exists():
        return {}

    try:
        return _parse_credentials(credentials_file.read_text())
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(env_var: str, api_key: str) -> None:
    """Store api_key under env_var (e.g. OPENAI_API_KEY), keeping other keys.

    The file is rewritten with owner-only permissions.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    credentials = load_credentials()
    credentials[env_var] = api_key
    lines = "".join(f"{key}={value}\n" for key, value in credentials.items())

    try:
        credentials_file.write_text(CREDENTIALS_HEADER + lines)
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(env_var: str) -> Optional[str]:
    """API key stored under env_var, or None."""
    return load_credentials().get(env_var)
