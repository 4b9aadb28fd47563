"""Provider configuration, loaded once from the environment (and an optional ``.env`` file)."""

import os
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

ProviderName = Literal["anthropic", "openai", "gemini"]

ENV_PREFIX = "REFINE_PROMPT_"

ANTHROPIC_OPENAI_COMPAT_URL = "https://api.anthropic.com/v1/"

DEFAULT_PROVIDER = "anthropic"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TIMEOUT = 120.0


class ProviderDefaults(BaseModel):
    """Per-provider defaults.

    Attributes:
        model: Mid-tier model used when no override is configured.
        credential_envs: Environment variables searched, in order, for the API key.
        base_url: Endpoint used when no override is configured.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    credential_envs: Tuple[str, ...]
    base_url: Optional[str] = None


PROVIDER_DEFAULTS: Dict[str, ProviderDefaults] = {
    "anthropic": ProviderDefaults(
        model="claude-3-5-sonnet-20241022",
        credential_envs=("ANTHROPIC_API_KEY",),
        base_url=ANTHROPIC_OPENAI_COMPAT_URL,
    ),
    "openai": ProviderDefaults(model="gpt-4o", credential_envs=("OPENAI_API_KEY",)),
    "gemini": ProviderDefaults(model="gemini-2.5-flash", credential_envs=("GEMINI_API_KEY", "GOOGLE_API_KEY")),
}


class RefinerConfig(BaseModel):
    """Immutable configuration handed to the model invoker at construction time.

    Fields left out are filled from ``PROVIDER_DEFAULTS`` for the chosen provider.

    Attributes:
        provider: Which completion provider to talk to.
        api_key: Provider credential. May be missing; it is only checked when a call is made.
        credential_env: Name of the environment variable the credential is expected in.
        model: Model identifier sent to the provider.
        base_url: Endpoint override, ``None`` means the SDK default.
        temperature: Sampling temperature.
        max_tokens: Maximum number of tokens to generate.
        timeout: Seconds to wait for the provider before giving up.
        log_level: Logging level name for the server process.
    """

    model_config = ConfigDict(frozen=True)

    provider: ProviderName = DEFAULT_PROVIDER
    api_key: Optional[str] = Field(default=None, repr=False)
    credential_env: str
    model: str
    base_url: Optional[str] = None
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = "INFO"

    @model_validator(mode="before")
    @classmethod
    def _apply_provider_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        defaults = PROVIDER_DEFAULTS.get(data.get("provider", DEFAULT_PROVIDER))
        if defaults is None:
            # Let the Literal check report the bad provider name.
            return data
        data = dict(data)
        if not data.get("model"):
            data["model"] = defaults.model
        data.setdefault("credential_env", defaults.credential_envs[0])
        data.setdefault("base_url", defaults.base_url)
        return data

    @property
    def has_credential(self) -> bool:
        """Whether a non-empty credential is configured."""
        return bool(self.api_key)


def _parse_number(env: Mapping[str, str], key: str, cast: type, default: Any) -> Any:
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{key} must be a {cast.__name__}, got {raw!r}.") from exc


def load_config(env: Optional[Mapping[str, str]] = None) -> RefinerConfig:
    """Build a RefinerConfig from environment variables.

    When ``env`` is None the process environment is used, after loading a ``.env``
    file if one is found. Values already present in the environment win over ``.env``.

    Args:
        env: Optional mapping used instead of ``os.environ``.

    Returns:
        The loaded configuration.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    provider = (env.get(f"{ENV_PREFIX}PROVIDER") or DEFAULT_PROVIDER).strip().lower()
    defaults = PROVIDER_DEFAULTS.get(provider)
    if defaults is None:
        raise ConfigurationError(
            f"Unsupported provider '{provider}'. Expected one of: {', '.join(sorted(PROVIDER_DEFAULTS))}."
        )

    api_key = None
    credential_env = defaults.credential_envs[0]
    for name in defaults.credential_envs:
        if env.get(name):
            api_key = env[name]
            credential_env = name
            break

    base_url = env.get(f"{ENV_PREFIX}BASE_URL")
    if not base_url and provider == "openai":
        base_url = env.get("OPENAI_BASE_URL")

    values: Dict[str, Any] = {
        "provider": provider,
        "api_key": api_key,
        "credential_env": credential_env,
        "model": env.get(f"{ENV_PREFIX}MODEL") or defaults.model,
        "base_url": base_url or defaults.base_url,
        "temperature": _parse_number(env, "TEMPERATURE", float, DEFAULT_TEMPERATURE),
        "max_tokens": _parse_number(env, "MAX_TOKENS", int, DEFAULT_MAX_TOKENS),
        "timeout": _parse_number(env, "TIMEOUT", float, DEFAULT_TIMEOUT),
        "log_level": (env.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper(),
    }

    try:
        config = RefinerConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    logger.debug(
        "Loaded config: provider=%s, model=%s, temperature=%s, timeout=%ss, credential=%s",
        config.provider,
        config.model,
        config.temperature,
        config.timeout,
        "set" if config.has_credential else "missing",
    )
    return config
