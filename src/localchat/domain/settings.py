"""Typed settings model used at settings-file I/O boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .. import constants
from .config import PROVIDER_MODES, EndpointConfig, ProviderMode


_KNOWN_SETTING_KEYS = {
    "api_url",
    "model",
    "api_compat",
    "custom_endpoint",
    "temperature",
    "max_tokens",
    "system_prompt",
    "max_history_messages",
    "request_timeout",
    "max_file_size",
    "allow_write_without_prompt",
    "logs_dir",
}


def _require_str(settings: Mapping[str, Any], key: str, default: str) -> str:
    value = settings.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _require_number(
    settings: Mapping[str, Any], key: str, default: float
) -> float:
    value = settings.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number")
    return float(value)


def _require_positive_int(settings: Mapping[str, Any], key: str, default: int) -> int:
    value = settings.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"'{key}' must be a positive integer")
    return value


@dataclass(frozen=True, slots=True)
class ChatSettings:
    """Validated view of the user's settings file."""

    api_url: str = constants.DEFAULT_API_URL
    model: str = constants.DEFAULT_MODEL
    api_compat: ProviderMode = "openai"
    custom_endpoint: str = ""
    temperature: float = constants.DEFAULT_TEMPERATURE
    max_tokens: int = constants.DEFAULT_MAX_TOKENS
    system_prompt: str = constants.DEFAULT_SYSTEM_PROMPT
    max_history_messages: int = constants.DEFAULT_MAX_HISTORY_MESSAGES
    request_timeout: int = constants.DEFAULT_REQUEST_TIMEOUT_MS
    max_file_size: int = constants.DEFAULT_MAX_FILE_SIZE
    allow_write_without_prompt: bool = False
    logs_dir: str = constants.DEFAULT_LOGS_DIR
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> ChatSettings:
        """Create typed settings from raw JSON data, applying defaults."""
        if not isinstance(settings, Mapping):
            raise ValueError("Settings must be a dictionary-like mapping")

        api_compat = _require_str(settings, "api_compat", constants.DEFAULT_API_COMPAT)
        if api_compat not in PROVIDER_MODES:
            raise ValueError(
                f"'api_compat' must be one of: {', '.join(PROVIDER_MODES)}"
            )

        temperature = _require_number(
            settings, "temperature", constants.DEFAULT_TEMPERATURE
        )
        if not 0.0 <= temperature <= 2.0:
            raise ValueError("'temperature' must be between 0.0 and 2.0")

        allow_write = settings.get("allow_write_without_prompt", False)
        if not isinstance(allow_write, bool):
            raise ValueError("'allow_write_without_prompt' must be a boolean")

        extras = {
            str(key): value
            for key, value in settings.items()
            if key not in _KNOWN_SETTING_KEYS
        }

        return cls(
            api_url=_require_str(settings, "api_url", constants.DEFAULT_API_URL),
            model=_require_str(settings, "model", constants.DEFAULT_MODEL),
            api_compat=api_compat,  # type: ignore[arg-type]
            custom_endpoint=_require_str(settings, "custom_endpoint", ""),
            temperature=temperature,
            max_tokens=_require_positive_int(
                settings, "max_tokens", constants.DEFAULT_MAX_TOKENS
            ),
            system_prompt=_require_str(
                settings, "system_prompt", constants.DEFAULT_SYSTEM_PROMPT
            ),
            max_history_messages=_require_positive_int(
                settings, "max_history_messages", constants.DEFAULT_MAX_HISTORY_MESSAGES
            ),
            request_timeout=_require_positive_int(
                settings, "request_timeout", constants.DEFAULT_REQUEST_TIMEOUT_MS
            ),
            max_file_size=_require_positive_int(
                settings, "max_file_size", constants.DEFAULT_MAX_FILE_SIZE
            ),
            allow_write_without_prompt=allow_write,
            logs_dir=_require_str(settings, "logs_dir", constants.DEFAULT_LOGS_DIR),
            extras=extras,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize settings to the settings-file shape."""
        payload: dict[str, Any] = {
            "api_url": self.api_url,
            "model": self.model,
            "api_compat": self.api_compat,
            "custom_endpoint": self.custom_endpoint,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "system_prompt": self.system_prompt,
            "max_history_messages": self.max_history_messages,
            "request_timeout": self.request_timeout,
            "max_file_size": self.max_file_size,
            "allow_write_without_prompt": self.allow_write_without_prompt,
            "logs_dir": self.logs_dir,
        }
        payload.update(self.extras)
        return payload

    def endpoint_config(self, auth_token: str | None = None) -> EndpointConfig:
        """Resolve the endpoint call configuration for one request."""
        return EndpointConfig(
            base_url=self.api_url,
            provider_mode=self.api_compat,
            model=self.model,
            auth_token=auth_token,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout_ms=self.request_timeout,
            custom_endpoint=self.custom_endpoint or None,
        )
