"""Setup wizard for localchat.

Interactive wizard that asks for the endpoint settings, writes the
settings file and stores the optional API token in the system credential
store.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional

from .ai.endpoint import validate_url
from .constants import SECRET_KEY_API_TOKEN
from .domain.config import PROVIDER_MODES
from .domain.settings import ChatSettings
from .formatting import borderline
from .keys import SecretStore
from .path_utils import map_path
from .ui.interaction import UserInteractionPort

# Answer that clears an optional value.
CLEAR_ANSWER = "-"

Check = Callable[[str], Optional[str]]


def _mask_token(token: str) -> str:
    """Mask a token for display, showing first 4 and last 4 characters."""
    if len(token) > 12:
        return token[:4] + "..." + token[-4:]
    return "***"


def _atomic_write_json(path: Path, payload: Any) -> None:
    """Write JSON via a temp file and atomically replace the destination."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            json.dump(payload, temp_file, indent=2, ensure_ascii=False)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, path)
    except Exception:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise


def _load_current(settings_path: Path) -> ChatSettings:
    """Return the settings offered as bracketed defaults."""
    if not settings_path.exists():
        return ChatSettings()
    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            return ChatSettings.from_dict(json.load(f))
    except (OSError, ValueError) as e:
        print(f"Existing settings could not be read ({e}).")
        print("Starting from the built-in defaults.")
        print()
        return ChatSettings()


def _check_url(answer: str) -> Optional[str]:
    if validate_url(answer):
        return None
    return "Enter an http(s) URL with a valid host and port, e.g. http://localhost:11434"


def _check_model(answer: str) -> Optional[str]:
    return None if answer.strip() else "Model name cannot be empty"


def _check_api_compat(answer: str) -> Optional[str]:
    if answer in PROVIDER_MODES:
        return None
    return f"Choose one of: {', '.join(PROVIDER_MODES)}"


def _check_custom_endpoint(answer: str) -> Optional[str]:
    if not answer or answer == CLEAR_ANSWER or validate_url(answer):
        return None
    return "Invalid URL format"


def _check_temperature(answer: str) -> Optional[str]:
    try:
        ChatSettings.from_dict({"temperature": float(answer)})
    except ValueError:
        return "Temperature must be between 0.0 and 2.0"
    return None


async def _ask(
    interaction: UserInteractionPort,
    label: str,
    default: str,
    check: Check,
) -> str:
    """Prompt until ``check`` accepts the answer; blank input keeps ``default``."""
    prompt = f"  {label} [{default}]: " if default else f"  {label}: "
    while True:
        answer = (await interaction.prompt_text(prompt)).strip() or default
        error = check(answer)
        if error is None:
            return answer
        print(f"  {error}")


def _describe_token(token: str) -> str:
    if token == CLEAR_ANSWER:
        return "(cleared)"
    if token:
        return _mask_token(token)
    return "(unchanged)"


async def run_setup_wizard(
    settings_path: str,
    interaction: UserInteractionPort,
    secret_store: SecretStore,
) -> Optional[ChatSettings]:
    """Run the interactive setup wizard.

    Blank answers keep the value in brackets: the current setting when the
    file exists, otherwise the built-in default. ``-`` clears the custom
    endpoint or the stored API token. Settings not asked about (history
    size, file size limit, logs directory) are carried over unchanged.

    Returns:
        The saved settings, or None when the user cancelled
    """
    path = Path(map_path(settings_path))
    current = _load_current(path)

    print(borderline())
    print("localchat Setup")
    print(borderline())
    print(f"Settings file: {path}")
    print("Press Enter to keep the value in brackets.")
    print()

    try:
        api_url = await _ask(interaction, "LLM API base URL", current.api_url, _check_url)
        model = await _ask(interaction, "Model name", current.model, _check_model)
        api_compat = await _ask(
            interaction,
            f"API compatibility ({'/'.join(PROVIDER_MODES)})",
            current.api_compat,
            _check_api_compat,
        )
        custom_endpoint = await _ask(
            interaction,
            f"Custom endpoint URL, OpenAI-style (optional, '{CLEAR_ANSWER}' for none)",
            current.custom_endpoint,
            _check_custom_endpoint,
        )
        token = (
            await interaction.prompt_secret(
                f"  API token (optional, Enter keeps the stored one, '{CLEAR_ANSWER}' clears): "
            )
        ).strip()
        temperature = await _ask(
            interaction,
            "Temperature (0.0 - 2.0)",
            str(current.temperature),
            _check_temperature,
        )

        if custom_endpoint == CLEAR_ANSWER:
            custom_endpoint = ""

        print()
        print("Settings:")
        print(f"  API URL:         {api_url}")
        print(f"  Model:           {model}")
        print(f"  Compatibility:   {api_compat}")
        print(f"  Custom endpoint: {custom_endpoint or '(none)'}")
        print(f"  API token:       {_describe_token(token)}")
        print(f"  Temperature:     {temperature}")
        print()

        confirm = (await interaction.prompt_text("Save settings? (y/N): ")).strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        print("Setup cancelled.")
        return None

    if confirm not in ("y", "yes"):
        print("Setup cancelled.")
        return None

    settings = ChatSettings.from_dict(
        {
            **current.to_dict(),
            "api_url": api_url,
            "model": model.strip(),
            "api_compat": api_compat,
            "custom_endpoint": custom_endpoint,
            "temperature": float(temperature),
        }
    )
    _atomic_write_json(path, settings.to_dict())

    if token == CLEAR_ANSWER:
        secret_store.set(SECRET_KEY_API_TOKEN, "")
    elif token:
        secret_store.set(SECRET_KEY_API_TOKEN, token)

    print()
    print(f"Settings: {path}")
    if token:
        print("API token updated in the system credential store.")
    print()

    return settings
