"""Settings file management for localchat.

This module handles loading, validating, and creating the JSON settings
file. Path mapping is handled by the path_utils module.
"""

import json
from pathlib import Path
from typing import Any

from .domain.settings import ChatSettings
from .errors import SettingsError
from .path_utils import map_path


def load_settings(path: str) -> ChatSettings:
    """Load settings from a JSON file.

    Args:
        path: Path to settings file (can have ~, absolute or relative)

    Returns:
        Validated settings with ``logs_dir`` mapped to an absolute path

    Raises:
        SettingsError: If the file is missing, unreadable, malformed or
            holds invalid values
    """
    try:
        settings_path = Path(map_path(path))
    except ValueError as e:
        raise SettingsError(str(e)) from e

    if not settings_path.exists():
        raise SettingsError(
            f"Settings file not found: {settings_path}\n"
            f"Create a new settings file with: localchat setup -s {path}\n"
            f"or write the defaults with: localchat init -s {path}"
        )

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsError(f"Settings file is not valid JSON: {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings file {settings_path}: {e}") from e

    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file must contain a JSON object: {settings_path}")

    try:
        settings = ChatSettings.from_dict(raw)
        logs_dir = map_path(settings.logs_dir)
    except ValueError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

    return ChatSettings.from_dict({**settings.to_dict(), "logs_dir": logs_dir})


def create_settings(path: str) -> tuple[dict[str, Any], list[str]]:
    """Create a settings file holding the built-in defaults.

    Args:
        path: Where to save the settings file

    Returns:
        Tuple of (created settings dictionary, list of status messages for display)

    Raises:
        SettingsError: If a file already exists at ``path``
    """
    settings_path = Path(map_path(path))
    if settings_path.exists():
        raise SettingsError(f"Settings file already exists: {settings_path}")

    settings_path.parent.mkdir(parents=True, exist_ok=True)

    messages = [
        f"Creating settings file: {settings_path}",
    ]

    settings = ChatSettings().to_dict()
    with open(settings_path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)

    messages.extend([
        "",
        "Settings file created successfully!",
        "",
        "Next steps:",
        f"  1. Edit {settings_path}",
        "     Set api_url, model and api_compat for your local server",
        f"     (or answer the prompts of: localchat setup -s {settings_path})",
        "",
        "  2. Optionally store an API token:",
        f"     localchat token -s {settings_path}",
        "",
        "  3. Start localchat in your project folder:",
        f"     localchat -s {settings_path}",
    ])

    return settings, messages
