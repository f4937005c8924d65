"""Tests for settings loading, validation and creation."""

import json

import pytest

from localchat import constants
from localchat.domain.settings import ChatSettings
from localchat.errors import SettingsError
from localchat.settings import create_settings, load_settings


def _write(path, data) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_defaults_match_constants():
    settings = ChatSettings()

    assert settings.api_url == "http://localhost:11434"
    assert settings.model == "llama3.1"
    assert settings.api_compat == "openai"
    assert settings.custom_endpoint == ""
    assert settings.temperature == 0.7
    assert settings.max_tokens == 2048
    assert settings.max_history_messages == 50
    assert settings.request_timeout == 120000
    assert settings.max_file_size == 1048576
    assert settings.allow_write_without_prompt is False
    assert settings.system_prompt == constants.DEFAULT_SYSTEM_PROMPT


def test_from_dict_applies_defaults_and_keeps_extras():
    settings = ChatSettings.from_dict({"model": "qwen2.5-coder", "theme": "dark"})

    assert settings.model == "qwen2.5-coder"
    assert settings.max_tokens == 2048
    assert settings.extras == {"theme": "dark"}
    assert settings.to_dict()["theme"] == "dark"


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"api_compat": "anthropic"}, "api_compat"),
        ({"temperature": 2.5}, "temperature"),
        ({"temperature": "hot"}, "temperature"),
        ({"max_tokens": 0}, "max_tokens"),
        ({"max_history_messages": True}, "max_history_messages"),
        ({"request_timeout": -5}, "request_timeout"),
        ({"allow_write_without_prompt": "yes"}, "allow_write_without_prompt"),
        ({"model": 3}, "model"),
    ],
)
def test_from_dict_rejects_invalid_values(raw, message):
    with pytest.raises(ValueError, match=message):
        ChatSettings.from_dict(raw)


def test_endpoint_config_maps_settings():
    settings = ChatSettings(
        api_url="http://gpu:8080",
        api_compat="ollama",
        model="mistral",
        temperature=0.1,
        max_tokens=99,
        request_timeout=5000,
    )

    config = settings.endpoint_config("tok")

    assert config.base_url == "http://gpu:8080"
    assert config.provider_mode == "ollama"
    assert config.model == "mistral"
    assert config.auth_token == "tok"
    assert config.temperature == 0.1
    assert config.max_tokens == 99
    assert config.timeout_ms == 5000
    assert config.custom_endpoint is None
    assert config.display() == "ollama | mistral"


def test_load_settings_reads_file(tmp_path):
    path = _write(
        tmp_path / "settings.json",
        {"api_compat": "ollama", "logs_dir": str(tmp_path / "logs")},
    )

    settings = load_settings(path)

    assert settings.api_compat == "ollama"
    assert settings.logs_dir == str((tmp_path / "logs").resolve())


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(SettingsError, match="Settings file not found"):
        load_settings(str(tmp_path / "nope.json"))


def test_load_settings_invalid_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SettingsError, match="not valid JSON"):
        load_settings(str(path))


def test_load_settings_non_object(tmp_path):
    path = _write(tmp_path / "settings.json", ["a"])

    with pytest.raises(SettingsError, match="JSON object"):
        load_settings(path)


def test_load_settings_invalid_value(tmp_path):
    path = _write(tmp_path / "settings.json", {"max_file_size": 0})

    with pytest.raises(SettingsError, match="max_file_size"):
        load_settings(path)


def test_create_settings_writes_defaults(tmp_path):
    path = tmp_path / "nested" / "settings.json"

    settings, messages = create_settings(str(path))

    assert json.loads(path.read_text(encoding="utf-8")) == settings
    assert settings["model"] == "llama3.1"
    assert "Settings file created successfully!" in messages


def test_create_settings_refuses_to_overwrite(tmp_path):
    path = _write(tmp_path / "settings.json", {})

    with pytest.raises(SettingsError, match="already exists"):
        create_settings(path)
