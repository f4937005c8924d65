"""Tests for CLI helpers and entry point."""

import json
import sys
from unittest.mock import patch

import pytest

from localchat.cli import main, store_api_token
from localchat.setup_wizard import run_setup_wizard
from localchat.constants import SECRET_KEY_API_TOKEN
from test_helpers import MemorySecretStore, ScriptedInteraction


@pytest.mark.asyncio
async def test_store_api_token_saves_token():
    store = MemorySecretStore()

    message = await store_api_token(store, ScriptedInteraction(secrets=[" tok-1 "]))

    assert message == "API token stored."
    assert store.get(SECRET_KEY_API_TOKEN) == "tok-1"


@pytest.mark.asyncio
async def test_store_api_token_empty_input_clears():
    store = MemorySecretStore({SECRET_KEY_API_TOKEN: "old"})

    message = await store_api_token(store, ScriptedInteraction(secrets=[""]))

    assert message == "API token cleared."
    assert store.get(SECRET_KEY_API_TOKEN) is None


def test_main_init_creates_settings(tmp_path, capsys):
    path = tmp_path / "settings.json"

    with patch.object(sys, "argv", ["localchat", "init", "-s", str(path)]):
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 0
    assert json.loads(path.read_text(encoding="utf-8"))["api_url"] == "http://localhost:11434"
    assert "Settings file created successfully!" in capsys.readouterr().out


def test_main_init_existing_file_fails(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{}", encoding="utf-8")

    with patch.object(sys, "argv", ["localchat", "init", "-s", str(path)]):
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 1
    assert "Error: Settings file already exists" in capsys.readouterr().out


def test_main_unknown_command(capsys):
    with patch.object(sys, "argv", ["localchat", "bogus"]):
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 1
    assert "unknown command 'bogus'" in capsys.readouterr().out


def test_main_missing_settings_reports_error(tmp_path, capsys):
    missing = tmp_path / "missing.json"

    with patch.object(sys, "argv", ["localchat", "-s", str(missing)]):
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 1
    assert "Error: Settings file not found" in capsys.readouterr().out


def test_main_runs_repl_with_loaded_settings(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"model": "qwen", "logs_dir": str(tmp_path / "logs")}), encoding="utf-8"
    )
    log_path = tmp_path / "run.log"

    async def fake_repl(settings, workspace, secret_store, **kwargs):
        fake_repl.seen = (settings, workspace, kwargs)

    argv = ["localchat", "-s", str(settings_path), "-w", str(tmp_path), "-l", str(log_path)]
    with patch.object(sys, "argv", argv), patch("localchat.cli.repl_loop", fake_repl), patch(
        "localchat.cli.setup_logging"
    ) as mock_setup:
        main()

    settings, workspace, kwargs = fake_repl.seen
    assert settings.model == "qwen"
    assert workspace.root == tmp_path.resolve()
    assert kwargs["log_file"] == str(log_path.resolve())
    mock_setup.assert_called_once_with(str(log_path.resolve()))


@pytest.mark.asyncio
async def test_setup_wizard_writes_settings_and_stores_token(tmp_path, capsys):
    path = tmp_path / "settings.json"
    store = MemorySecretStore()
    interaction = ScriptedInteraction(
        texts=["http://127.0.0.1:1234", "qwen2.5-coder", "ollama", "", "0.2", "y"],
        secrets=["tok-abcdefghijklmnop"],
    )

    result = await run_setup_wizard(str(path), interaction, store)

    assert result is not None
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["api_url"] == "http://127.0.0.1:1234"
    assert saved["model"] == "qwen2.5-coder"
    assert saved["api_compat"] == "ollama"
    assert saved["custom_endpoint"] == ""
    assert saved["temperature"] == 0.2
    assert saved["max_history_messages"] == 50
    assert store.get(SECRET_KEY_API_TOKEN) == "tok-abcdefghijklmnop"
    assert interaction.text_prompts[0] == "  LLM API base URL [http://localhost:11434]: "
    out = capsys.readouterr().out
    assert "tok-...mnop" in out
    assert "tok-abcdefghijklmnop" not in out


@pytest.mark.asyncio
async def test_setup_wizard_reprompts_until_answers_are_valid(tmp_path, capsys):
    path = tmp_path / "settings.json"
    interaction = ScriptedInteraction(
        texts=[
            "http://localhost:99999",
            "",
            "",
            "anthropic",
            "openai",
            "ftp://example.com",
            "",
            "2.5",
            "warm",
            "",
            "yes",
        ],
    )

    result = await run_setup_wizard(str(path), interaction, MemorySecretStore())

    assert result is not None
    assert result.api_url == "http://localhost:11434"
    assert result.model == "llama3.1"
    assert result.api_compat == "openai"
    assert result.custom_endpoint == ""
    assert result.temperature == 0.7
    assert len(interaction.text_prompts) == 11
    out = capsys.readouterr().out
    assert "Enter an http(s) URL with a valid host and port" in out
    assert "Choose one of: openai, ollama" in out
    assert "Invalid URL format" in out
    assert out.count("Temperature must be between 0.0 and 2.0") == 2


@pytest.mark.asyncio
async def test_setup_wizard_keeps_existing_values_and_clears_optional_ones(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "api_url": "http://gpu-box:8000",
                "model": "coder",
                "custom_endpoint": "http://gpu-box:8000/v1/chat/completions",
                "max_history_messages": 10,
                "theme": "dark",
            }
        ),
        encoding="utf-8",
    )
    store = MemorySecretStore({SECRET_KEY_API_TOKEN: "old"})
    interaction = ScriptedInteraction(texts=["", "", "", "-", "", "y"], secrets=["-"])

    await run_setup_wizard(str(path), interaction, store)

    assert interaction.text_prompts[0] == "  LLM API base URL [http://gpu-box:8000]: "
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["api_url"] == "http://gpu-box:8000"
    assert saved["model"] == "coder"
    assert saved["custom_endpoint"] == ""
    assert saved["max_history_messages"] == 10
    assert saved["theme"] == "dark"
    assert store.get(SECRET_KEY_API_TOKEN) is None


@pytest.mark.asyncio
async def test_setup_wizard_blank_token_keeps_stored_token(tmp_path):
    store = MemorySecretStore({SECRET_KEY_API_TOKEN: "old"})
    interaction = ScriptedInteraction(texts=["", "", "", "", "", "y"], secrets=[""])

    await run_setup_wizard(str(tmp_path / "settings.json"), interaction, store)

    assert store.get(SECRET_KEY_API_TOKEN) == "old"


@pytest.mark.asyncio
async def test_setup_wizard_unreadable_settings_fall_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{oops", encoding="utf-8")
    interaction = ScriptedInteraction(texts=["", "", "", "", "", "y"])

    result = await run_setup_wizard(str(path), interaction, MemorySecretStore())

    assert result is not None
    assert "Existing settings could not be read" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8"))["model"] == "llama3.1"


@pytest.mark.asyncio
async def test_setup_wizard_declined_confirmation_saves_nothing(tmp_path, capsys):
    path = tmp_path / "settings.json"
    store = MemorySecretStore()
    interaction = ScriptedInteraction(texts=["", "", "", "", "", "n"], secrets=["tok"])

    result = await run_setup_wizard(str(path), interaction, store)

    assert result is None
    assert not path.exists()
    assert store.values == {}
    assert "Setup cancelled." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_setup_wizard_end_of_input_cancels(tmp_path, capsys):
    path = tmp_path / "settings.json"
    interaction = ScriptedInteraction(texts=["http://localhost:11434"])

    result = await run_setup_wizard(str(path), interaction, MemorySecretStore())

    assert result is None
    assert not path.exists()
    assert "Setup cancelled." in capsys.readouterr().out


def test_main_setup_saves_settings_then_starts_repl(tmp_path):
    settings_path = tmp_path / "settings.json"
    log_path = tmp_path / "run.log"
    store = MemorySecretStore()
    interaction = ScriptedInteraction(
        texts=["", "qwen", "", "", "", "y"], secrets=["tok-1"]
    )

    async def fake_repl(settings, workspace, secret_store, **kwargs):
        fake_repl.seen = (settings, secret_store)

    argv = [
        "localchat", "setup", "-s", str(settings_path), "-w", str(tmp_path), "-l", str(log_path),
    ]
    with patch.object(sys, "argv", argv), patch(
        "localchat.cli.ThreadedConsoleInteraction", return_value=interaction
    ), patch("localchat.cli.KeyringSecretStore", return_value=store), patch(
        "localchat.cli.repl_loop", fake_repl
    ), patch("localchat.cli.setup_logging"):
        main()

    settings, secret_store = fake_repl.seen
    assert settings.model == "qwen"
    assert secret_store is store
    assert store.get(SECRET_KEY_API_TOKEN) == "tok-1"
    assert json.loads(settings_path.read_text(encoding="utf-8"))["model"] == "qwen"


def test_main_setup_cancelled_exits_with_error(tmp_path):
    settings_path = tmp_path / "settings.json"
    interaction = ScriptedInteraction(texts=[])

    with patch.object(sys, "argv", ["localchat", "setup", "-s", str(settings_path)]), patch(
        "localchat.cli.ThreadedConsoleInteraction", return_value=interaction
    ), patch("localchat.cli.KeyringSecretStore", return_value=MemorySecretStore()):
        with pytest.raises(SystemExit) as excinfo:
            main()

    assert excinfo.value.code == 1
    assert not settings_path.exists()
