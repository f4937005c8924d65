"""Shared pytest fixtures."""

import pytest

from localchat.domain.settings import ChatSettings
from localchat.workspace import Workspace
from test_helpers import MemorySecretStore, RecordingDisplay, ScriptedInteraction


@pytest.fixture
def workspace(tmp_path):
    """Workspace rooted at a small sample project."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "app.py").write_text("print('hi')\n", encoding="utf-8")
    (root / "src" / "util.py").write_text("", encoding="utf-8")
    (root / "README.md").write_text("# Project\n", encoding="utf-8")
    (root / ".hidden").write_text("secret", encoding="utf-8")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "index.js").write_text("", encoding="utf-8")
    return Workspace(root)


@pytest.fixture
def settings():
    return ChatSettings(system_prompt="S", max_history_messages=50)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def interaction():
    return ScriptedInteraction()


@pytest.fixture
def secret_store():
    return MemorySecretStore()
