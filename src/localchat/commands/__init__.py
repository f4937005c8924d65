"""Slash-command system façade."""

from __future__ import annotations

from typing import Any

from ..domain.chat import Conversation
from ..ui.interaction import DisplayPort
from ..workspace import Workspace
from .context import CommandContext
from .dispatch import (
    COMMAND_SPECS,
    CommandDispatcher,
    CommandSpec,
    UnknownCommandError,
    build_command_map,
)
from .misc import MiscCommandHandlers
from .workspace_commands import WorkspaceCommandHandlers


def is_command(text: str) -> bool:
    """Check if text is a command (starts with ``/``)."""
    return text.strip().startswith("/")


def parse_command(text: str) -> tuple[str, list[str]]:
    """Parse command text into a lower-cased name and argument tokens.

    Args:
        text: Command text (e.g., "/read src/app.py")

    Returns:
        Tuple of (command, args) where command is without / and args are
        the remaining whitespace-delimited tokens
    """
    text = text.strip()
    if not text.startswith("/"):
        return "", []

    parts = text[1:].split()
    command = parts[0].lower() if parts else ""
    return command, parts[1:]


class CommandHandler:
    """Parses and executes slash commands against one session's state."""

    def __init__(
        self,
        workspace: Workspace,
        conversation: Conversation,
        display: DisplayPort,
        *,
        include_host_commands: bool = False,
    ) -> None:
        self.context = CommandContext(
            workspace=workspace,
            conversation=conversation,
            display=display,
        )
        self._handler_groups: dict[str, Any] = {
            "workspace": WorkspaceCommandHandlers(self.context),
            "misc": MiscCommandHandlers(
                self.context, include_host_commands=include_host_commands
            ),
        }
        self._dispatcher = CommandDispatcher(self._handler_groups)

    async def execute_command(self, text: str) -> None:
        """Execute a command.

        Unknown commands produce a notice and leave the conversation as is.

        Raises:
            LocalChatError: If the command's workspace query fails
            ValueError: If the command arguments are invalid
        """
        command, args = parse_command(text)
        try:
            await self._dispatcher.dispatch(command, args)
        except UnknownCommandError as e:
            await self.context.notify(f"{e}\nType /help for available commands.")


__all__ = [
    "COMMAND_SPECS",
    "CommandContext",
    "CommandDispatcher",
    "CommandHandler",
    "CommandSpec",
    "UnknownCommandError",
    "build_command_map",
    "is_command",
    "parse_command",
]
