"""Command registration metadata and dispatch orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable


CommandCallable = Callable[[list[str]], Awaitable[None]]


class UnknownCommandError(ValueError):
    """Raised when no handler is registered for a command name."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: /{command}")
        self.command = command


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """One command registration entry."""

    name: str
    method_name: str
    group: str
    aliases: tuple[str, ...] = ()


COMMAND_SPECS: tuple[CommandSpec, ...] = (
    # Workspace inspection
    CommandSpec("read", "read_file", "workspace"),
    CommandSpec("list", "list_files", "workspace"),
    CommandSpec("search", "search_files", "workspace"),
    CommandSpec("workspace", "show_workspace", "workspace", aliases=("info",)),
    # Misc
    CommandSpec("help", "show_help", "misc"),
)


def build_command_map(
    handler_groups: dict[str, Any],
) -> dict[str, CommandCallable]:
    """Build command string → bound async handler map from handler group instances."""
    command_map: dict[str, CommandCallable] = {}

    for spec in COMMAND_SPECS:
        handler = handler_groups[spec.group]
        method = getattr(handler, spec.method_name)
        command_map[spec.name] = method
        for alias in spec.aliases:
            command_map[alias] = method

    return command_map


@dataclass(slots=True)
class CommandDispatcher:
    """Resolve and dispatch parsed commands to handler methods."""

    handler_groups: dict[str, Any]
    _command_map: dict[str, CommandCallable] = field(init=False)

    def __post_init__(self) -> None:
        self._command_map = build_command_map(self.handler_groups)

    def is_registered(self, command: str) -> bool:
        return command in self._command_map

    async def dispatch(self, command: str, args: list[str]) -> None:
        """Dispatch one command with already-parsed args."""
        command_handler = self._command_map.get(command)
        if command_handler is not None:
            await command_handler(args)
            return

        raise UnknownCommandError(command)
