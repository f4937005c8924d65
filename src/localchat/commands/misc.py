"""Misc command handlers."""

from .command_docs import render_help_text
from .context import CommandContext


class MiscCommandHandlers:
    """Explicit handlers for help."""

    def __init__(self, context: CommandContext, *, include_host_commands: bool = False):
        self.context = context
        self.include_host_commands = include_host_commands

    async def show_help(self, args: list[str]) -> None:
        """Show help information."""
        await self.context.notify(
            render_help_text(include_host_commands=self.include_host_commands)
        )
