"""Workspace inspection commands: /read, /list, /search, /workspace."""

from __future__ import annotations

from ..constants import SEARCH_RESULT_LIMIT
from ..domain.chat import ChatMessage
from .context import CommandContext

ICON_DIRECTORY = "📁"
ICON_FILE = "📄"

READ_USAGE = "Usage: /read <file-path>\nExample: /read src/app.py"
SEARCH_USAGE = "Usage: /search <pattern>\nExample: /search **/*.py"


def _flag(value: bool) -> str:
    return "✅" if value else "❌"


class WorkspaceCommandHandlers:
    """Read-only workspace queries exposed as slash commands."""

    def __init__(self, context: CommandContext):
        self.context = context

    async def read_file(self, args: list[str]) -> None:
        """Show a file and add its content to the conversation context."""
        if not args:
            await self.context.notify(READ_USAGE)
            return

        file_path = " ".join(args)
        content = await self.context.workspace.read_file(file_path)

        await self.context.notify(f'File "{file_path}":\n\n```\n{content}\n```')
        self.context.conversation.append(
            ChatMessage.user(
                f'I\'m showing you the content of file "{file_path}":\n\n```\n{content}\n```'
            )
        )

    async def list_files(self, args: list[str]) -> None:
        """List one directory level, directories first."""
        dir_path = " ".join(args)
        entries = await self.context.workspace.list_entries(dir_path, recursive=False)
        label = dir_path or "workspace root"

        if not entries:
            await self.context.notify(f'No files found in "{label}"')
            return

        lines = [f'Files in "{label}" ({len(entries)} items):', ""]
        for entry in entries:
            icon = ICON_DIRECTORY if entry.is_directory else ICON_FILE
            lines.append(f"{icon} {entry.name}")
        await self.context.notify("\n".join(lines))

    async def search_files(self, args: list[str]) -> None:
        """Find files by glob pattern."""
        if not args:
            await self.context.notify(SEARCH_USAGE)
            return

        pattern = " ".join(args)
        matches = await self.context.workspace.find_by_glob(
            pattern, max_results=SEARCH_RESULT_LIMIT
        )

        if not matches:
            await self.context.notify(f'No files found matching "{pattern}"')
            return

        lines = [f'Files matching "{pattern}" ({len(matches)} results):', ""]
        lines.extend(f"{ICON_FILE} {match}" for match in matches)
        if len(matches) >= SEARCH_RESULT_LIMIT:
            lines.append("")
            lines.append(f"(Limited to first {SEARCH_RESULT_LIMIT} results)")
        await self.context.notify("\n".join(lines))

    async def show_workspace(self, args: list[str]) -> None:
        """Show workspace name, path and project markers."""
        metadata = await self.context.workspace.get_metadata()
        lines = [
            "Workspace Information:",
            "",
            f"{ICON_DIRECTORY} Name: {metadata.name}",
            f"📂 Path: {metadata.path}",
            f"{_flag(metadata.has_git)} Git Repository",
            f"{_flag(metadata.has_package_manifest)} Package Manifest",
        ]
        await self.context.notify("\n".join(lines))
