"""Single-source command documentation for ``/help``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandDocEntry:
    """One documented command entry."""

    icon: str
    signature: str
    description: str
    example: str | None = None


COMMAND_DOCS: tuple[CommandDocEntry, ...] = (
    CommandDocEntry(
        "📄",
        "/read <file-path>",
        "Read a file and add to conversation context",
        "/read src/app.py",
    ),
    CommandDocEntry(
        "📁",
        "/list [directory]",
        "List files in a directory (default: root)",
        "/list src",
    ),
    CommandDocEntry(
        "🔍",
        "/search <pattern>",
        "Search for files matching a pattern",
        "/search **/*.json",
    ),
    CommandDocEntry("ℹ️ ", "/workspace", "Show workspace information (alias: /info)"),
    CommandDocEntry("❓", "/help", "Show this help message"),
)

# Handled by the terminal host rather than the chat session.
HOST_COMMAND_DOCS: tuple[CommandDocEntry, ...] = (
    CommandDocEntry("🧹", "/clear", "Clear the conversation"),
    CommandDocEntry("💾", "/write <n>", "Create suggested file number n", "/write 1"),
    CommandDocEntry("🚪", "/exit", "Quit (alias: /quit, Ctrl-D)"),
)


def _render_entries(entries: tuple[CommandDocEntry, ...]) -> list[str]:
    lines: list[str] = []
    for entry in entries:
        lines.append("")
        lines.append(f"{entry.icon} {entry.signature}")
        lines.append(f"   {entry.description}")
        if entry.example:
            lines.append(f"   Example: {entry.example}")
    return lines


def render_help_text(*, include_host_commands: bool = False) -> str:
    """Render in-chat ``/help`` output."""
    lines: list[str] = ["Available Commands:"]
    lines.extend(_render_entries(COMMAND_DOCS))
    if include_host_commands:
        lines.extend(_render_entries(HOST_COMMAND_DOCS))
    return "\n".join(lines)
