"""File suggestion extraction from assistant replies.

Models are asked to propose files as fenced blocks::

    ```file path="relative/path.ext"
    <complete file content>
    ```

Nested fences inside a file block are not supported: the first closing
fence ends the block.
"""

from __future__ import annotations

import re

from .domain.chat import FileSuggestion
from .formatting import format_bytes

_FILE_FENCE_RE = re.compile(
    r'```file[ \t]+path="(?P<path>[^"\r\n]*)"[^\r\n]*\r?\n(?P<content>.*?)```',
    re.DOTALL,
)

PREVIEW_MAX_LINES = 8


def extract_file_suggestions(text: str) -> list[FileSuggestion]:
    """Return every file fence in ``text``, in order of appearance.

    Paths are stripped; blocks with a blank path are skipped. Content is
    kept verbatim and may be empty.
    """
    suggestions: list[FileSuggestion] = []
    for match in _FILE_FENCE_RE.finditer(text):
        path = match.group("path").strip()
        if not path:
            continue
        suggestions.append(FileSuggestion(path=path, content=match.group("content")))
    return suggestions


def render_suggestion_preview(suggestion: FileSuggestion) -> str:
    """Short preview: path, size and the first few content lines."""
    size = format_bytes(len(suggestion.content.encode("utf-8")))
    lines = suggestion.content.splitlines()
    shown = lines[:PREVIEW_MAX_LINES]
    preview = [f"{suggestion.path} ({size})"]
    preview.extend(f"  | {line}" for line in shown)
    if len(lines) > len(shown):
        preview.append(f"  | ... ({len(lines) - len(shown)} more lines)")
    return "\n".join(preview)
