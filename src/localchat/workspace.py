"""Workspace collaborator: read-only queries plus the confirmed write path.

Every path handed in is workspace-relative and validated before any file
system access. Results are never cached: each call reflects the disk at
the time of the call.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]

from .constants import IGNORED_ENTRY_NAMES, PACKAGE_MANIFEST_NAMES
from .domain.workspace import WorkspaceEntry, WorkspaceMetadata
from .errors import PathValidationError, WorkspaceError
from .path_utils import resolve_in_root, validate_relative_path


def is_ignored_name(name: str) -> bool:
    """Hidden entries and common dependency/cache folders are never listed."""
    return name.startswith(".") or name in IGNORED_ENTRY_NAMES


def _sort_entries(entries: list[WorkspaceEntry]) -> list[WorkspaceEntry]:
    """Directories first, then by name."""
    return sorted(entries, key=lambda e: (not e.is_directory, e.name, e.path))


class Workspace:
    """File system view rooted at one workspace directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    @property
    def name(self) -> str:
        return self.root.name or str(self.root)

    def resolve(self, rel_path: str) -> Path:
        """Validate ``rel_path`` and return its absolute location."""
        return resolve_in_root(self.root, rel_path)

    def _require_root(self) -> None:
        if not self.root.is_dir():
            raise WorkspaceError(f"Workspace folder not found: {self.root}")

    async def read_file(self, rel_path: str) -> str:
        """Read a workspace file as UTF-8 text."""
        self._require_root()
        path = self.resolve(rel_path)
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise WorkspaceError(f'Failed to read file "{rel_path}": {e}') from e

    async def exists(self, rel_path: str) -> bool:
        path = self.resolve(rel_path)
        return await asyncio.to_thread(path.exists)

    async def write_file(self, rel_path: str, content: str) -> Path:
        """Write UTF-8 content, creating parent directories as needed."""
        self._require_root()
        path = self.resolve(rel_path)
        try:
            await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content.encode("utf-8"))
        except OSError as e:
            raise WorkspaceError(f'Failed to write file "{rel_path}": {e}') from e
        return path

    async def list_entries(
        self,
        rel_path: str = "",
        *,
        recursive: bool = False,
        max_depth: int | None = None,
        files_only: bool = False,
    ) -> list[WorkspaceEntry]:
        """List a directory, directories first then by name.

        With ``recursive``, sub-directories are descended while their
        depth (number of path segments) is below ``max_depth``; no
        ``max_depth`` means unlimited.
        """
        self._require_root()
        if rel_path:
            validate_relative_path(rel_path)
        return await asyncio.to_thread(
            self._list_entries_sync,
            rel_path,
            recursive,
            max_depth,
            files_only,
        )

    def _list_entries_sync(
        self,
        rel_path: str,
        recursive: bool,
        max_depth: int | None,
        files_only: bool,
    ) -> list[WorkspaceEntry]:
        directory = self.resolve(rel_path) if rel_path else self.root
        try:
            children = list(directory.iterdir())
        except OSError as e:
            raise WorkspaceError(f'Failed to list directory "{rel_path}": {e}') from e

        prefix = rel_path.replace("\\", "/").strip("/")
        results: list[WorkspaceEntry] = []
        for child in children:
            if is_ignored_name(child.name):
                continue

            item_path = f"{prefix}/{child.name}" if prefix else child.name
            is_dir = child.is_dir()
            if not (files_only and is_dir):
                results.append(
                    WorkspaceEntry(
                        name=child.name,
                        path=item_path,
                        kind="directory" if is_dir else "file",
                    )
                )

            if recursive and is_dir and not child.is_symlink():
                depth = len(item_path.split("/"))
                if max_depth is None or depth < max_depth:
                    results.extend(
                        self._list_entries_sync(item_path, recursive, max_depth, files_only)
                    )

        return _sort_entries(results)

    async def find_by_glob(self, pattern: str, max_results: int = 100) -> list[str]:
        """Return up to ``max_results`` file paths matching a glob pattern."""
        self._require_root()
        normalized = pattern.strip().replace("\\", "/")
        if not normalized:
            raise PathValidationError("Search pattern cannot be empty")
        if normalized.startswith("/") or ".." in normalized.split("/"):
            raise PathValidationError(
                f"Search pattern must stay inside the workspace: {pattern}"
            )
        return await asyncio.to_thread(self._find_sync, normalized, max_results)

    def _find_sync(self, pattern: str, max_results: int) -> list[str]:
        matches: list[str] = []
        try:
            for path in sorted(self.root.glob(pattern)):
                rel = path.relative_to(self.root)
                if "node_modules" in rel.parts or not path.is_file():
                    continue
                matches.append(rel.as_posix())
                if len(matches) >= max_results:
                    break
        except (OSError, ValueError) as e:
            raise WorkspaceError(f"Failed to search files: {e}") from e
        return matches

    async def get_metadata(self) -> WorkspaceMetadata:
        self._require_root()
        has_git = await asyncio.to_thread((self.root / ".git").exists)
        manifests = await asyncio.to_thread(
            lambda: any((self.root / name).exists() for name in PACKAGE_MANIFEST_NAMES)
        )
        return WorkspaceMetadata(
            name=self.name,
            path=str(self.root),
            has_git=has_git,
            has_package_manifest=manifests,
        )
