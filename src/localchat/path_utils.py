"""Path mapping and workspace path validation.

Two concerns live here:
- ``map_path`` expands CLI path arguments (``~`` home prefix, absolute
  paths, paths relative to the current directory) to absolute paths.
- ``validate_relative_path`` guards every workspace-relative path that
  reaches the file system, so reads and confirmed writes can never leave
  the workspace root.
"""

import ntpath
import sys
import unicodedata
from pathlib import Path, PurePosixPath, PureWindowsPath

from .errors import PathValidationError

# Characters Windows forbids in file names (drive colon handled separately).
_WINDOWS_FORBIDDEN_CHARS = frozenset('<>:"|?*')


def has_home_path_prefix(path: str) -> bool:
    """Return True when path uses the supported home prefix forms."""
    return path == "~" or path.startswith("~/") or path.startswith("~\\")


def is_windows_absolute_path(path: str) -> bool:
    """Return True when path is an absolute Windows path (drive or UNC)."""
    return PureWindowsPath(path).is_absolute()


def _normalize_path_input(path: str) -> str:
    """Normalize input text to NFC and reject NUL characters."""
    if "\x00" in path:
        raise ValueError("Path contains NUL character")
    return unicodedata.normalize("NFC", path)


def map_path(path: str) -> str:
    """Map a CLI path argument to an absolute path.

    Supports:
    - ~/... or ~\\... → expands to user home directory
    - Native absolute paths → used as-is
    - Windows absolute paths → accepted on Windows, rejected elsewhere
    - Relative paths → resolved against the current working directory

    Raises:
        ValueError: If the path escapes the home directory or uses a
            Windows absolute path on non-Windows
    """
    path = _normalize_path_input(path)

    if has_home_path_prefix(path):
        home_dir = Path.home().resolve()
        if path == "~":
            return str(home_dir)

        resolved = (home_dir / path[2:]).resolve()
        try:
            resolved.relative_to(home_dir)
        except ValueError:
            raise ValueError(f"Path escapes home directory: {path}")
        return str(resolved)

    if is_windows_absolute_path(path) and not Path(path).is_absolute():
        raise ValueError(
            f"Windows absolute paths are not supported on this platform: {path}"
        )

    return str(Path(path).resolve())


def validate_relative_path(rel_path: str, *, windows: bool | None = None) -> None:
    """Validate that a workspace-relative path cannot escape the workspace.

    Args:
        rel_path: Path relative to the workspace root
        windows: Apply Windows character rules; defaults to the host platform

    Raises:
        PathValidationError: If the path is empty, absolute, traverses to a
            parent, starts with a separator, or contains forbidden characters
    """
    if windows is None:
        windows = sys.platform == "win32"

    if not rel_path or not rel_path.strip():
        raise PathValidationError("Path cannot be empty")

    if "\x00" in rel_path:
        raise PathValidationError("Path contains null bytes")

    if rel_path.startswith(("/", "\\")):
        raise PathValidationError("Absolute paths are not allowed")

    if PurePosixPath(rel_path).is_absolute() or is_windows_absolute_path(rel_path):
        raise PathValidationError("Absolute paths are not allowed")

    # Drive-relative Windows forms such as "C:foo" carry a drive but no root.
    if ntpath.splitdrive(rel_path)[0]:
        raise PathValidationError("Absolute paths are not allowed")

    segments = rel_path.replace("\\", "/").split("/")
    if ".." in segments:
        raise PathValidationError("Path traversal (..) is not allowed")

    if windows and any(char in _WINDOWS_FORBIDDEN_CHARS for char in rel_path):
        raise PathValidationError("Path contains invalid characters")


def resolve_in_root(root: Path, rel_path: str) -> Path:
    """Validate ``rel_path`` and resolve it under ``root``.

    Symlinks that point outside the root are rejected as well.
    """
    validate_relative_path(rel_path)
    root_resolved = root.resolve()
    candidate = (root_resolved / rel_path.replace("\\", "/")).resolve()
    try:
        candidate.relative_to(root_resolved)
    except ValueError:
        raise PathValidationError(f"Path escapes workspace: {rel_path}")
    return candidate
