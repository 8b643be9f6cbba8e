"""Filesystem path helpers shared by providers.

Library exports written on Windows store paths relative to the library
root with backslash separators (``..\\Games\\SNES\\Contra III.sfc``).
:func:`resolve_library_path` turns those into absolute paths on any OS,
and :func:`canonical_path` produces the symlink-free key used to
deduplicate games.

Usage::

    from gamecatalog.core.path_resolver import canonical_path, resolve_library_path

    p = resolve_library_path(lb_dir, r"Games\\SNES\\Contra III.sfc")
    key = canonical_path(p)          # "" if the file does not exist
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

from loguru import logger

_cache: dict[str, Path] = {}


def get_home_dir() -> Path:
    """Return the user home directory."""
    if "home" not in _cache:
        _cache["home"] = Path.home()
        logger.debug("Home directory resolved to: {}", _cache["home"])
    return _cache["home"]


def _native(raw: str) -> Path:
    if platform.system() == "Windows":
        return Path(raw)
    return Path(raw.replace("\\", "/"))


def resolve_library_path(root: str | Path, raw: str) -> Path:
    """Resolve *raw* (as written in a library export) against *root*.

    Absolute paths are returned unchanged.  No filesystem access.
    """
    candidate = _native(raw.strip())
    if candidate.is_absolute():
        return candidate
    return Path(root) / candidate


def canonical_path(path: str | Path) -> str:
    """Return the absolute, symlink-free path of an existing *path*.

    Returns an empty string if *path* does not exist.
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError):
        return ""


def is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)
