"""Locating ``config.yaml`` relative to the MoneyMood root."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional


ROOT_ENV_VAR = "MONEYMOOD_ROOT"

# Checked in order; config.yaml wins over generic repository markers
ROOT_MARKERS = ("config.yaml", "pyproject.toml", ".git")


def _search_dirs(start: Optional[Path]) -> Iterator[Path]:
    yielded = set()
    origins = [Path(start).resolve()] if start is not None else []
    origins += [Path.cwd(), Path(__file__).resolve().parent]
    for origin in origins:
        for directory in (origin, *origin.parents):
            if directory not in yielded:
                yielded.add(directory)
                yield directory


def find_project_root(start: Optional[Path] = None) -> Path:
    """Return the directory holding the MoneyMood config.

    ``MONEYMOOD_ROOT`` takes precedence when it points at an existing
    directory. Otherwise the nearest ancestor of ``start``, the working
    directory or the installed package carrying a root marker is used,
    falling back to the working directory.
    """
    override = os.getenv(ROOT_ENV_VAR)
    if override:
        root = Path(override).expanduser().resolve()
        if root.is_dir():
            return root

    for directory in _search_dirs(start):
        if any((directory / marker).exists() for marker in ROOT_MARKERS):
            return directory
    return Path.cwd()


def resolve_project_path(path_str: str, root: Optional[Path] = None) -> Path:
    """Resolve a config file path.

    Absolute paths and paths that exist relative to the working directory
    are returned unchanged; anything else is anchored at the project root.
    """
    path = Path(path_str).expanduser()
    if path.is_absolute() or path.exists():
        return path
    return ((root or find_project_root()) / path).resolve()
