# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the project directory that owns a ``dtmgr.toml``."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import chain
from pathlib import Path

from dtmgr.core.config.constants import CONFIG_FILE_NAME, OVERLAY_DIR_NAME
from dtmgr.errors import ConfigNotFoundError

ExistsPredicate = Callable[[Path], bool]


def _path_exists(path: Path) -> bool:
    return path.exists()


def _iter_candidates(start: Path) -> Iterable[Path]:
    """Yield ``start`` followed by each of its ancestors up to the filesystem root.

    Args:
        start: Directory whose ancestors should be traversed.

    Yields:
        Path: Candidate directories considered during root discovery.
    """

    yield from chain([start], start.parents)


def find_root(
    start: Path,
    *,
    filename: str = CONFIG_FILE_NAME,
    exists: ExistsPredicate | None = None,
) -> Path | None:
    """Return the nearest directory at or above ``start`` containing ``filename``.

    Args:
        start: Directory where the upward search begins.
        filename: Sentinel file that marks a dtmgr project.
        exists: Predicate used to probe candidate files; defaults to
            :meth:`pathlib.Path.exists`. Tests pass an in-memory model here.

    Returns:
        Path | None: The project directory, or ``None`` when the filesystem
        root is reached without finding the sentinel.
    """

    probe = exists or _path_exists
    for candidate in _iter_candidates(start.absolute()):
        if probe(candidate / filename):
            return candidate
    return None


def require_root(start: Path, *, filename: str = CONFIG_FILE_NAME) -> Path:
    """Return the project directory for ``start`` or raise.

    Raises:
        ConfigNotFoundError: If no ancestor of ``start`` holds ``filename``.
    """

    root = find_root(start, filename=filename)
    if root is None:
        raise ConfigNotFoundError(start.absolute(), filename)
    return root


def overlay_dir(project_root: Path) -> Path:
    """Return the overlay directory owned by ``project_root``."""

    return project_root / OVERLAY_DIR_NAME


__all__ = ["find_root", "overlay_dir", "require_root"]
