# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mirror resolved package files from the global root into the overlay."""

from __future__ import annotations

import logging
import os
import shutil
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dtmgr.errors import DirectoryCreationFailed, FileWriteFailed, LinkCreationFailed
from dtmgr.platform.capabilities import PlatformCapability
from dtmgr.tlmgr.models import PackageRecord

from .strategy import LinkStrategy, classify, iter_package_files

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class MaterializeSummary:
    """Counts of files reproduced per strategy."""

    packages: int = 0
    strategies: Counter[LinkStrategy] = field(default_factory=Counter)
    copy_fallbacks: int = 0

    @property
    def files(self) -> int:
        """Return the total number of files placed in the overlay."""

        return sum(self.strategies.values())


def _ensure_parent(destination: Path) -> None:
    parent = destination.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailed(parent, exc) from exc


def copy_file(source: Path, destination: Path) -> None:
    """Copy bytes and permission bits from ``source`` to ``destination``.

    Raises:
        FileWriteFailed: If the copy fails for any reason.
    """

    try:
        shutil.copy(source, destination)
    except OSError as exc:
        raise FileWriteFailed(destination, exc) from exc


def hardlink_or_copy(source: Path, destination: Path) -> bool:
    """Hard link ``source`` to ``destination``, copying when linking fails.

    Returns:
        bool: ``True`` when the copy fallback was used.

    Raises:
        FileWriteFailed: If the fallback copy fails.
    """

    try:
        os.link(source, destination)
    except OSError as exc:
        LOGGER.debug("hard link %s -> %s failed (%s); copying", source, destination, exc)
        copy_file(source, destination)
        return True
    return False


def symlink(source: Path, destination: Path, capability: PlatformCapability) -> None:
    """Create ``destination`` as a symbolic link to the absolute ``source``.

    Raises:
        LinkCreationFailed: If the link cannot be created.
    """

    try:
        capability.create_symlink(source, destination)
    except OSError as exc:
        raise LinkCreationFailed(source, destination, exc) from exc


def place_file(
    global_root: Path,
    local_root: Path,
    relative: str,
    strategy: LinkStrategy,
    capability: PlatformCapability,
) -> bool:
    """Reproduce one file of the global root inside the overlay.

    Returns:
        bool: ``True`` when a hard link fell back to a copy.
    """

    source = global_root / relative
    destination = local_root / relative
    _ensure_parent(destination)
    if strategy is LinkStrategy.SYMLINK:
        symlink(source, destination, capability)
        return False
    if strategy is LinkStrategy.HARDLINK_OR_COPY:
        return hardlink_or_copy(source, destination)
    copy_file(source, destination)
    return False


def materialize(
    global_root: Path,
    local_root: Path,
    capability: PlatformCapability,
    platform: str,
    resolved: Mapping[str, PackageRecord],
) -> MaterializeSummary:
    """Populate ``local_root`` with every file owned by the resolved packages.

    Args:
        global_root: Absolute root of the shared installation.
        local_root: Overlay directory being built.
        capability: Host platform capability.
        platform: TeX Live platform identifier used to select binaries.
        resolved: Package records produced by closure resolution.

    Returns:
        MaterializeSummary: Per-strategy file counts.

    Raises:
        DirectoryCreationFailed: If a parent directory cannot be created.
        LinkCreationFailed: If a symbolic link cannot be created.
        FileWriteFailed: If a copy fails.
    """

    summary = MaterializeSummary()
    for record in resolved.values():
        summary.packages += 1
        for category, relative in iter_package_files(record, platform):
            strategy = classify(category, relative, capability)
            if place_file(global_root, local_root, relative, strategy, capability):
                summary.copy_fallbacks += 1
            summary.strategies[strategy] += 1
    LOGGER.debug(
        "materialized %d file(s) from %d package(s) into %s",
        summary.files,
        summary.packages,
        local_root,
    )
    return summary


__all__ = [
    "MaterializeSummary",
    "copy_file",
    "hardlink_or_copy",
    "materialize",
    "place_file",
    "symlink",
]
