# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Choose how each package file is reproduced inside the overlay."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Final

from dtmgr.platform.capabilities import PlatformCapability
from dtmgr.tlmgr.models import PackageRecord

KPSEWHICH: Final[str] = "kpsewhich"
UPDMAP_CFG: Final[str] = "updmap.cfg"
OTF_SUFFIX: Final[str] = ".otf"


class FileCategory(str, Enum):
    """File lists carried by a package record."""

    BINARY = "binary"
    DOCUMENTATION = "documentation"
    RUNTIME = "runtime"
    SOURCE = "source"


class LinkStrategy(str, Enum):
    """Filesystem mechanism used to reproduce one file."""

    SYMLINK = "symlink"
    HARDLINK_OR_COPY = "hardlink-or-copy"
    COPY = "copy"


def classify(category: FileCategory, relative: str, capability: PlatformCapability) -> LinkStrategy:
    """Return the link strategy for a file.

    Args:
        category: File list the path was taken from.
        relative: Path relative to the installation root.
        capability: Host platform capability.

    Returns:
        LinkStrategy: Strategy for the file; the result depends only on the
        arguments, never on file content.
    """

    path = capability.pure_path(relative)
    # kpsewhich derives its search roots from its own location, and a symlink
    # would report the global installation instead of the overlay.
    if category is FileCategory.BINARY and path.name in _kpsewhich_names(capability):
        return LinkStrategy.HARDLINK_OR_COPY
    if category is FileCategory.RUNTIME:
        # updmap-sys --syncwithtrees rewrites this file in place.
        if path.name == UPDMAP_CFG:
            return LinkStrategy.COPY
        # https://github.com/lunarmodules/luafilesystem/issues/184
        if capability.otf_hardlink and path.suffix == OTF_SUFFIX:
            return LinkStrategy.HARDLINK_OR_COPY
    return LinkStrategy.SYMLINK


def _kpsewhich_names(capability: PlatformCapability) -> frozenset[str]:
    return frozenset({KPSEWHICH, f"{KPSEWHICH}{capability.executable_suffix}"})


def iter_package_files(record: PackageRecord, platform: str) -> Iterator[tuple[FileCategory, str]]:
    """Yield every ``(category, relative path)`` pair owned by ``record``.

    Binary files listed for other platforms are skipped entirely.
    """

    for relative in record.binaries_for(platform):
        yield FileCategory.BINARY, relative
    for docfile in record.docfiles or ():
        yield FileCategory.DOCUMENTATION, docfile.file
    for relative in record.runfiles or ():
        yield FileCategory.RUNTIME, relative
    for relative in record.srcfiles or ():
        yield FileCategory.SOURCE, relative


__all__ = [
    "FileCategory",
    "LinkStrategy",
    "classify",
    "iter_package_files",
]
