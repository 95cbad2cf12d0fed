# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration digests and the overlay version marker."""

from __future__ import annotations

import hashlib
import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from dtmgr.config.models import DtMgrConfig
from dtmgr.core.config.constants import MARKER_FILE_NAME
from dtmgr.errors import DirectoryRemovalFailed, FileWriteFailed

LOGGER = logging.getLogger(__name__)


def _varint(value: int) -> bytes:
    """Return ``value`` as an unsigned LEB128 varint."""

    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_dependencies(names: Iterable[str]) -> bytes:
    """Return the canonical byte encoding of a dependency set.

    The set is de-duplicated and sorted by UTF-8 bytes, then written as an
    element count followed by length-prefixed UTF-8 names (all lengths as
    LEB128 varints). This is the postcard layout of a struct holding one
    ordered string set, so markers written by earlier releases stay valid.
    """

    encoded = sorted({name.encode("utf-8") for name in names})
    out = bytearray(_varint(len(encoded)))
    for name in encoded:
        out += _varint(len(name))
        out += name
    return bytes(out)


def config_digest(config: DtMgrConfig) -> str:
    """Return the hex SHA3-256 digest identifying ``config``'s dependency set."""

    return hashlib.sha3_256(encode_dependencies(config.dependencies)).hexdigest()


def marker_path(local_root: Path) -> Path:
    """Return the location of the version marker inside ``local_root``."""

    return local_root / MARKER_FILE_NAME


def read_marker(local_root: Path) -> str | None:
    """Return the stored digest, or ``None`` when it is absent or unreadable."""

    if not local_root.is_dir():
        return None
    marker = marker_path(local_root)
    if not marker.is_file():
        return None
    try:
        return marker.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("unable to read overlay marker %s: %s", marker, exc)
        return None


def should_rebuild(config: DtMgrConfig, local_root: Path) -> bool:
    """Return ``True`` unless the overlay was built from exactly ``config``.

    This only reads the marker; it never modifies the filesystem.
    """

    stored = read_marker(local_root)
    if stored is None:
        return True
    return stored != config_digest(config)


def write_marker(local_root: Path, config: DtMgrConfig) -> Path:
    """Persist ``config``'s digest as the overlay marker.

    Raises:
        FileWriteFailed: If the marker cannot be written.
    """

    marker = marker_path(local_root)
    try:
        marker.write_text(config_digest(config), encoding="utf-8", newline="")
    except OSError as exc:
        raise FileWriteFailed(marker, exc) from exc
    return marker


def remove_overlay(local_root: Path) -> bool:
    """Delete ``local_root`` and everything below it.

    Returns:
        bool: ``True`` when a directory was removed.

    Raises:
        DirectoryRemovalFailed: If the tree cannot be deleted.
    """

    if not local_root.is_dir():
        return False
    try:
        shutil.rmtree(local_root)
    except OSError as exc:
        raise DirectoryRemovalFailed(local_root, exc) from exc
    return True


__all__ = [
    "config_digest",
    "encode_dependencies",
    "marker_path",
    "read_marker",
    "remove_overlay",
    "should_rebuild",
    "write_marker",
]
