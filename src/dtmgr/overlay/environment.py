# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment rewriting that points child tools at the overlay."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Final

from dtmgr.core.config.constants import PATH_ENV, TEXMFCNF_ENV, WEB2C_SUBPATH
from dtmgr.errors import EnvironmentVariableMissing
from dtmgr.platform.capabilities import PlatformCapability

_SEPARATORS: Final[frozenset[str]] = frozenset({"/", "\\"})


def rewrite_path_env(
    path_value: str,
    target: Path | str,
    replacement: Path | str,
    capability: PlatformCapability,
) -> str:
    """Redirect entries of a search-path value from ``target`` to ``replacement``.

    Entries are matched on whole path components, so ``/opt/tex`` does not
    match ``/opt/texlive/bin``. Entry count and order are preserved exactly,
    including empty entries. Unmatched entries are returned verbatim, and the
    text following the matched prefix is kept byte-for-byte.

    Args:
        path_value: Raw value of a ``PATH``-style variable.
        target: Root whose prefix should be replaced.
        replacement: Root substituted for ``target``.
        capability: Host platform capability (separator and path flavour).

    Returns:
        str: The rewritten search-path value.
    """

    target_path = capability.pure_path(str(target))
    entries: list[str] = []
    for entry in path_value.split(capability.path_separator):
        end = _matched_prefix_end(entry, target_path, capability) if entry else None
        if end is None:
            entries.append(entry)
        else:
            entries.append(f"{replacement}{entry[end:]}")
    return capability.path_separator.join(entries)


def _matched_prefix_end(entry: str, target: PurePath, capability: PlatformCapability) -> int | None:
    """Return the index in ``entry`` where the part equal to ``target`` ends."""

    if not capability.pure_path(entry).is_relative_to(target):
        return None
    for index in range(1, len(entry) + 1):
        at_boundary = index == len(entry) or entry[index] in _SEPARATORS or entry[index - 1] in _SEPARATORS
        if not at_boundary:
            continue
        if capability.pure_path(entry[:index]) == target:
            return index
    return None


def texmfcnf_value(local_root: Path, capability: PlatformCapability) -> str:
    """Return the ``TEXMFCNF`` search path for an overlay rooted at ``local_root``."""

    web2c = local_root.joinpath(*WEB2C_SUBPATH)
    return f"{local_root}{capability.kpse_separator}{web2c}"


def build_tool_env(
    base_env: Mapping[str, str],
    global_root: Path,
    local_root: Path,
    capability: PlatformCapability,
) -> dict[str, str]:
    """Return ``base_env`` adjusted so TeX tools resolve through the overlay.

    Raises:
        EnvironmentVariableMissing: If ``base_env`` has no ``PATH``.
    """

    if PATH_ENV not in base_env:
        raise EnvironmentVariableMissing(PATH_ENV)
    env = dict(base_env)
    env[PATH_ENV] = rewrite_path_env(base_env[PATH_ENV], global_root, local_root, capability)
    env[TEXMFCNF_ENV] = texmfcnf_value(local_root, capability)
    return env


__all__ = ["build_tool_env", "rewrite_path_env", "texmfcnf_value"]
