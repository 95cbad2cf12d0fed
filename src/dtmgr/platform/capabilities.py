# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host platform capabilities selected at runtime.

Everything that differs between POSIX and Windows hosts (separators, symlink
creation, how a command line is spawned, extra seed packages) is captured by a
:class:`PlatformCapability`. The resolver, materializer, and environment
rewriter receive a capability explicitly, so tests can inject either flavour
regardless of the machine running them.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Final, Protocol, runtime_checkable

_WINDOWS_ARG_PREFIX: Final[str] = "DTMGR_ARG"


@runtime_checkable
class PlatformCapability(Protocol):
    """Operations and constants that depend on the host operating system."""

    name: str
    path_separator: str
    kpse_separator: str
    executable_suffix: str
    extra_seeds: tuple[str, ...]
    otf_hardlink: bool

    def pure_path(self, value: str) -> PurePath:
        """Return ``value`` parsed with the host path flavour."""

    def create_symlink(self, target: Path, link: Path) -> None:
        """Create ``link`` pointing at ``target``."""

    def command(self, argv: Sequence[str]) -> tuple[list[str], dict[str, str]]:
        """Return the argv to spawn and any environment variables it needs."""


@dataclass(frozen=True, slots=True)
class PosixPlatform:
    """Capability for Linux, macOS, and other POSIX hosts."""

    name: str = "posix"
    path_separator: str = ":"
    kpse_separator: str = ":"
    executable_suffix: str = ""
    extra_seeds: tuple[str, ...] = ()
    otf_hardlink: bool = False

    def pure_path(self, value: str) -> PurePath:
        return PurePosixPath(value)

    def create_symlink(self, target: Path, link: Path) -> None:
        os.symlink(target, link)

    def command(self, argv: Sequence[str]) -> tuple[list[str], dict[str, str]]:
        if not argv:
            raise ValueError("command requires at least one argument")
        return list(argv), {}


@dataclass(frozen=True, slots=True)
class WindowsPlatform:
    """Capability for Windows hosts.

    Commands are routed through PowerShell so ``.bat``/``.ps1`` wrappers that
    TeX Live installs resolve the same way they do in an interactive shell.
    Arguments travel through ``DTMGR_ARG<n>`` environment variables, which
    keeps them out of PowerShell's own parser.
    """

    name: str = "windows"
    path_separator: str = ";"
    kpse_separator: str = ";"
    executable_suffix: str = ".exe"
    extra_seeds: tuple[str, ...] = ("tlperl.windows",)
    otf_hardlink: bool = True

    def pure_path(self, value: str) -> PurePath:
        return PureWindowsPath(value)

    def create_symlink(self, target: Path, link: Path) -> None:
        os.symlink(target, link, target_is_directory=target.is_dir())

    def command(self, argv: Sequence[str]) -> tuple[list[str], dict[str, str]]:
        if not argv:
            raise ValueError("command requires at least one argument")
        env: dict[str, str] = {}
        script = "& "
        for index, element in enumerate(argv):
            key = f"{_WINDOWS_ARG_PREFIX}{index}"
            script += f"$Env:{key} "
            env[key] = str(element)
        return ["powershell", "-c", script], env


def detect_capability() -> PlatformCapability:
    """Return the capability matching the interpreter's host platform."""

    if os.name == "nt":
        return WindowsPlatform()
    return PosixPlatform()


__all__ = [
    "PlatformCapability",
    "PosixPlatform",
    "WindowsPlatform",
    "detect_capability",
]
