# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by every dtmgr component.

Each error carries the context needed to explain the failure to the user
(the path, command, or exit code involved) and is propagated unchanged up to
the CLI, which prints a single message and exits non-zero.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class DtMgrError(RuntimeError):
    """Base class for failures surfaced to the dtmgr user."""


class ConfigError(DtMgrError):
    """Raised when ``dtmgr.toml`` cannot be read or does not validate."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"unable to parse configuration file ({path}): {reason}")
        self.path = path
        self.reason = reason


class ConfigNotFoundError(DtMgrError):
    """Raised when no ancestor of the start directory holds ``dtmgr.toml``."""

    def __init__(self, start: Path, filename: str) -> None:
        super().__init__(f"unable to find {filename} in current directory ({start}) or any of its parents")
        self.start = start
        self.filename = filename


class CommandExecutionError(DtMgrError):
    """Raised when a child process could not be spawned at all."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"system failure executing `{' '.join(command)}`: {reason}")
        self.command = tuple(command)
        self.reason = reason


class CommandStatusError(DtMgrError):
    """Raised when a child process exits with a non-zero status."""

    def __init__(self, command: Sequence[str], code: int | None) -> None:
        super().__init__(f"command `{' '.join(command)}` exited with non-zero exit code ({code})")
        self.command = tuple(command)
        self.code = code


class MetadataUnavailable(DtMgrError):
    """Raised when a batched metadata query cannot be completed."""

    def __init__(self, command: Sequence[str], code: int | None, reason: str | None = None) -> None:
        detail = f"exit code {code}" if reason is None else reason
        super().__init__(f"package metadata query `{' '.join(command)}` failed ({detail})")
        self.command = tuple(command)
        self.code = code
        self.reason = reason


class MetadataMalformed(DtMgrError):
    """Raised when metadata output cannot be decoded into package records."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to parse package metadata: {reason}")
        self.reason = reason


class DirectoryCreationFailed(DtMgrError):
    """Raised when a directory under the overlay cannot be created."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        super().__init__(f"unable to create directory ({directory}): {cause}")
        self.directory = directory


class LinkCreationFailed(DtMgrError):
    """Raised when a symbolic link cannot be created."""

    def __init__(self, src: Path, dst: Path, cause: OSError) -> None:
        super().__init__(f"unable to create symlink (src: {src}, dst: {dst}): {cause}")
        self.src = src
        self.dst = dst


class FileWriteFailed(DtMgrError):
    """Raised when a file copy or marker write fails."""

    def __init__(self, file: Path, cause: OSError) -> None:
        super().__init__(f"unable to write to file ({file}): {cause}")
        self.file = file


class DirectoryRemovalFailed(DtMgrError):
    """Raised when a stale overlay cannot be deleted."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        super().__init__(f"unable to remove directory ({directory}): {cause}")
        self.directory = directory


class EnvironmentVariableMissing(DtMgrError):
    """Raised when a variable required to build a tool environment is unset."""

    def __init__(self, name: str) -> None:
        super().__init__(f"environment variable {name} is not set")
        self.name = name


__all__ = [
    "CommandExecutionError",
    "CommandStatusError",
    "ConfigError",
    "ConfigNotFoundError",
    "DirectoryCreationFailed",
    "DirectoryRemovalFailed",
    "DtMgrError",
    "EnvironmentVariableMissing",
    "FileWriteFailed",
    "LinkCreationFailed",
    "MetadataMalformed",
    "MetadataUnavailable",
]
