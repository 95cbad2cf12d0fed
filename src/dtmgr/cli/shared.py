# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, project loading)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from dtmgr.config import DtMgrConfig, load_config
from dtmgr.core.config.constants import CONFIG_FILE_NAME
from dtmgr.core.logging import configure_verbose_logging
from dtmgr.core.logging import fail as core_fail
from dtmgr.core.logging import info as core_info
from dtmgr.core.logging import ok as core_ok
from dtmgr.core.logging import warn as core_warn
from dtmgr.errors import DtMgrError
from dtmgr.platform.workspace import require_root


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool
    verbose: bool = False

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji)

    def progress(self, message: str) -> None:
        """Emit ``message`` only when verbose output was requested."""

        if self.verbose:
            self.info(message)


def build_logger(*, use_emoji: bool, verbose: bool) -> CLILogger:
    """Return a :class:`CLILogger`, enabling debug logging when ``verbose``."""

    if verbose:
        configure_verbose_logging()
    return CLILogger(use_emoji=use_emoji, verbose=verbose)


def load_project(start: Path) -> tuple[Path, DtMgrConfig]:
    """Return the project directory above ``start`` and its configuration.

    Raises:
        ConfigNotFoundError: If no ``dtmgr.toml`` is found.
        ConfigError: If the configuration cannot be loaded.
    """

    project_root = require_root(start)
    return project_root, load_config(project_root / CONFIG_FILE_NAME)


def exit_with_error(logger: CLILogger, exc: DtMgrError) -> NoReturn:
    """Report ``exc`` as a single failure line and exit with status 1."""

    logger.fail(str(exc))
    raise typer.Exit(code=1) from exc


__all__ = ["CLILogger", "build_logger", "exit_with_error", "load_project"]
