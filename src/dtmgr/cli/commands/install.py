# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `dtmgr install` command."""

from __future__ import annotations

from pathlib import Path

import typer

from dtmgr.errors import DtMgrError
from dtmgr.overlay.lifecycle import OverlayController
from dtmgr.platform.capabilities import detect_capability

from ..options import EMOJI_OPTION, ROOT_OPTION, VERBOSE_OPTION
from ..shared import build_logger, exit_with_error, load_project


def install_command(
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Install declared packages and (re)build the project overlay when stale."""

    logger = build_logger(use_emoji=emoji, verbose=verbose)
    try:
        project_root, config = load_project(root)
        controller = OverlayController(project_root, detect_capability(), on_progress=logger.progress)
        outcome = controller.install(config)
    except DtMgrError as exc:
        exit_with_error(logger, exc)

    if not outcome.rebuilt:
        logger.ok("Up-to-date")
    elif verbose:
        logger.ok(
            f"Overlay rebuilt at {outcome.overlay}: {len(outcome.packages)} package(s), "
            f"{outcome.summary.files} file(s)",
        )
    raise typer.Exit(code=0)


def register(app: typer.Typer) -> None:
    """Register the install command with ``app``."""

    app.command("install")(install_command)


__all__ = ["install_command", "register"]
