# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `dtmgr status` command."""

from __future__ import annotations

from pathlib import Path

import typer

from dtmgr.errors import DtMgrError
from dtmgr.overlay.lifecycle import OverlayController, OverlayState
from dtmgr.platform.capabilities import detect_capability

from ..options import CHECK_OPTION, EMOJI_OPTION, ROOT_OPTION
from ..shared import build_logger, exit_with_error, load_project


def status_command(
    root: ROOT_OPTION = Path("."),
    check: CHECK_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Report whether the project overlay matches dtmgr.toml."""

    logger = build_logger(use_emoji=emoji, verbose=False)
    try:
        project_root, config = load_project(root)
        status = OverlayController(project_root, detect_capability()).status(config)
    except DtMgrError as exc:
        exit_with_error(logger, exc)

    if status.state is OverlayState.UP_TO_DATE:
        logger.ok(f"Up-to-date ({status.overlay})")
        raise typer.Exit(code=0)
    if status.state is OverlayState.MISSING:
        logger.warn(f"No overlay at {status.overlay}; run `dtmgr install`")
    else:
        logger.warn(f"Overlay at {status.overlay} is stale; run `dtmgr install`")
    raise typer.Exit(code=1 if check else 0)


def register(app: typer.Typer) -> None:
    """Register the status command with ``app``."""

    app.command("status")(status_command)


__all__ = ["register", "status_command"]
