# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `dtmgr run` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from dtmgr.errors import DtMgrError
from dtmgr.overlay.lifecycle import OverlayController
from dtmgr.platform.capabilities import detect_capability
from dtmgr.platform.workspace import require_root

from ..options import ROOT_OPTION
from ..shared import build_logger, exit_with_error

PROGRAM_ARGUMENT = Annotated[str, typer.Argument(help="Program to run inside the overlay.")]
ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(help="Arguments forwarded to the program unchanged."),
]

# Everything after PROGRAM belongs to the child, including --help.
RUN_CONTEXT_SETTINGS = {
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
}


def run_tool_command(
    program: PROGRAM_ARGUMENT,
    args: ARGS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
) -> None:
    """Run PROGRAM with PATH and TEXMFCNF pointing at the project overlay."""

    logger = build_logger(use_emoji=True, verbose=False)
    try:
        project_root = require_root(root)
        controller = OverlayController(project_root, detect_capability())
        code = controller.run([program, *(args or [])])
    except DtMgrError as exc:
        exit_with_error(logger, exc)
    raise typer.Exit(code=code)


def register(app: typer.Typer) -> None:
    """Register the run command with ``app``."""

    app.command(
        "run",
        context_settings=RUN_CONTEXT_SETTINGS,
        add_help_option=False,
    )(run_tool_command)


__all__ = ["register", "run_tool_command"]
