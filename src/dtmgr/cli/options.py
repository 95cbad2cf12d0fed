# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer option declarations shared by dtmgr commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Directory where the search for dtmgr.toml starts (defaults to the current directory).",
        file_okay=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Report progress and debug details."),
]
CHECK_OPTION = Annotated[
    bool,
    typer.Option("--check", help="Exit with status 1 unless the overlay is up to date."),
]

__all__ = ["CHECK_OPTION", "EMOJI_OPTION", "ROOT_OPTION", "VERBOSE_OPTION"]
