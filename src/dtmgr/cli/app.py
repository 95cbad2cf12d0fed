# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .commands import register_commands
from .typer_ext import create_typer

app = create_typer(
    name="dtmgr",
    help="Project-local TeX Live environments built from a shared installation.",
    no_args_is_help=True,
)
register_commands(app)

__all__ = ["app"]
