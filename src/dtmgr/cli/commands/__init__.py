# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import install, run, status

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Attach every dtmgr command to ``app``."""

    for module in (install, run, status):
        module.register(app)
