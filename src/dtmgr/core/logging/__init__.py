# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import configure_verbose_logging, emoji, fail, info, ok, warn

__all__ = [
    "configure_verbose_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
