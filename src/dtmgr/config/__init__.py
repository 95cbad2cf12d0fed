# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project configuration models and loaders."""

from __future__ import annotations

from .loader import load_config, parse_config
from .models import DtMgrConfig

__all__ = ["DtMgrConfig", "load_config", "parse_config"]
