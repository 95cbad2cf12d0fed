# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform capabilities and project discovery helpers."""

from __future__ import annotations

from .capabilities import PlatformCapability, PosixPlatform, WindowsPlatform, detect_capability
from .workspace import find_root, overlay_dir, require_root

__all__ = [
    "PlatformCapability",
    "PosixPlatform",
    "WindowsPlatform",
    "detect_capability",
    "find_root",
    "overlay_dir",
    "require_root",
]
