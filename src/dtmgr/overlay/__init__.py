# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-local overlay construction: resolution, linking, and change detection."""

from __future__ import annotations

from .environment import build_tool_env, rewrite_path_env, texmfcnf_value
from .lifecycle import InstallOutcome, OverlayController, OverlayState, OverlayStatus, exit_code_from_returncode
from .marker import config_digest, encode_dependencies, read_marker, remove_overlay, should_rebuild, write_marker
from .materializer import MaterializeSummary, materialize
from .resolver import default_seeds, resolve_arch, resolve_closure
from .strategy import FileCategory, LinkStrategy, classify, iter_package_files

__all__ = [
    "FileCategory",
    "InstallOutcome",
    "LinkStrategy",
    "MaterializeSummary",
    "OverlayController",
    "OverlayState",
    "OverlayStatus",
    "build_tool_env",
    "classify",
    "config_digest",
    "default_seeds",
    "encode_dependencies",
    "exit_code_from_returncode",
    "iter_package_files",
    "materialize",
    "read_marker",
    "remove_overlay",
    "resolve_arch",
    "resolve_closure",
    "rewrite_path_env",
    "should_rebuild",
    "texmfcnf_value",
    "write_marker",
]
