# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core configuration constants."""

from __future__ import annotations

from typing import Final

CONFIG_FILE_NAME: Final[str] = "dtmgr.toml"
OVERLAY_DIR_NAME: Final[str] = ".dtmgr"
MARKER_FILE_NAME: Final[str] = "version"
TEXMF_CONFIG_DIR: Final[str] = "texmf-config"
TEXMF_VAR_DIR: Final[str] = "texmf-var"
# Relative to the overlay root; appended to TEXMFCNF after the root itself.
WEB2C_SUBPATH: Final[tuple[str, ...]] = ("texmf-dist", "web2c")

BASE_SEEDS: Final[tuple[str, ...]] = ("texlive.infra", "kpathsea")
ARCH_SUFFIX: Final[str] = ".ARCH"

PATH_ENV: Final[str] = "PATH"
TEXMFCNF_ENV: Final[str] = "TEXMFCNF"

POST_INSTALL_STEPS: Final[tuple[tuple[str, ...], ...]] = (
    ("mktexlsr",),
    ("fmtutil-sys", "--missing"),
    ("updmap-sys", "--syncwithtrees"),
    ("updmap-sys",),
)

__all__ = [
    "ARCH_SUFFIX",
    "BASE_SEEDS",
    "CONFIG_FILE_NAME",
    "MARKER_FILE_NAME",
    "OVERLAY_DIR_NAME",
    "PATH_ENV",
    "POST_INSTALL_STEPS",
    "TEXMFCNF_ENV",
    "TEXMF_CONFIG_DIR",
    "TEXMF_VAR_DIR",
    "WEB2C_SUBPATH",
]
