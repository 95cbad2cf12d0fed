# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core helpers shared across dtmgr (logging, process execution, constants)."""
