# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""TeX Live metadata provider and package installer."""

from __future__ import annotations

from .client import TlmgrClient, decode_records
from .models import BatchQuery, CatalogueData, DocFile, PackageRecord

__all__ = ["BatchQuery", "CatalogueData", "DocFile", "PackageRecord", "TlmgrClient", "decode_records"]
