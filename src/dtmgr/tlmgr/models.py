# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Package records decoded from ``tlmgr info --json``.

The field set follows TeX Live's ``tlpkg/doc/json-formats.txt``. Only
``name``, ``depends`` and the four file lists drive overlay construction; the
remaining fields are kept so records can be inspected and logged.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from collections.abc import Set as AbstractSet

from pydantic import BaseModel, ConfigDict, Field


class CatalogueData(BaseModel):
    """CTAN catalogue details attached to a package."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    topics: str | None = None
    version: str | None = None
    license: str | None = None
    ctan: str | None = None
    date: str | None = None
    related: str | None = None


class DocFile(BaseModel):
    """One documentation file entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    file: str
    lang: str | None = None
    details: str | None = None


class PackageRecord(BaseModel):
    """Immutable metadata for a single TeX Live package."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    shortdesc: str | None = None
    longdesc: str | None = None
    category: str | None = None
    catalogue: str | None = None
    containerchecksum: str | None = None
    lrev: int | None = None
    rrev: int | None = None
    runsize: int | None = None
    docsize: int | None = None
    srcsize: int | None = None
    containersize: int | None = None
    srccontainersize: int | None = None
    doccontainersize: int | None = None
    available: bool = True
    installed: bool | None = None
    relocated: bool | None = None
    runfiles: tuple[str, ...] | None = None
    srcfiles: tuple[str, ...] | None = None
    executes: tuple[str, ...] | None = None
    depends: tuple[str, ...] | None = None
    postactions: tuple[str, ...] | None = None
    docfiles: tuple[DocFile, ...] | None = None
    binfiles: dict[str, tuple[str, ...]] | None = None
    binsize: dict[str, int] | None = None
    cataloguedata: CatalogueData | None = None
    rcataloguedata: CatalogueData | None = None

    @property
    def dependencies(self) -> tuple[str, ...]:
        """Return declared dependencies, treating an absent list as empty."""

        return self.depends or ()

    def binaries_for(self, platform: str) -> tuple[str, ...]:
        """Return binary files listed under ``platform`` only."""

        if not self.binfiles:
            return ()
        return self.binfiles.get(platform, ())


BatchQuery = Callable[[AbstractSet[str]], Sequence[PackageRecord]]
"""Callable returning records for every name in one batched lookup."""


__all__ = ["BatchQuery", "CatalogueData", "DocFile", "PackageRecord"]
