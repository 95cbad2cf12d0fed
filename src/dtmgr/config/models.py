# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declared project configuration (``dtmgr.toml``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DtMgrConfig(BaseModel):
    """Dependency set declared by a project.

    ``dependencies`` is a set: declaration order and duplicates in the TOML
    array carry no meaning and never influence the configuration digest.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    dependencies: frozenset[str] = Field(...)

    def sorted_dependencies(self) -> tuple[str, ...]:
        """Return the dependencies in canonical (UTF-8 byte) order."""

        return tuple(sorted(self.dependencies, key=lambda name: name.encode("utf-8")))


__all__ = ["DtMgrConfig"]
