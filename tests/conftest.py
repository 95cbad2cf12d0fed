# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from pathlib import Path
from typing import Any

import pytest

from dtmgr.platform.capabilities import PosixPlatform, WindowsPlatform
from dtmgr.tlmgr.models import PackageRecord

PLATFORM = "x86_64-linux"


def make_record(name: str, **fields: Any) -> PackageRecord:
    """Build a package record the way ``tlmgr info --json`` would describe it."""

    payload: dict[str, Any] = {"name": name, "available": True}
    if "docfiles" in fields:
        fields["docfiles"] = [{"file": entry} for entry in fields["docfiles"]]
    payload.update(fields)
    return PackageRecord.model_validate(payload)


class FakeIndex:
    """In-memory metadata provider recording each batched lookup."""

    def __init__(self, records: Mapping[str, PackageRecord]) -> None:
        self.records = dict(records)
        self.calls: list[frozenset[str]] = []

    def __call__(self, names: AbstractSet[str]) -> Sequence[PackageRecord]:
        self.calls.append(frozenset(names))
        return [self.records[name] for name in sorted(names) if name in self.records]


@pytest.fixture
def posix() -> PosixPlatform:
    return PosixPlatform()


@pytest.fixture
def windows() -> WindowsPlatform:
    return WindowsPlatform()


@pytest.fixture
def global_root(tmp_path: Path) -> Path:
    """Return a small TeX Live-like installation tree."""

    root = tmp_path / "texlive" / "2025"
    files = {
        f"bin/{PLATFORM}/kpsewhich": "#!/bin/sh\necho kpsewhich\n",
        f"bin/{PLATFORM}/pdftex": "#!/bin/sh\necho pdftex\n",
        "bin/windows/kpsewhich.exe": "MZ",
        "texmf-dist/web2c/texmf.cnf": "TEXMFROOT = $SELFAUTOPARENT\n",
        "texmf-dist/web2c/updmap.cfg": "# updmap\n",
        "texmf-dist/tex/latex/foo/foo.sty": "\\ProvidesPackage{foo}\n",
        "texmf-dist/fonts/opentype/foo/foo.otf": "OTTO",
        "texmf-dist/doc/latex/foo/readme.txt": "foo docs\n",
        "texmf-dist/source/latex/foo/foo.dtx": "% foo source\n",
    }
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    (root / f"bin/{PLATFORM}/kpsewhich").chmod(0o755)
    return root


@pytest.fixture
def record() -> Any:
    """Return the :func:`make_record` factory."""

    return make_record


@pytest.fixture
def index_factory() -> type[FakeIndex]:
    """Return the :class:`FakeIndex` type for building metadata providers."""

    return FakeIndex
