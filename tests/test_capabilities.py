# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for host platform capabilities."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath, PureWindowsPath
from types import SimpleNamespace

import pytest

from dtmgr.platform import capabilities
from dtmgr.platform.capabilities import PlatformCapability, PosixPlatform, WindowsPlatform, detect_capability


def test_posix_command_is_unchanged(posix) -> None:
    assert posix.command(["pdflatex", "doc.tex"]) == (["pdflatex", "doc.tex"], {})


def test_windows_command_routes_through_powershell(windows) -> None:
    argv, env = windows.command(["tlmgr", "info", "--json", "a b"])

    assert argv == ["powershell", "-c", "& $Env:DTMGR_ARG0 $Env:DTMGR_ARG1 $Env:DTMGR_ARG2 $Env:DTMGR_ARG3 "]
    assert env == {
        "DTMGR_ARG0": "tlmgr",
        "DTMGR_ARG1": "info",
        "DTMGR_ARG2": "--json",
        "DTMGR_ARG3": "a b",
    }


@pytest.mark.parametrize("capability", [PosixPlatform(), WindowsPlatform()])
def test_command_requires_arguments(capability: PlatformCapability) -> None:
    with pytest.raises(ValueError):
        capability.command([])


def test_capability_constants(posix, windows) -> None:
    assert isinstance(posix, PlatformCapability)
    assert isinstance(windows, PlatformCapability)
    assert (posix.path_separator, posix.kpse_separator, posix.extra_seeds) == (":", ":", ())
    assert (windows.path_separator, windows.kpse_separator) == (";", ";")
    assert windows.extra_seeds == ("tlperl.windows",)
    assert windows.executable_suffix == ".exe"
    assert isinstance(posix.pure_path("a/b"), PurePosixPath)
    assert isinstance(windows.pure_path("a\\b"), PureWindowsPath)


def test_detect_capability_follows_os_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(capabilities, "os", SimpleNamespace(name="nt"))
    assert isinstance(detect_capability(), WindowsPlatform)

    monkeypatch.setattr(capabilities, "os", SimpleNamespace(name="posix"))
    assert isinstance(detect_capability(), PosixPlatform)


@pytest.mark.skipif(os.name == "nt", reason="POSIX symlink semantics")
def test_posix_symlink_points_at_absolute_target(tmp_path: Path, posix) -> None:
    target = tmp_path / "target.txt"
    target.write_text("x", encoding="utf-8")
    link = tmp_path / "link.txt"

    posix.create_symlink(target, link)

    assert link.is_symlink()
    assert Path(os.readlink(link)) == target
