# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for PATH rewriting and tool environments."""

from __future__ import annotations

from pathlib import Path

import pytest

from dtmgr.errors import EnvironmentVariableMissing
from dtmgr.overlay.environment import build_tool_env, rewrite_path_env, texmfcnf_value


def test_rewrite_replaces_matching_prefix(posix) -> None:
    result = rewrite_path_env(
        "/usr/bin:/opt/texlive/2025/bin/x86_64-linux",
        "/opt/texlive/2025",
        "/home/u/proj/.dtmgr",
        posix,
    )

    assert result == "/usr/bin:/home/u/proj/.dtmgr/bin/x86_64-linux"


def test_rewrite_matches_whole_components_only(posix) -> None:
    value = "/opt/texlive/2025-old/bin:/opt/texlive/20255/bin"

    assert rewrite_path_env(value, "/opt/texlive/2025", "/overlay", posix) == value


def test_rewrite_keeps_remainder_text_verbatim(posix) -> None:
    value = "/opt/tl//bin/./x86_64-linux/:/opt/tl/:/usr/bin"

    result = rewrite_path_env(value, "/opt/tl", "/overlay", posix)

    assert result == "/overlay//bin/./x86_64-linux/:/overlay/:/usr/bin"


def test_rewrite_matches_non_normalised_prefix(posix) -> None:
    assert rewrite_path_env("/opt/./tl/bin", "/opt/tl", "/overlay", posix) == "/overlay/bin"


def test_rewrite_maps_exact_root_to_replacement(posix) -> None:
    assert rewrite_path_env("/opt/tl", "/opt/tl", "/overlay", posix) == "/overlay"


def test_rewrite_preserves_empty_entries_and_order(posix) -> None:
    value = ":/opt/tl/bin::/usr/bin:"

    result = rewrite_path_env(value, "/opt/tl", "/overlay", posix)

    assert result == ":/overlay/bin::/usr/bin:"
    assert len(result.split(":")) == len(value.split(":"))


def test_rewrite_without_matches_is_identity(posix) -> None:
    value = "/usr/local/bin:/usr/bin:/bin"

    assert rewrite_path_env(value, "/opt/tl", "/overlay", posix) == value


def test_rewrite_uses_windows_separator(windows) -> None:
    value = "C:\\texlive\\2025\\bin\\windows;C:\\Windows\\system32"

    result = rewrite_path_env(value, "C:\\texlive\\2025", "D:\\proj\\.dtmgr", windows)

    assert result == "D:\\proj\\.dtmgr\\bin\\windows;C:\\Windows\\system32"


def test_texmfcnf_lists_root_then_web2c(posix) -> None:
    local_root = Path("/proj/.dtmgr")

    assert texmfcnf_value(local_root, posix) == "/proj/.dtmgr:/proj/.dtmgr/texmf-dist/web2c"


def test_build_tool_env_rewrites_path_and_sets_texmfcnf(posix) -> None:
    base = {"PATH": "/opt/tl/bin/x86_64-linux:/usr/bin", "HOME": "/home/u"}

    env = build_tool_env(base, Path("/opt/tl"), Path("/proj/.dtmgr"), posix)

    assert env["PATH"] == "/proj/.dtmgr/bin/x86_64-linux:/usr/bin"
    assert env["TEXMFCNF"] == "/proj/.dtmgr:/proj/.dtmgr/texmf-dist/web2c"
    assert env["HOME"] == "/home/u"
    assert base["PATH"] == "/opt/tl/bin/x86_64-linux:/usr/bin"


def test_build_tool_env_overrides_existing_texmfcnf(posix) -> None:
    base = {"PATH": "/usr/bin", "TEXMFCNF": "/somewhere/else"}

    env = build_tool_env(base, Path("/opt/tl"), Path("/proj/.dtmgr"), posix)

    assert env["TEXMFCNF"] == "/proj/.dtmgr:/proj/.dtmgr/texmf-dist/web2c"


def test_build_tool_env_requires_path(posix) -> None:
    with pytest.raises(EnvironmentVariableMissing) as excinfo:
        build_tool_env({"HOME": "/home/u"}, Path("/opt/tl"), Path("/proj/.dtmgr"), posix)

    assert excinfo.value.name == "PATH"
