# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for configuration digests and the overlay marker."""

from __future__ import annotations

import hashlib
from pathlib import Path

from dtmgr.config.models import DtMgrConfig
from dtmgr.overlay.marker import (
    config_digest,
    encode_dependencies,
    marker_path,
    read_marker,
    remove_overlay,
    should_rebuild,
    write_marker,
)


def _config(*names: str) -> DtMgrConfig:
    return DtMgrConfig(dependencies=frozenset(names))


def test_encoding_is_count_then_length_prefixed_names() -> None:
    assert encode_dependencies([]) == b"\x00"
    assert encode_dependencies(["foo"]) == b"\x01\x03foo"
    assert encode_dependencies(["b", "a", "a"]) == b"\x02\x01a\x01b"


def test_encoding_uses_varint_lengths() -> None:
    name = "x" * 200

    assert encode_dependencies([name]) == b"\x01\xc8\x01" + name.encode("utf-8")


def test_digest_matches_known_value() -> None:
    expected = hashlib.sha3_256(b"\x01\x03foo").hexdigest()

    assert config_digest(_config("foo")) == expected
    assert len(expected) == 64


def test_digest_ignores_declaration_order() -> None:
    assert config_digest(_config("a", "b", "c")) == config_digest(_config("c", "a", "b"))
    assert config_digest(_config("a")) != config_digest(_config("a", "b"))


def test_should_rebuild_when_overlay_missing(tmp_path: Path) -> None:
    assert should_rebuild(_config("foo"), tmp_path / ".dtmgr") is True


def test_should_rebuild_when_marker_missing(tmp_path: Path) -> None:
    local_root = tmp_path / ".dtmgr"
    local_root.mkdir()

    assert should_rebuild(_config("foo"), local_root) is True


def test_marker_roundtrip_marks_overlay_current(tmp_path: Path) -> None:
    local_root = tmp_path / ".dtmgr"
    local_root.mkdir()
    config = _config("foo", "bar")

    marker = write_marker(local_root, config)

    assert marker == marker_path(local_root)
    assert marker.read_bytes() == config_digest(config).encode("ascii")
    assert read_marker(local_root) == config_digest(config)
    assert should_rebuild(config, local_root) is False
    assert should_rebuild(_config("foo"), local_root) is True


def test_marker_with_trailing_newline_is_stale(tmp_path: Path) -> None:
    local_root = tmp_path / ".dtmgr"
    local_root.mkdir()
    config = _config("foo")
    marker_path(local_root).write_text(config_digest(config) + "\n", encoding="utf-8")

    assert should_rebuild(config, local_root) is True


def test_unreadable_marker_means_rebuild(tmp_path: Path) -> None:
    local_root = tmp_path / ".dtmgr"
    local_root.mkdir()
    marker_path(local_root).write_bytes(b"\xff\xfe\x00")

    assert read_marker(local_root) is None
    assert should_rebuild(_config("foo"), local_root) is True


def test_should_rebuild_does_not_touch_filesystem(tmp_path: Path) -> None:
    local_root = tmp_path / ".dtmgr"

    should_rebuild(_config("foo"), local_root)

    assert not local_root.exists()


def test_remove_overlay(tmp_path: Path) -> None:
    local_root = tmp_path / ".dtmgr"
    (local_root / "texmf-dist").mkdir(parents=True)
    (local_root / "texmf-dist" / "file").write_text("x", encoding="utf-8")

    assert remove_overlay(local_root) is True
    assert not local_root.exists()
    assert remove_overlay(local_root) is False
