# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for dtmgr.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from dtmgr.config import DtMgrConfig, load_config, parse_config
from dtmgr.errors import ConfigError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "dtmgr.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_config_reads_dependency_set(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, 'dependencies = ["foo", "bar", "foo"]\n'))

    assert config.dependencies == frozenset({"foo", "bar"})
    assert config.sorted_dependencies() == ("bar", "foo")


def test_load_config_accepts_empty_list(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "dependencies = []\n")).dependencies == frozenset()


def test_load_config_ignores_unknown_keys(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, 'dependencies = ["foo"]\n\n[tool]\nname = "x"\n'))

    assert config.dependencies == frozenset({"foo"})


@pytest.mark.parametrize(
    "content",
    [
        "",
        'dependencies = "foo"\n',
        "dependencies = [1, 2]\n",
        "dependencies = [\n",
    ],
)
def test_load_config_rejects_invalid_documents(tmp_path: Path, content: str) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(ConfigError) as excinfo:
        load_config(path)

    assert excinfo.value.path == path


def test_load_config_reports_unreadable_file(tmp_path: Path) -> None:
    missing = tmp_path / "dtmgr.toml"

    with pytest.raises(ConfigError) as excinfo:
        load_config(missing)

    assert "unable to read file" in excinfo.value.reason


def test_parse_config_names_failing_field(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        parse_config({"dependencies": None}, source=tmp_path / "dtmgr.toml")

    assert excinfo.value.reason.startswith("dependencies")


def test_sorted_dependencies_orders_by_utf8_bytes() -> None:
    config = DtMgrConfig(dependencies=frozenset({"é", "z", "A"}))

    assert config.sorted_dependencies() == ("A", "z", "é")
