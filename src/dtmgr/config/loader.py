# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load ``dtmgr.toml`` from disk."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from dtmgr.errors import ConfigError

from .models import DtMgrConfig

LOGGER = logging.getLogger(__name__)


def parse_config(payload: Mapping[str, Any], *, source: Path) -> DtMgrConfig:
    """Validate a decoded TOML document into :class:`DtMgrConfig`.

    Args:
        payload: Decoded TOML table.
        source: File the payload came from, used in error messages.

    Returns:
        DtMgrConfig: Validated configuration.

    Raises:
        ConfigError: If the payload does not match the expected schema.
    """

    try:
        return DtMgrConfig.model_validate(dict(payload))
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(source, errors) from exc


def load_config(path: Path) -> DtMgrConfig:
    """Read and validate the configuration stored at ``path``.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or fails
            schema validation.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(path, f"unable to read file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, str(exc)) from exc
    config = parse_config(data, source=path)
    LOGGER.debug("loaded %d declared dependencies from %s", len(config.dependencies), path)
    return config


__all__ = ["load_config", "parse_config"]
