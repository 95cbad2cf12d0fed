# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin client around the ``tlmgr`` and ``kpsewhich`` executables."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from collections.abc import Set as AbstractSet
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any

from pydantic import TypeAdapter, ValidationError

from dtmgr.core.runtime.process import run_command
from dtmgr.errors import (
    CommandExecutionError,
    CommandStatusError,
    MetadataMalformed,
    MetadataUnavailable,
)
from dtmgr.platform.capabilities import PlatformCapability

from .models import PackageRecord

LOGGER = logging.getLogger(__name__)

_RECORDS_ADAPTER: TypeAdapter[list[PackageRecord]] = TypeAdapter(list[PackageRecord])


def decode_records(payload: str | bytes) -> list[PackageRecord]:
    """Decode ``tlmgr info --json`` output into package records.

    Raises:
        MetadataMalformed: If the payload is not valid UTF-8 or not a JSON
            array of package objects.
    """

    try:
        return _RECORDS_ADAPTER.validate_json(payload)
    except (ValidationError, UnicodeDecodeError) as exc:
        raise MetadataMalformed(str(exc)) from exc


class TlmgrClient:
    """Run TeX Live management commands through a platform capability."""

    def __init__(self, capability: PlatformCapability, *, environ: Mapping[str, str] | None = None) -> None:
        self._capability = capability
        self._environ = environ if environ is not None else os.environ

    def _spawn(self, argv: Sequence[str], *, capture_output: bool, text: bool = True) -> CompletedProcess[Any]:
        command, extra_env = self._capability.command(argv)
        env = {**self._environ, **extra_env}
        LOGGER.debug("running %s", " ".join(argv))
        return run_command(command, env=env, check=False, capture_output=capture_output, text=text)

    def _capture_line(self, argv: Sequence[str]) -> str:
        try:
            completed = self._spawn(argv, capture_output=True)
        except OSError as exc:
            raise CommandExecutionError(argv, str(exc)) from exc
        if completed.returncode != 0:
            raise CommandStatusError(argv, completed.returncode)
        return completed.stdout.strip()

    def platform(self) -> str:
        """Return the TeX Live platform identifier (``tlmgr print-platform``)."""

        return self._capture_line(["tlmgr", "print-platform"])

    def texmf_root(self) -> Path:
        """Return the global installation root (``TEXMFROOT``)."""

        return Path(self._capture_line(["kpsewhich", "-var-value=TEXMFROOT"]))

    def install(self, packages: Iterable[str]) -> None:
        """Install ``packages`` into the global root.

        Raises:
            CommandExecutionError: If ``tlmgr`` cannot be spawned.
            CommandStatusError: If the installation fails.
        """

        argv = ["tlmgr", "install", *packages]
        try:
            completed = self._spawn(argv, capture_output=False)
        except OSError as exc:
            raise CommandExecutionError(argv, str(exc)) from exc
        if completed.returncode != 0:
            raise CommandStatusError(argv, completed.returncode)

    def info(self, packages: AbstractSet[str]) -> list[PackageRecord]:
        """Return metadata for every name in ``packages`` with one ``tlmgr`` call.

        Raises:
            MetadataUnavailable: If ``tlmgr`` cannot be spawned or exits non-zero.
            MetadataMalformed: If the output cannot be decoded.
        """

        argv = ["tlmgr", "info", "--json", *sorted(packages)]
        try:
            # Raw bytes; decoding belongs to the JSON validator.
            completed = self._spawn(argv, capture_output=True, text=False)
        except OSError as exc:
            raise MetadataUnavailable(argv, None, str(exc)) from exc
        if completed.returncode != 0:
            raise MetadataUnavailable(argv, completed.returncode)
        return decode_records(completed.stdout)

    __call__ = info


__all__ = ["TlmgrClient", "decode_records"]
