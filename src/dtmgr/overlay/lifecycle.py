# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build, check, and use a project's overlay.

:class:`OverlayController` owns the ordering of a rebuild: check the marker,
wipe a stale overlay, install and resolve packages, materialize the file tree,
run the TeX Live post-install steps inside the overlay, then write the marker.
The marker is written last, so any failure leaves an overlay the next run
will rebuild from scratch.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from dtmgr.config.models import DtMgrConfig
from dtmgr.core.config.constants import POST_INSTALL_STEPS, TEXMF_CONFIG_DIR, TEXMF_VAR_DIR
from dtmgr.core.runtime.process import run_command
from dtmgr.errors import CommandExecutionError, DirectoryCreationFailed
from dtmgr.platform.capabilities import PlatformCapability
from dtmgr.platform.workspace import overlay_dir
from dtmgr.tlmgr.client import TlmgrClient

from .environment import build_tool_env
from .marker import config_digest, read_marker, remove_overlay, should_rebuild, write_marker
from .materializer import MaterializeSummary, materialize
from .resolver import default_seeds, resolve_closure

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class OverlayState(str, Enum):
    """Observed state of a project's overlay."""

    MISSING = "missing"
    STALE = "stale"
    UP_TO_DATE = "up-to-date"


@dataclass(frozen=True, slots=True)
class OverlayStatus:
    """Read-only snapshot of an overlay compared with the declared config."""

    overlay: Path
    state: OverlayState
    expected_digest: str
    stored_digest: str | None


@dataclass(slots=True)
class InstallOutcome:
    """Result of :meth:`OverlayController.install`."""

    overlay: Path
    rebuilt: bool
    packages: tuple[str, ...] = ()
    summary: MaterializeSummary = field(default_factory=MaterializeSummary)


def exit_code_from_returncode(returncode: int) -> int:
    """Map a child's return code to this process's exit status.

    Negative return codes (termination by signal) have no exit code and map
    to a generic failure; other codes are truncated to a byte.
    """

    if returncode < 0:
        return 1
    return returncode & 0xFF


class OverlayController:
    """Coordinate overlay construction and tool execution for one project."""

    def __init__(
        self,
        project_root: Path,
        capability: PlatformCapability,
        *,
        tlmgr: TlmgrClient | None = None,
        environ: Mapping[str, str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._project_root = project_root
        self._capability = capability
        self._environ = environ if environ is not None else os.environ
        self._tlmgr = tlmgr or TlmgrClient(capability, environ=self._environ)
        self._on_progress = on_progress

    @property
    def overlay(self) -> Path:
        """Return the overlay directory managed by this controller."""

        return overlay_dir(self._project_root)

    def _progress(self, message: str) -> None:
        LOGGER.debug(message)
        if self._on_progress is not None:
            self._on_progress(message)

    def status(self, config: DtMgrConfig) -> OverlayStatus:
        """Compare the overlay on disk against ``config`` without modifying it."""

        expected = config_digest(config)
        stored = read_marker(self.overlay)
        if stored is None:
            state = OverlayState.STALE if self.overlay.is_dir() else OverlayState.MISSING
        elif stored == expected:
            state = OverlayState.UP_TO_DATE
        else:
            state = OverlayState.STALE
        return OverlayStatus(overlay=self.overlay, state=state, expected_digest=expected, stored_digest=stored)

    def install(self, config: DtMgrConfig) -> InstallOutcome:
        """Rebuild the overlay when ``config`` differs from the recorded marker.

        Returns:
            InstallOutcome: ``rebuilt`` is ``False`` when the overlay was already
            up to date, in which case nothing on disk was touched.

        A post-install step that exits non-zero is logged and skipped; only a
        step that cannot be spawned aborts the rebuild.

        Raises:
            DtMgrError: Any failure during the rebuild; the marker is not written.
        """

        local_root = self.overlay
        if not should_rebuild(config, local_root):
            return InstallOutcome(overlay=local_root, rebuilt=False)

        if remove_overlay(local_root):
            self._progress(f"Removed stale overlay at {local_root}")

        global_root = self._tlmgr.texmf_root()
        platform = self._tlmgr.platform()
        self._progress(f"Using TeX Live at {global_root} ({platform})")

        _make_directory(local_root)

        declared = config.sorted_dependencies()
        if declared:
            self._progress(f"Installing {len(declared)} package(s) globally")
            self._tlmgr.install(declared)

        seeds = default_seeds(config, self._capability)
        resolved = resolve_closure(seeds, platform, self._tlmgr.info)
        self._progress(f"Resolved {len(resolved)} package(s)")

        summary = materialize(global_root, local_root, self._capability, platform, resolved)
        self._progress(f"Linked {summary.files} file(s) into {local_root}")

        _make_directory(local_root / TEXMF_CONFIG_DIR)
        _make_directory(local_root / TEXMF_VAR_DIR)

        env = build_tool_env(self._environ, global_root, local_root, self._capability)
        for step in POST_INSTALL_STEPS:
            self._progress(f"Running {' '.join(step)}")
            returncode = self._spawn(step, env)
            if returncode != 0:
                LOGGER.warning("%s exited with status %d", " ".join(step), returncode)
                self._progress(f"{' '.join(step)} exited with status {returncode}; continuing")

        write_marker(local_root, config)
        return InstallOutcome(
            overlay=local_root,
            rebuilt=True,
            packages=tuple(sorted(resolved)),
            summary=summary,
        )

    def tool_env(self) -> dict[str, str]:
        """Return the environment a tool should run with inside the overlay."""

        global_root = self._tlmgr.texmf_root()
        return build_tool_env(self._environ, global_root, self.overlay, self._capability)

    def run(self, argv: Sequence[str]) -> int:
        """Run ``argv`` against the overlay and return the exit code to use.

        Raises:
            CommandExecutionError: If the command cannot be spawned.
        """

        return exit_code_from_returncode(self._spawn(argv, self.tool_env()))

    def _spawn(self, argv: Sequence[str], env: Mapping[str, str]) -> int:
        command, extra_env = self._capability.command(argv)
        child_env = {**env, **extra_env}
        try:
            completed = run_command(command, env=child_env, check=False)
        except OSError as exc:
            raise CommandExecutionError(argv, str(exc)) from exc
        return completed.returncode


def _make_directory(directory: Path) -> None:
    try:
        directory.mkdir()
    except OSError as exc:
        raise DirectoryCreationFailed(directory, exc) from exc


__all__ = [
    "InstallOutcome",
    "OverlayController",
    "OverlayState",
    "OverlayStatus",
    "exit_code_from_returncode",
]
