# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess is only reached through run_command, which normalises
# arguments and never enables ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess


@dataclass(slots=True)
class CommandOptions:
    """Command execution options shared by the tlmgr client and tool runner."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    text: bool = True


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _normalize_args(args: Sequence[str], env: Mapping[str, str] | None) -> list[str]:
    """Normalise the subprocess argument sequence.

    The executable is looked up on the ``PATH`` the child will see, so a
    rewritten ``PATH`` selects tools from the overlay rather than the caller's
    environment.

    Args:
        args: Raw command arguments supplied by the caller.
        env: Environment handed to the child, or ``None`` to inherit.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be located.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    search_path = env.get("PATH") if env is not None else None
    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
    **overrides: object,
) -> CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    Args:
        args: Command and arguments to execute.
        options: Base execution options; defaults to :class:`CommandOptions`.
        **overrides: Individual option overrides (``env=...``, ``check=...``).

    Returns:
        CompletedProcess[str]: Completed process handle.

    Raises:
        SubprocessExecutionError: When ``check`` is true and the command fails.
        OSError: When the process cannot be spawned.
    """

    base = options or CommandOptions()
    unknown = sorted(key for key in overrides if key not in CommandOptions.__slots__)
    if unknown:
        raise TypeError(f"Unknown command option(s): {', '.join(unknown)}")
    effective = CommandOptions(
        cwd=overrides.get("cwd", base.cwd),  # type: ignore[arg-type]
        env=overrides.get("env", base.env),  # type: ignore[arg-type]
        check=bool(overrides.get("check", base.check)),
        capture_output=bool(overrides.get("capture_output", base.capture_output)),
        text=bool(overrides.get("text", base.text)),
    )
    normalized = _normalize_args(args, effective.env)

    # Bandit: commands are assembled from fixed tool names and user-supplied
    # argument lists; no shell expansion takes place.
    completed: CompletedProcess[str] = subprocess.run(  # nosec B603
        normalized,
        cwd=str(effective.cwd) if effective.cwd is not None else None,
        env=dict(effective.env) if effective.env is not None else None,
        check=False,
        capture_output=effective.capture_output,
        text=effective.text,
    )

    if effective.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


__all__ = ["CommandOptions", "SubprocessExecutionError", "run_command"]
