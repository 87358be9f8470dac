"""External project generator invoked across a process boundary.

The service only depends on the :class:`ProjectGenerator` protocol, so
tests substitute a fake instead of spawning ``cargo``.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from newx.domain.errors import GeneratorFailedError, GeneratorLaunchError
from newx.domain.types import ProjectKind

logger = logging.getLogger(__name__)


class ProjectGenerator(Protocol):
    """Scaffolds the base project directory.

    Raises :class:`~newx.domain.errors.GeneratorError` on failure.
    """

    def generate(self, name: str, kind: ProjectKind) -> None: ...


class CargoGenerator:
    """Runs ``cargo new <name> [--lib]`` and waits for it to exit.

    No timeout: a hung generator hangs the tool.
    """

    def __init__(self, program: str = "cargo") -> None:
        self._program = program

    def command(self, name: str, kind: ProjectKind) -> list[str]:
        """Build the argument vector for *name* and *kind*."""
        args = [self._program, "new", name]
        if kind is ProjectKind.LIB:
            args.append("--lib")
        return args

    def generate(self, name: str, kind: ProjectKind) -> None:
        args = self.command(name, kind)
        logger.debug("Running generator: %s", " ".join(args))
        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            msg = f"Failed to execute {self._program} new command: {exc}"
            raise GeneratorLaunchError(msg, program=self._program) from exc

        if proc.returncode != 0:
            stderr = proc.stderr or ""
            logger.debug("Generator exited with status %d", proc.returncode)
            raise GeneratorFailedError(
                f"{self._program} new failed: {stderr.strip()}",
                returncode=proc.returncode,
                stderr=stderr,
            )
