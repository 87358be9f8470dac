"""Template lookup and verbatim placement into a new project.

Lookup tries an ordered list of candidate strategies and keeps the first
path that exists:

1. ``<executable dir>/../templates/<name>``: installed layout, where the
   ``templates/`` directory ships next to ``bin/``.
2. ``templates/<name>`` under the working directory: development layout.

Templates are copied as-is. There is no variable substitution.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Protocol

from newx.domain.errors import TemplateCopyError, TemplateNotFoundError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = "templates"


class CandidateStrategy(Protocol):
    """Maps a template name to a candidate path, which may not exist."""

    label: ClassVar[str]

    def __call__(self, name: str) -> Path: ...


@dataclass(frozen=True)
class TemplateResolution:
    """A located template file."""

    name: str
    path: Path
    strategy: str


def current_executable() -> Path:
    """Path of the running program (the console script, not the interpreter).

    Falls back to the interpreter when ``argv[0]`` is empty, as it is in an
    embedded or interactive session.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    return Path(argv0 or sys.executable).resolve()


@dataclass(frozen=True)
class ExecutableRelative:
    """Candidate ``<exe dir>/../templates/<name>``."""

    label: ClassVar[str] = "executable"

    executable: Path | None = None

    def __call__(self, name: str) -> Path:
        exe = self.executable if self.executable is not None else current_executable()
        return exe.parent.parent / TEMPLATES_DIR / name


@dataclass(frozen=True)
class CwdRelative:
    """Candidate ``templates/<name>`` under *cwd* (default: the process CWD)."""

    label: ClassVar[str] = "cwd"

    cwd: Path | None = None

    def __call__(self, name: str) -> Path:
        base = self.cwd if self.cwd is not None else Path()
        return base / TEMPLATES_DIR / name


def default_strategies() -> tuple[CandidateStrategy, ...]:
    return (ExecutableRelative(), CwdRelative())


class TemplateResolver:
    """Resolve template names against an ordered list of strategies."""

    def __init__(self, strategies: Sequence[CandidateStrategy] | None = None) -> None:
        self._strategies = tuple(strategies) if strategies is not None else default_strategies()

    def resolve(self, name: str) -> TemplateResolution:
        """Return the first existing candidate for *name*.

        Raises:
            TemplateNotFoundError: No candidate exists.
        """
        tried: list[Path] = []
        for strategy in self._strategies:
            path = strategy(name)
            tried.append(path)
            if path.exists():
                logger.debug("Resolved template %s via %s: %s", name, strategy.label, path)
                return TemplateResolution(name=name, path=path, strategy=strategy.label)
            logger.debug("Template candidate missing: %s", path)
        raise TemplateNotFoundError(name, tried)


def copy_template(resolution: TemplateResolution, project_dir: Path) -> Path:
    """Copy a resolved template to ``<project_dir>/<name>``, overwriting.

    Contents are read and written as UTF-8 with newline translation
    disabled, so the destination is byte-identical to the source.

    Raises:
        TemplateCopyError: Reading the template or writing the file failed.
    """
    src = resolution.path
    try:
        with src.open(encoding="utf-8", newline="") as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read template file: {src}: {exc}"
        raise TemplateCopyError(msg, path=str(src)) from exc

    dest = project_dir / resolution.name
    try:
        with dest.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        msg = f"Failed to write file: {dest}: {exc}"
        raise TemplateCopyError(msg, path=str(dest)) from exc

    logger.debug("Wrote %s (%d chars)", dest, len(content))
    return dest
