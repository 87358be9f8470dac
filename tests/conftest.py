"""Shared pytest fixtures and test helpers for newx tests."""

from __future__ import annotations

import logging
import stat
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from newx.domain.errors import GeneratorFailedError, GeneratorLaunchError
from newx.domain.types import ProjectKind

RUSTFMT_CONTENT = 'edition = "2021"\nmax_width = 100\n'
CLIPPY_CONTENT = 'msrv = "1.74"\r\ntoo-many-arguments-threshold = 7\n'


class FakeGenerator:
    """In-process stand-in for ``cargo new``.

    Creates the project directory on success, like the real generator.
    """

    def __init__(self, *, stderr: str | None = None, launch_error: bool = False) -> None:
        self.calls: list[tuple[str, ProjectKind]] = []
        self._stderr = stderr
        self._launch_error = launch_error

    def generate(self, name: str, kind: ProjectKind) -> None:
        self.calls.append((name, kind))
        if self._launch_error:
            raise GeneratorLaunchError("Failed to execute cargo new command: not found")
        if self._stderr is not None:
            raise GeneratorFailedError(
                f"cargo new failed: {self._stderr}", returncode=101, stderr=self._stderr
            )
        (Path(name) / "src").mkdir(parents=True)
        (Path(name) / "Cargo.toml").write_text(f'[package]\nname = "{name}"\n', encoding="utf-8")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep host config and the real executable location out of every test.

    ``argv[0]`` points at ``<tmp>/prefix/bin/newx`` so the executable-relative
    template candidate is ``<tmp>/prefix/templates/<name>``, which tests
    populate explicitly when they need it.
    """
    for var in ("NEWX_CONFIG", "NEWX_GENERATOR__PROGRAM", "NEWX_JSON_OUTPUT", "NEWX_QUIET"):
        monkeypatch.delenv(var, raising=False)
    exe = tmp_path / "prefix" / "bin" / "newx"
    monkeypatch.setattr(sys, "argv", [str(exe)])

    # The CLI reconfigures logging onto CliRunner streams; undo that afterwards.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    newx_level = logging.getLogger("newx").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("newx").setLevel(newx_level)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory; CWD is changed into it."""
    ws = tmp_path / "ws"
    ws.mkdir()
    monkeypatch.chdir(ws)
    return ws


def write_templates(root: Path) -> Path:
    """Create ``<root>/templates/`` with both well-known templates."""
    templates = root / "templates"
    templates.mkdir(parents=True, exist_ok=True)
    (templates / "rustfmt.toml").write_bytes(RUSTFMT_CONTENT.encode("utf-8"))
    (templates / "clippy.toml").write_bytes(CLIPPY_CONTENT.encode("utf-8"))
    return templates


@pytest.fixture
def cwd_templates(workspace: Path) -> Path:
    """Development layout: ``./templates/`` in the working directory."""
    return write_templates(workspace)


@pytest.fixture
def fake_cargo(tmp_path: Path) -> Path:
    """A shell script standing in for ``cargo``.

    Records its arguments in ``<tmp>/cargo-args`` and creates the project
    directory. Fails with stderr when the project name starts with ``fail``.
    """
    script = tmp_path / "fake-bin" / "cargo"
    script.parent.mkdir()
    log = tmp_path / "cargo-args"
    script.write_text(
        "#!/bin/sh\n"
        f'echo "$@" >> "{log}"\n'
        'case "$2" in\n'
        '  fail*) echo "error: destination is not writable" >&2; exit 101 ;;\n'
        "esac\n"
        'mkdir -p "$2/src"\n'
        "exit 0\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def recorded_cargo_args(tmp_path: Path) -> list[str]:
    log = tmp_path / "cargo-args"
    if not log.exists():
        return []
    return log.read_text(encoding="utf-8").splitlines()
