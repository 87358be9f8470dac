"""ProjectService — scaffold a project and place configuration templates.

Pipeline: PRE-CHECK → GENERATE → PLACE rustfmt.toml → PLACE clippy.toml → REPORT

Every step aborts the run on failure. Nothing is rolled back: if template
placement fails, the generated project stays on disk.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from newx.domain.errors import NewxError, TargetExistsError
from newx.domain.request import CreationRequest
from newx.infrastructure.generator import CargoGenerator, ProjectGenerator
from newx.infrastructure.templates import TemplateResolver, copy_template
from newx.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class ProjectService:
    """Creates new projects from a :class:`CreationRequest`.

    Args:
        generator: Scaffolds the base project. Defaults to ``cargo new``.
        resolver: Locates template files.
        reporter: Called with a human-readable line after each completed
            step. ``None`` collects steps silently.
    """

    def __init__(
        self,
        generator: ProjectGenerator | None = None,
        resolver: TemplateResolver | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._generator = generator or CargoGenerator()
        self._resolver = resolver or TemplateResolver()
        self._reporter = reporter

    def create_project(self, request: CreationRequest) -> ServiceResult:
        """Run the creation pipeline for *request*."""
        op = "create_project"
        t0 = time.perf_counter()
        name = request.project_name
        project_dir = Path(name)
        steps: list[str] = []
        files_added: list[str] = []

        try:
            # ── PRE-CHECK ──
            # is_symlink() also catches dangling links, which exists() misses.
            if project_dir.exists() or project_dir.is_symlink():
                raise TargetExistsError(f"Directory '{name}' already exists", project=name)

            # ── GENERATE ──
            self._generator.generate(name, request.kind)
            self._step(steps, f"Created new Rust project: {name}")

            # ── PLACE TEMPLATES ──
            for template in request.templates:
                resolution = self._resolver.resolve(template)
                dest = copy_template(resolution, project_dir)
                files_added.append(str(dest))
                self._step(steps, f"Added {template} configuration")
        except NewxError as exc:
            logger.debug("%s failed at %s: %s", op, exc.code, exc.message)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=exc.code,
                    message=exc.message,
                    detail={"project": name, **exc.detail, "completed_steps": steps},
                ),
            )

        message = f"Project '{name}' created successfully!"
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "project": name,
                "path": str(project_dir),
                "kind": str(request.kind),
                "files_added": files_added,
                "steps": steps,
                "message": message,
            },
            meta={"duration_ms": round((time.perf_counter() - t0) * 1000, 2)},
        )

    def _step(self, steps: list[str], line: str) -> None:
        steps.append(line)
        logger.debug(line)
        if self._reporter is not None:
            self._reporter(line)
