"""Error types raised below the service layer.

Each carries the ``code`` that ends up in :class:`ServiceError`, so the
service can convert any of them without inspecting the concrete type.
"""

from __future__ import annotations

from pathlib import Path


class NewxError(Exception):
    """Base class for project creation failures."""

    code = "NEWX_ERROR"

    def __init__(self, message: str, **detail: object) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class TargetExistsError(NewxError):
    code = "TARGET_EXISTS"


class GeneratorError(NewxError):
    """Base for failures of the external project generator."""

    code = "GENERATOR_FAILED"


class GeneratorLaunchError(GeneratorError):
    """The generator process could not be started."""

    code = "GENERATOR_LAUNCH"


class GeneratorFailedError(GeneratorError):
    """The generator ran but exited with a failure status."""

    code = "GENERATOR_FAILED"

    def __init__(self, message: str, *, returncode: int, stderr: str) -> None:
        super().__init__(message, returncode=returncode, stderr=stderr)
        self.returncode = returncode
        self.stderr = stderr


class TemplateNotFoundError(NewxError):
    code = "TEMPLATE_NOT_FOUND"

    def __init__(self, name: str, candidates: list[Path]) -> None:
        super().__init__(
            f"Template file '{name}' not found",
            template=name,
            candidates=[str(c) for c in candidates],
        )
        self.name = name
        self.candidates = candidates


class TemplateCopyError(NewxError):
    """Reading a template or writing its destination failed."""

    code = "IO_ERROR"
