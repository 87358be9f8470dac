"""CreationRequest — the parsed, validated form of a ``newx`` invocation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from newx.domain.types import FORMATTING_TEMPLATE, OPTIONAL_TEMPLATES, ProjectKind


class CreationRequest(BaseModel):
    """What to create, frozen after construction.

    Attributes:
        project_name: Directory name for the new project, relative to CWD.
        kind: Binary (default) or library crate.
        include_clippy_config: Also place every optional template
            (today only ``clippy.toml``).
    """

    model_config = {"frozen": True}

    project_name: str = Field(min_length=1)
    kind: ProjectKind = ProjectKind.BIN
    include_clippy_config: bool = False

    @classmethod
    def from_flags(
        cls,
        project_name: str,
        *,
        lib: bool = False,
        clippy: bool = False,
        all_: bool = False,
    ) -> CreationRequest:
        """Build a request from raw CLI flags (``--all`` implies ``--clippy``)."""
        return cls(
            project_name=project_name,
            kind=ProjectKind.LIB if lib else ProjectKind.BIN,
            include_clippy_config=clippy or all_,
        )

    @property
    def templates(self) -> list[str]:
        """Template names to place, in order."""
        names = [FORMATTING_TEMPLATE]
        if self.include_clippy_config:
            names.extend(OPTIONAL_TEMPLATES)
        return names
