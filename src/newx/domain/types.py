"""Project kinds and the well-known configuration templates."""

from __future__ import annotations

from enum import StrEnum


class ProjectKind(StrEnum):
    """Kind of crate the generator scaffolds."""

    BIN = "bin"
    LIB = "lib"


# Always placed in a new project.
FORMATTING_TEMPLATE = "rustfmt.toml"

# Placed on request (``--clippy``).
LINT_TEMPLATE = "clippy.toml"

# Every optional template, in placement order. ``--all`` selects all of them.
OPTIONAL_TEMPLATES: tuple[str, ...] = (LINT_TEMPLATE,)
