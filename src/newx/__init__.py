"""newx — create Rust projects with best practice configuration files."""

__version__ = "0.1.0"
