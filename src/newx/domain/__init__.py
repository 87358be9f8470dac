"""Domain types for project creation requests."""
