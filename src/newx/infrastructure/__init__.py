"""Process and filesystem collaborators used by the project service."""
