"""Exceptions raised while validating answers and scaffolding a project.

Every error derives from :class:`ScaffoldError` so the CLI can turn any of
them into a single human-readable message and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class ValidationError(ScaffoldError):
    """Raised when an answer does not satisfy its field constraint."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class AlreadyExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f'Directory "{self.path.name}" already exists!')


class WriteError(ScaffoldError):
    """Raised when a directory or file of the project could not be written.

    Files written before the failure are left in place.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")
