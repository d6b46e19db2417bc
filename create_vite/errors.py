"""Exceptions raised while collecting answers and scaffolding a project.

Only fatal conditions are modelled as exceptions.  An unknown ``--template``
value or an invalid package name is recovered inside the prompt flow, and a
failing delegated generator simply hands its exit status back to the caller.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Raised when a scaffolding run cannot continue."""


class UserCancelled(ScaffoldError):
    """Raised when the user aborts the run (prompt interrupt or overwrite cancel)."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template has no directory to copy from."""

    def __init__(self, template_id: str, path: Path) -> None:
        self.template_id = template_id
        self.path = path
        super().__init__(f"Template '{template_id}' not found at {path}")
