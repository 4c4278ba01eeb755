"""Errors raised by the documentation checker."""

from __future__ import annotations

from pathlib import Path


class DocCheckError(Exception):
    """Base class for documentation checker errors."""


class DocsPathNotFoundError(DocCheckError):
    """Raised when a path given to the checker does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No such file or directory: {path}")
        self.path = path


class UnknownCheckError(DocCheckError):
    """Raised when a check name is not registered."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown check {name!r}; expected one of: {', '.join(known)}"
        )
        self.name = name
        self.known = known


class DocsDecodeError(DocCheckError):
    """Raised when a Markdown file is not valid UTF-8."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path} as UTF-8 ({reason}); re-save it as UTF-8")
        self.path = path
        self.reason = reason
