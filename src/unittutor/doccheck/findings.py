"""Findings produced by the documentation checks and the report that collects them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class Severity(str, Enum):
    """How serious a finding is.

    Errors fail ``unittutor docs check``; warnings only do so with ``--strict``.
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, order=True)
class Finding:
    """A single problem at a location in a Markdown file.

    Findings order by path, then line, so reports read top to bottom.
    """

    path: Path
    line: int
    check: str
    severity: Severity
    message: str

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "path": self.path.as_posix(),
            "line": self.line,
            "check": self.check,
            "severity": self.severity.value,
            "message": self.message,
        }

    def __str__(self) -> str:
        return (
            f"{self.path.as_posix()}:{self.line}: "
            f"{self.severity.value} [{self.check}] {self.message}"
        )


@dataclass
class Report:
    """All findings from one run, plus the files that were checked."""

    files: list[Path] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)

    def extend(self, findings: Iterable[Finding]) -> None:
        """Add ``findings`` to the report."""
        self.findings.extend(findings)

    @property
    def errors(self) -> list[Finding]:
        """Findings with :attr:`Severity.ERROR`, sorted."""
        return sorted(f for f in self.findings if f.severity is Severity.ERROR)

    @property
    def warnings(self) -> list[Finding]:
        """Findings with :attr:`Severity.WARNING`, sorted."""
        return sorted(f for f in self.findings if f.severity is Severity.WARNING)

    @property
    def ok(self) -> bool:
        """True when no errors were found (warnings allowed)."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation with a summary block."""
        return {
            "files": [p.as_posix() for p in self.files],
            "findings": [f.to_dict() for f in sorted(self.findings)],
            "summary": {
                "files": len(self.files),
                "errors": len(self.errors),
                "warnings": len(self.warnings),
                "ok": self.ok,
            },
        }
