"""Diagnostic model: structured lint findings about class lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Replacement:
    """Replace ``source[start:end]`` with *text*."""

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding about a class list.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        line: 1-based source line of the offending text.
        column: 0-based source column of the offending text.
        token: The offending class, if the finding is about one class.
        first: The earlier class a duplicate collides with.
        fix: Source replacement that resolves the finding, if available.
    """

    rule: str
    severity: Severity
    message: str
    line: int
    column: int
    token: str | None = None
    first: str | None = None
    fix: Replacement | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.severity.value} [{self.rule}] {self.message}"
