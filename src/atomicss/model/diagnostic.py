"""Diagnostic model: structured messages produced while compiling styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a style definition.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        key: The style key path involved (``"color"``, ``":hover_color"``), if any.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    key: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [key={self.key}]" if self.key else ""
        return f"{self.severity.value}{location}: {self.message}"


def error(rule: str, message: str, key: str | None = None, fix: str | None = None) -> Diagnostic:
    return Diagnostic(rule=rule, severity=Severity.ERROR, message=message, key=key, fix=fix)


def warning(rule: str, message: str, key: str | None = None, fix: str | None = None) -> Diagnostic:
    return Diagnostic(rule=rule, severity=Severity.WARNING, message=message, key=key, fix=fix)
