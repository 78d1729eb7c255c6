"""Diagnostic model: structured findings about a compilation unit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about registered breakpoints or submitted fragments.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        breakpoint: The breakpoint involved, if applicable.
        component: The contributing component, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    breakpoint: str | None = None
    component: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.breakpoint:
            location = f" [breakpoint={self.breakpoint}]"
        elif self.component:
            location = f" [component={self.component}]"
        return f"{self.severity.value}{location}: {self.message}"
