"""Run authoring checks over a collected compilation unit."""

from __future__ import annotations

from typing import Callable

from stratum.collector.collector import RuleCollector
from stratum.errors import StratumError
from stratum.model.diagnostic import Diagnostic, Severity
from stratum.validation.rules import ALL_RULES

RuleFunc = Callable[[RuleCollector], list[Diagnostic]]

_SEVERITY_ORDER = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}


class ValidationError(StratumError):
    """Collected fragments would compile into a broken stylesheet."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = [d for d in diagnostics if d.is_error]
        buckets = list(dict.fromkeys(d.breakpoint or "*" for d in self.diagnostics))
        super().__init__(
            f"{len(self.diagnostics)} blocking diagnostic(s) in "
            f"{', '.join(buckets)}: " + "; ".join(d.message for d in self.diagnostics)
        )


def validate(
    collector: RuleCollector, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run every authoring check against *collector*.

    Diagnostics come back most severe first; within a severity, universal
    findings lead and breakpoint findings follow in registry rank order, the
    same order the blocks are emitted in.
    """
    registry = collector.registry

    def position(diag: Diagnostic) -> tuple[int, int, int]:
        if diag.breakpoint is None or diag.breakpoint not in registry:
            return (_SEVERITY_ORDER[diag.severity], 0, 0)
        return (_SEVERITY_ORDER[diag.severity], 1, registry.resolve(diag.breakpoint).rank)

    found: list[Diagnostic] = []
    for rule in (*ALL_RULES, *(extra_rules or ())):
        found.extend(rule(collector))
    return sorted(found, key=position)


def validate_or_raise(
    collector: RuleCollector, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on any ERROR.

    Returns the remaining warnings and info diagnostics otherwise.
    """
    diagnostics = validate(collector, extra_rules=extra_rules)
    if any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics
