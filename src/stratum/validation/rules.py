"""Authoring checks for a collected compilation unit.

Each rule is a function taking a RuleCollector and returning a list of
Diagnostic objects.  Hard failures (unknown breakpoints, duplicate ranks)
never reach these checks; they are raised at registration or submission.
"""

from __future__ import annotations

import re

from stratum.collector.collector import RuleCollector
from stratum.model.breakpoint import BreakpointKind
from stratum.model.diagnostic import Diagnostic, Severity


# ---------------------------------------------------------------------------
# Wrapper integrity (ERROR severity)
# ---------------------------------------------------------------------------

_IGNORED = re.compile(r"/\*.*?\*/|\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'", re.DOTALL)


def _brace_imbalance(text: str) -> int:
    """Net unmatched braces in *text*; a stray ``}`` counts as -1 immediately."""
    depth = 0
    for char in _IGNORED.sub("", text):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                return depth
    return depth


def check_brace_balance(collector: RuleCollector) -> list[Diagnostic]:
    """Breakpoint fragments must open and close their own braces.

    Modern output wraps each breakpoint bucket in ``@media ... { }``; an
    unmatched brace in any fragment closes that wrapper early or swallows
    the blocks after it.
    """
    diagnostics: list[Diagnostic] = []
    for name in collector.bucket_names():
        if name is None:
            continue
        for fragment in collector.bucket_for(name):
            imbalance = _brace_imbalance(fragment.text)
            if imbalance == 0:
                continue
            side = "closing" if imbalance < 0 else "opening"
            diagnostics.append(
                Diagnostic(
                    rule="check_brace_balance",
                    severity=Severity.ERROR,
                    message=f"Fragment #{fragment.sequence} in '{name}' has an unmatched "
                    f"{side} brace and would break its @media block.",
                    breakpoint=name,
                    component=fragment.component_id or None,
                    fix="Balance the braces within the fragment.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Cascade order (WARNING severity)
# ---------------------------------------------------------------------------


def check_authoring_order(collector: RuleCollector) -> list[Diagnostic]:
    """Cross-breakpoint authoring order should match rank order.

    Output places blocks by rank, so a breakpoint first authored after a
    higher-ranked one ends up earlier in the cascade than it was written.
    """
    registry = collector.registry
    diagnostics: list[Diagnostic] = []
    seen: set[str | None] = set()
    highest = None
    saw_breakpoint = False
    for name in collector.submission_log:
        if name in seen:
            continue
        seen.add(name)
        if name is None:
            if saw_breakpoint:
                diagnostics.append(
                    Diagnostic(
                        rule="check_authoring_order",
                        severity=Severity.WARNING,
                        message="Universal rules were first authored after breakpoint "
                        "rules but are emitted before every breakpoint block.",
                        fix="Author universal rules before any breakpoint rules.",
                    )
                )
            continue
        saw_breakpoint = True
        bp = registry.resolve(name)
        if highest is not None and bp.rank < highest.rank:
            diagnostics.append(
                Diagnostic(
                    rule="check_authoring_order",
                    severity=Severity.WARNING,
                    message=f"Breakpoint '{bp.name}' (rank {bp.rank}) was first authored "
                    f"after '{highest.name}' (rank {highest.rank}) but is emitted before it.",
                    breakpoint=bp.name,
                    fix=f"Author '{bp.name}' rules before '{highest.name}' rules if "
                    "cascade precedence between them matters.",
                )
            )
        elif highest is None or bp.rank > highest.rank:
            highest = bp
    return diagnostics


def check_empty_fragments(collector: RuleCollector) -> list[Diagnostic]:
    """Fragments should carry some rule text."""
    diagnostics: list[Diagnostic] = []
    for name in collector.bucket_names():
        for fragment in collector.bucket_for(name):
            if not fragment.text.strip():
                diagnostics.append(
                    Diagnostic(
                        rule="check_empty_fragments",
                        severity=Severity.WARNING,
                        message=f"Fragment #{fragment.sequence} in bucket "
                        f"'{name or '*'}' has no rule text.",
                        breakpoint=name,
                        component=fragment.component_id or None,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Informational rules (INFO severity)
# ---------------------------------------------------------------------------


def check_unused_breakpoints(collector: RuleCollector) -> list[Diagnostic]:
    """Report registered breakpoints that received no fragments."""
    return [
        Diagnostic(
            rule="check_unused_breakpoints",
            severity=Severity.INFO,
            message=f"Breakpoint '{bp.name}' has no rules and is omitted from output.",
            breakpoint=bp.name,
        )
        for bp in collector.registry.ordered_all()
        if not collector.bucket_for(bp.name)
    ]


def check_hidpi_below_cutoff(collector: RuleCollector) -> list[Diagnostic]:
    """Hi-dpi rules inside the legacy rank range are still left out of legacy output."""
    registry = collector.registry
    cutoff = registry.cutoff_rank
    diagnostics: list[Diagnostic] = []
    for bp in registry.ordered_all():
        if bp.kind is BreakpointKind.BASE_WIDTH:
            continue
        if cutoff is not None and bp.rank > cutoff:
            continue
        if collector.bucket_for(bp.name):
            diagnostics.append(
                Diagnostic(
                    rule="check_hidpi_below_cutoff",
                    severity=Severity.INFO,
                    message=f"Hi-dpi breakpoint '{bp.name}' ranks within the legacy "
                    "cutoff but is never included in legacy output.",
                    breakpoint=bp.name,
                )
            )
    return diagnostics


ALL_RULES = [
    check_brace_balance,
    check_authoring_order,
    check_empty_fragments,
    check_unused_breakpoints,
    check_hidpi_below_cutoff,
]
