"""Rule collector: buckets fragments by breakpoint for one compilation unit."""

from __future__ import annotations

from dataclasses import replace

from stratum.errors import UnknownBreakpointError
from stratum.model.fragment import RuleFragment
from stratum.registry.registry import BreakpointRegistry


class RuleCollector:
    """Accumulates rule fragments, one bucket per breakpoint name.

    ``None`` keys the universal bucket.  Buckets are created lazily on first
    submission, so breakpoints nobody targets never exist here at all.
    """

    def __init__(self, registry: BreakpointRegistry) -> None:
        self._registry = registry
        self._buckets: dict[str | None, list[RuleFragment]] = {}
        self._log: list[str | None] = []

    @property
    def registry(self) -> BreakpointRegistry:
        return self._registry

    def submit(self, fragment: RuleFragment) -> RuleFragment:
        """Append *fragment* to its bucket and return the sequenced copy."""
        name = fragment.breakpoint_name
        if name is not None and name not in self._registry:
            raise UnknownBreakpointError(name, component=fragment.component_id)
        bucket = self._buckets.setdefault(name, [])
        stored = replace(fragment, sequence=len(bucket))
        bucket.append(stored)
        self._log.append(name)
        return stored

    def add(
        self, text: str, breakpoint: str | None = None, component: str = ""
    ) -> RuleFragment:
        """Build a fragment from its parts and submit it."""
        return self.submit(
            RuleFragment(text=text, breakpoint_name=breakpoint, component_id=component)
        )

    def bucket_for(self, name: str | None) -> tuple[RuleFragment, ...]:
        """Fragments submitted to *name* (``None``: universal), in order."""
        return tuple(self._buckets.get(name, ()))

    def bucket_names(self) -> list[str | None]:
        """Keys of non-empty buckets, in first-submission order."""
        return list(self._buckets)

    @property
    def submission_log(self) -> list[str | None]:
        """Bucket key of every submission, in arrival order."""
        return list(self._log)

    def __len__(self) -> int:
        return len(self._log)

    def __repr__(self) -> str:
        sizes = {k if k is not None else "*": len(v) for k, v in self._buckets.items()}
        return f"RuleCollector(buckets={sizes})"
