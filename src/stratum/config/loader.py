"""Load breakpoint registries and fragment manifests from JSON.

Registry file::

    {
      "cutoff_rank": "768up",
      "breakpoints": [
        {"name": "320up", "rank": 1, "kind": "base-width", "width": 320},
        {"name": "768up", "rank": 2, "kind": "base-width", "width": 768},
        {"name": "all2x", "rank": 3, "kind": "hi-dpi-only"},
        {"name": "768up2x", "rank": 4, "kind": "width+hi-dpi", "paired_with": "768up"}
      ]
    }

Fragment manifest::

    {"fragments": [{"component": "nav", "breakpoint": "768up", "text": ".nav {}"}]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from stratum.errors import InvalidBreakpointError, ManifestError, StratumError
from stratum.model.breakpoint import Breakpoint, BreakpointKind, WidthBound
from stratum.model.fragment import RuleFragment
from stratum.registry.registry import BreakpointRegistry

__all__ = ["build_registry", "load_registry", "parse_fragments", "load_fragments"]

_BOUND_ALIASES = {
    "min": WidthBound.MIN,
    "min-width": WidthBound.MIN,
    "max": WidthBound.MAX,
    "max-width": WidthBound.MAX,
}


def _read_json(path: Path, error: type[StratumError]) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise error(f"{path}: invalid JSON ({exc})") from exc


def _pick(entry: dict[str, Any], *keys: str) -> Any:
    """First present value among *keys* (snake_case and camelCase spellings)."""
    for key in keys:
        if key in entry:
            return entry[key]
    return None


def _parse_breakpoint(entry: Any, index: int) -> Breakpoint:
    if not isinstance(entry, dict):
        raise InvalidBreakpointError(f"breakpoints[{index}] must be an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise InvalidBreakpointError(f"breakpoints[{index}] needs a string 'name'")
    rank = entry.get("rank")
    if not isinstance(rank, int) or isinstance(rank, bool):
        raise InvalidBreakpointError(f"Breakpoint '{name}' needs an integer 'rank'", name=name)

    raw_kind = entry.get("kind", BreakpointKind.BASE_WIDTH.value)
    try:
        kind = BreakpointKind(raw_kind)
    except ValueError:
        valid = ", ".join(k.value for k in BreakpointKind)
        raise InvalidBreakpointError(
            f"Breakpoint '{name}' has unknown kind {raw_kind!r} (expected one of: {valid})",
            name=name,
        ) from None

    params = entry.get("predicateParams") or entry.get("predicate_params") or {}
    width = _pick(entry, "width") if "width" in entry else _pick(params, "width")
    raw_bound = _pick(entry, "bound") or _pick(params, "bound") or "min-width"
    bound = _BOUND_ALIASES.get(str(raw_bound).lower())
    if bound is None:
        raise InvalidBreakpointError(
            f"Breakpoint '{name}' has unknown bound {raw_bound!r}", name=name
        )
    if width is not None and (not isinstance(width, int) or isinstance(width, bool)):
        raise InvalidBreakpointError(f"Breakpoint '{name}' width must be an integer", name=name)

    return Breakpoint(
        name=name,
        rank=rank,
        kind=kind,
        width=width,
        bound=bound,
        paired_with=_pick(entry, "paired_with", "pairedWith"),
    )


def build_registry(data: dict[str, Any], freeze: bool = True) -> BreakpointRegistry:
    """Build a registry from a decoded configuration mapping.

    Breakpoints are registered in list order, so a width+hi-dpi entry must
    come after the base it pairs with.  The cutoff may be an integer rank or
    the name of a registered breakpoint.
    """
    if not isinstance(data, dict):
        raise InvalidBreakpointError("Configuration must be a JSON object")
    entries = data.get("breakpoints")
    if not isinstance(entries, list):
        raise InvalidBreakpointError("Configuration needs a 'breakpoints' list")

    registry = BreakpointRegistry()
    for index, entry in enumerate(entries):
        registry.register(_parse_breakpoint(entry, index))

    cutoff = _pick(data, "cutoff_rank", "cutoffRank", "legacy_cutoff")
    if isinstance(cutoff, str):
        cutoff = registry.resolve(cutoff).rank
    elif cutoff is not None and (not isinstance(cutoff, int) or isinstance(cutoff, bool)):
        raise InvalidBreakpointError(f"Cutoff must be a rank or breakpoint name, got {cutoff!r}")
    registry.set_cutoff(cutoff)

    if freeze:
        registry.freeze()
    return registry


def load_registry(path: str | Path) -> BreakpointRegistry:
    """Read a registry configuration file and return the frozen registry."""
    return build_registry(_read_json(Path(path), InvalidBreakpointError))


def _read_fragment_file(raw: Any, index: int, base_dir: Path | None) -> str:
    if not isinstance(raw, str) or not raw:
        raise ManifestError(f"fragments[{index}] file must be a path string, got {raw!r}")
    source = Path(raw)
    if base_dir is not None and not source.is_absolute():
        source = base_dir / source
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"fragments[{index}] cannot read {source}: {exc}") from exc


def parse_fragments(data: Any, base_dir: Path | None = None) -> list[RuleFragment]:
    """Decode a fragment manifest (object with ``fragments`` or a bare list).

    An entry may give its rule text inline (``text``) or point at a file
    (``file``, relative to *base_dir*).  Sequence numbers are left for the
    collector to assign.
    """
    entries = data.get("fragments") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ManifestError("Fragment manifest needs a 'fragments' list")

    fragments: list[RuleFragment] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ManifestError(f"fragments[{index}] must be an object")
        text = entry.get("text")
        if text is None and "file" in entry:
            text = _read_fragment_file(entry["file"], index, base_dir)
        if not isinstance(text, str):
            raise ManifestError(f"fragments[{index}] needs 'text' or 'file'")
        breakpoint_name = _pick(entry, "breakpoint", "breakpoint_name", "breakpointName")
        if breakpoint_name is not None and not isinstance(breakpoint_name, str):
            raise ManifestError(
                f"fragments[{index}] breakpoint must be a name or null, got {breakpoint_name!r}"
            )
        fragments.append(
            RuleFragment(
                text=text,
                breakpoint_name=breakpoint_name,
                component_id=str(_pick(entry, "component", "component_id", "componentId") or ""),
            )
        )
    return fragments


def load_fragments(path: str | Path) -> list[RuleFragment]:
    """Read a fragment manifest file."""
    path = Path(path)
    return parse_fragments(_read_json(path, ManifestError), base_dir=path.parent)
