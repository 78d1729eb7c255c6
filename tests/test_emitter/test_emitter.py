"""Tests for stylesheet emission."""

from stratum.collation import Mode, collate
from stratum.collector import RuleCollector
from stratum.emitter import emit_legacy, emit_modern
from stratum.predicate import PredicateRenderer
from tests.conftest import DPI_ALL


def _collect(registry, *items):
    col = RuleCollector(registry)
    for text, name in items:
        col.add(text, name)
    return col


class TestEmitModern:
    def test_universal_unwrapped(self, registry):
        col = _collect(registry, ("body { margin: 0; }", None))
        out = emit_modern(collate(registry, col), PredicateRenderer(registry))
        assert out == "body { margin: 0; }"

    def test_breakpoint_wrapped(self, registry):
        col = _collect(registry, (".a { float: left; }", "320up"))
        out = emit_modern(collate(registry, col), PredicateRenderer(registry))
        assert out == "@media only screen and (min-width: 320px) {\n.a { float: left; }\n}"

    def test_blocks_separated_by_blank_line(self, registry):
        col = _collect(registry, ("A", None), ("D", "all2x"))
        out = emit_modern(collate(registry, col), PredicateRenderer(registry))
        assert out == f"A\n\n@media {DPI_ALL} {{\nD\n}}"

    def test_fragments_joined_in_one_wrapper(self, registry):
        col = _collect(registry, ("x", "768up"), ("y", "768up"))
        out = emit_modern(collate(registry, col), PredicateRenderer(registry))
        assert out.count("@media") == 1
        assert "{\nx\ny\n}" in out

    def test_empty(self, registry):
        assert emit_modern([], PredicateRenderer(registry)) == ""


class TestEmitLegacy:
    def test_no_wrappers(self, registry):
        col = _collect(registry, ("A", None), ("B", "320up"), ("C", "768up"))
        out = emit_legacy(collate(registry, col, Mode.LEGACY))
        assert out == "A\nB\nC"
        assert "@media" not in out

    def test_empty(self):
        assert emit_legacy([]) == ""
