"""End-to-end tests for the compiler facade."""

import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from stratum import Compiler, Mode, RuleFragment
from stratum.errors import UnknownBreakpointError
from stratum.events import CompilationFailed, EventBus
from stratum.predicate import render_predicate
from tests.conftest import DPI_768, DPI_ALL, make_registry


def _scenario(registry):
    compiler = Compiler(registry)
    compiler.add("A")
    compiler.add("B", "320up")
    compiler.add("C", "768up")
    compiler.add("D", "all2x")
    compiler.add("E", "768up2x")
    return compiler


# ---------------------------------------------------------------------------
# Two-tier scale with hi-dpi
# ---------------------------------------------------------------------------


class TestTwoTierScale:
    def test_modern_output(self, registry):
        expected = (
            "A\n\n"
            "@media only screen and (min-width: 320px) {\nB\n}\n\n"
            "@media only screen and (min-width: 768px) {\nC\n}\n\n"
            f"@media {DPI_ALL} {{\nD\n}}\n\n"
            f"@media {DPI_768} {{\nE\n}}"
        )
        assert _scenario(registry).compile_modern() == expected

    def test_modern_blocks(self, registry):
        blocks = _scenario(registry).blocks(Mode.MODERN)
        assert [(b.name, b.text) for b in blocks] == [
            (None, "A"),
            ("320up", "B"),
            ("768up", "C"),
            ("all2x", "D"),
            ("768up2x", "E"),
        ]

    def test_legacy_output(self, registry):
        out = _scenario(registry).compile_legacy()
        assert out == "A\nB\nC"
        assert "D" not in out and "E" not in out


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    def test_authoring_order_caveat(self, registry):
        compiler = Compiler(registry)
        compiler.add(".wide { width: 50%; }", "768up")
        compiler.add(".wide { width: 100%; }", "320up")
        out = compiler.compile_modern()
        assert out.index("min-width: 320px") < out.index("min-width: 768px")
        assert out.index("width: 100%") < out.index("width: 50%")

    def test_rank_order_invariance(self, registry):
        items = [("B", "320up"), ("C", "768up"), ("D", "all2x"), ("E", "768up2x")]
        outputs = set()
        for perm in itertools.permutations(items):
            compiler = Compiler(registry)
            for text, name in perm:
                compiler.add(text, name)
            outputs.add(compiler.compile_modern())
        assert len(outputs) == 1

    def test_empty_bucket_elision(self, registry):
        compiler = Compiler(registry)
        compiler.add("A")
        compiler.add("C", "768up")
        modern = compiler.compile_modern()
        legacy = compiler.compile_legacy()
        for name in ("320up", "all2x", "768up2x"):
            predicate = render_predicate(registry.resolve(name), registry)
            assert predicate not in modern
            assert predicate not in legacy
        assert modern.count("@media") == 1

    def test_universal_is_strict_prefix(self, registry):
        compiler = _scenario(registry)
        universal = compiler.blocks()[0].text
        for out in (compiler.compile_modern(), compiler.compile_legacy()):
            assert out.startswith(universal)
            assert len(out) > len(universal)

    def test_legacy_only_eligible_breakpoints(self, registry):
        compiler = Compiler(registry)
        for bp in registry.ordered_all():
            compiler.add(f"/* {bp.name} */", bp.name)
        eligible = {bp.name for bp in registry.legacy_eligible()}
        legacy_names = {b.name for b in compiler.blocks(Mode.LEGACY)}
        assert legacy_names == eligible == {"320up", "768up"}
        for name in legacy_names:
            bp = registry.resolve(name)
            assert bp.rank <= registry.cutoff_rank
            assert not bp.is_hidpi

    def test_only_universal(self, registry):
        compiler = Compiler(registry)
        compiler.add("html {}")
        assert compiler.compile_modern() == "html {}"
        assert compiler.compile_legacy() == "html {}"


# ---------------------------------------------------------------------------
# Failure handling
# ---------------------------------------------------------------------------


class TestFailure:
    def test_unknown_breakpoint_fails_unit(self, registry):
        compiler = Compiler(registry)
        compiler.add("A")
        with pytest.raises(UnknownBreakpointError):
            compiler.add("X", "1024up")
        with pytest.raises(UnknownBreakpointError, match="1024up"):
            compiler.compile_modern()
        with pytest.raises(UnknownBreakpointError):
            compiler.compile_legacy()

    def test_failure_event_emitted(self, registry):
        bus = EventBus()
        seen = []
        bus.subscribe(CompilationFailed, seen.append)
        compiler = Compiler(registry, event_bus=bus)
        with pytest.raises(UnknownBreakpointError):
            compiler.submit(RuleFragment(text="x", breakpoint_name="nope"))
        assert seen == [CompilationFailed(error="Unknown breakpoint 'nope'", breakpoint="nope")]


# ---------------------------------------------------------------------------
# Shared registry
# ---------------------------------------------------------------------------


class TestSharedRegistry:
    def test_binding_freezes_registry(self):
        reg = make_registry(freeze=False)
        assert not reg.frozen
        Compiler(reg)
        assert reg.frozen

    def test_from_fragments(self, registry):
        fragments = [RuleFragment(text="C", breakpoint_name="768up"), RuleFragment(text="A")]
        compiler = Compiler.from_fragments(registry, fragments)
        assert compiler.compile_legacy() == "A\nC"

    def test_concurrent_units_are_isolated(self, registry):
        def run(i):
            compiler = Compiler(registry)
            compiler.add(f"u{i}")
            compiler.add(f"b{i}", "320up")
            return compiler.compile_legacy()

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(run, range(8)))
        assert results == [f"u{i}\nb{i}" for i in range(8)]
