"""Tests for media-query predicate rendering."""

from stratum.model.breakpoint import Breakpoint
from stratum.predicate import DPI_FEATURES, PredicateRenderer, render_predicate
from stratum.registry import BreakpointRegistry, default_registry
from tests.conftest import DPI_768, DPI_ALL, make_registry


class TestBaseWidth:
    def test_min_width(self):
        reg = make_registry()
        assert render_predicate(reg.resolve("320up"), reg) == "only screen and (min-width: 320px)"

    def test_max_width_mobile_ceiling(self):
        reg = default_registry()
        assert render_predicate(reg.resolve("mobile"), reg) == "only screen and (max-width: 767px)"


class TestHiDpi:
    def test_hidpi_only_four_clauses(self):
        reg = make_registry()
        assert render_predicate(reg.resolve("all2x"), reg) == DPI_ALL

    def test_vendor_order(self):
        assert [f.split(":")[0] for f in DPI_FEATURES] == [
            "min-device-pixel-ratio",
            "-webkit-min-device-pixel-ratio",
            "-o-min-device-pixel-ratio",
            "min-resolution",
        ]

    def test_pair_ands_width_into_every_clause(self):
        reg = make_registry()
        predicate = render_predicate(reg.resolve("768up2x"), reg)
        assert predicate == DPI_768
        clauses = predicate.split(", ")
        assert len(clauses) == 4
        assert all(c.endswith(" and (min-width: 768px)") for c in clauses)

    def test_pair_with_max_width_base(self):
        reg = BreakpointRegistry()
        reg.register(Breakpoint.max_width("mobile", 0, 767))
        reg.register(Breakpoint.paired("mobile2x", 1, "mobile"))
        predicate = render_predicate(reg.resolve("mobile2x"), reg)
        assert predicate.startswith(
            "only screen and (min-device-pixel-ratio: 1.3) and (max-width: 767px), "
        )


class TestPredicateRenderer:
    def test_matches_function_form(self):
        reg = make_registry()
        renderer = PredicateRenderer(reg)
        for bp in reg.ordered_all():
            assert renderer.render(bp) == render_predicate(bp, reg)

    def test_deterministic(self):
        reg = make_registry()
        renderer = PredicateRenderer(reg)
        bp = reg.resolve("768up2x")
        assert renderer.render(bp) == renderer.render(bp)
