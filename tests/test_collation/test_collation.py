"""Tests for the collation engine."""

import itertools

from stratum.collation import Mode, collate
from stratum.collector import RuleCollector
from tests.conftest import make_registry


def _names(blocks):
    return [b.name for b in blocks]


# ---------------------------------------------------------------------------
# Modern mode
# ---------------------------------------------------------------------------


class TestModern:
    def test_universal_first_then_rank_order(self, registry):
        col = RuleCollector(registry)
        col.add("E", "768up2x")
        col.add("C", "768up")
        col.add("A")
        col.add("D", "all2x")
        col.add("B", "320up")
        blocks = collate(registry, col, Mode.MODERN)
        assert _names(blocks) == [None, "320up", "768up", "all2x", "768up2x"]
        assert blocks[0].is_universal

    def test_empty_buckets_elided(self, registry):
        col = RuleCollector(registry)
        col.add("C", "768up")
        assert _names(collate(registry, col)) == ["768up"]

    def test_nothing_submitted(self, registry):
        assert collate(registry, RuleCollector(registry)) == []

    def test_within_block_order_preserved(self, registry):
        col = RuleCollector(registry)
        col.add("first", "320up", component="nav")
        col.add("other", "768up")
        col.add("second", "320up", component="footer")
        block = collate(registry, col)[0]
        assert block.text == "first\nsecond"
        assert [f.component_id for f in block.fragments] == ["nav", "footer"]

    def test_rank_order_invariant_under_permutation(self, registry):
        items = [("B", "320up"), ("C", "768up"), ("D", "all2x"), ("E", "768up2x")]
        expected = None
        for perm in itertools.permutations(items):
            col = RuleCollector(registry)
            for text, name in perm:
                col.add(text, name)
            result = [(b.name, b.text) for b in collate(registry, col)]
            if expected is None:
                expected = result
            assert result == expected
        assert [name for name, _ in expected] == ["320up", "768up", "all2x", "768up2x"]


# ---------------------------------------------------------------------------
# Legacy mode
# ---------------------------------------------------------------------------


class TestLegacy:
    def test_hidpi_excluded(self, registry):
        col = RuleCollector(registry)
        col.add("A")
        col.add("B", "320up")
        col.add("C", "768up")
        col.add("D", "all2x")
        col.add("E", "768up2x")
        assert _names(collate(registry, col, Mode.LEGACY)) == [None, "320up", "768up"]

    def test_cutoff_limits_blocks(self):
        reg = make_registry(cutoff_rank=1)
        col = RuleCollector(reg)
        col.add("B", "320up")
        col.add("C", "768up")
        assert _names(collate(reg, col, Mode.LEGACY)) == ["320up"]

    def test_mode_accepts_string(self, registry):
        col = RuleCollector(registry)
        col.add("D", "all2x")
        assert collate(registry, col, Mode("legacy")) == []
