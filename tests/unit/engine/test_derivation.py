"""Tests for the derivation pass."""

from __future__ import annotations

from status_screen.engine.derivation import apply_derivations, derivation_bonus
from status_screen.models import DerivationRule, Stat, StatBreakdown


def rule(source: Stat, target: Stat, percent: float) -> DerivationRule:
    return DerivationRule(source_stat=source, target_stat=target, percent=percent)


class TestDerivationBonus:
    """Tests for derivation_bonus."""

    def test_floors(self) -> None:
        """Test bonuses round down."""
        assert derivation_bonus({Stat.MANA: 33}, rule(Stat.MANA, Stat.WISDOM, 10)) == 3

    def test_missing_source(self) -> None:
        """Test a missing source stat derives nothing."""
        assert derivation_bonus({}, rule(Stat.MANA, Stat.WISDOM, 50)) == 0


class TestApplyDerivations:
    """Tests for apply_derivations."""

    def test_net_of_snapshot(self) -> None:
        """Test 25% of 100 with 10 already ledgered adds 15."""
        stats, _ = apply_derivations(
            {Stat.MANA: 100, Stat.WISDOM: 0},
            {},
            [rule(Stat.MANA, Stat.WISDOM, 25)],
            {Stat.WISDOM: 10},
        )

        assert stats[Stat.WISDOM] == 15

    def test_rules_chain_in_order(self) -> None:
        """Test each rule reads the stats left by the rules before it."""
        stats, _ = apply_derivations(
            {Stat.MANA: 100, Stat.WISDOM: 0, Stat.INTELLECT: 0},
            {},
            [rule(Stat.MANA, Stat.WISDOM, 50), rule(Stat.WISDOM, Stat.INTELLECT, 50)],
            {},
        )

        assert stats[Stat.WISDOM] == 50
        assert stats[Stat.INTELLECT] == 25

    def test_ledger_netted_once_per_target(self) -> None:
        """Test several rules on one target subtract the ledgered bonus once."""
        stats, _ = apply_derivations(
            {Stat.MANA: 100, Stat.INTELLECT: 50, Stat.WISDOM: 0},
            {},
            [rule(Stat.MANA, Stat.WISDOM, 10), rule(Stat.INTELLECT, Stat.WISDOM, 10)],
            {Stat.WISDOM: 10},
        )

        assert stats[Stat.WISDOM] == 10 + 5 - 10

    def test_updates_breakdowns(self) -> None:
        """Test the target's breakdown records the derivation."""
        breakdowns = {Stat.WISDOM: StatBreakdown(stat=Stat.WISDOM, snapshot_derivation=10)}

        _, traces = apply_derivations(
            {Stat.MANA: 100, Stat.WISDOM: 0},
            breakdowns,
            [rule(Stat.MANA, Stat.WISDOM, 25)],
            {Stat.WISDOM: 10},
        )

        trace = traces[Stat.WISDOM]
        assert trace.derivation_bonus == 25
        assert trace.net_derivation == 15
        assert trace.derivation_sources == ("25% of Mana",)
        assert trace.final == 15

    def test_inputs_untouched(self) -> None:
        """Test the input maps are not modified."""
        stats = {Stat.MANA: 100, Stat.WISDOM: 0}
        breakdowns = {Stat.WISDOM: StatBreakdown(stat=Stat.WISDOM)}

        apply_derivations(stats, breakdowns, [rule(Stat.MANA, Stat.WISDOM, 25)], {})

        assert stats[Stat.WISDOM] == 0
        assert breakdowns[Stat.WISDOM].final == 0

    def test_negative_percent_lowers_target(self) -> None:
        """Test a negative percent subtracts from the target."""
        stats, _ = apply_derivations(
            {Stat.MANA: 100, Stat.WISDOM: 50},
            {},
            [rule(Stat.MANA, Stat.WISDOM, -10)],
            {},
        )

        assert stats[Stat.WISDOM] == 40

    def test_incomplete_rule_skipped(self) -> None:
        """Test a rule missing its target stat changes nothing."""
        stats = {Stat.MANA: 100, Stat.WISDOM: 50}
        breakdowns = {Stat.WISDOM: StatBreakdown(stat=Stat.WISDOM, final=50)}

        result, traces = apply_derivations(
            stats,
            breakdowns,
            [DerivationRule(source_stat=Stat.MANA, percent=10), rule(Stat.MANA, Stat.WISDOM, 10)],
            {},
        )

        assert result == {Stat.MANA: 100, Stat.WISDOM: 60}
        assert traces[Stat.WISDOM].derivation_sources == ("10% of Mana",)
