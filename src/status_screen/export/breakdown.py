"""Audit text for a stat breakdown, shown as a tooltip next to each stat."""

from __future__ import annotations

from status_screen.models.results import StatBreakdown


def _num(value: float) -> str:
    return f"{value:g}"


def _signed(value: float) -> str:
    return f"+{_num(value)}" if value >= 0 else _num(value)


def breakdown_text(breakdown: StatBreakdown) -> str:
    """Render the lines explaining how a stat reached its final value.

    Only non-neutral parts are listed; the final value always is.

    Args:
        breakdown: The stat's breakdown.

    Returns:
        Newline-separated audit lines.

    Example:
        >>> print(breakdown_text(result.breakdowns[Stat.STRENGTH]))
        Base (Lvl 5): 10
        Class: +10 (Warrior: 2×5)
        Final: 20
    """
    parts: list[str] = []

    if breakdown.snapshot_level is not None:
        parts.append(f"Base (Lvl {breakdown.snapshot_level}): {breakdown.snapshot_base}")

    if breakdown.growth:
        detail = ", ".join(
            f"{c.phase or 'Unnamed'}: {c.per_level}×{c.levels}" for c in breakdown.growth_detail
        )
        parts.append(f"Class: {_signed(breakdown.growth)} ({detail})")

    if breakdown.redirected_free_points:
        parts.append(f"Redirected Free Points: +{breakdown.redirected_free_points}")

    if breakdown.net_free_points:
        parts.append(f"Free Points: {_signed(breakdown.net_free_points)}")

    if breakdown.trait_multiplier != 1:
        parts.append(f"Trait Multiplier: ×{_num(breakdown.trait_multiplier)}")

    if breakdown.net_title_additive:
        parts.append(f"Title Bonus: {_signed(breakdown.net_title_additive)}")

    if breakdown.net_boost_additive:
        parts.append(f"Stat Boost: {_signed(breakdown.net_boost_additive)}")

    if breakdown.net_title_rate > 0:
        escalated = " (trait-scaled)" if breakdown.title_rate_escalated else ""
        parts.append(f"Title Multiplier: ×{1 + breakdown.net_title_rate:.2f}{escalated}")

    if breakdown.net_boost_rate > 0:
        parts.append(f"Boost Multiplier: ×{1 + breakdown.net_boost_rate:.2f}")

    if breakdown.net_derivation:
        sources = ", ".join(breakdown.derivation_sources)
        parts.append(f"Derived: {_signed(breakdown.net_derivation)} ({sources})")

    parts.append(f"Final: {breakdown.final}")
    return "\n".join(parts)


__all__ = [
    "breakdown_text",
]
