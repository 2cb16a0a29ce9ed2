"""Game-rule constants for the status screen stat engine.

These are literal rules of the story's leveling system, not tunables,
which is why they live here rather than in configuration.
"""

from __future__ import annotations

# =============================================================================
# Leveling
# =============================================================================

FREE_POINTS_PER_LEVEL = 3
"""Free points granted per level-up when a trait redirects them."""

REDIRECT_BASELINE_LEVEL = 1
"""Level free point redirection counts from when no snapshot exists."""

TITLE_RATE_ESCALATION_LEVEL = 30
"""From this level on, a trait multiplier above 1 also scales net title rates."""

# =============================================================================
# Derived Resources
# =============================================================================

HP_PER_CONSTITUTION = 10
"""Maximum HP granted per point of Constitution."""

MP_PER_MANA = 10
"""Maximum MP granted per point of Mana (own plus borrowed)."""

# =============================================================================
# Bond Sync
# =============================================================================

DEFAULT_BOND_FRACTION = 0.5
"""Fraction of the partner's stat shared by a bond sync rule by default."""


__all__ = [
    "FREE_POINTS_PER_LEVEL",
    "REDIRECT_BASELINE_LEVEL",
    "TITLE_RATE_ESCALATION_LEVEL",
    "HP_PER_CONSTITUTION",
    "MP_PER_MANA",
    "DEFAULT_BOND_FRACTION",
]
