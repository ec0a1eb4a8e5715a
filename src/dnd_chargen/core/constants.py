"""Rules constants for D&D 5E character creation.

Numeric boundaries shared by the validators, the derived-stat calculator
and the ability-generation helpers.
"""

from __future__ import annotations

from types import MappingProxyType


# =============================================================================
# Ability Scores
# =============================================================================

UNSET_ABILITY_SCORE = 0
"""Sentinel for an ability score the player has not assigned yet."""

MIN_ABILITY_SCORE = 1
"""Minimum legal ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum legal ability score (RAW D&D 5E upper bound)."""

# =============================================================================
# Point Buy Constants (PHB p.13)
# =============================================================================

POINT_BUY_TOTAL = 27
"""Total points available for point buy character creation."""

POINT_BUY_MIN = 8
"""Minimum ability score in point buy."""

POINT_BUY_MAX = 15
"""Maximum ability score in point buy (before racial bonuses)."""

POINT_BUY_COSTS = MappingProxyType(
    {
        8: 0,
        9: 1,
        10: 2,
        11: 3,
        12: 4,
        13: 5,
        14: 7,
        15: 9,
    }
)

# =============================================================================
# Standard Array (PHB p.13)
# =============================================================================

STANDARD_ARRAY = (15, 14, 13, 12, 10, 8)
"""Standard array values for ability scores."""

# =============================================================================
# Derived Stat Baselines
# =============================================================================

DEFAULT_SPEED = 30
"""Walking speed in feet when no race is selected."""

DEFAULT_HIT_DIE = 8
"""Hit die used when the first class entry does not resolve."""

UNARMORED_AC_BASE = 10
"""Armor class before the dexterity modifier, with no armor worn."""

PASSIVE_SCORE_BASE = 10
"""Base for passive perception, insight and investigation."""

SPELL_SAVE_DC_BASE = 8
"""Base for the spell save DC."""

MIN_CHARACTER_LEVEL = 1
"""Lowest total character level."""

MAX_CHARACTER_LEVEL = 20
"""Highest level covered by the SRD progression tables."""

MAX_SPELL_LEVEL = 9
"""Highest spell level in a leveled slot row."""
