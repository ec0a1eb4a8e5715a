"""D&D 5E spellcasting progression tables.

Static SRD data used to build class spellcasting profiles and to classify
casters. Every table is read-only; profiles embed the rows they need so
an engine never reads these module globals at call time except for the
caster classification, which is injected into the calculator.

Slot rows list slot counts by spell level starting at 1st level, with
trailing zero levels left out.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from dnd_chargen.models.enums import CasterType


# =============================================================================
# Spell Slots by Class Level (PHB p.113 et al.)
# =============================================================================

FULL_CASTER_SLOTS: Mapping[int, tuple[int, ...]] = MappingProxyType({
    1:  (2,),
    2:  (3,),
    3:  (4, 2),
    4:  (4, 3),
    5:  (4, 3, 2),
    6:  (4, 3, 3),
    7:  (4, 3, 3, 1),
    8:  (4, 3, 3, 2),
    9:  (4, 3, 3, 3, 1),
    10: (4, 3, 3, 3, 2),
    11: (4, 3, 3, 3, 2, 1),
    12: (4, 3, 3, 3, 2, 1),
    13: (4, 3, 3, 3, 2, 1, 1),
    14: (4, 3, 3, 3, 2, 1, 1),
    15: (4, 3, 3, 3, 2, 1, 1, 1),
    16: (4, 3, 3, 3, 2, 1, 1, 1),
    17: (4, 3, 3, 3, 2, 1, 1, 1, 1),
    18: (4, 3, 3, 3, 3, 1, 1, 1, 1),
    19: (4, 3, 3, 3, 3, 2, 1, 1, 1),
    20: (4, 3, 3, 3, 3, 2, 2, 1, 1),
})

# Paladin and ranger gain slots at level 2
HALF_CASTER_SLOTS: Mapping[int, tuple[int, ...]] = MappingProxyType({
    1:  (),
    2:  (2,),
    3:  (3,),
    4:  (3,),
    5:  (4, 2),
    6:  (4, 2),
    7:  (4, 3),
    8:  (4, 3),
    9:  (4, 3, 2),
    10: (4, 3, 2),
    11: (4, 3, 3),
    12: (4, 3, 3),
    13: (4, 3, 3, 1),
    14: (4, 3, 3, 1),
    15: (4, 3, 3, 2),
    16: (4, 3, 3, 2),
    17: (4, 3, 3, 3, 1),
    18: (4, 3, 3, 3, 1),
    19: (4, 3, 3, 3, 2),
    20: (4, 3, 3, 3, 2),
})

# level: (slot_count, slot_level)
PACT_MAGIC_SLOTS: Mapping[int, tuple[int, int]] = MappingProxyType({
    1:  (1, 1),
    2:  (2, 1),
    3:  (2, 2),
    4:  (2, 2),
    5:  (2, 3),
    6:  (2, 3),
    7:  (2, 4),
    8:  (2, 4),
    9:  (2, 5),
    10: (2, 5),
    11: (3, 5),
    12: (3, 5),
    13: (3, 5),
    14: (3, 5),
    15: (3, 5),
    16: (3, 5),
    17: (4, 5),
    18: (4, 5),
    19: (4, 5),
    20: (4, 5),
})


# =============================================================================
# Caster Classification
# =============================================================================

CASTER_TYPES: Mapping[str, CasterType] = MappingProxyType({
    "bard": CasterType.FULL,
    "cleric": CasterType.FULL,
    "druid": CasterType.FULL,
    "sorcerer": CasterType.FULL,
    "wizard": CasterType.FULL,
    "paladin": CasterType.HALF,
    "ranger": CasterType.HALF,
    "warlock": CasterType.PACT,
    "barbarian": CasterType.NONE,
    "fighter": CasterType.NONE,
    "monk": CasterType.NONE,
    "rogue": CasterType.NONE,
})


def get_caster_type(
    class_id: str,
    classification: Mapping[str, CasterType] = CASTER_TYPES,
) -> CasterType:
    """Caster type for a class id; unknown ids are non-casters."""
    return classification.get(class_id, CasterType.NONE)


# =============================================================================
# Cantrips Known (breakpoints: class level -> count from that level on)
# =============================================================================

CANTRIPS_KNOWN: Mapping[str, Mapping[int, int]] = MappingProxyType({
    "bard": MappingProxyType({1: 2, 4: 3, 10: 4}),
    "cleric": MappingProxyType({1: 3, 4: 4, 10: 5}),
    "druid": MappingProxyType({1: 2, 4: 3, 10: 4}),
    "sorcerer": MappingProxyType({1: 4, 4: 5, 10: 6}),
    "warlock": MappingProxyType({1: 2, 4: 3, 10: 4}),
    "wizard": MappingProxyType({1: 3, 4: 4, 10: 5}),
})


def lookup_breakpoint(table: Mapping[int, int], level: int) -> int:
    """Value of the highest breakpoint at or below ``level``, or 0."""
    value = 0
    for threshold in sorted(table):
        if level >= threshold:
            value = table[threshold]
    return value


# =============================================================================
# Spells Known (known-spell casters)
# =============================================================================

SPELLS_KNOWN: Mapping[str, Mapping[int, int]] = MappingProxyType({
    "bard": MappingProxyType({
        1: 4, 2: 5, 3: 6, 4: 7, 5: 8, 6: 9, 7: 10, 8: 11,
        9: 12, 10: 14, 11: 15, 12: 15, 13: 16, 14: 18,
        15: 19, 16: 19, 17: 20, 18: 22, 19: 22, 20: 22,
    }),
    "ranger": MappingProxyType({
        1: 0, 2: 2, 3: 3, 4: 3, 5: 4, 6: 4, 7: 5, 8: 5,
        9: 6, 10: 6, 11: 7, 12: 7, 13: 8, 14: 8,
        15: 9, 16: 9, 17: 10, 18: 10, 19: 11, 20: 11,
    }),
    "sorcerer": MappingProxyType({
        1: 2, 2: 3, 3: 4, 4: 5, 5: 6, 6: 7, 7: 8, 8: 9,
        9: 10, 10: 11, 11: 12, 12: 12, 13: 13, 14: 13,
        15: 14, 16: 14, 17: 15, 18: 15, 19: 15, 20: 15,
    }),
    "warlock": MappingProxyType({
        1: 2, 2: 3, 3: 4, 4: 5, 5: 6, 6: 7, 7: 8, 8: 9,
        9: 10, 10: 10, 11: 11, 12: 11, 13: 12, 14: 12,
        15: 13, 16: 13, 17: 14, 18: 14, 19: 15, 20: 15,
    }),
})


__all__ = [
    "FULL_CASTER_SLOTS",
    "HALF_CASTER_SLOTS",
    "PACT_MAGIC_SLOTS",
    "CASTER_TYPES",
    "get_caster_type",
    "CANTRIPS_KNOWN",
    "lookup_breakpoint",
    "SPELLS_KNOWN",
]
