"""Spellcasting state for a character.

The calculator is total: any snapshot yields a ``SpellcastingInfo``, and a
character without a spellcasting class gets the empty value.
Only the first class with a spellcasting profile is considered; multiclass slot stacking is
not modelled.

Slot shapes:

- Full and half casters expose ``spell_slots`` keyed by spell level,
  with zero-slot levels left out.
- Pact casters expose ``pact_slots`` (count and shared level) and an
  empty ``spell_slots`` mapping.
"""

from __future__ import annotations

from collections.abc import Mapping

from dnd_chargen.catalog.catalog import RulesContent
from dnd_chargen.core.logging import get_logger
from dnd_chargen.models.character import CharacterSnapshot, ClassEntry
from dnd_chargen.models.content import (
    ClassDefinition,
    KnownSpellProgression,
    LeveledSlotTable,
    PactSlotTable,
    SpellcastingProfile,
)
from dnd_chargen.models.enums import CasterType
from dnd_chargen.models.results import PactSlots, SpellcastingInfo, SpellSlot
from dnd_chargen.rules import formulas
from dnd_chargen.rules.progression import CASTER_TYPES, get_caster_type, lookup_breakpoint


logger = get_logger(__name__)


class SpellcastingCalculator:
    """Computes spellcasting info against one content set.

    Args:
        content: Catalogs to resolve class and subclass ids against.
        caster_types: Class id to caster type classification.
    """

    def __init__(
        self,
        content: RulesContent,
        caster_types: Mapping[str, CasterType] = CASTER_TYPES,
    ) -> None:
        self._content = content
        self._caster_types = caster_types

    def find_casting_class(
        self, character: CharacterSnapshot
    ) -> tuple[ClassEntry, ClassDefinition, SpellcastingProfile] | None:
        """First class entry whose definition has a spellcasting profile.

        The profile is returned even below its first casting level; callers
        check ``SpellcastingProfile.is_active_at`` for that.
        """
        for entry in character.classes:
            class_def = self._content.classes.get_by_id(entry.class_id)
            if class_def is None or class_def.spellcasting is None:
                continue
            return entry, class_def, class_def.spellcasting
        return None

    def get_spellcasting_info(self, character: CharacterSnapshot) -> SpellcastingInfo:
        """Spellcasting state of ``character``.

        Args:
            character: The snapshot to inspect.

        Returns:
            Save DC, attack bonus, cantrip and spell counts, slots and bonus
            spells for the first casting class, or ``SpellcastingInfo.empty()``.
        """
        found = self.find_casting_class(character)
        if found is None:
            return SpellcastingInfo.empty()
        entry, class_def, profile = found

        caster_type = get_caster_type(class_def.id, self._caster_types)
        if caster_type == CasterType.NONE:
            logger.debug("Spellcasting class has no caster classification", class_id=class_def.id)

        active = profile.is_active_at(entry.level)
        modifier = character.ability_scores.get_modifier(profile.ability)
        prof = formulas.proficiency_bonus(character.total_level)

        max_known: int | None = None
        max_prepared: int | None = None
        if isinstance(profile.progression, KnownSpellProgression):
            max_known = profile.progression.spells_known.get(entry.level, 0) if active else 0
        elif not active:
            max_prepared = 0
        else:
            max_prepared = formulas.prepared_spell_count(
                profile.progression.formula, modifier, entry.level
            )

        spell_slots: dict[int, SpellSlot] = {}
        pact_slots: PactSlots | None = None
        if not active:
            logger.debug("Spellcasting not gained yet", class_id=class_def.id, level=entry.level)
        elif isinstance(profile.slots, PactSlotTable):
            pact_slots = self._pact_slots(profile.slots, entry.level)
        elif isinstance(profile.slots, LeveledSlotTable):
            spell_slots = self._leveled_slots(profile.slots, entry.level)

        bonus_spells: tuple[str, ...] = ()
        if entry.subclass_id is not None:
            subclass = class_def.get_subclass(entry.subclass_id)
            if subclass is not None:
                bonus_spells = subclass.bonus_spells_through(entry.level)

        return SpellcastingInfo(
            is_spellcaster=True,
            class_id=class_def.id,
            caster_type=caster_type,
            spellcasting_ability=profile.ability,
            spell_save_dc=formulas.spell_save_dc(prof, modifier),
            spell_attack_bonus=formulas.spell_attack_bonus(prof, modifier),
            cantrips_known=lookup_breakpoint(profile.cantrips_known, entry.level),
            max_spells_known=max_known,
            max_prepared_spells=max_prepared,
            spell_slots=spell_slots,
            pact_slots=pact_slots,
            spell_list_id=profile.spell_list_id,
            bonus_spells=bonus_spells,
            ritual_casting=profile.ritual_casting,
            known_cantrips=character.selected_cantrips,
            known_spells=character.selected_spells,
        )

    @staticmethod
    def _leveled_slots(table: LeveledSlotTable, class_level: int) -> dict[int, SpellSlot]:
        row = table.rows.get(class_level, ())
        return {
            spell_level: SpellSlot(total=count)
            for spell_level, count in enumerate(row, start=1)
            if count > 0
        }

    @staticmethod
    def _pact_slots(table: PactSlotTable, class_level: int) -> PactSlots | None:
        row = table.rows.get(class_level)
        if row is None:
            return None
        slot_count, slot_level = row
        return PactSlots(slot_count=slot_count, slot_level=slot_level)


__all__ = [
    "SpellcastingCalculator",
]
