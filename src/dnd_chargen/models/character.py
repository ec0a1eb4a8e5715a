"""The in-progress character passed into every engine call.

The snapshot is owned by the caller. The engine reads it and never keeps
a reference between calls, so the same snapshot may be handed to several
calculators at once.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_chargen.models.abilities import AbilityBonus, AbilityScores
from dnd_chargen.models.enums import Ability, Skill


class ClassEntry(BaseModel):
    """One class the character has levels in.

    Attributes:
        class_id: Class identifier.
        level: Levels taken in this class.
        subclass_id: Chosen subclass, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    class_id: str
    level: int = Field(default=1, ge=1)
    subclass_id: str | None = None


class Proficiencies(BaseModel):
    """Proficiencies selected so far."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skills: tuple[Skill, ...] = ()
    saving_throws: tuple[Ability, ...] = ()
    armor: tuple[str, ...] = ()
    weapons: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()


class CharacterSnapshot(BaseModel):
    """A character as currently selected in the creation wizard.

    Class entries are multiclass-shaped. Hit points use the first entry's
    hit die; proficiency uses the sum of all entry levels.

    Attributes:
        name: Character name.
        ability_scores: Scores used for every calculation, racial bonuses
            already applied.
        race_id: Selected race.
        flexible_bonuses: Player-chosen racial ability increases.
        classes: Class entries, first entry is the starting class.
        background_id: Selected background.
        equipment: Item ids chosen.
        proficiencies: Proficiency selections.
        selected_cantrips: Cantrip ids chosen.
        selected_spells: Leveled spell ids chosen.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    ability_scores: AbilityScores = Field(default_factory=AbilityScores)
    race_id: str | None = None
    flexible_bonuses: tuple[AbilityBonus, ...] = ()
    classes: tuple[ClassEntry, ...] = ()
    background_id: str | None = None
    equipment: tuple[str, ...] = ()
    proficiencies: Proficiencies = Field(default_factory=Proficiencies)
    selected_cantrips: tuple[str, ...] = ()
    selected_spells: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_level(self) -> int:
        """Sum of all class levels, or 1 before any class is chosen."""
        if not self.classes:
            return 1
        return sum(entry.level for entry in self.classes)

    @property
    def primary_class(self) -> ClassEntry | None:
        return self.classes[0] if self.classes else None


__all__ = [
    "ClassEntry",
    "Proficiencies",
    "CharacterSnapshot",
]
