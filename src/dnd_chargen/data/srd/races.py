"""SRD races and subraces, plus the half-elf flexible bonus."""

from __future__ import annotations

from dnd_chargen.models.abilities import AbilityBonus
from dnd_chargen.models.content import FlexibleBonusConfig, Race, RacialTrait, Speed
from dnd_chargen.models.enums import Ability, Size, TraitType


def _trait(trait_id: str, name: str, description: str, kind: TraitType = TraitType.PASSIVE) -> RacialTrait:
    return RacialTrait(id=trait_id, name=name, description=description, type=kind)


def _bonuses(**amounts: int) -> tuple[AbilityBonus, ...]:
    return tuple(AbilityBonus(ability=Ability(name), bonus=bonus) for name, bonus in amounts.items())


DARKVISION = _trait(
    "darkvision",
    "Darkvision",
    "You can see in dim light within 60 feet as if it were bright light, and in darkness as if it were dim light.",
)

# =============================================================================
# Dwarf
# =============================================================================

_DWARF_TRAITS = (
    DARKVISION,
    _trait("dwarven-resilience", "Dwarven Resilience",
           "Advantage on saving throws against poison and resistance to poison damage."),
    _trait("dwarven-combat-training", "Dwarven Combat Training",
           "Proficiency with the battleaxe, handaxe, light hammer and warhammer."),
    _trait("tool-proficiency", "Tool Proficiency",
           "Proficiency with smith's tools, brewer's supplies or mason's tools."),
    _trait("stonecunning", "Stonecunning",
           "Double proficiency on History checks related to the origin of stonework."),
)

HILL_DWARF = Race(
    id="hill-dwarf",
    name="Hill Dwarf",
    base_race="dwarf",
    speed=Speed(walk=25),
    ability_bonuses=_bonuses(constitution=2, wisdom=1),
    traits=(*_DWARF_TRAITS, _trait(
        "dwarven-toughness", "Dwarven Toughness",
        "Your hit point maximum increases by 1, and by 1 again every time you gain a level.",
    )),
    languages=("Common", "Dwarvish"),
    description="Keen senses, deep intuition and remarkable resilience.",
)

MOUNTAIN_DWARF = Race(
    id="mountain-dwarf",
    name="Mountain Dwarf",
    base_race="dwarf",
    speed=Speed(walk=25),
    ability_bonuses=_bonuses(constitution=2, strength=2),
    traits=(*_DWARF_TRAITS, _trait(
        "dwarven-armor-training", "Dwarven Armor Training",
        "Proficiency with light and medium armor.",
    )),
    languages=("Common", "Dwarvish"),
    description="Strong and hardy, accustomed to a difficult life in rugged terrain.",
)

# =============================================================================
# Elf
# =============================================================================

_ELF_TRAITS = (
    DARKVISION,
    _trait("keen-senses", "Keen Senses", "Proficiency in the Perception skill."),
    _trait("fey-ancestry", "Fey Ancestry",
           "Advantage on saving throws against being charmed; magic can't put you to sleep."),
    _trait("trance", "Trance", "Four hours of meditation give the benefit of a long rest."),
)

HIGH_ELF = Race(
    id="high-elf",
    name="High Elf",
    base_race="elf",
    ability_bonuses=_bonuses(dexterity=2, intelligence=1),
    traits=(
        *_ELF_TRAITS,
        _trait("elf-weapon-training", "Elf Weapon Training",
               "Proficiency with the longsword, shortsword, shortbow and longbow."),
        _trait("cantrip-high-elf", "Cantrip",
               "You know one wizard cantrip, cast with Intelligence.", TraitType.ACTIVE),
    ),
    languages=("Common", "Elvish"),
    language_choices=1,
    description="A keen mind and a mastery of at least the basics of magic.",
)

WOOD_ELF = Race(
    id="wood-elf",
    name="Wood Elf",
    base_race="elf",
    speed=Speed(walk=35),
    ability_bonuses=_bonuses(dexterity=2, wisdom=1),
    traits=(
        *_ELF_TRAITS,
        _trait("elf-weapon-training", "Elf Weapon Training",
               "Proficiency with the longsword, shortsword, shortbow and longbow."),
        _trait("fleet-of-foot", "Fleet of Foot", "Your base walking speed increases to 35 feet."),
        _trait("mask-of-the-wild", "Mask of the Wild",
               "You can attempt to hide when only lightly obscured by natural phenomena."),
    ),
    languages=("Common", "Elvish"),
    description="Keen senses and intuition, with fleet feet and stealth.",
)

# =============================================================================
# Halfling
# =============================================================================

_HALFLING_TRAITS = (
    _trait("lucky", "Lucky", "Reroll a 1 on an attack roll, ability check or saving throw."),
    _trait("brave", "Brave", "Advantage on saving throws against being frightened."),
    _trait("halfling-nimbleness", "Halfling Nimbleness",
           "Move through the space of any creature a size larger than you."),
)

LIGHTFOOT_HALFLING = Race(
    id="lightfoot-halfling",
    name="Lightfoot Halfling",
    base_race="halfling",
    size=Size.SMALL,
    speed=Speed(walk=25),
    ability_bonuses=_bonuses(dexterity=2, charisma=1),
    traits=(*_HALFLING_TRAITS, _trait(
        "naturally-stealthy", "Naturally Stealthy",
        "You can hide when obscured only by a creature at least one size larger than you.",
    )),
    languages=("Common", "Halfling"),
    description="Adept at hiding and inclined to wanderlust.",
)

STOUT_HALFLING = Race(
    id="stout-halfling",
    name="Stout Halfling",
    base_race="halfling",
    size=Size.SMALL,
    speed=Speed(walk=25),
    ability_bonuses=_bonuses(dexterity=2, constitution=1),
    traits=(*_HALFLING_TRAITS, _trait(
        "stout-resilience", "Stout Resilience",
        "Advantage on saving throws against poison and resistance to poison damage.",
    )),
    languages=("Common", "Halfling"),
    description="Hardier than average and with some resistance to poison.",
)

# =============================================================================
# Root races without subraces
# =============================================================================

HUMAN = Race(
    id="human",
    name="Human",
    ability_bonuses=_bonuses(
        strength=1, dexterity=1, constitution=1, intelligence=1, wisdom=1, charisma=1
    ),
    languages=("Common",),
    language_choices=1,
    description="The most adaptable and ambitious people among the common races.",
)

DRAGONBORN = Race(
    id="dragonborn",
    name="Dragonborn",
    ability_bonuses=_bonuses(strength=2, charisma=1),
    traits=(
        _trait("draconic-ancestry", "Draconic Ancestry",
               "Choose a dragon type; it sets your breath weapon and damage resistance."),
        _trait("breath-weapon", "Breath Weapon",
               "Exhale destructive energy determined by your draconic ancestry.", TraitType.ACTIVE),
        _trait("damage-resistance", "Damage Resistance",
               "Resistance to the damage type of your draconic ancestry."),
    ),
    languages=("Common", "Draconic"),
    description="Born of dragons, proud and self-sufficient.",
)

_GNOME_TRAITS = (
    DARKVISION,
    _trait("gnome-cunning", "Gnome Cunning",
           "Advantage on Intelligence, Wisdom and Charisma saving throws against magic."),
)

FOREST_GNOME = Race(
    id="forest-gnome",
    name="Forest Gnome",
    base_race="gnome",
    size=Size.SMALL,
    speed=Speed(walk=25),
    ability_bonuses=_bonuses(intelligence=2, dexterity=1),
    traits=(
        *_GNOME_TRAITS,
        _trait("natural-illusionist", "Natural Illusionist", "You know the minor illusion cantrip."),
        _trait("speak-with-small-beasts", "Speak with Small Beasts",
               "Communicate simple ideas with Small or smaller beasts."),
    ),
    languages=("Common", "Gnomish"),
    description="A knack for illusion and an inherent quickness and stealth.",
)

ROCK_GNOME = Race(
    id="rock-gnome",
    name="Rock Gnome",
    base_race="gnome",
    size=Size.SMALL,
    speed=Speed(walk=25),
    ability_bonuses=_bonuses(intelligence=2, constitution=1),
    traits=(
        *_GNOME_TRAITS,
        _trait("artificers-lore", "Artificer's Lore",
               "Double proficiency on History checks about magic items, alchemy or technology."),
        _trait("tinker", "Tinker", "Proficiency with tinker's tools and the ability to build clockwork devices."),
    ),
    languages=("Common", "Gnomish"),
    description="A natural inventiveness and hardiness beyond other gnomes.",
)

HALF_ELF = Race(
    id="half-elf",
    name="Half-Elf",
    ability_bonuses=_bonuses(charisma=2),
    traits=(
        DARKVISION,
        _trait("fey-ancestry", "Fey Ancestry",
               "Advantage on saving throws against being charmed; magic can't put you to sleep."),
        _trait("skill-versatility", "Skill Versatility", "Proficiency in two skills of your choice."),
    ),
    languages=("Common", "Elvish"),
    language_choices=1,
    description="Combining the best qualities of their elf and human parents.",
)

HALF_ORC = Race(
    id="half-orc",
    name="Half-Orc",
    ability_bonuses=_bonuses(strength=2, constitution=1),
    traits=(
        DARKVISION,
        _trait("menacing", "Menacing", "Proficiency in the Intimidation skill."),
        _trait("relentless-endurance", "Relentless Endurance",
               "Drop to 1 hit point instead of 0 once per long rest.", TraitType.ACTIVE),
        _trait("savage-attacks", "Savage Attacks",
               "Roll one extra weapon damage die on a melee critical hit."),
    ),
    languages=("Common", "Orc"),
    description="Combining orcish strength with human ambition.",
)

TIEFLING = Race(
    id="tiefling",
    name="Tiefling",
    ability_bonuses=_bonuses(charisma=2, intelligence=1),
    traits=(
        DARKVISION,
        _trait("hellish-resistance", "Hellish Resistance", "Resistance to fire damage."),
        _trait("infernal-legacy", "Infernal Legacy",
               "You know the thaumaturgy cantrip and gain more innate spells as you level."),
    ),
    languages=("Common", "Infernal"),
    description="Bearing the mark of an infernal bloodline.",
)


SRD_RACES: tuple[Race, ...] = (
    HILL_DWARF,
    MOUNTAIN_DWARF,
    HIGH_ELF,
    WOOD_ELF,
    LIGHTFOOT_HALFLING,
    STOUT_HALFLING,
    HUMAN,
    DRAGONBORN,
    FOREST_GNOME,
    ROCK_GNOME,
    HALF_ELF,
    HALF_ORC,
    TIEFLING,
)

SRD_FLEXIBLE_BONUSES: tuple[FlexibleBonusConfig, ...] = (
    FlexibleBonusConfig(
        race_id="half-elf",
        choice_count=2,
        bonus_per_choice=1,
        excluded_abilities=frozenset({Ability.CHA}),
        allow_stacking=False,
    ),
)


__all__ = [
    "SRD_RACES",
    "SRD_FLEXIBLE_BONUSES",
]
