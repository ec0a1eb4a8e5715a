"""SRD classes with one SRD subclass each.

Spellcasting profiles embed rows from ``dnd_chargen.rules.progression``.
Prepared casters give their formula as text; it is resolved when the
profile is built.
"""

from __future__ import annotations

from dnd_chargen.models.content import (
    ClassDefinition,
    EquipmentOption,
    EquipmentOptionGroup,
    KnownSpellProgression,
    LeveledSlotTable,
    PactSlotTable,
    PreparedSpellProgression,
    SkillChoiceDescriptor,
    SpellcastingProfile,
    Subclass,
)
from dnd_chargen.models.enums import Ability, Skill
from dnd_chargen.rules.progression import (
    CANTRIPS_KNOWN,
    FULL_CASTER_SLOTS,
    HALF_CASTER_SLOTS,
    PACT_MAGIC_SLOTS,
    SPELLS_KNOWN,
)


def _option(option_id: str, description: str, *items: str) -> EquipmentOption:
    return EquipmentOption(id=option_id, description=description, items=items)


def _group(group_id: str, *options: EquipmentOption) -> EquipmentOptionGroup:
    return EquipmentOptionGroup(id=group_id, choose=1, options=options)


def _skills(count: int, *options: Skill) -> SkillChoiceDescriptor:
    return SkillChoiceDescriptor(choose=count, options=options)


def _full_slots() -> LeveledSlotTable:
    return LeveledSlotTable(rows=dict(FULL_CASTER_SLOTS))


def _half_slots() -> LeveledSlotTable:
    return LeveledSlotTable(rows=dict(HALF_CASTER_SLOTS))


def _known(class_id: str) -> KnownSpellProgression:
    return KnownSpellProgression(spells_known=dict(SPELLS_KNOWN[class_id]))


def _cantrips(class_id: str) -> dict[int, int]:
    return dict(CANTRIPS_KNOWN.get(class_id, {}))


_ALL_SKILLS = tuple(Skill)

_PACKS = {
    "burglar": _option("burglars-pack", "A burglar's pack", "burglars-pack"),
    "diplomat": _option("diplomats-pack", "A diplomat's pack", "diplomats-pack"),
    "dungeoneer": _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
    "entertainer": _option("entertainers-pack", "An entertainer's pack", "entertainers-pack"),
    "explorer": _option("explorers-pack", "An explorer's pack", "explorers-pack"),
    "priest": _option("priests-pack", "A priest's pack", "priests-pack"),
    "scholar": _option("scholars-pack", "A scholar's pack", "scholars-pack"),
}

# =============================================================================
# Martial Classes
# =============================================================================

BARBARIAN = ClassDefinition(
    id="barbarian",
    name="Barbarian",
    hit_die=12,
    saving_throws=(Ability.STR, Ability.CON),
    armor_proficiencies=("light armor", "medium armor", "shields"),
    weapon_proficiencies=("simple weapons", "martial weapons"),
    skill_choices=_skills(
        2, Skill.ANIMAL_HANDLING, Skill.ATHLETICS, Skill.INTIMIDATION,
        Skill.NATURE, Skill.PERCEPTION, Skill.SURVIVAL,
    ),
    equipment_options=(
        _group("barbarian-weapon-1",
               _option("greataxe", "A greataxe", "greataxe"),
               _option("martial-melee", "Any martial melee weapon", "martial-melee-choice")),
        _group("barbarian-weapon-2",
               _option("two-handaxes", "Two handaxes", "handaxe", "handaxe"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("barbarian-pack", _PACKS["explorer"]),
        _group("barbarian-javelins",
               _option("four-javelins", "Four javelins", "javelin", "javelin", "javelin", "javelin")),
    ),
    features={1: ("Rage", "Unarmored Defense"), 2: ("Reckless Attack", "Danger Sense"), 3: ("Primal Path",)},
    subclasses=(Subclass(id="berserker", name="Path of the Berserker", class_id="barbarian"),),
    subclass_level=3,
    description="A fierce warrior who can enter a battle rage.",
)

FIGHTER = ClassDefinition(
    id="fighter",
    name="Fighter",
    hit_die=10,
    saving_throws=(Ability.STR, Ability.CON),
    armor_proficiencies=("all armor", "shields"),
    weapon_proficiencies=("simple weapons", "martial weapons"),
    skill_choices=_skills(
        2, Skill.ACROBATICS, Skill.ANIMAL_HANDLING, Skill.ATHLETICS, Skill.HISTORY,
        Skill.INSIGHT, Skill.INTIMIDATION, Skill.PERCEPTION, Skill.SURVIVAL,
    ),
    equipment_options=(
        _group("fighter-armor",
               _option("chain-mail", "Chain mail", "chain-mail"),
               _option("leather-longbow-arrows", "Leather armor, longbow and 20 arrows",
                       "leather-armor", "longbow", "arrows-20")),
        _group("fighter-weapons",
               _option("martial-weapon-shield", "A martial weapon and a shield",
                       "martial-weapon-choice", "shield"),
               _option("two-martial-weapons", "Two martial weapons",
                       "martial-weapon-choice", "martial-weapon-choice")),
        _group("fighter-ranged",
               _option("light-crossbow-bolts", "A light crossbow and 20 bolts", "light-crossbow", "bolts-20"),
               _option("two-handaxes", "Two handaxes", "handaxe", "handaxe")),
        _group("fighter-pack", _PACKS["dungeoneer"], _PACKS["explorer"]),
    ),
    features={1: ("Fighting Style", "Second Wind"), 2: ("Action Surge",), 3: ("Martial Archetype",)},
    subclasses=(Subclass(id="champion", name="Champion", class_id="fighter"),),
    subclass_level=3,
    description="A master of martial combat, skilled with a variety of weapons and armor.",
)

MONK = ClassDefinition(
    id="monk",
    name="Monk",
    hit_die=8,
    saving_throws=(Ability.STR, Ability.DEX),
    weapon_proficiencies=("simple weapons", "shortswords"),
    tool_proficiencies=("one artisan's tool or musical instrument",),
    skill_choices=_skills(
        2, Skill.ACROBATICS, Skill.ATHLETICS, Skill.HISTORY,
        Skill.INSIGHT, Skill.RELIGION, Skill.STEALTH,
    ),
    equipment_options=(
        _group("monk-weapon",
               _option("shortsword", "A shortsword", "shortsword"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("monk-pack", _PACKS["dungeoneer"], _PACKS["explorer"]),
        _group("monk-darts", _option("ten-darts", "Ten darts", *(["dart"] * 10))),
    ),
    features={
        1: ("Unarmored Defense", "Martial Arts"),
        2: ("Ki", "Flurry of Blows", "Patient Defense", "Step of the Wind", "Unarmored Movement"),
        3: ("Monastic Tradition", "Deflect Missiles"),
    },
    subclasses=(Subclass(id="way-of-the-open-hand", name="Way of the Open Hand", class_id="monk"),),
    subclass_level=3,
    description="A master of martial arts, harnessing the power of the body.",
)

ROGUE = ClassDefinition(
    id="rogue",
    name="Rogue",
    hit_die=8,
    saving_throws=(Ability.DEX, Ability.INT),
    armor_proficiencies=("light armor",),
    weapon_proficiencies=("simple weapons", "hand crossbows", "longswords", "rapiers", "shortswords"),
    tool_proficiencies=("thieves' tools",),
    skill_choices=_skills(
        4, Skill.ACROBATICS, Skill.ATHLETICS, Skill.DECEPTION, Skill.INSIGHT,
        Skill.INTIMIDATION, Skill.INVESTIGATION, Skill.PERCEPTION, Skill.PERFORMANCE,
        Skill.PERSUASION, Skill.SLEIGHT_OF_HAND, Skill.STEALTH,
    ),
    equipment_options=(
        _group("rogue-weapon-1",
               _option("rapier", "A rapier", "rapier"),
               _option("shortsword", "A shortsword", "shortsword")),
        _group("rogue-weapon-2",
               _option("shortbow-quiver", "A shortbow and quiver of 20 arrows", "shortbow", "arrows-20"),
               _option("shortsword-2", "A shortsword", "shortsword")),
        _group("rogue-pack", _PACKS["burglar"], _PACKS["dungeoneer"], _PACKS["explorer"]),
        _group("rogue-standard",
               _option("leather-daggers-tools", "Leather armor, two daggers and thieves' tools",
                       "leather-armor", "dagger", "dagger", "thieves-tools")),
    ),
    features={1: ("Expertise", "Sneak Attack", "Thieves' Cant"), 2: ("Cunning Action",), 3: ("Roguish Archetype",)},
    subclasses=(Subclass(id="thief", name="Thief", class_id="rogue"),),
    subclass_level=3,
    description="A scoundrel who uses stealth and trickery to overcome obstacles.",
)

# =============================================================================
# Full Casters
# =============================================================================

BARD = ClassDefinition(
    id="bard",
    name="Bard",
    hit_die=8,
    saving_throws=(Ability.DEX, Ability.CHA),
    armor_proficiencies=("light armor",),
    weapon_proficiencies=("simple weapons", "hand crossbows", "longswords", "rapiers", "shortswords"),
    tool_proficiencies=("three musical instruments",),
    skill_choices=SkillChoiceDescriptor(choose=3, options=_ALL_SKILLS),
    equipment_options=(
        _group("bard-weapon",
               _option("rapier", "A rapier", "rapier"),
               _option("longsword", "A longsword", "longsword"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("bard-pack", _PACKS["diplomat"], _PACKS["entertainer"]),
        _group("bard-instrument",
               _option("lute", "A lute", "lute"),
               _option("musical-instrument", "Any other musical instrument", "musical-instrument-choice")),
        _group("bard-standard",
               _option("leather-dagger", "Leather armor and a dagger", "leather-armor", "dagger")),
    ),
    features={1: ("Spellcasting", "Bardic Inspiration"), 2: ("Jack of All Trades", "Song of Rest"),
              3: ("Bard College", "Expertise")},
    subclasses=(Subclass(id="college-of-lore", name="College of Lore", class_id="bard"),),
    subclass_level=3,
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        cantrips_known=_cantrips("bard"),
        progression=_known("bard"),
        slots=_full_slots(),
        spell_list_id="bard",
        ritual_casting=True,
    ),
    description="An inspiring magician whose power echoes the music of creation.",
)

CLERIC = ClassDefinition(
    id="cleric",
    name="Cleric",
    hit_die=8,
    saving_throws=(Ability.WIS, Ability.CHA),
    armor_proficiencies=("light armor", "medium armor", "shields"),
    weapon_proficiencies=("simple weapons",),
    skill_choices=_skills(
        2, Skill.HISTORY, Skill.INSIGHT, Skill.MEDICINE, Skill.PERSUASION, Skill.RELIGION,
    ),
    equipment_options=(
        _group("cleric-weapon",
               _option("mace", "A mace", "mace"),
               _option("warhammer", "A warhammer (if proficient)", "warhammer")),
        _group("cleric-armor",
               _option("scale-mail", "Scale mail", "scale-mail"),
               _option("leather-armor", "Leather armor", "leather-armor"),
               _option("chain-mail", "Chain mail (if proficient)", "chain-mail")),
        _group("cleric-weapon-2",
               _option("light-crossbow-bolts", "A light crossbow and 20 bolts", "light-crossbow", "bolts-20"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("cleric-pack", _PACKS["priest"], _PACKS["explorer"]),
        _group("cleric-standard",
               _option("shield-holy-symbol", "A shield and a holy symbol", "shield", "holy-symbol")),
    ),
    features={1: ("Spellcasting", "Divine Domain"), 2: ("Channel Divinity", "Turn Undead")},
    subclasses=(
        Subclass(
            id="life-domain",
            name="Life Domain",
            class_id="cleric",
            description="Positive energy that sustains all life.",
            bonus_spells={
                1: ("bless", "cure-wounds"),
                3: ("lesser-restoration", "spiritual-weapon"),
                5: ("beacon-of-hope", "revivify"),
                7: ("death-ward", "guardian-of-faith"),
                9: ("mass-cure-wounds", "raise-dead"),
            },
        ),
    ),
    subclass_level=1,
    spellcasting=SpellcastingProfile(
        ability=Ability.WIS,
        cantrips_known=_cantrips("cleric"),
        progression=PreparedSpellProgression(formula="WIS_MOD + LEVEL"),
        slots=_full_slots(),
        spell_list_id="cleric",
        ritual_casting=True,
    ),
    description="A priestly champion who wields divine magic in service of a higher power.",
)

DRUID = ClassDefinition(
    id="druid",
    name="Druid",
    hit_die=8,
    saving_throws=(Ability.INT, Ability.WIS),
    armor_proficiencies=("light armor", "medium armor", "shields (nonmetal)"),
    weapon_proficiencies=("clubs", "daggers", "darts", "javelins", "maces", "quarterstaffs",
                          "scimitars", "sickles", "slings", "spears"),
    tool_proficiencies=("herbalism kit",),
    skill_choices=_skills(
        2, Skill.ARCANA, Skill.ANIMAL_HANDLING, Skill.INSIGHT, Skill.MEDICINE,
        Skill.NATURE, Skill.PERCEPTION, Skill.RELIGION, Skill.SURVIVAL,
    ),
    equipment_options=(
        _group("druid-shield",
               _option("wooden-shield", "A wooden shield", "wooden-shield"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("druid-weapon",
               _option("scimitar", "A scimitar", "scimitar"),
               _option("simple-melee", "Any simple melee weapon", "simple-melee-choice")),
        _group("druid-standard",
               _option("leather-explorer-focus", "Leather armor, an explorer's pack and a druidic focus",
                       "leather-armor", "explorers-pack", "druidic-focus")),
    ),
    features={1: ("Druidic", "Spellcasting"), 2: ("Wild Shape", "Druid Circle")},
    subclasses=(Subclass(id="circle-of-the-land", name="Circle of the Land", class_id="druid"),),
    subclass_level=2,
    spellcasting=SpellcastingProfile(
        ability=Ability.WIS,
        cantrips_known=_cantrips("druid"),
        progression=PreparedSpellProgression(formula="WIS_MOD + LEVEL"),
        slots=_full_slots(),
        spell_list_id="druid",
        ritual_casting=True,
    ),
    description="A priest of the Old Faith, wielding the powers of nature.",
)

SORCERER = ClassDefinition(
    id="sorcerer",
    name="Sorcerer",
    hit_die=6,
    saving_throws=(Ability.CON, Ability.CHA),
    weapon_proficiencies=("daggers", "darts", "slings", "quarterstaffs", "light crossbows"),
    skill_choices=_skills(
        2, Skill.ARCANA, Skill.DECEPTION, Skill.INSIGHT,
        Skill.INTIMIDATION, Skill.PERSUASION, Skill.RELIGION,
    ),
    equipment_options=(
        _group("sorcerer-weapon",
               _option("light-crossbow-bolts", "A light crossbow and 20 bolts", "light-crossbow", "bolts-20"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("sorcerer-focus",
               _option("component-pouch", "A component pouch", "component-pouch"),
               _option("arcane-focus", "An arcane focus", "arcane-focus")),
        _group("sorcerer-pack", _PACKS["dungeoneer"], _PACKS["explorer"]),
        _group("sorcerer-standard", _option("two-daggers", "Two daggers", "dagger", "dagger")),
    ),
    features={1: ("Spellcasting", "Sorcerous Origin"), 2: ("Font of Magic",), 3: ("Metamagic",)},
    subclasses=(Subclass(id="draconic-bloodline", name="Draconic Bloodline", class_id="sorcerer"),),
    subclass_level=1,
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        cantrips_known=_cantrips("sorcerer"),
        progression=_known("sorcerer"),
        slots=_full_slots(),
        spell_list_id="sorcerer",
    ),
    description="A spellcaster who draws on inherent magic from a gift or bloodline.",
)

WIZARD = ClassDefinition(
    id="wizard",
    name="Wizard",
    hit_die=6,
    saving_throws=(Ability.INT, Ability.WIS),
    weapon_proficiencies=("daggers", "darts", "slings", "quarterstaffs", "light crossbows"),
    skill_choices=_skills(
        2, Skill.ARCANA, Skill.HISTORY, Skill.INSIGHT,
        Skill.INVESTIGATION, Skill.MEDICINE, Skill.RELIGION,
    ),
    equipment_options=(
        _group("wizard-weapon",
               _option("quarterstaff", "A quarterstaff", "quarterstaff"),
               _option("dagger", "A dagger", "dagger")),
        _group("wizard-focus",
               _option("component-pouch", "A component pouch", "component-pouch"),
               _option("arcane-focus", "An arcane focus", "arcane-focus")),
        _group("wizard-pack", _PACKS["scholar"], _PACKS["explorer"]),
        _group("wizard-standard", _option("spellbook", "A spellbook", "spellbook")),
    ),
    features={1: ("Spellcasting", "Arcane Recovery"), 2: ("Arcane Tradition",)},
    subclasses=(Subclass(id="school-of-evocation", name="School of Evocation", class_id="wizard"),),
    subclass_level=2,
    spellcasting=SpellcastingProfile(
        ability=Ability.INT,
        cantrips_known=_cantrips("wizard"),
        progression=PreparedSpellProgression(formula="INT_MOD + LEVEL"),
        slots=_full_slots(),
        spell_list_id="wizard",
        ritual_casting=True,
    ),
    description="A scholarly magic-user capable of manipulating the structures of reality.",
)

# =============================================================================
# Half Casters
# =============================================================================

PALADIN = ClassDefinition(
    id="paladin",
    name="Paladin",
    hit_die=10,
    saving_throws=(Ability.WIS, Ability.CHA),
    armor_proficiencies=("all armor", "shields"),
    weapon_proficiencies=("simple weapons", "martial weapons"),
    skill_choices=_skills(
        2, Skill.ATHLETICS, Skill.INSIGHT, Skill.INTIMIDATION,
        Skill.MEDICINE, Skill.PERSUASION, Skill.RELIGION,
    ),
    equipment_options=(
        _group("paladin-weapons",
               _option("martial-weapon-shield", "A martial weapon and a shield",
                       "martial-weapon-choice", "shield"),
               _option("two-martial-weapons", "Two martial weapons",
                       "martial-weapon-choice", "martial-weapon-choice")),
        _group("paladin-secondary",
               _option("five-javelins", "Five javelins", *(["javelin"] * 5)),
               _option("simple-melee", "Any simple melee weapon", "simple-melee-choice")),
        _group("paladin-pack", _PACKS["priest"], _PACKS["explorer"]),
        _group("paladin-standard",
               _option("chain-mail-holy-symbol", "Chain mail and a holy symbol", "chain-mail", "holy-symbol")),
    ),
    features={1: ("Divine Sense", "Lay on Hands"), 2: ("Fighting Style", "Spellcasting", "Divine Smite"),
              3: ("Divine Health", "Sacred Oath")},
    subclasses=(
        Subclass(
            id="oath-of-devotion",
            name="Oath of Devotion",
            class_id="paladin",
            bonus_spells={
                3: ("protection-from-evil-and-good", "sanctuary"),
                5: ("lesser-restoration", "zone-of-truth"),
                9: ("beacon-of-hope", "dispel-magic"),
                13: ("freedom-of-movement", "guardian-of-faith"),
                17: ("commune", "flame-strike"),
            },
        ),
    ),
    subclass_level=3,
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        progression=PreparedSpellProgression(formula="CHA_MOD + HALF_LEVEL"),
        slots=_half_slots(),
        spell_list_id="paladin",
        first_level=2,
    ),
    description="A holy warrior bound to a sacred oath.",
)

RANGER = ClassDefinition(
    id="ranger",
    name="Ranger",
    hit_die=10,
    saving_throws=(Ability.STR, Ability.DEX),
    armor_proficiencies=("light armor", "medium armor", "shields"),
    weapon_proficiencies=("simple weapons", "martial weapons"),
    skill_choices=_skills(
        3, Skill.ANIMAL_HANDLING, Skill.ATHLETICS, Skill.INSIGHT, Skill.INVESTIGATION,
        Skill.NATURE, Skill.PERCEPTION, Skill.STEALTH, Skill.SURVIVAL,
    ),
    equipment_options=(
        _group("ranger-armor",
               _option("scale-mail", "Scale mail", "scale-mail"),
               _option("leather-armor", "Leather armor", "leather-armor")),
        _group("ranger-weapons",
               _option("two-shortswords", "Two shortswords", "shortsword", "shortsword"),
               _option("two-simple-melee", "Two simple melee weapons",
                       "simple-melee-choice", "simple-melee-choice")),
        _group("ranger-pack", _PACKS["dungeoneer"], _PACKS["explorer"]),
        _group("ranger-standard",
               _option("longbow-quiver", "A longbow and a quiver of 20 arrows", "longbow", "arrows-20")),
    ),
    features={1: ("Favored Enemy", "Natural Explorer"), 2: ("Fighting Style", "Spellcasting"),
              3: ("Ranger Archetype", "Primeval Awareness")},
    subclasses=(Subclass(id="hunter", name="Hunter", class_id="ranger"),),
    subclass_level=3,
    spellcasting=SpellcastingProfile(
        ability=Ability.WIS,
        progression=_known("ranger"),
        slots=_half_slots(),
        spell_list_id="ranger",
        first_level=2,
    ),
    description="A warrior who uses martial prowess and nature magic on the frontier.",
)

# =============================================================================
# Pact Caster
# =============================================================================

WARLOCK = ClassDefinition(
    id="warlock",
    name="Warlock",
    hit_die=8,
    saving_throws=(Ability.WIS, Ability.CHA),
    armor_proficiencies=("light armor",),
    weapon_proficiencies=("simple weapons",),
    skill_choices=_skills(
        2, Skill.ARCANA, Skill.DECEPTION, Skill.HISTORY, Skill.INTIMIDATION,
        Skill.INVESTIGATION, Skill.NATURE, Skill.RELIGION,
    ),
    equipment_options=(
        _group("warlock-weapon",
               _option("light-crossbow-bolts", "A light crossbow and 20 bolts", "light-crossbow", "bolts-20"),
               _option("simple-weapon", "Any simple weapon", "simple-weapon-choice")),
        _group("warlock-focus",
               _option("component-pouch", "A component pouch", "component-pouch"),
               _option("arcane-focus", "An arcane focus", "arcane-focus")),
        _group("warlock-pack", _PACKS["scholar"], _PACKS["dungeoneer"]),
        _group("warlock-standard",
               _option("leather-simple-daggers", "Leather armor, any simple weapon and two daggers",
                       "leather-armor", "simple-weapon-choice", "dagger", "dagger")),
    ),
    features={1: ("Otherworldly Patron", "Pact Magic"), 2: ("Eldritch Invocations",), 3: ("Pact Boon",)},
    subclasses=(Subclass(id="the-fiend", name="The Fiend", class_id="warlock"),),
    subclass_level=1,
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        cantrips_known=_cantrips("warlock"),
        progression=_known("warlock"),
        slots=PactSlotTable(rows=dict(PACT_MAGIC_SLOTS)),
        spell_list_id="warlock",
    ),
    description="A wielder of magic derived from a bargain with an extraplanar entity.",
)


SRD_CLASSES: tuple[ClassDefinition, ...] = (
    BARBARIAN,
    BARD,
    CLERIC,
    DRUID,
    FIGHTER,
    MONK,
    PALADIN,
    RANGER,
    ROGUE,
    SORCERER,
    WARLOCK,
    WIZARD,
)


__all__ = [
    "SRD_CLASSES",
]
