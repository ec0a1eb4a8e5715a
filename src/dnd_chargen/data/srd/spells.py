"""SRD cantrips and 1st-level spells with their class lists."""

from __future__ import annotations

from dnd_chargen.models.content import Spell
from dnd_chargen.models.enums import SpellSchool


def _spell(
    spell_id: str,
    name: str,
    level: int,
    school: SpellSchool,
    classes: tuple[str, ...],
    *,
    casting_time: str = "1 action",
    range_: str = "Self",
    components: tuple[str, ...] = ("V", "S"),
    duration: str = "Instantaneous",
    description: str = "",
    ritual: bool = False,
    concentration: bool = False,
) -> Spell:
    return Spell(
        id=spell_id,
        name=name,
        level=level,
        school=school,
        casting_time=casting_time,
        range=range_,
        components=components,
        duration=duration,
        description=description,
        ritual=ritual,
        concentration=concentration,
        classes=classes,
    )


_S = SpellSchool

# =============================================================================
# Cantrips
# =============================================================================

CANTRIPS: tuple[Spell, ...] = (
    _spell("acid-splash", "Acid Splash", 0, _S.CONJURATION, ("sorcerer", "wizard"),
           range_="60 feet", description="Hurl a bubble of acid at one or two nearby creatures."),
    _spell("chill-touch", "Chill Touch", 0, _S.NECROMANCY, ("sorcerer", "warlock", "wizard"),
           range_="120 feet", duration="1 round", description="A ghostly hand deals necrotic damage and blocks healing."),
    _spell("dancing-lights", "Dancing Lights", 0, _S.EVOCATION, ("bard", "sorcerer", "wizard"),
           range_="120 feet", components=("V", "S", "M"), duration="Up to 1 minute",
           description="Create up to four torch-sized lights.", concentration=True),
    _spell("druidcraft", "Druidcraft", 0, _S.TRANSMUTATION, ("druid",),
           range_="30 feet", description="Whisper to the spirits of nature for a minor effect."),
    _spell("eldritch-blast", "Eldritch Blast", 0, _S.EVOCATION, ("warlock",),
           range_="120 feet", description="A beam of crackling energy streaks toward a creature."),
    _spell("fire-bolt", "Fire Bolt", 0, _S.EVOCATION, ("sorcerer", "wizard"),
           range_="120 feet", description="Hurl a mote of fire at a creature or object."),
    _spell("guidance", "Guidance", 0, _S.DIVINATION, ("cleric", "druid"),
           range_="Touch", duration="Up to 1 minute",
           description="Add a d4 to one ability check.", concentration=True),
    _spell("light", "Light", 0, _S.EVOCATION, ("bard", "cleric", "sorcerer", "wizard"),
           range_="Touch", components=("V", "M"), duration="1 hour",
           description="An object sheds bright light in a 20-foot radius."),
    _spell("mage-hand", "Mage Hand", 0, _S.CONJURATION, ("bard", "sorcerer", "warlock", "wizard"),
           range_="30 feet", duration="1 minute", description="A spectral hand manipulates objects."),
    _spell("mending", "Mending", 0, _S.TRANSMUTATION, ("bard", "cleric", "druid", "sorcerer", "wizard"),
           casting_time="1 minute", range_="Touch", components=("V", "S", "M"),
           description="Repair a single break or tear in an object."),
    _spell("message", "Message", 0, _S.TRANSMUTATION, ("bard", "sorcerer", "wizard"),
           range_="120 feet", components=("V", "S", "M"), duration="1 round",
           description="Whisper a message that only the target hears."),
    _spell("minor-illusion", "Minor Illusion", 0, _S.ILLUSION, ("bard", "sorcerer", "warlock", "wizard"),
           range_="30 feet", components=("S", "M"), duration="1 minute",
           description="Create a sound or an image of an object."),
    _spell("poison-spray", "Poison Spray", 0, _S.CONJURATION, ("druid", "sorcerer", "warlock", "wizard"),
           range_="10 feet", description="Project a puff of noxious gas."),
    _spell("prestidigitation", "Prestidigitation", 0, _S.TRANSMUTATION, ("bard", "sorcerer", "warlock", "wizard"),
           range_="10 feet", duration="Up to 1 hour", description="A minor magical trick."),
    _spell("produce-flame", "Produce Flame", 0, _S.CONJURATION, ("druid",),
           duration="10 minutes", description="A flickering flame appears in your hand."),
    _spell("ray-of-frost", "Ray of Frost", 0, _S.EVOCATION, ("sorcerer", "wizard"),
           range_="60 feet", description="A frigid beam deals cold damage and slows the target."),
    _spell("resistance", "Resistance", 0, _S.ABJURATION, ("cleric", "druid"),
           range_="Touch", components=("V", "S", "M"), duration="Up to 1 minute",
           description="Add a d4 to one saving throw.", concentration=True),
    _spell("sacred-flame", "Sacred Flame", 0, _S.EVOCATION, ("cleric",),
           range_="60 feet", description="Flame-like radiance descends on a creature."),
    _spell("shocking-grasp", "Shocking Grasp", 0, _S.EVOCATION, ("sorcerer", "wizard"),
           range_="Touch", description="Lightning springs from your hand."),
    _spell("spare-the-dying", "Spare the Dying", 0, _S.NECROMANCY, ("cleric",),
           range_="Touch", description="Stabilize a living creature with 0 hit points."),
    _spell("thaumaturgy", "Thaumaturgy", 0, _S.TRANSMUTATION, ("cleric",),
           range_="30 feet", components=("V",), duration="Up to 1 minute",
           description="Manifest a minor wonder."),
    _spell("true-strike", "True Strike", 0, _S.DIVINATION, ("bard", "sorcerer", "warlock", "wizard"),
           range_="30 feet", components=("S",), duration="Up to 1 round",
           description="Gain advantage on your next attack roll.", concentration=True),
    _spell("vicious-mockery", "Vicious Mockery", 0, _S.ENCHANTMENT, ("bard",),
           range_="60 feet", components=("V",), description="Insults laced with subtle enchantment."),
)

# =============================================================================
# 1st Level
# =============================================================================

FIRST_LEVEL: tuple[Spell, ...] = (
    _spell("bless", "Bless", 1, _S.ENCHANTMENT, ("cleric", "paladin"),
           range_="30 feet", components=("V", "S", "M"), duration="Up to 1 minute",
           description="Up to three creatures add a d4 to attacks and saves.", concentration=True),
    _spell("burning-hands", "Burning Hands", 1, _S.EVOCATION, ("sorcerer", "wizard"),
           range_="Self (15-foot cone)", description="A thin sheet of flames shoots from your fingertips."),
    _spell("charm-person", "Charm Person", 1, _S.ENCHANTMENT, ("bard", "druid", "sorcerer", "warlock", "wizard"),
           range_="30 feet", duration="1 hour", description="Charm a humanoid you can see."),
    _spell("cure-wounds", "Cure Wounds", 1, _S.EVOCATION, ("bard", "cleric", "druid", "paladin", "ranger"),
           range_="Touch", description="A touched creature regains hit points."),
    _spell("detect-magic", "Detect Magic", 1, _S.DIVINATION,
           ("bard", "cleric", "druid", "paladin", "ranger", "sorcerer", "wizard"),
           duration="Up to 10 minutes", description="Sense the presence of magic within 30 feet.",
           ritual=True, concentration=True),
    _spell("disguise-self", "Disguise Self", 1, _S.ILLUSION, ("bard", "sorcerer", "wizard"),
           duration="1 hour", description="Make yourself look different."),
    _spell("faerie-fire", "Faerie Fire", 1, _S.EVOCATION, ("bard", "druid"),
           range_="60 feet", components=("V",), duration="Up to 1 minute",
           description="Outline creatures in light, granting advantage against them.", concentration=True),
    _spell("guiding-bolt", "Guiding Bolt", 1, _S.EVOCATION, ("cleric",),
           range_="120 feet", duration="1 round", description="A flash of light deals radiant damage."),
    _spell("healing-word", "Healing Word", 1, _S.EVOCATION, ("bard", "cleric", "druid"),
           casting_time="1 bonus action", range_="60 feet", components=("V",),
           description="A creature you can see regains hit points."),
    _spell("hellish-rebuke", "Hellish Rebuke", 1, _S.EVOCATION, ("warlock",),
           casting_time="1 reaction", range_="60 feet", description="Engulf an attacker in flames."),
    _spell("heroism", "Heroism", 1, _S.ENCHANTMENT, ("bard", "paladin"),
           range_="Touch", duration="Up to 1 minute",
           description="A willing creature is immune to fear and gains temporary hit points.",
           concentration=True),
    _spell("identify", "Identify", 1, _S.DIVINATION, ("bard", "wizard"),
           casting_time="1 minute", range_="Touch", components=("V", "S", "M"),
           description="Learn the properties of a magic item.", ritual=True),
    _spell("inflict-wounds", "Inflict Wounds", 1, _S.NECROMANCY, ("cleric",),
           range_="Touch", description="A melee spell attack deals necrotic damage."),
    _spell("mage-armor", "Mage Armor", 1, _S.ABJURATION, ("sorcerer", "wizard"),
           range_="Touch", components=("V", "S", "M"), duration="8 hours",
           description="Base AC becomes 13 + Dexterity modifier."),
    _spell("magic-missile", "Magic Missile", 1, _S.EVOCATION, ("sorcerer", "wizard"),
           range_="120 feet", description="Three glowing darts of force strike unerringly."),
    _spell("protection-from-evil-and-good", "Protection from Evil and Good", 1, _S.ABJURATION,
           ("cleric", "paladin", "warlock", "wizard"),
           range_="Touch", components=("V", "S", "M"), duration="Up to 10 minutes",
           description="Ward a creature against aberrations, celestials and others.", concentration=True),
    _spell("sanctuary", "Sanctuary", 1, _S.ABJURATION, ("cleric",),
           casting_time="1 bonus action", range_="30 feet", components=("V", "S", "M"),
           duration="1 minute", description="Ward a creature against attack."),
    _spell("shield", "Shield", 1, _S.ABJURATION, ("sorcerer", "wizard"),
           casting_time="1 reaction", duration="1 round", description="+5 bonus to AC until your next turn."),
    _spell("shield-of-faith", "Shield of Faith", 1, _S.ABJURATION, ("cleric", "paladin"),
           casting_time="1 bonus action", range_="60 feet", components=("V", "S", "M"),
           duration="Up to 10 minutes", description="+2 bonus to AC.", concentration=True),
    _spell("sleep", "Sleep", 1, _S.ENCHANTMENT, ("bard", "sorcerer", "wizard"),
           range_="90 feet", components=("V", "S", "M"), duration="1 minute",
           description="Send creatures into a magical slumber."),
    _spell("speak-with-animals", "Speak with Animals", 1, _S.DIVINATION, ("bard", "druid", "ranger"),
           duration="10 minutes", description="Comprehend and communicate with beasts.", ritual=True),
    _spell("thunderwave", "Thunderwave", 1, _S.EVOCATION, ("bard", "druid", "sorcerer", "wizard"),
           range_="Self (15-foot cube)", description="A wave of thunderous force sweeps out from you."),
)


SRD_SPELLS: tuple[Spell, ...] = CANTRIPS + FIRST_LEVEL


__all__ = [
    "SRD_SPELLS",
]
