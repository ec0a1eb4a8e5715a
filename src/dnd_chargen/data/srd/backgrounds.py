"""SRD-style backgrounds."""

from __future__ import annotations

from dnd_chargen.models.content import Background
from dnd_chargen.models.enums import Skill


SRD_BACKGROUNDS: tuple[Background, ...] = (
    Background(
        id="acolyte",
        name="Acolyte",
        skill_proficiencies=(Skill.INSIGHT, Skill.RELIGION),
        language_choices=2,
        equipment=("holy-symbol", "prayer-book", "incense-5", "vestments", "common-clothes", "pouch-15gp"),
        feature_name="Shelter of the Faithful",
        feature_description="You and your companions can expect free healing and care at a temple of your faith.",
        description="You have spent your life in the service of a temple.",
    ),
    Background(
        id="criminal",
        name="Criminal",
        skill_proficiencies=(Skill.DECEPTION, Skill.STEALTH),
        tool_proficiencies=("gaming-set", "thieves-tools"),
        equipment=("crowbar", "dark-common-clothes-hood", "pouch-15gp"),
        feature_name="Criminal Contact",
        feature_description="You have a reliable contact who acts as your liaison to a network of criminals.",
        description="You are an experienced criminal with a history of breaking the law.",
    ),
    Background(
        id="folk-hero",
        name="Folk Hero",
        skill_proficiencies=(Skill.ANIMAL_HANDLING, Skill.SURVIVAL),
        tool_proficiencies=("artisans-tools", "land-vehicles"),
        equipment=("artisans-tools", "shovel", "iron-pot", "common-clothes", "pouch-10gp"),
        feature_name="Rustic Hospitality",
        feature_description="Common folk will shelter you from the law or anyone else searching for you.",
        description="You come from a humble social rank, but you are destined for much more.",
    ),
    Background(
        id="noble",
        name="Noble",
        skill_proficiencies=(Skill.HISTORY, Skill.PERSUASION),
        tool_proficiencies=("gaming-set",),
        language_choices=1,
        equipment=("fine-clothes", "signet-ring", "scroll-of-pedigree", "purse-25gp"),
        feature_name="Position of Privilege",
        feature_description="People are inclined to think the best of you and you are welcome in high society.",
        description="You understand wealth, power, and privilege.",
    ),
    Background(
        id="sage",
        name="Sage",
        skill_proficiencies=(Skill.ARCANA, Skill.HISTORY),
        language_choices=2,
        equipment=("ink", "quill", "small-knife", "letter-from-colleague", "common-clothes", "pouch-10gp"),
        feature_name="Researcher",
        feature_description="When you don't know a piece of lore, you often know where to find it.",
        description="You spent years learning the lore of the multiverse.",
    ),
    Background(
        id="soldier",
        name="Soldier",
        skill_proficiencies=(Skill.ATHLETICS, Skill.INTIMIDATION),
        tool_proficiencies=("gaming-set", "land-vehicles"),
        equipment=("insignia-of-rank", "trophy", "dice-set", "common-clothes", "pouch-10gp"),
        feature_name="Military Rank",
        feature_description="Soldiers loyal to your former organization still recognize your authority.",
        description="War has been your life for as long as you care to remember.",
    ),
)


__all__ = [
    "SRD_BACKGROUNDS",
]
