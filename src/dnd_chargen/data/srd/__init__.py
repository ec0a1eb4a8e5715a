"""D&D 5E System Reference Document content.

``load_srd_content`` bundles every SRD table into a ``RulesContent``.
"""

from __future__ import annotations

from dnd_chargen.catalog.catalog import RulesContent
from dnd_chargen.data.srd.backgrounds import SRD_BACKGROUNDS
from dnd_chargen.data.srd.classes import SRD_CLASSES
from dnd_chargen.data.srd.races import SRD_FLEXIBLE_BONUSES, SRD_RACES
from dnd_chargen.data.srd.spells import SRD_SPELLS


def load_srd_content(*, strict: bool = True) -> RulesContent:
    """Build catalogs over the SRD tables."""
    return RulesContent(
        races=SRD_RACES,
        classes=SRD_CLASSES,
        backgrounds=SRD_BACKGROUNDS,
        spells=SRD_SPELLS,
        flexible_bonuses=SRD_FLEXIBLE_BONUSES,
        strict=strict,
    )


__all__ = [
    "SRD_RACES",
    "SRD_FLEXIBLE_BONUSES",
    "SRD_CLASSES",
    "SRD_BACKGROUNDS",
    "SRD_SPELLS",
    "load_srd_content",
]
