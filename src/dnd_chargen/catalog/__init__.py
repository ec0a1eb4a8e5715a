"""Read-only content catalogs."""

from __future__ import annotations

from dnd_chargen.catalog.catalog import ContentCatalog, Identified, RulesContent


__all__ = [
    "ContentCatalog",
    "Identified",
    "RulesContent",
]
