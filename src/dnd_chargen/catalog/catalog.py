"""Read-only indexed lookup over content records.

A ``ContentCatalog`` wraps one collection (races, classes, backgrounds,
spells) keyed by each record's ``id``. A ``RulesContent`` bundles the
catalogs and the flexible-bonus configs an engine instance owns.

Lookups never raise for unknown ids: they return None or an empty list and
leave reporting to the validators.

Example:
    >>> races = ContentCatalog(SRD_RACES, name="races")
    >>> races.get_by_id("hill-dwarf").name
    'Hill Dwarf'
    >>> [r.id for r in races.filter(lambda r: r.base_race == "dwarf")]
    ['hill-dwarf', 'mountain-dwarf']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, Protocol, TypeVar

from dnd_chargen.core.exceptions import ContentError
from dnd_chargen.core.logging import get_logger
from dnd_chargen.models.content import (
    Background,
    ClassDefinition,
    FlexibleBonusConfig,
    Race,
    Spell,
)


logger = get_logger(__name__)


class Identified(Protocol):
    """Anything with a stable string identifier."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Identified)


class ContentCatalog(Generic[T]):
    """Immutable id-indexed collection.

    Insertion order is preserved for ``all`` and ``filter``.

    Args:
        items: Records to index.
        name: Collection name used in log and error context.
        strict: Raise on duplicate ids instead of keeping the last record.

    Raises:
        ContentError: If ``strict`` and two records share an id.
    """

    def __init__(self, items: Iterable[T], *, name: str, strict: bool = True) -> None:
        self._name = name
        index: dict[str, T] = {}
        for item in items:
            if item.id in index:
                if strict:
                    raise ContentError(
                        f"Duplicate id in {name} catalog",
                        content_id=item.id,
                        collection=name,
                    )
                logger.warning("Duplicate content id replaced", collection=name, content_id=item.id)
            index[item.id] = item
        self._index: Mapping[str, T] = MappingProxyType(index)
        logger.debug("Catalog built", collection=name, size=len(index))

    @property
    def name(self) -> str:
        return self._name

    def get_by_id(self, content_id: str | None) -> T | None:
        """Exact lookup. Returns None for unknown or missing ids."""
        if content_id is None:
            return None
        return self._index.get(content_id)

    def exists(self, content_id: str | None) -> bool:
        return content_id is not None and content_id in self._index

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """All records matching ``predicate``, in catalog order."""
        return [item for item in self._index.values() if predicate(item)]

    def all(self) -> list[T]:
        return list(self._index.values())

    def ids(self) -> tuple[str, ...]:
        return tuple(self._index)

    def __contains__(self, content_id: object) -> bool:
        return content_id in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"ContentCatalog(name={self._name!r}, size={len(self)})"


class RulesContent:
    """The content an engine instance reads from.

    Attributes:
        races: Race and subrace records.
        classes: Class definitions.
        backgrounds: Background records.
        spells: Spell records.
        flexible_bonuses: Flexible-bonus configs keyed by race id.
    """

    def __init__(
        self,
        *,
        races: Iterable[Race],
        classes: Iterable[ClassDefinition],
        backgrounds: Iterable[Background],
        spells: Iterable[Spell],
        flexible_bonuses: Iterable[FlexibleBonusConfig] = (),
        strict: bool = True,
    ) -> None:
        self.races: ContentCatalog[Race] = ContentCatalog(races, name="races", strict=strict)
        self.classes: ContentCatalog[ClassDefinition] = ContentCatalog(
            classes, name="classes", strict=strict
        )
        self.backgrounds: ContentCatalog[Background] = ContentCatalog(
            backgrounds, name="backgrounds", strict=strict
        )
        self.spells: ContentCatalog[Spell] = ContentCatalog(spells, name="spells", strict=strict)

        configs: dict[str, FlexibleBonusConfig] = {}
        for config in flexible_bonuses:
            if config.race_id in configs:
                raise ContentError(
                    "More than one flexible-bonus config for a race",
                    content_id=config.race_id,
                    collection="flexible_bonuses",
                )
            configs[config.race_id] = config
        self.flexible_bonuses: Mapping[str, FlexibleBonusConfig] = MappingProxyType(configs)

    def get_flexible_bonus_config(self, race_id: str | None) -> FlexibleBonusConfig | None:
        if race_id is None:
            return None
        return self.flexible_bonuses.get(race_id)

    def subraces_of(self, base_race: str) -> list[Race]:
        """Subraces whose ``base_race`` matches, case-insensitively."""
        wanted = base_race.lower()
        return self.races.filter(
            lambda race: race.base_race is not None and race.base_race.lower() == wanted
        )

    def spells_for_list(self, spell_list_id: str) -> list[Spell]:
        return self.spells.filter(lambda spell: spell_list_id in spell.classes)


__all__ = [
    "Identified",
    "ContentCatalog",
    "RulesContent",
]
