"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the character-creation engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dnd_chargen.catalog import RulesContent
from dnd_chargen.data.srd import load_srd_content
from dnd_chargen.engine import DiceRoller, DnD5eRuleEngine
from dnd_chargen.models import (
    AbilityScores,
    CharacterSnapshot,
    ClassEntry,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_chargen.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_CHARGEN_LOG_LEVEL": "DEBUG",
        "DND_CHARGEN_JSON_LOGS": "true",
        "DND_CHARGEN_ENGINE_DEFAULT_HIT_DIE": "10",
        "DND_CHARGEN_ENGINE_DEFAULT_SPEED": "25",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Content and Engine Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def srd_content() -> RulesContent:
    """Bundled SRD catalogs, built once per session."""
    return load_srd_content()


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Provide a seeded dice roller for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def engine(srd_content: RulesContent) -> DnD5eRuleEngine:
    """Provide an engine over the SRD content."""
    return DnD5eRuleEngine(srd_content)


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def sample_scores() -> AbilityScores:
    """Standard-array scores assigned for a typical martial character."""
    return AbilityScores(
        strength=15,
        dexterity=14,
        constitution=13,
        intelligence=12,
        wisdom=10,
        charisma=8,
    )


@pytest.fixture
def make_character() -> Callable[..., CharacterSnapshot]:
    """Factory for snapshots with a single class entry.

    Returns:
        Callable taking ``class_id``, ``level``, ``subclass_id`` and any
        other ``CharacterSnapshot`` fields as keyword arguments.
    """

    def _make(
        class_id: str | None = "fighter",
        level: int = 1,
        subclass_id: str | None = None,
        **fields: object,
    ) -> CharacterSnapshot:
        classes = (
            (ClassEntry(class_id=class_id, level=level, subclass_id=subclass_id),)
            if class_id is not None
            else ()
        )
        fields.setdefault("ability_scores", AbilityScores.uniform(10))
        return CharacterSnapshot(classes=classes, **fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def complete_fighter(sample_scores: AbilityScores) -> CharacterSnapshot:
    """A level 1 hill-dwarf fighter with every step filled in."""
    return CharacterSnapshot(
        name="Thorin",
        ability_scores=sample_scores,
        race_id="hill-dwarf",
        classes=(ClassEntry(class_id="fighter", level=1),),
        background_id="soldier",
        equipment=("chain-mail", "longsword", "shield"),
    )
