"""Pytest configuration and fixtures."""

import pytest

from skill_settings.config import SaveLayout, StoreConfig
from skill_settings.section import MemorySection
from skill_settings.store import Settings


@pytest.fixture
def settings():
    """Empty store with the default nested save layout."""
    return Settings(StoreConfig(save_layout=SaveLayout.NESTED, load_nested_sections=True))


@pytest.fixture
def flat_settings():
    """Empty store that saves key: value directly."""
    return Settings(StoreConfig(save_layout=SaveLayout.FLAT))


@pytest.fixture
def section():
    """Configuration section as it would come from a skill file."""
    return MemorySection.from_dict(
        {
            "damage-base": "8",
            "damage-scale": 1.5,
            "message": "Hit!",
            "enabled": True,
            "uses": 3,
        }
    )
