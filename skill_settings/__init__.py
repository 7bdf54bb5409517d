"""
skill_settings - Typed, level-scaling settings for game entities.

Usage:
    from skill_settings import MemorySection, Settings

    settings = Settings()
    settings.set('damage', 5.0, 2.0)
    settings.load(MemorySection.from_dict({'damage-base': 8}))
    settings.get('damage', 3)  # 12.0
"""

from skill_settings.config import SaveLayout, StoreConfig, store_config
from skill_settings.errors import InvalidValueError, ParseError, SettingsError
from skill_settings.section import ConfigSection, MemorySection
from skill_settings.store import Settings
from skill_settings.values import ScalingSetting, SettingValue, ValueKind

__all__ = [
    "Settings",
    "ConfigSection",
    "MemorySection",
    "SaveLayout",
    "StoreConfig",
    "store_config",
    "SettingsError",
    "ParseError",
    "InvalidValueError",
    "SettingValue",
    "ScalingSetting",
    "ValueKind",
]
