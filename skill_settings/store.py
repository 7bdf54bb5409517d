"""
Settings - Typed parameters for one configurable game entity.

Usage:
    settings = Settings()
    settings.set('damage', 5.0, 2.0)          # scaling default: base 5, +2 per level
    settings.set('message', 'Hit!')
    settings.load(config_section)             # configuration overrides defaults
    settings.check_default('cooldown', 10, -0.5)
    damage = settings.get('damage', level)    # base + scale * (level - 1)
    settings.save(config_section)

A scaling setting is stored as one {base, scale} record. In configuration it
appears as two keys, '<key>-base' and '<key>-scale'; every method that takes
a key also accepts those physical names and resolves them to the record.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Optional

from skill_settings.config import SaveLayout, StoreConfig, store_config
from skill_settings.errors import ParseError
from skill_settings.section import ConfigSection
from skill_settings.values import (
    BASE_SUFFIX,
    SCALE_SUFFIX,
    ZERO,
    Primitive,
    ScalingSetting,
    SettingValue,
    split_key,
)

logger = logging.getLogger(__name__)


class Settings:
    """Settings store for a single configurable entity."""

    def __init__(self, config: Optional[StoreConfig] = None):
        self._config = config if config is not None else store_config
        self._values: dict[str, SettingValue] = {}
        self._scaling: dict[str, ScalingSetting] = {}

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def set(self, key: str, value: Primitive, scale: Optional[float] = None) -> None:
        """Set a value, or declare a scaling setting when a scale is given.

        Only str, int, bool and float values are accepted.
        """
        if scale is not None:
            self.set_scaling(key, value, scale)
            return
        self._put(key, SettingValue.of(key, value))

    def set_scaling(self, key: str, base: float, scale: float) -> None:
        """Declare a scaling setting, overwriting both halves.

        Meant for declaring defaults before configuration is loaded.
        """
        self._scaling[key] = ScalingSetting(
            base=SettingValue.double(key + BASE_SUFFIX, base),
            scale=SettingValue.double(key + SCALE_SUFFIX, scale),
        )

    def set_base(self, key: str, value: float) -> None:
        """Set the base of a scaling setting. A missing scale becomes 0."""
        base = SettingValue.double(key + BASE_SUFFIX, value)
        record = self._scaling.setdefault(key, ScalingSetting())
        if record.scale is None:
            record.scale = ZERO
        record.base = base

    def set_scale(self, key: str, value: float) -> None:
        """Set the per-level scale of a scaling setting. A missing base becomes 0."""
        scale = SettingValue.double(key + SCALE_SUFFIX, value)
        record = self._scaling.setdefault(key, ScalingSetting())
        if record.base is None:
            record.base = ZERO
        record.scale = scale

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    def get(self, key: str, level: Optional[int] = None, default: float = 0.0) -> float:
        """Get a number, or a scaling setting's value when a level is given.

        Returns default (0 unless given) when the setting is not defined.
        Raises ParseError if the stored text is not a number.
        """
        if level is not None:
            return self.scaled(key, level, default)
        value = self._lookup(key)
        if value is None:
            return default
        return self._parse_float(key, value)

    def get_int(self, key: str) -> int:
        """Get an integer, 0 if not set. Raises ParseError on non-integer text."""
        value = self._lookup(key)
        if value is None:
            return 0
        try:
            return value.as_int()
        except ValueError as e:
            raise ParseError(key, value.text, "integer") from e

    def get_bool(self, key: str) -> bool:
        """Get a boolean, False if not set. Raises ParseError unless 'true' or 'false'."""
        value = self._lookup(key)
        if value is None:
            return False
        try:
            return value.as_bool()
        except ValueError as e:
            raise ParseError(key, value.text, "boolean") from e

    def get_string(self, key: str) -> Optional[str]:
        """Get the textual form of a value, None if not set."""
        value = self._lookup(key)
        return value.text if value is not None else None

    def get_base(self, key: str) -> float:
        """Base value of a scaling setting, 0 if not set."""
        value = self._lookup(key + BASE_SUFFIX)
        if value is None:
            return 0.0
        return self._parse_float(key + BASE_SUFFIX, value)

    def get_scale(self, key: str) -> float:
        """Per-level change of a scaling setting, 0 if not set."""
        value = self._lookup(key + SCALE_SUFFIX)
        if value is None:
            return 0.0
        return self._parse_float(key + SCALE_SUFFIX, value)

    def scaled(self, key: str, level: int, default: float = 0.0) -> float:
        """Value of a scaling setting at a level.

        Level 1 is exactly the base value. Returns default when the
        setting is not defined.
        """
        if not self.has(key):
            return default
        return self.get_base(key) + self.get_scale(key) * (level - 1)

    # -------------------------------------------------------------------------
    # Presence
    # -------------------------------------------------------------------------

    def has(self, key: str) -> bool:
        """Whether the setting is defined as a plain value or has a base value."""
        return self._lookup(key) is not None or self._lookup(key + BASE_SUFFIX) is not None

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def remove(self, key: str) -> None:
        """Remove a setting with both of its scaling halves. No-op if not set."""
        self._discard(key)
        self._discard(key + BASE_SUFFIX)
        self._discard(key + SCALE_SUFFIX)

    def check_default(self, key: str, default_base: float, default_scale: float) -> None:
        """Declare a scaling setting unless it is already defined.

        Call after load() so configured values are not replaced.
        """
        if not self.has(key):
            self.set_scaling(key, default_base, default_scale)

    def init_defaults(self, defaults: Mapping[str, tuple[float, float]]) -> None:
        """Apply check_default() for each key -> (base, scale) pair."""
        for key, (base, scale) in defaults.items():
            self.check_default(key, base, scale)

    def keys(self) -> list[str]:
        """Physical keys, with scaling halves as '<key>-base' and '<key>-scale'."""
        return [name for name, _ in self._items()]

    def scaling_keys(self) -> list[str]:
        """Names of scaling settings that have a base value."""
        return [key for key, record in self._scaling.items() if record.base is not None]

    def __len__(self) -> int:
        return sum(1 for _ in self._items())

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save(self, section: Optional[ConfigSection]) -> None:
        """Write every setting to a configuration section. No-op if None."""
        if section is None:
            return

        layout = self._config.save_layout
        count = 0
        for name, value in self._items():
            if layout == SaveLayout.NESTED:
                section.create_section(name).set(name, value.data)
            else:
                section.set(name, value.data)
            count += 1
        logger.debug(f"Saved {count} settings ({layout.value} layout)")

    def load(self, section: Optional[ConfigSection]) -> None:
        """Read every direct child of a section as a text setting.

        '<key>-base' and '<key>-scale' children fill the halves of the
        scaling setting '<key>'. No-op if the section is None or empty.
        """
        if section is None:
            return

        count = 0
        for name in section.keys():
            text = self._read(section, name)
            if text is None:
                logger.warning(f"Skipping setting '{name}': no primitive value")
                continue
            self._put(name, SettingValue.text_value(text))
            count += 1
        logger.debug(f"Loaded {count} settings")

    def _read(self, section: ConfigSection, name: str) -> Optional[str]:
        if not section.is_section(name):
            return section.get_string(name)
        if not self._config.load_nested_sections:
            return None
        child = section.get_section(name)
        return child.get_string(name) if child is not None else None

    # -------------------------------------------------------------------------
    # Physical key resolution
    # -------------------------------------------------------------------------

    def _lookup(self, name: str) -> Optional[SettingValue]:
        key, half = split_key(name)
        if half is None:
            return self._values.get(name)
        record = self._scaling.get(key)
        if record is None:
            return None
        return record.base if half == BASE_SUFFIX else record.scale

    def _put(self, name: str, value: SettingValue) -> None:
        key, half = split_key(name)
        if half is None:
            self._values[name] = value
            return
        record = self._scaling.setdefault(key, ScalingSetting())
        if half == BASE_SUFFIX:
            record.base = value
        else:
            record.scale = value

    def _discard(self, name: str) -> None:
        key, half = split_key(name)
        if half is None:
            self._values.pop(name, None)
            return
        record = self._scaling.get(key)
        if record is None:
            return
        if half == BASE_SUFFIX:
            record.base = None
        else:
            record.scale = None
        if record.is_empty():
            del self._scaling[key]

    def _items(self) -> Iterator[tuple[str, SettingValue]]:
        yield from self._values.items()
        for key, record in self._scaling.items():
            if record.base is not None:
                yield key + BASE_SUFFIX, record.base
            if record.scale is not None:
                yield key + SCALE_SUFFIX, record.scale

    def _parse_float(self, name: str, value: SettingValue) -> float:
        try:
            return value.as_float()
        except ValueError as e:
            raise ParseError(name, value.text, "number") from e
