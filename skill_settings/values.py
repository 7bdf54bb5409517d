"""
Values - Typed setting values and the textual parse path.

A stored value is always one of four kinds. Values read from a
configuration section arrive as text and are only interpreted when a
typed getter asks for them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from skill_settings.errors import InvalidValueError

Primitive = Union[str, int, bool, float]

BASE_SUFFIX = "-base"
SCALE_SUFFIX = "-scale"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Integer settings are 32-bit signed
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ValueKind(str, Enum):
    """Tag of a stored setting value."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DOUBLE = "double"


def to_text(value: Primitive) -> str:
    """Textual form of a primitive, as written to and read from configuration."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def parse_float(text: str) -> float:
    """Parse a decimal or scientific number. Raises ValueError."""
    stripped = text.strip()
    # float() accepts digit separators, configuration files don't
    if not stripped or "_" in stripped:
        raise ValueError(f"not a number: {text!r}")
    return float(stripped)


def parse_int(text: str) -> int:
    """Parse an optionally signed run of decimal digits.

    The result must fit a 32-bit signed integer. Raises ValueError.
    """
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_bool(text: str) -> bool:
    """Parse 'true' or 'false', ignoring case. Raises ValueError."""
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


@dataclass(frozen=True)
class SettingValue:
    """A tagged setting value."""

    kind: ValueKind
    data: Primitive

    @classmethod
    def of(cls, key: str, value: Primitive) -> "SettingValue":
        """Wrap a Python primitive, rejecting anything else."""
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls(ValueKind.BOOLEAN, value)
        if isinstance(value, int):
            return cls(ValueKind.INTEGER, value)
        if isinstance(value, float):
            return cls(ValueKind.DOUBLE, value)
        if isinstance(value, str):
            return cls(ValueKind.STRING, value)
        raise InvalidValueError(key, value)

    @classmethod
    def double(cls, key: str, value: Union[int, float]) -> "SettingValue":
        """Wrap a number as a double value."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidValueError(key, value)
        return cls(ValueKind.DOUBLE, float(value))

    @classmethod
    def text_value(cls, text: str) -> "SettingValue":
        return cls(ValueKind.STRING, text)

    @property
    def text(self) -> str:
        return to_text(self.data)

    def as_float(self) -> float:
        return parse_float(self.text)

    def as_int(self) -> int:
        return parse_int(self.text)

    def as_bool(self) -> bool:
        return parse_bool(self.text)


ZERO = SettingValue(ValueKind.DOUBLE, 0.0)


@dataclass
class ScalingSetting:
    """Base and per-level scale of a scaling setting.

    Either half may be missing when the record was built from loaded
    configuration; the setters always fill both.
    """

    base: Optional[SettingValue] = None
    scale: Optional[SettingValue] = None

    def is_empty(self) -> bool:
        return self.base is None and self.scale is None


def split_key(name: str) -> tuple[str, Optional[str]]:
    """Split a physical key into its logical key and half.

    Returns (name, None) for plain keys, (key, BASE_SUFFIX) or
    (key, SCALE_SUFFIX) for scaling halves.
    """
    for suffix in (BASE_SUFFIX, SCALE_SUFFIX):
        if name.endswith(suffix):
            return name[: -len(suffix)], suffix
    return name, None
