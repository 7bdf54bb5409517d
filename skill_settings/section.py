"""
Configuration sections - the hierarchical medium settings are saved to.

Usage:
    root = MemorySection.from_dict(json.load(f))
    settings.load(root.get_section("skills"))
    settings.save(root.create_section("skills"))
    data = root.to_dict()
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from skill_settings.values import to_text


class ConfigSection(ABC):
    """A named node holding primitive values and nested sections."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Names of the direct children of this section."""
        pass

    @abstractmethod
    def get_string(self, key: str) -> Optional[str]:
        """Textual value of a primitive child, None if absent or a section."""
        pass

    @abstractmethod
    def is_section(self, key: str) -> bool:
        """Whether the child is a nested section."""
        pass

    @abstractmethod
    def get_section(self, key: str) -> Optional["ConfigSection"]:
        """Nested child section, None if absent or a primitive."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Write a primitive child. None removes the child."""
        pass

    @abstractmethod
    def create_section(self, key: str) -> "ConfigSection":
        """Create an empty child section, replacing any existing child."""
        pass


class MemorySection(ConfigSection):
    """Dictionary-backed configuration section."""

    def __init__(self):
        self._children: dict[str, Any] = {}

    @classmethod
    def from_dict(cls, data: dict) -> "MemorySection":
        """Build a section tree from nested dictionaries."""
        section = cls()
        for key, value in data.items():
            if isinstance(value, dict):
                section._children[str(key)] = cls.from_dict(value)
            else:
                section._children[str(key)] = value
        return section

    def to_dict(self) -> dict:
        """Nested dictionaries suitable for json.dump."""
        result = {}
        for key, value in self._children.items():
            if isinstance(value, MemorySection):
                result[key] = value.to_dict()
            else:
                result[key] = value
        return result

    def keys(self) -> list[str]:
        return list(self._children)

    def get_string(self, key: str) -> Optional[str]:
        value = self._children.get(key)
        if value is None or isinstance(value, MemorySection):
            return None
        if isinstance(value, (str, int, bool, float)):
            return to_text(value)
        return str(value)

    def is_section(self, key: str) -> bool:
        return isinstance(self._children.get(key), MemorySection)

    def get_section(self, key: str) -> Optional["MemorySection"]:
        value = self._children.get(key)
        return value if isinstance(value, MemorySection) else None

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self._children.pop(key, None)
        else:
            self._children[key] = value

    def create_section(self, key: str) -> "MemorySection":
        section = MemorySection()
        self._children[key] = section
        return section

    def __repr__(self) -> str:
        return f"MemorySection({self.to_dict()!r})"
