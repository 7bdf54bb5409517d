"""Tests for the dictionary-backed configuration section."""

from skill_settings.section import ConfigSection, MemorySection


class TestMemorySection:
    """Test MemorySection."""

    def test_is_config_section(self):
        assert isinstance(MemorySection(), ConfigSection)

    def test_keys_are_direct_children(self):
        section = MemorySection.from_dict({"a": 1, "b": {"c": 2}})
        assert section.keys() == ["a", "b"]

    def test_get_string_formats_primitives(self):
        section = MemorySection.from_dict({"i": 3, "f": 1.5, "b": False, "s": "x"})
        assert section.get_string("i") == "3"
        assert section.get_string("f") == "1.5"
        assert section.get_string("b") == "false"
        assert section.get_string("s") == "x"

    def test_get_string_missing_or_section(self):
        section = MemorySection.from_dict({"b": {"c": 2}})
        assert section.get_string("missing") is None
        assert section.get_string("b") is None

    def test_sections(self):
        section = MemorySection.from_dict({"a": 1, "b": {"c": 2}})
        assert section.is_section("b")
        assert not section.is_section("a")
        assert section.get_section("a") is None
        assert section.get_section("b").get_string("c") == "2"

    def test_set_and_remove(self):
        section = MemorySection()
        section.set("a", 1)
        assert section.to_dict() == {"a": 1}
        section.set("a", None)
        assert section.to_dict() == {}

    def test_create_section_replaces_child(self):
        section = MemorySection.from_dict({"a": 1})
        child = section.create_section("a")
        child.set("a", 2)
        assert section.to_dict() == {"a": {"a": 2}}

    def test_dict_round_trip(self):
        data = {"skills": {"fireball": {"damage-base": 5.0, "message": "Burn"}}, "version": 2}
        assert MemorySection.from_dict(data).to_dict() == data
