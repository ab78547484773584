"""Unit tests for delimiter policies and the attribute list container."""

import pytest

from android_manifest.attribute_list import (
    AttributeList,
    Delimiter,
    IntegerCodec,
    Semicolon,
    StringCodec,
    VerticalBar,
)


class TestDelimiters:
    """Tests for delimiter policies."""

    def test_semicolon_symbol(self):
        """Test semicolon policy symbol."""
        assert Semicolon.symbol() == ";"

    def test_vertical_bar_symbol(self):
        """Test vertical bar policy symbol."""
        assert VerticalBar.symbol() == "|"

    def test_custom_delimiter(self):
        """Test that new policies can be added by subclassing."""

        class Comma(Delimiter):
            SYMBOL = ","

        assert Comma.symbol() == ","

    def test_delimiter_without_symbol_rejected(self):
        """Test that a policy must define its symbol."""
        with pytest.raises(TypeError):

            class Nothing(Delimiter):
                pass


class TestSpecialization:
    """Tests for parameterizing AttributeList."""

    def test_specialization_is_cached(self):
        """Test that subscribing twice returns the same class."""
        assert AttributeList[Semicolon, str] is AttributeList[Semicolon, str]

    def test_delimiters_give_distinct_classes(self):
        """Test that lists differing only by delimiter are different types."""
        semicolon_list = AttributeList[Semicolon, str]
        bar_list = AttributeList[VerticalBar, str]

        assert semicolon_list is not bar_list
        assert not issubclass(semicolon_list, bar_list)
        assert semicolon_list.delimiter is Semicolon
        assert bar_list.delimiter is VerticalBar

    def test_codec_resolved_for_element_type(self):
        """Test that the element codec is attached to the class."""
        assert isinstance(AttributeList[Semicolon, str].codec, StringCodec)
        assert isinstance(AttributeList[Semicolon, int].codec, IntegerCodec)

    def test_class_name_describes_parameters(self):
        """Test readable class names."""
        assert AttributeList[VerticalBar, int].__name__ == "AttributeList[VerticalBar, int]"

    def test_non_delimiter_rejected(self):
        """Test that the first parameter must be a delimiter policy."""
        with pytest.raises(TypeError):
            AttributeList[str, str]

    def test_wrong_parameter_count_rejected(self):
        """Test that exactly two parameters are required."""
        with pytest.raises(TypeError):
            AttributeList[Semicolon]

    def test_double_specialization_rejected(self):
        """Test that a specialized list can't be parameterized again."""
        with pytest.raises(TypeError):
            AttributeList[Semicolon, str][Semicolon, str]

    def test_unspecialized_list_cannot_be_instantiated(self):
        """Test that the bare container is not usable."""
        with pytest.raises(TypeError, match="specialized"):
            AttributeList(["a"])


class TestContainer:
    """Tests for container operations."""

    def test_new_is_empty(self, semicolon_strings):
        """Test that new() builds an empty list."""
        empty = semicolon_strings.new()

        assert empty.is_empty()
        assert empty.values() == ()
        assert len(empty) == 0

    def test_from_sequence_preserves_order(self, semicolon_strings):
        """Test that values keep their given order."""
        values = semicolon_strings.from_sequence(["c", "a", "b"])

        assert values.values() == ("c", "a", "b")
        assert list(values) == ["c", "a", "b"]
        assert not values.is_empty()

    def test_from_sequence_does_not_validate(self, semicolon_strings):
        """Test that construction accepts an empty sequence."""
        assert semicolon_strings.from_sequence([]).is_empty()

    def test_container_owns_its_values(self, semicolon_strings):
        """Test that later changes to the source sequence are not seen."""
        source = ["a", "b"]
        values = semicolon_strings.from_sequence(source)
        source.append("c")

        assert values.values() == ("a", "b")

    def test_equality_requires_same_class(self, semicolon_strings, bar_strings):
        """Test that lists with different delimiters are never equal."""
        assert semicolon_strings(["a", "b"]) == semicolon_strings(["a", "b"])
        assert semicolon_strings(["a", "b"]) != semicolon_strings(["b", "a"])
        assert semicolon_strings(["a", "b"]) != bar_strings(["a", "b"])

    def test_hashable(self, semicolon_strings):
        """Test that equal lists hash equally."""
        assert hash(semicolon_strings(["a"])) == hash(semicolon_strings(["a"]))

    def test_repr(self, semicolon_strings):
        """Test repr shows class and values."""
        assert repr(semicolon_strings(["a"])) == "AttributeList[Semicolon, str](['a'])"
