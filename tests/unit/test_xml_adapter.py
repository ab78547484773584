"""Unit tests for XML event serialization of attribute lists."""

import pytest

from android_manifest.attribute_list import AttributeList, Semicolon, VerticalBar
from android_manifest.attribute_list.xml_adapter import ScanState
from android_manifest.shared.exceptions import (
    ElementDecodeError,
    EmptyInputError,
    EmptyListError,
    MalformedStreamError,
)
from android_manifest.xml_events import (
    Characters,
    Comment,
    EndElement,
    StartElement,
    XmlEventReader,
    XmlEventWriter,
)


def _write_wrapped(attribute_list: AttributeList, tag: str = "categories") -> XmlEventWriter:
    writer = XmlEventWriter()
    writer.write(StartElement(name=tag))
    attribute_list.xml_serialize(writer)
    writer.write(EndElement(name=tag))
    return writer


class TestXmlSerialize:
    """Tests for writing lists as character data."""

    def test_writes_single_characters_event(self, semicolon_strings):
        """Test the joined values are one text event."""
        writer = _write_wrapped(semicolon_strings(["cat1", "cat2"]))

        assert writer.events == [
            StartElement(name="categories"),
            Characters(text="cat1;cat2"),
            EndElement(name="categories"),
        ]
        assert writer.to_string() == "<categories>cat1;cat2</categories>"

    def test_bar_delimiter(self, bar_strings):
        """Test bar-delimited output."""
        writer = _write_wrapped(bar_strings(["a", "b", "c"]))

        assert writer.to_string() == "<categories>a|b|c</categories>"

    def test_empty_list_writes_nothing(self, semicolon_strings):
        """Test empty list fails before any event is written."""
        writer = XmlEventWriter()
        writer.write(StartElement(name="categories"))

        with pytest.raises(EmptyListError):
            semicolon_strings.new().xml_serialize(writer)

        assert writer.events == [StartElement(name="categories")]

    def test_attributes_pass_through(self, semicolon_strings):
        """Test the list contributes no attributes or namespaces."""
        attributes = {"android:name": "x"}
        namespaces = {"android": "http://schemas.android.com/apk/res/android"}

        result = semicolon_strings(["a"]).xml_serialize_attributes(attributes, namespaces)

        assert result[0] is attributes
        assert result[1] is namespaces
        assert attributes == {"android:name": "x"}


class TestXmlDeserialize:
    """Tests for reading lists from event streams."""

    def test_decode_wrapped_characters(self, semicolon_strings, category_events):
        """Test StartElement, Characters, EndElement decodes the text."""
        parsed = semicolon_strings.xml_deserialize(XmlEventReader(category_events))

        assert parsed.values() == ("cat1", "cat2")

    def test_decode_skips_nested_start_elements(self, semicolon_strings):
        """Test several wrapper elements are skipped."""
        reader = XmlEventReader.from_string("<outer><inner> a ; b </inner></outer>")

        assert semicolon_strings.xml_deserialize(reader).values() == ("a", "b")

    def test_decode_bare_characters(self, bar_strings):
        """Test a stream starting with text."""
        reader = XmlEventReader([Characters(text="x|y")])

        assert bar_strings.xml_deserialize(reader).values() == ("x", "y")

    def test_stops_after_first_characters(self, semicolon_strings):
        """Test events after the text are left unread."""
        reader = XmlEventReader(
            [
                StartElement(name="a"),
                Characters(text="first"),
                Characters(text="second"),
                EndElement(name="a"),
            ]
        )

        assert semicolon_strings.xml_deserialize(reader).values() == ("first",)
        assert reader.next_event() == Characters(text="second")

    def test_no_characters_fails(self, semicolon_strings):
        """Test StartElement, EndElement is a malformed stream."""
        reader = XmlEventReader([StartElement(name="categories"), EndElement(name="categories")])

        with pytest.raises(MalformedStreamError) as exc_info:
            semicolon_strings.xml_deserialize(reader)

        assert str(exc_info.value) == "unable to parse attribute"
        assert exc_info.value.details["event"] == "EndElement"
        assert exc_info.value.details["skipped_elements"] == 1

    def test_other_event_before_characters_fails(self, semicolon_strings):
        """Test the scan fails on the first unexpected event."""
        reader = XmlEventReader(
            [StartElement(name="a"), Comment(text="x"), Characters(text="v")]
        )

        with pytest.raises(MalformedStreamError) as exc_info:
            semicolon_strings.xml_deserialize(reader)

        assert exc_info.value.details["event"] == "Comment"

    def test_exhausted_stream_fails(self, semicolon_strings):
        """Test a stream ending without text."""
        reader = XmlEventReader([StartElement(name="a")])

        with pytest.raises(MalformedStreamError) as exc_info:
            semicolon_strings.xml_deserialize(reader)

        assert exc_info.value.details["event"] == "end of stream"

    def test_empty_stream_fails(self, semicolon_strings):
        """Test a stream with no events at all."""
        with pytest.raises(MalformedStreamError):
            semicolon_strings.xml_deserialize(XmlEventReader([]))

    def test_empty_element_from_xml_fails(self, semicolon_strings):
        """Test an empty element parsed from XML text."""
        reader = XmlEventReader.from_string("<categories></categories>")

        with pytest.raises(MalformedStreamError):
            semicolon_strings.xml_deserialize(reader)

    def test_blank_characters_fail_as_empty_input(self, semicolon_strings):
        """Test whitespace-only text reaching the parser."""
        reader = XmlEventReader([Characters(text="  ")], skip_whitespace=False)

        with pytest.raises(EmptyInputError):
            semicolon_strings.xml_deserialize(reader)

    def test_bad_fragment_propagates(self):
        """Test element decode errors are not turned into stream errors."""
        reader = XmlEventReader([StartElement(name="n"), Characters(text="1;x")])

        with pytest.raises(ElementDecodeError) as exc_info:
            AttributeList[Semicolon, int].xml_deserialize(reader)

        assert exc_info.value.position == 1

    @pytest.mark.parametrize("delimiter", [Semicolon, VerticalBar])
    def test_round_trip(self, delimiter):
        """Test writing then reading gives an equal list."""
        numbers = AttributeList[delimiter, int]
        original = numbers([3, 1, 2])

        xml = _write_wrapped(original, "numbers").to_string()
        parsed = numbers.xml_deserialize(XmlEventReader.from_string(xml))

        assert parsed == original

    def test_scan_states(self):
        """Test the scan state names."""
        assert [state.value for state in ScanState] == ["scanning", "done", "failed"]
