"""Tests for the shared element protocol and the smaller elements."""

from __future__ import annotations

import pytest

from gpxkit.elements import Bounds, Element, Extensions, Leaf, Link, Metadata, Person
from gpxkit.elements.base import format_number, parse_float, parse_int
from gpxkit.elements.email import EmailAddress
from gpxkit.raw_parser import parse_raw_xml
from gpxkit.schemas import RawNode


class TestElementProtocol:
    """Tests for behaviour every element inherits."""

    def test_indent_is_two_spaces_per_level(self) -> None:
        """indent scales linearly with the nesting level."""
        assert Element.indent(0) == ""
        assert Element.indent(3) == "      "

    def test_tag_name_is_fixed_per_type(self) -> None:
        """Each element type reports its own tag."""
        assert Link().tag_name() == "link"
        assert Person().tag_name() == "author"
        assert Bounds().tag_name() == "bounds"

    def test_render_property_skips_unset_values(self) -> None:
        """The leaf primitive writes nothing for None."""
        out: list[str] = []
        Link().render_property(out, "text", None, 1)

        assert out == []

    def test_render_property_escapes_text(self) -> None:
        """Leaf text is XML escaped."""
        out: list[str] = []
        Link().render_property(out, "text", "Fish & <Chips>", 1)

        assert out == ["  <text>Fish &amp; &lt;Chips&gt;</text>\r\n"]

    def test_attributes_are_escaped(self) -> None:
        """Attribute values are escaped, quotes included."""
        link = Link(href='https://example.com/?a=1&b="2"')

        assert link.to_gpx() == '<link href="https://example.com/?a=1&amp;b=&quot;2&quot;">\r\n</link>\r\n'

    def test_attribute_whitespace_is_escaped(self) -> None:
        """Newlines, carriage returns and tabs in attributes become character references."""
        link = Link(href="a\nb\rc\td")

        assert link.to_gpx() == '<link href="a&#10;b&#13;c&#9;d">\r\n</link>\r\n'

    def test_children_render_one_level_deeper(self) -> None:
        """Leaves render at level + 1 between open and close tags."""
        link = Link(href="https://example.com", text="Home", type="text/html")

        assert link.to_gpx(1) == (
            '  <link href="https://example.com">\r\n'
            "    <text>Home</text>\r\n"
            "    <type>text/html</type>\r\n"
            "  </link>\r\n"
        )

    def test_nested_elements_recurse(self) -> None:
        """Nested elements render through their own render at level + 1."""
        person = Person(
            name="Jane Doe",
            email=EmailAddress(local_part="jane", domain="example.com"),
            link=Link(href="https://example.com/jane"),
        )

        assert person.to_gpx() == (
            "<author>\r\n"
            "  <name>Jane Doe</name>\r\n"
            '  <email id="jane" domain="example.com"/>\r\n'
            '  <link href="https://example.com/jane">\r\n'
            "  </link>\r\n"
            "</author>\r\n"
        )

    def test_child_items_keep_declared_order(self) -> None:
        """child_items lists leaves and elements in declared order."""
        link = Link(text="Home")

        assert link.child_items() == [Leaf("text", "Home"), Leaf("type", None)]

    def test_unsupported_parse_paths_raise(self) -> None:
        """Types without a flat or tree parse path say so."""
        with pytest.raises(NotImplementedError):
            Metadata.from_dict({"name": "x"})
        with pytest.raises(NotImplementedError):
            EmailAddress.from_raw(RawNode(name="email"))


class TestValueHelpers:
    """Tests for number formatting and lenient parsing."""

    def test_format_number(self) -> None:
        """Whole floats drop the fraction; unset stays unset."""
        assert format_number(None) is None
        assert format_number(52.0) == "52"
        assert format_number(52.517) == "52.517"
        assert format_number(-0.5) == "-0.5"
        assert format_number(12) == "12"

    def test_format_number_never_uses_exponent(self) -> None:
        """Small and large magnitudes render as plain decimals."""
        assert format_number(0.00001) == "0.00001"
        assert format_number(-0.00005) == "-0.00005"
        assert format_number(1.5e-7) == "0.00000015"
        assert format_number(1e20) == "100000000000000000000"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_parse_float(self) -> None:
        """Malformed floats degrade to None."""
        assert parse_float("47.25") == 47.25
        assert parse_float(None) is None
        assert parse_float("north") is None

    def test_parse_int(self) -> None:
        """Malformed integers degrade to None."""
        assert parse_int(" 7 ") == 7
        assert parse_int(None) is None
        assert parse_int("7.5") is None


class TestLink:
    """Tests for link elements."""

    def test_from_raw(self) -> None:
        """href comes from attributes, text and type from children."""
        raw = parse_raw_xml('<link href="https://example.com"><text>Home</text><type>text/html</type></link>')

        assert Link.from_raw(raw) == Link(href="https://example.com", text="Home", type="text/html")

    def test_from_dict(self) -> None:
        """The flat path reads href, text and type."""
        assert Link.from_dict({"href": "https://example.com"}) == Link(href="https://example.com")


class TestPerson:
    """Tests for person elements."""

    def test_from_raw_reads_email_attributes(self) -> None:
        """The nested email is built through its flat mapping path."""
        raw = parse_raw_xml(
            '<author><name>Jane</name><email id="jane" domain="example.com"/>'
            '<link href="https://example.com"/><phone>555</phone></author>'
        )

        person = Person.from_raw(raw)

        assert person == Person(
            name="Jane",
            email=EmailAddress(local_part="jane", domain="example.com"),
            link=Link(href="https://example.com"),
        )

    def test_round_trip(self) -> None:
        """A rendered person parses back to an equal person."""
        person = Person(name="Jane", email=EmailAddress.from_address("jane@example.com"))

        assert Person.from_raw(parse_raw_xml(person.to_gpx())) == person


class TestBounds:
    """Tests for bounds elements."""

    def test_renders_self_closing_in_fixed_order(self) -> None:
        """Bounds is a single line with minlat, minlon, maxlat, maxlon."""
        bounds = Bounds(max_longitude=8.5, max_latitude=47.3, min_longitude=8.2, min_latitude=47.1)

        assert bounds.to_gpx(2) == '    <bounds minlat="47.1" minlon="8.2" maxlat="47.3" maxlon="8.5"/>\r\n'

    def test_from_dict_and_from_raw_agree(self) -> None:
        """Both parse paths read the same attributes."""
        values = {"minlat": "47.1", "minlon": "8.2", "maxlat": "47.3", "maxlon": "8.5"}

        assert Bounds.from_dict(values) == Bounds.from_raw(RawNode(name="bounds", attributes=values))
        assert Bounds.from_dict(values).max_latitude == 47.3

    def test_unset_bounds_render_bare_tag(self) -> None:
        """An empty bounds still renders a valid tag."""
        assert Bounds().to_gpx() == "<bounds/>\r\n"


class TestExtensions:
    """Tests for opaque extension content."""

    def test_round_trips_foreign_content(self) -> None:
        """Extension children are written back node for node."""
        raw = parse_raw_xml(
            "<extensions>"
            '<speed unit="m/s">3.2</speed>'
            "<sensor><hr>128</hr><cad>88</cad></sensor>"
            "<flag/>"
            "</extensions>"
        )

        extensions = Extensions.from_raw(raw)

        assert extensions.to_gpx() == (
            "<extensions>\r\n"
            '  <speed unit="m/s">3.2</speed>\r\n'
            "  <sensor>\r\n"
            "    <hr>128</hr>\r\n"
            "    <cad>88</cad>\r\n"
            "  </sensor>\r\n"
            "  <flag/>\r\n"
            "</extensions>\r\n"
        )
        assert Extensions.from_raw(parse_raw_xml(extensions.to_gpx())) == extensions

    def test_mixed_content_text_is_written_before_children(self) -> None:
        """Text that followed a child element is written ahead of it."""
        raw = parse_raw_xml("<extensions><note><b>bold</b> tail</note></extensions>")

        rendered = Extensions.from_raw(raw).to_gpx()

        assert rendered == (
            "<extensions>\r\n"
            "  <note>\r\n"
            "    tail\r\n"
            "    <b>bold</b>\r\n"
            "  </note>\r\n"
            "</extensions>\r\n"
        )

    def test_empty_extensions(self) -> None:
        """Extensions with no content render an empty pair."""
        assert Extensions().to_gpx() == "<extensions>\r\n</extensions>\r\n"
