"""Shared parse/render protocol for GPX elements.

Every concrete element declares its tag, its attributes and its ordered
child items; the open/close tag syntax, indentation and recursion live
here. Rendering appends to a ``list[str]`` buffer that is passed down the
tree and joined once by the caller.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import ClassVar, NamedTuple, Union
from xml.sax.saxutils import escape

from gpxkit.config import INDENT_UNIT, LINE_TERMINATOR
from gpxkit.schemas import RawNode

logger = logging.getLogger(__name__)

# Whitespace is escaped so values survive attribute-value normalisation.
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


class Leaf(NamedTuple):
    """A scalar child rendered as ``<name>value</name>``."""

    name: str
    value: str | None


ChildItem = Union[Leaf, "Element"]


class Element:
    """Base class for every node in a GPX document tree."""

    tag: ClassVar[str] = ""

    def tag_name(self) -> str:
        return self.tag

    @staticmethod
    def indent(level: int) -> str:
        """Whitespace prefix for a tag nested ``level`` deep."""
        return INDENT_UNIT * level

    def attributes(self) -> list[tuple[str, str | None]]:
        """Attributes in render order; None values are skipped."""
        return []

    def child_items(self) -> list[ChildItem]:
        """Leaf properties and nested elements in render order."""
        return []

    def render_open_tag(self, out: list[str], level: int) -> None:
        out.append(f"{self.indent(level)}<{self.tag_name()}{self._attribute_text()}>{LINE_TERMINATOR}")

    def render_property(self, out: list[str], name: str, value: str | None, level: int) -> None:
        """Append ``<name>value</name>`` at ``level``, or nothing if value is unset."""
        if value is None:
            return
        out.append(f"{self.indent(level)}<{name}>{escape(value)}</{name}>{LINE_TERMINATOR}")

    def render_children(self, out: list[str], level: int) -> None:
        for item in self.child_items():
            if isinstance(item, Leaf):
                self.render_property(out, item.name, item.value, level + 1)
            else:
                item.render(out, level + 1)

    def render_close_tag(self, out: list[str], level: int) -> None:
        out.append(f"{self.indent(level)}</{self.tag_name()}>{LINE_TERMINATOR}")

    def render(self, out: list[str], level: int = 0) -> None:
        self.render_open_tag(out, level)
        self.render_children(out, level)
        self.render_close_tag(out, level)

    def to_gpx(self, level: int = 0) -> str:
        """Render this element and its subtree to a string."""
        out: list[str] = []
        self.render(out, level)
        return "".join(out)

    def _attribute_text(self) -> str:
        return format_attributes(self.attributes())

    @classmethod
    def from_raw(cls, raw: RawNode):
        raise NotImplementedError(f"<{cls.tag}> cannot be parsed from a raw node")

    @classmethod
    def from_dict(cls, values: Mapping[str, str]):
        raise NotImplementedError(f"<{cls.tag}> cannot be parsed from a flat mapping")


class SelfClosingElement(Element):
    """An element rendered on one line with attributes only."""

    def render(self, out: list[str], level: int = 0) -> None:
        out.append(f"{self.indent(level)}<{self.tag_name()}{self._attribute_text()}/>{LINE_TERMINATOR}")


def format_number(value: float | int | None) -> str | None:
    """Positional decimal text for a number; GPX decimals have no exponent form."""
    if value is None:
        return None
    if not isinstance(value, float):
        return str(value)
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_float(text: str | None) -> float | None:
    """Lenient float parse; malformed values degrade to None."""
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        logger.debug("Ignoring malformed number %r", text)
        return None


def parse_int(text: str | None) -> int | None:
    """Lenient int parse; malformed values degrade to None."""
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        logger.debug("Ignoring malformed integer %r", text)
        return None


def format_attributes(pairs: Iterable[tuple[str, str | None]]) -> str:
    """Render ``name="value"`` pairs with a leading space each, skipping unset values."""
    return "".join(
        f' {name}="{escape(value, _ATTRIBUTE_ENTITIES)}"'
        for name, value in pairs
        if value is not None
    )
