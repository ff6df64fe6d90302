"""Links to external resources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from gpxkit.elements.base import ChildItem, Element, Leaf
from gpxkit.schemas import RawNode


@dataclass
class Link(Element):
    """A hyperlink with optional display text and MIME type."""

    tag = "link"

    href: str | None = None
    text: str | None = None
    type: str | None = None

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> Link:
        return cls(href=values.get("href"), text=values.get("text"), type=values.get("type"))

    @classmethod
    def from_raw(cls, raw: RawNode) -> Link:
        link = cls(href=raw.attributes.get("href"))
        for child in raw.children:
            if child.name == "text":
                link.text = child.text
            elif child.name == "type":
                link.type = child.text
        return link

    def attributes(self) -> list[tuple[str, str | None]]:
        return [("href", self.href)]

    def child_items(self) -> list[ChildItem]:
        return [Leaf("text", self.text), Leaf("type", self.type)]
