"""Descriptive information about a GPX file."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from gpxkit.dates import format_time, parse_time
from gpxkit.elements.base import ChildItem, Element, Leaf
from gpxkit.elements.bounds import Bounds
from gpxkit.elements.copyright import Copyright
from gpxkit.elements.extensions import Extensions
from gpxkit.elements.link import Link
from gpxkit.elements.person import Person
from gpxkit.schemas import RawNode


@dataclass
class Metadata(Element):
    tag = "metadata"

    name: str | None = None
    description: str | None = None
    author: Person | None = None
    copyright: Copyright | None = None
    links: list[Link] = field(default_factory=list)
    time: datetime | None = None
    keywords: str | None = None
    bounds: Bounds | None = None
    extensions: Extensions | None = None

    @classmethod
    def from_raw(cls, raw: RawNode) -> Metadata:
        metadata = cls()
        for child in raw.children:
            if child.name == "name":
                metadata.name = child.text
            elif child.name == "desc":
                metadata.description = child.text
            elif child.name == "author":
                metadata.author = Person.from_raw(child)
            elif child.name == "copyright":
                metadata.copyright = Copyright.from_raw(child)
            elif child.name == "link":
                metadata.links.append(Link.from_raw(child))
            elif child.name == "time":
                metadata.time = parse_time(child.text)
            elif child.name == "keywords":
                metadata.keywords = child.text
            elif child.name == "bounds":
                metadata.bounds = Bounds.from_raw(child)
            elif child.name == "extensions":
                metadata.extensions = Extensions.from_raw(child)
        return metadata

    def child_items(self) -> list[ChildItem]:
        items: list[ChildItem] = [Leaf("name", self.name), Leaf("desc", self.description)]
        if self.author is not None:
            items.append(self.author)
        if self.copyright is not None:
            items.append(self.copyright)
        items.extend(self.links)
        items.append(Leaf("time", format_time(self.time)))
        items.append(Leaf("keywords", self.keywords))
        if self.bounds is not None:
            items.append(self.bounds)
        if self.extensions is not None:
            items.append(self.extensions)
        return items
