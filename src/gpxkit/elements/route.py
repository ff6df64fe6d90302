"""Routes: ordered lists of points leading to a destination."""

from __future__ import annotations

from dataclasses import dataclass, field

from gpxkit.elements.base import ChildItem, Element, Leaf, format_number, parse_int
from gpxkit.elements.extensions import Extensions
from gpxkit.elements.link import Link
from gpxkit.elements.waypoint import RoutePoint
from gpxkit.schemas import RawNode


@dataclass
class Route(Element):
    tag = "rte"

    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    number: int | None = None
    type: str | None = None
    extensions: Extensions | None = None
    points: list[RoutePoint] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: RawNode) -> Route:
        route = cls()
        for child in raw.children:
            if child.name == "name":
                route.name = child.text
            elif child.name == "cmt":
                route.comment = child.text
            elif child.name == "desc":
                route.description = child.text
            elif child.name == "src":
                route.source = child.text
            elif child.name == "link":
                route.links.append(Link.from_raw(child))
            elif child.name == "number":
                route.number = parse_int(child.text)
            elif child.name == "type":
                route.type = child.text
            elif child.name == "extensions":
                route.extensions = Extensions.from_raw(child)
            elif child.name == "rtept":
                route.points.append(RoutePoint.from_raw(child))
        return route

    def child_items(self) -> list[ChildItem]:
        items: list[ChildItem] = [
            Leaf("name", self.name),
            Leaf("cmt", self.comment),
            Leaf("desc", self.description),
            Leaf("src", self.source),
        ]
        items.extend(self.links)
        items.append(Leaf("number", format_number(self.number)))
        items.append(Leaf("type", self.type))
        if self.extensions is not None:
            items.append(self.extensions)
        items.extend(self.points)
        return items
