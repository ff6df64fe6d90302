"""Tracks: recorded paths made of one or more segments."""

from __future__ import annotations

from dataclasses import dataclass, field

from gpxkit.elements.base import ChildItem, Element, Leaf, format_number, parse_int
from gpxkit.elements.extensions import Extensions
from gpxkit.elements.link import Link
from gpxkit.elements.waypoint import TrackPoint
from gpxkit.schemas import RawNode


@dataclass
class TrackSegment(Element):
    """A run of track points with no gap in reception."""

    tag = "trkseg"

    points: list[TrackPoint] = field(default_factory=list)
    extensions: Extensions | None = None

    @classmethod
    def from_raw(cls, raw: RawNode) -> TrackSegment:
        segment = cls()
        for child in raw.children:
            if child.name == "trkpt":
                segment.points.append(TrackPoint.from_raw(child))
            elif child.name == "extensions":
                segment.extensions = Extensions.from_raw(child)
        return segment

    def child_items(self) -> list[ChildItem]:
        items: list[ChildItem] = list(self.points)
        if self.extensions is not None:
            items.append(self.extensions)
        return items


@dataclass
class Track(Element):
    tag = "trk"

    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    number: int | None = None
    type: str | None = None
    extensions: Extensions | None = None
    segments: list[TrackSegment] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: RawNode) -> Track:
        track = cls()
        for child in raw.children:
            if child.name == "name":
                track.name = child.text
            elif child.name == "cmt":
                track.comment = child.text
            elif child.name == "desc":
                track.description = child.text
            elif child.name == "src":
                track.source = child.text
            elif child.name == "link":
                track.links.append(Link.from_raw(child))
            elif child.name == "number":
                track.number = parse_int(child.text)
            elif child.name == "type":
                track.type = child.text
            elif child.name == "extensions":
                track.extensions = Extensions.from_raw(child)
            elif child.name == "trkseg":
                track.segments.append(TrackSegment.from_raw(child))
        return track

    @property
    def points(self) -> list[TrackPoint]:
        """All points of every segment, in order."""
        return [point for segment in self.segments for point in segment.points]

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
        items.extend(self.segments)
        return items
