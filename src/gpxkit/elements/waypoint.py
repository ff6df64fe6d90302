"""Waypoints and the route/track points that share their shape."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from gpxkit.dates import format_time, parse_time
from gpxkit.elements.base import ChildItem, Element, Leaf, format_number, parse_float, parse_int
from gpxkit.elements.extensions import Extensions
from gpxkit.elements.link import Link
from gpxkit.schemas import RawNode

# Leaf tag -> (field name, text parser), in the order GPX 1.1 lists them.
_LEADING_FIELDS: dict[str, tuple[str, Callable[[str | None], object]]] = {
    "ele": ("elevation", parse_float),
    "time": ("time", parse_time),
    "magvar": ("magnetic_variation", parse_float),
    "geoidheight": ("geoid_height", parse_float),
    "name": ("name", lambda text: text),
    "cmt": ("comment", lambda text: text),
    "desc": ("description", lambda text: text),
    "src": ("source", lambda text: text),
}
_TRAILING_FIELDS: dict[str, tuple[str, Callable[[str | None], object]]] = {
    "sym": ("symbol", lambda text: text),
    "type": ("type", lambda text: text),
    "fix": ("fix", lambda text: text),
    "sat": ("satellites", parse_int),
    "hdop": ("horizontal_dilution", parse_float),
    "vdop": ("vertical_dilution", parse_float),
    "pdop": ("position_dilution", parse_float),
    "ageofdgpsdata": ("age_of_dgps_data", parse_float),
    "dgpsid": ("dgps_id", parse_int),
}


def _format_value(value: object) -> str | None:
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return value


@dataclass
class Waypoint(Element):
    """A point of interest, or a named feature on a map.

    Route and track points are the same type under a different tag.
    """

    tag = "wpt"

    latitude: float | None = None
    longitude: float | None = None
    elevation: float | None = None
    time: datetime | None = None
    magnetic_variation: float | None = None
    geoid_height: float | None = None
    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    symbol: str | None = None
    type: str | None = None
    fix: str | None = None
    satellites: int | None = None
    horizontal_dilution: float | None = None
    vertical_dilution: float | None = None
    position_dilution: float | None = None
    age_of_dgps_data: float | None = None
    dgps_id: int | None = None
    extensions: Extensions | None = None

    @classmethod
    def from_raw(cls, raw: RawNode) -> Waypoint:
        point = cls(
            latitude=parse_float(raw.attributes.get("lat")),
            longitude=parse_float(raw.attributes.get("lon")),
        )
        for child in raw.children:
            spec = _LEADING_FIELDS.get(child.name) or _TRAILING_FIELDS.get(child.name)
            if spec is not None:
                attr, parse = spec
                setattr(point, attr, parse(child.text))
            elif child.name == "link":
                point.links.append(Link.from_raw(child))
            elif child.name == "extensions":
                point.extensions = Extensions.from_raw(child)
        return point

    def attributes(self) -> list[tuple[str, str | None]]:
        return [
            ("lat", format_number(self.latitude)),
            ("lon", format_number(self.longitude)),
        ]

    def child_items(self) -> list[ChildItem]:
        items: list[ChildItem] = [
            Leaf(tag, _format_value(getattr(self, attr))) for tag, (attr, _) in _LEADING_FIELDS.items()
        ]
        items.extend(self.links)
        items.extend(
            Leaf(tag, _format_value(getattr(self, attr))) for tag, (attr, _) in _TRAILING_FIELDS.items()
        )
        if self.extensions is not None:
            items.append(self.extensions)
        return items


@dataclass
class RoutePoint(Waypoint):
    tag = "rtept"


@dataclass
class TrackPoint(Waypoint):
    tag = "trkpt"
