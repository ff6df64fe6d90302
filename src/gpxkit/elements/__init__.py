"""Typed GPX elements."""

from gpxkit.elements.base import Element, Leaf, SelfClosingElement
from gpxkit.elements.bounds import Bounds
from gpxkit.elements.copyright import Copyright
from gpxkit.elements.email import EmailAddress
from gpxkit.elements.extensions import Extensions
from gpxkit.elements.link import Link
from gpxkit.elements.metadata import Metadata
from gpxkit.elements.person import Person
from gpxkit.elements.route import Route
from gpxkit.elements.track import Track, TrackSegment
from gpxkit.elements.waypoint import RoutePoint, TrackPoint, Waypoint

__all__ = [
    "Bounds",
    "Copyright",
    "Element",
    "EmailAddress",
    "Extensions",
    "Leaf",
    "Link",
    "Metadata",
    "Person",
    "Route",
    "RoutePoint",
    "SelfClosingElement",
    "Track",
    "TrackPoint",
    "TrackSegment",
    "Waypoint",
]
