"""gpxkit: model, parse and render GPX documents."""

from gpxkit.document import GPXDocument
from gpxkit.elements import (
    Bounds,
    Copyright,
    Element,
    EmailAddress,
    Extensions,
    Link,
    Metadata,
    Person,
    Route,
    RoutePoint,
    Track,
    TrackPoint,
    TrackSegment,
    Waypoint,
)
from gpxkit.exceptions import EmailFormatError, GpxKitError, ParseError
from gpxkit.gpx_io import load_gpx, parse_gpx, save_gpx
from gpxkit.raw_parser import parse_raw_xml
from gpxkit.schemas import RawNode

__all__ = [
    "Bounds",
    "Copyright",
    "Element",
    "EmailAddress",
    "EmailFormatError",
    "Extensions",
    "GPXDocument",
    "GpxKitError",
    "Link",
    "Metadata",
    "ParseError",
    "Person",
    "RawNode",
    "Route",
    "RoutePoint",
    "Track",
    "TrackPoint",
    "TrackSegment",
    "Waypoint",
    "load_gpx",
    "parse_gpx",
    "parse_raw_xml",
    "save_gpx",
]
