"""The root ``<gpx>`` element and whole-document rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gpxkit.config import GPX_NAMESPACE, GPX_VERSION, GPXKIT_CREATOR, LINE_TERMINATOR, XML_DECLARATION
from gpxkit.elements import Element, Extensions, Metadata, Route, Track, Waypoint
from gpxkit.elements.base import ChildItem
from gpxkit.exceptions import ParseError
from gpxkit.schemas import RawNode

logger = logging.getLogger(__name__)

_NAMESPACE_PREFIX = "xmlns:"


@dataclass
class GPXDocument(Element):
    """A complete GPX document.

    Top-level children always render as metadata, waypoints, routes,
    tracks, then extensions, whatever order they were parsed or added in.

    Attributes:
        creator: Name of the software that created the document.
        version: GPX schema version.
        namespaces: Extra ``xmlns:prefix`` declarations, kept so that
            extension content using those prefixes stays bound.
    """

    tag = "gpx"

    creator: str | None = GPXKIT_CREATOR
    version: str | None = GPX_VERSION
    namespaces: dict[str, str] = field(default_factory=dict)
    metadata: Metadata | None = None
    waypoints: list[Waypoint] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)
    tracks: list[Track] = field(default_factory=list)
    extensions: Extensions | None = None

    @classmethod
    def from_raw(cls, raw: RawNode) -> GPXDocument:
        """Build a document from a raw ``<gpx>`` node.

        Raises:
            ParseError: If ``raw`` is not a ``<gpx>`` node.
        """
        if raw.name != cls.tag:
            raise ParseError(f"Expected a <{cls.tag}> root element, got <{raw.name}>")

        document = cls(
            creator=raw.attributes.get("creator"),
            version=raw.attributes.get("version"),
            namespaces={
                key[len(_NAMESPACE_PREFIX):]: value
                for key, value in raw.attributes.items()
                if key.startswith(_NAMESPACE_PREFIX)
            },
        )
        for child in raw.children:
            if child.name == "metadata":
                document.metadata = Metadata.from_raw(child)
            elif child.name == "wpt":
                document.waypoints.append(Waypoint.from_raw(child))
            elif child.name == "rte":
                document.routes.append(Route.from_raw(child))
            elif child.name == "trk":
                document.tracks.append(Track.from_raw(child))
            elif child.name == "extensions":
                document.extensions = Extensions.from_raw(child)
            else:
                logger.debug("Skipping unknown top-level element <%s>", child.name)
        return document

    def attributes(self) -> list[tuple[str, str | None]]:
        pairs: list[tuple[str, str | None]] = [
            ("version", self.version),
            ("creator", self.creator),
            ("xmlns", GPX_NAMESPACE),
        ]
        pairs.extend((f"{_NAMESPACE_PREFIX}{prefix}", uri) for prefix, uri in sorted(self.namespaces.items()))
        return pairs

    def child_items(self) -> list[ChildItem]:
        items: list[ChildItem] = []
        if self.metadata is not None:
            items.append(self.metadata)
        items.extend(self.waypoints)
        items.extend(self.routes)
        items.extend(self.tracks)
        if self.extensions is not None:
            items.append(self.extensions)
        return items

    def render(self, out: list[str] | None = None, level: int = 0) -> str:
        """Render the full document, XML declaration included.

        When ``out`` is given the markup is also appended to it.
        """
        buffer: list[str] = [XML_DECLARATION, LINE_TERMINATOR]
        super().render(buffer, level)
        if out is not None:
            out.extend(buffer)
        return "".join(buffer)
