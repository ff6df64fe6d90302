"""Copyright holder and license of a GPX file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone

from gpxkit.dates import format_year, parse_year
from gpxkit.elements.base import ChildItem, Element, Leaf
from gpxkit.schemas import RawNode


@dataclass
class Copyright(Element):
    """Copyright information for a GPX file.

    Attributes:
        year: Year of first publication; only the year is kept on output.
        license: URI of the license the file is published under.
        author: Copyright holder's name, rendered as the ``author`` attribute.
    """

    tag = "copyright"

    year: datetime | None = None
    license: str | None = None
    author: str | None = None

    @classmethod
    def for_author(cls, author: str) -> Copyright:
        """Create a copyright for ``author``, stamped with the current year."""
        return cls(year=datetime.now(timezone.utc), author=author)

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> Copyright:
        return cls(
            year=parse_year(values.get("year")),
            license=values.get("license"),
            author=values.get("author"),
        )

    @classmethod
    def from_raw(cls, raw: RawNode) -> Copyright:
        parsed = cls(author=raw.attributes.get("author"))
        for child in raw.children:
            if child.name == "year":
                parsed.year = parse_year(child.text)
            elif child.name == "license":
                parsed.license = child.text
        return parsed

    def attributes(self) -> list[tuple[str, str | None]]:
        return [("author", self.author)]

    def child_items(self) -> list[ChildItem]:
        return [
            Leaf("year", format_year(self.year)),
            Leaf("license", self.license),
        ]
