"""Bounding box of the coordinates in a GPX file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from gpxkit.elements.base import SelfClosingElement, format_number, parse_float
from gpxkit.schemas import RawNode


@dataclass
class Bounds(SelfClosingElement):
    tag = "bounds"

    min_latitude: float | None = None
    min_longitude: float | None = None
    max_latitude: float | None = None
    max_longitude: float | None = None

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> Bounds:
        return cls(
            min_latitude=parse_float(values.get("minlat")),
            min_longitude=parse_float(values.get("minlon")),
            max_latitude=parse_float(values.get("maxlat")),
            max_longitude=parse_float(values.get("maxlon")),
        )

    @classmethod
    def from_raw(cls, raw: RawNode) -> Bounds:
        return cls.from_dict(raw.attributes)

    def attributes(self) -> list[tuple[str, str | None]]:
        return [
            ("minlat", format_number(self.min_latitude)),
            ("minlon", format_number(self.min_longitude)),
            ("maxlat", format_number(self.max_latitude)),
            ("maxlon", format_number(self.max_longitude)),
        ]
