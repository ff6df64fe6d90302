"""Schema models for gpxkit."""

from gpxkit.schemas.raw import RawNode

__all__ = ["RawNode"]
