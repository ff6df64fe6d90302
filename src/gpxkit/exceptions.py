"""Custom exceptions for gpxkit."""


class GpxKitError(Exception):
    """Base exception for gpxkit operations."""


class ParseError(GpxKitError):
    """Error while building elements from raw GPX input."""


class EmailFormatError(GpxKitError, ValueError):
    """Email address does not split into exactly one local part and one domain."""
