"""Read and write GPX documents."""

from __future__ import annotations

import logging
from pathlib import Path

from gpxkit.document import GPXDocument
from gpxkit.raw_parser import parse_raw_xml

logger = logging.getLogger(__name__)


def parse_gpx(text: str | bytes) -> GPXDocument:
    """Parse GPX markup into a GPXDocument.

    Raises:
        ParseError: If the markup has no root element or the root is not ``<gpx>``.
    """
    return GPXDocument.from_raw(parse_raw_xml(text))


def load_gpx(path: str | Path, encoding: str = "utf-8") -> GPXDocument:
    """Read and parse a GPX file.

    Args:
        path: Path to the GPX file.
        encoding: Text encoding of the file.

    Returns:
        The parsed document.
    """
    path = Path(path)
    logger.debug("Reading GPX file %s", path)
    return parse_gpx(path.read_text(encoding=encoding))


def save_gpx(document: GPXDocument, path: str | Path, encoding: str = "utf-8") -> Path:
    """Render ``document`` and write it to ``path``.

    Parent directories are created as needed. Line endings are written
    as rendered (CRLF), without platform translation.

    Returns:
        The path written to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="") as gpx_file:
        gpx_file.write(document.render())
    logger.debug("Wrote GPX file %s", path)
    return path
