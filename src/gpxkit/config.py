"""Local configuration for gpxkit."""

from __future__ import annotations

import os


DEFAULT_CREATOR = "gpxkit"

GPX_VERSION = "1.1"
GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Output format constants; downstream consumers rely on both.
INDENT_UNIT = "  "
LINE_TERMINATOR = "\r\n"

GPXKIT_CREATOR = os.getenv("GPXKIT_CREATOR", DEFAULT_CREATOR)
