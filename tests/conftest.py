"""Test setup for gpxkit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Field Logger 2.3"
     xmlns="http://www.topografix.com/GPX/1/1"
     xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">
  <metadata>
    <name>Morning loop</name>
    <desc>Lakeside run &amp; hill repeats</desc>
    <author>
      <name>Jane Doe</name>
      <email id="jane" domain="example.com"/>
      <link href="https://example.com/jane">
        <text>Jane's page</text>
      </link>
    </author>
    <copyright author="Jane Doe">
      <year>2023</year>
      <license>https://creativecommons.org/licenses/by/4.0/</license>
    </copyright>
    <time>2023-06-04T06:30:00Z</time>
    <keywords>running, lake</keywords>
    <bounds minlat="47.1" minlon="8.2" maxlat="47.3" maxlon="8.5"/>
  </metadata>
  <wpt lat="47.2" lon="8.3">
    <ele>412.5</ele>
    <name>Boathouse</name>
    <sym>Flag</sym>
  </wpt>
  <rte>
    <name>Way back</name>
    <number>1</number>
    <rtept lat="47.21" lon="8.31"><name>Bridge</name></rtept>
    <rtept lat="47.22" lon="8.32"/>
  </rte>
  <trk>
    <name>Loop</name>
    <trkseg>
      <trkpt lat="47.2" lon="8.3">
        <ele>410</ele>
        <time>2023-06-04T06:30:00Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>128</gpxtpx:hr>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
      <trkpt lat="47.201" lon="8.302">
        <ele>411.2</ele>
        <time>2023-06-04T06:30:05Z</time>
      </trkpt>
    </trkseg>
  </trk>
  <unknown-element>ignored</unknown-element>
</gpx>
"""


@pytest.fixture
def sample_gpx() -> str:
    """A small but complete GPX 1.1 document."""
    return SAMPLE_GPX
