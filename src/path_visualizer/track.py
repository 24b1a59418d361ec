#!/usr/bin/env python3
"""
GPX track loading.
"""

from typing import List, TextIO
import logging
import sys
import gpxpy
import gpxpy.gpx

from .geometry import Position

logger = logging.getLogger(__name__)


class TrackNotFoundError(ValueError):
    """Raised when a GPX document contains no track."""

    pass


def parse_track(file_input: TextIO) -> List[Position]:
    """
    Parse GPX data and return the points of its first track.

    All segments of the track are concatenated in document order. Routes,
    waypoints and any further tracks are ignored.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        List of Position objects (possibly empty if the track has no points)

    Raises:
        TrackNotFoundError: If the document has no <trk> element
        gpxpy.gpx.GPXException: If the GPX data is malformed
    """
    gpx_data = gpxpy.parse(file_input)

    if not gpx_data.tracks:
        raise TrackNotFoundError("GPX file contains no track")

    track = gpx_data.tracks[0]
    if len(gpx_data.tracks) > 1:
        logger.warning(
            f"GPX file contains {len(gpx_data.tracks)} tracks, using only the first"
        )

    positions = [
        Position(latitude=point.latitude, longitude=point.longitude)
        for segment in track.segments
        for point in segment.points
    ]

    logger.debug(
        f"Parsed {len(positions)} track points from {len(track.segments)} segments"
        + (f" of track '{track.name}'" if track.name else "")
    )
    return positions


def load_track(filename: str) -> List[Position]:
    """
    Load the first track of a GPX file.

    Args:
        filename: Path to GPX file, or "-" for stdin

    Returns:
        List of Position objects

    Raises:
        TrackNotFoundError: If the document has no track
        FileNotFoundError: If file doesn't exist
        PermissionError: If file can't be read
        gpxpy.gpx.GPXException: If the GPX data is malformed
    """
    if filename == "-":
        logger.debug("Reading GPX data from stdin")
        return parse_track(sys.stdin)

    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return parse_track(f)
