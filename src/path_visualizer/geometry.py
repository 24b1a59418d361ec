#!/usr/bin/env python3
"""
Geometry and distance calculation utilities for track playback and measuring.
"""

from typing import List, NamedTuple, Sequence
import logging
import math
import pyproj
from shapely.geometry import MultiPoint

logger = logging.getLogger(__name__)

# WGS84 ellipsoid used for measured (ground) distances
WGS84 = pyproj.Geod(ellps="WGS84")


class Position(NamedTuple):
    """Represents a geographic position with latitude and longitude."""

    latitude: float
    longitude: float


class Bounds(NamedTuple):
    """Bounding region of a sequence of positions, in decimal degrees."""

    south: float
    west: float
    north: float
    east: float

    def to_folium(self) -> List[List[float]]:
        """Return [[south, west], [north, east]] as expected by fit_bounds."""
        return [[self.south, self.west], [self.north, self.east]]


def perpendicular_distance(
    point: Position, line_start: Position, line_end: Position
) -> float:
    """
    Calculate the planar distance from a point to a line segment.

    Latitude and longitude are treated as plain x/y coordinates. The point is
    projected onto the segment, the projection parameter is clamped to [0, 1]
    and the Euclidean distance to the clamped projection is returned. A
    zero-length segment measures the distance to its start.

    Args:
        point: Position to measure from
        line_start: First endpoint of the segment
        line_end: Second endpoint of the segment

    Returns:
        Distance in degrees
    """
    x, y = point.latitude, point.longitude
    x1, y1 = line_start.latitude, line_start.longitude
    x2, y2 = line_end.latitude, line_end.longitude

    dx = x2 - x1
    dy = y2 - y1
    length_squared = dx * dx + dy * dy

    if length_squared == 0:
        t = 0.0
    else:
        t = ((x - x1) * dx + (y - y1) * dy) / length_squared
        t = max(0.0, min(1.0, t))

    closest_x = x1 + t * dx
    closest_y = y1 + t * dy

    return math.hypot(x - closest_x, y - closest_y)


def geodesic_distance(coord1: Position, coord2: Position) -> float:
    """
    Calculate the ellipsoidal distance between two coordinates.

    Args:
        coord1: First coordinate position
        coord2: Second coordinate position

    Returns:
        Distance in meters along the WGS84 ellipsoid
    """
    _, _, distance = WGS84.inv(
        coord1.longitude, coord1.latitude, coord2.longitude, coord2.latitude
    )
    return distance


def path_length(positions: Sequence[Position]) -> float:
    """
    Sum the geodesic distances between consecutive positions.

    Args:
        positions: Ordered positions

    Returns:
        Total length in meters (0.0 for fewer than two positions)
    """
    return sum(
        geodesic_distance(positions[i - 1], positions[i])
        for i in range(1, len(positions))
    )


def calculate_bounds(positions: Sequence[Position]) -> Bounds:
    """
    Calculate the bounding region of a sequence of positions.

    Args:
        positions: Positions to enclose

    Returns:
        Bounds(south, west, north, east)

    Raises:
        ValueError: If positions is empty
    """
    if not positions:
        raise ValueError("Cannot calculate bounds of an empty sequence")

    # Shapely works in (x, y) = (longitude, latitude)
    west, south, east, north = MultiPoint(
        [(pos.longitude, pos.latitude) for pos in positions]
    ).bounds

    logger.debug(
        f"Bounds calculated: ({south:.5f}, {west:.5f}, {north:.5f}, {east:.5f}) over {len(positions)} points"
    )
    return Bounds(south, west, north, east)
