#!/usr/bin/env python3
"""
Ramer-Douglas-Peucker simplification of track point sequences.
"""

from typing import List, Sequence, Tuple
import logging

from .geometry import Position, perpendicular_distance

logger = logging.getLogger(__name__)


def _find_split(
    points: Sequence[Position], start: int, end: int
) -> Tuple[int, float]:
    """
    Find the interior point of points[start..end] farthest from the chord.

    Ties keep the lowest index.

    Returns:
        Tuple of (index, distance); (start, 0.0) when there are no interior points
    """
    max_distance = 0.0
    index = start

    for i in range(start + 1, end):
        distance = perpendicular_distance(points[i], points[start], points[end])
        if distance > max_distance:
            index = i
            max_distance = distance

    return index, max_distance


def simplify(points: Sequence[Position], epsilon: float) -> List[Position]:
    """
    Simplify an ordered point sequence with the Ramer-Douglas-Peucker algorithm.

    Each range of points is split at the interior point farthest from the
    segment joining its endpoints while that distance exceeds epsilon; ranges
    within tolerance collapse to their two endpoints. Ranges are processed
    from an explicit stack rather than by recursion so that long tracks do not
    hit the interpreter's recursion limit.

    Args:
        points: Ordered positions to simplify
        epsilon: Maximum allowed perpendicular deviation, in degrees

    Returns:
        Ordered subsequence of points that always keeps the first and last point.
        Inputs with two points or fewer are returned unchanged.

    Raises:
        ValueError: If epsilon is negative
    """
    if epsilon < 0:
        raise ValueError(f"Simplification tolerance must be non-negative, got {epsilon}")

    if len(points) <= 2:
        return list(points)

    last = len(points) - 1
    keep = [False] * len(points)
    keep[0] = keep[last] = True

    stack = [(0, last)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        index, max_distance = _find_split(points, start, end)
        if max_distance > epsilon:
            # The split point is kept once and shared by both halves
            keep[index] = True
            stack.append((index, end))
            stack.append((start, index))

    simplified = [point for point, kept in zip(points, keep) if kept]

    logger.debug(
        f"Kept {len(simplified)} of {len(points)} points with epsilon {epsilon}"
    )
    return simplified
