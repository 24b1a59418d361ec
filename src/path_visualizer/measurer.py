#!/usr/bin/env python3
"""
Incremental distance measuring over a sequence of map clicks.
"""

from typing import Callable, List, Optional
import logging

from .config import KILOMETRE_THRESHOLD
from .geometry import Position, geodesic_distance

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[str, float], None]


def format_distance(total: float) -> str:
    """
    Format a measured distance for display.

    Args:
        total: Distance in meters

    Returns:
        Label in kilometers with three decimals above the threshold,
        otherwise in meters with two decimals
    """
    if total > KILOMETRE_THRESHOLD:
        return f"Measure: {total / 1000:.3f} km"
    return f"Measure: {total:.2f} m"


class DistanceTracker:
    """Running total of ground distance between consecutive clicked points."""

    def __init__(self, on_update: Optional[UpdateCallback] = None):
        self._clicks: List[Position] = []
        self._total = 0.0
        self._on_update = on_update

    @property
    def clicks(self) -> List[Position]:
        return list(self._clicks)

    @property
    def last_point(self) -> Optional[Position]:
        return self._clicks[-1] if self._clicks else None

    @property
    def can_undo(self) -> bool:
        """Undo is offered once there is a segment to remove."""
        return len(self._clicks) > 1

    def current_total(self) -> float:
        """Return the measured distance in meters."""
        return self._total

    def add_point(self, point: Position) -> None:
        """Append a click, extending the total by the new segment."""
        self._clicks.append(point)
        if len(self._clicks) >= 2:
            self._total += geodesic_distance(self._clicks[-2], point)
        self._notify()

    def remove_last(self) -> Optional[Position]:
        """
        Undo the most recent click.

        Returns:
            The removed point, or None if nothing was recorded
        """
        if not self._clicks:
            return None

        removed = self._clicks.pop()
        if self._clicks:
            self._total -= geodesic_distance(self._clicks[-1], removed)

        if len(self._clicks) <= 1:
            self._total = 0.0
        else:
            # Floating point drift can leave a tiny negative total
            self._total = max(self._total, 0.0)

        self._notify()
        return removed

    def reset(self) -> None:
        """Forget all clicks."""
        self._clicks.clear()
        self._total = 0.0
        if self._on_update is not None:
            self._on_update("Measure", 0.0)

    def _notify(self) -> None:
        label = format_distance(self._total)
        logger.debug(f"{label} over {len(self._clicks)} points")
        if self._on_update is not None:
            self._on_update(label, self._total)
