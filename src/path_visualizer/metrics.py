"""
Module for collecting and logging playback metrics.
"""

from typing import List, NamedTuple
import logging

from .geometry import Position, path_length
from .measurer import DistanceTracker

logger = logging.getLogger(__name__)


class PlaybackMetrics(NamedTuple):
    """Container for playback metrics data."""

    raw_points: int
    simplified_points: int
    frames_drawn: int
    track_length_m: float
    measured_points: int
    measured_distance_m: float


def collect_metrics(
    raw_points: List[Position],
    simplified: List[Position],
    frames_drawn: int,
    tracker: DistanceTracker,
) -> PlaybackMetrics:
    """
    Collect metrics once playback has finished.

    Args:
        raw_points: Track points as loaded
        simplified: Points that were played back
        frames_drawn: Number of frames the renderer received
        tracker: DistanceTracker holding the measurement

    Returns:
        PlaybackMetrics for the run
    """
    return PlaybackMetrics(
        raw_points=len(raw_points),
        simplified_points=len(simplified),
        frames_drawn=frames_drawn,
        track_length_m=path_length(simplified),
        measured_points=len(tracker.clicks),
        measured_distance_m=tracker.current_total(),
    )


def log_metrics(metrics: PlaybackMetrics, enabled: bool) -> None:
    """
    Log structured metrics.

    Args:
        metrics: PlaybackMetrics to log
        enabled: Value of the --metrics flag
    """
    if not enabled:
        return

    logger.debug("=== PATH_VISUALIZER_METRICS ===")
    for key, value in metrics._asdict().items():
        if isinstance(value, float):
            logger.debug(f"{key}={value:.2f}")
        else:
            logger.debug(f"{key}={value}")
    if metrics.raw_points:
        logger.debug(
            f"simplification_ratio={metrics.simplified_points / metrics.raw_points:.4f}"
        )
    logger.debug("=== END_PATH_VISUALIZER_METRICS ===")
