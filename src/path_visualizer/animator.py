#!/usr/bin/env python3
"""
Timed playback of a simplified track.

A PathAnimator owns at most one PathAnimation at a time. The animation
advances a cursor over its simplified points on a cancellable timer taken
from an asyncio-style event loop (anything providing call_later), and
reports each frame through render callbacks:

    on_tick(marker, path)   current position and the path drawn so far;
                            (None, []) means "nothing drawn, marker hidden"
    on_fit(bounds)          bounding region the view should be fitted to
"""

from typing import Any, Callable, List, Optional, Sequence
import asyncio
import logging

from .config import ANIMATION_INTERVAL, SIMPLIFY_EPSILON
from .geometry import Bounds, Position, calculate_bounds
from .simplify import simplify

logger = logging.getLogger(__name__)

TickCallback = Callable[[Optional[Position], List[Position]], None]
FitCallback = Callable[[Bounds], None]


class PathAnimation:
    """A single playback of a track, from the first point to the last."""

    def __init__(
        self,
        points: Sequence[Position],
        on_tick: TickCallback,
        on_fit: FitCallback,
        loop: Any,
    ):
        """
        Simplify the track and fit the view to it.

        Args:
            points: Raw track points
            on_tick: Called with (marker, path) for every drawn frame
            on_fit: Called with the Bounds of the simplified track
            loop: Event loop providing call_later(delay, callback, *args)
        """
        self.points: List[Position] = simplify(points, SIMPLIFY_EPSILON)
        logger.info(f"Simplified from {len(points)} to {len(self.points)} points")

        self.cursor = 0
        self._on_tick = on_tick
        self._on_fit = on_fit
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        # Ticks carry the generation they were scheduled in so that a tick
        # dispatched before a stop() never advances a later run.
        self._generation = 0

        self.recenter()

    @property
    def running(self) -> bool:
        """True while a timer is pending."""
        return self._handle is not None

    def recenter(self) -> None:
        """Fit the view to the simplified track. Does not touch the cursor."""
        if not self.points:
            return
        self._on_fit(calculate_bounds(self.points))

    def start(self) -> None:
        """Begin ticking from the current cursor. No-op if already running."""
        if self._handle is not None:
            return
        self._schedule()

    def stop(self) -> None:
        """Cancel the pending timer, keeping the cursor and the drawn path."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug(f"Animation stopped at point {self.cursor}/{len(self.points)}")

    def reset(self) -> None:
        """Stop, rewind to the first point and clear the drawn path and marker."""
        self.stop()
        self.cursor = 0
        self._on_tick(None, [])

    def _schedule(self) -> None:
        self._generation += 1
        self._handle = self._loop.call_later(
            ANIMATION_INTERVAL, self._tick, self._generation
        )

    def _tick(self, generation: int) -> None:
        if generation != self._generation or self._handle is None:
            return
        self._handle = None

        if self.cursor >= len(self.points):
            logger.debug("Animation reached the end of the track")
            return

        self._on_tick(self.points[self.cursor], self.points[: self.cursor + 1])
        self.cursor += 1

        if self.cursor < len(self.points):
            self._schedule()
        else:
            logger.debug(f"Animation drew all {len(self.points)} points")


class PathAnimator:
    """Single-slot controller: starting a track replaces the previous playback."""

    def __init__(
        self,
        on_tick: TickCallback,
        on_fit: FitCallback,
        loop: Optional[Any] = None,
    ):
        """
        Args:
            on_tick: Render callback for frames, see module docstring
            on_fit: Render callback for view fitting
            loop: Event loop providing call_later; defaults to the running
                  asyncio loop at the time start() is called
        """
        self._on_tick = on_tick
        self._on_fit = on_fit
        self._loop = loop
        self._animation: Optional[PathAnimation] = None

    @property
    def animation(self) -> Optional[PathAnimation]:
        return self._animation

    @property
    def running(self) -> bool:
        return self._animation is not None and self._animation.running

    def start(self, points: Sequence[Position]) -> PathAnimation:
        """
        Replace any current playback with a new one of the given track.

        Args:
            points: Raw track points

        Returns:
            The newly started PathAnimation
        """
        if self._animation is not None:
            self._animation.reset()

        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        self._animation = PathAnimation(points, self._on_tick, self._on_fit, loop)
        self._animation.start()
        return self._animation

    def restart(self) -> None:
        """Play the current track again from its first point."""
        if self._animation is None:
            return
        self._animation.reset()
        self._animation.start()

    def stop(self) -> None:
        if self._animation is not None:
            self._animation.stop()

    def reset(self) -> None:
        if self._animation is not None:
            self._animation.reset()

    def recenter(self) -> None:
        if self._animation is not None:
            self._animation.recenter()
