#!/usr/bin/env python3
"""
Path Visualizer - animated playback and distance measuring for GPX tracks.

This package simplifies recorded tracks with the Ramer-Douglas-Peucker
algorithm, replays them on a timer, measures clicked paths, and renders the
result on interactive maps using folium.
"""
import importlib.metadata

__version__ = importlib.metadata.version("path-visualizer")

# Import main classes for public API
from .geometry import Bounds, Position
from .simplify import simplify
from .animator import PathAnimation, PathAnimator
from .measurer import DistanceTracker, format_distance

__all__ = [
    "Bounds",
    "Position",
    "simplify",
    "PathAnimation",
    "PathAnimator",
    "DistanceTracker",
    "format_distance",
]
