#!/usr/bin/env python3
"""
Path Visualizer
This script replays the first track of a GPX file as a simplified, animated
path and saves the resulting frame, together with an optional distance
measurement, as an interactive HTML map.
"""

from typing import List, Optional, Tuple
import argparse
import asyncio
import logging
import os
import sys
import webbrowser
from gpxpy import gpx

from . import __version__
from .animator import PathAnimator
from .config import ANIMATION_INTERVAL, SIMPLIFY_EPSILON, VisualizerConfig
from .file_utils import generate_output_filename
from .geometry import Position, calculate_bounds
from .measurer import DistanceTracker
from .metrics import collect_metrics, log_metrics
from .simplify import simplify
from .track import TrackNotFoundError, load_track
from .visualization import MapRenderer, create_track_map

logger = logging.getLogger("path_visualizer")


def parse_position(value: str) -> Tuple[float, float]:
    """Parse a "LAT,LON" command-line value."""
    try:
        lat_text, lon_text = value.split(",")
        latitude, longitude = float(lat_text), float(lon_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LAT,LON but got {value!r}")
    if not -90.0 <= latitude <= 90.0 or not -180.0 <= longitude <= 180.0:
        raise argparse.ArgumentTypeError(f"coordinates out of range: {value!r}")
    return latitude, longitude


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Animated GPX track playback with distance measuring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="GPX file to replay ('-' reads from stdin)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output HTML map file (default: auto-generated based on input filename)",
    )
    parser.add_argument(
        "--measure",
        type=parse_position,
        action="append",
        default=[],
        metavar="LAT,LON",
        help="Add a measuring point; repeat to measure a path",
    )
    parser.add_argument(
        "--no-animate",
        action="store_true",
        help="Draw the whole simplified track at once instead of replaying it",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Don't automatically open the HTML file in browser",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"path-visualizer {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> VisualizerConfig:
    """Build a VisualizerConfig from parsed arguments."""
    return VisualizerConfig(
        output=args.output,
        log_level=args.log_level,
        no_open=args.no_open,
        no_animate=args.no_animate,
        metrics=args.metrics,
        measure=list(args.measure),
    )


def determine_output_filename(input_filename: str, output_arg: Optional[str]) -> str:
    """
    Determine the output filename to use.

    Args:
        input_filename: Path to the input GPX file
        output_arg: Value from --output argument (None if not specified)

    Returns:
        Output filename to use

    Raises:
        RuntimeError: If auto-generation fails
        ValueError: If constructed filename would be illegal
    """
    if output_arg is not None:
        return output_arg

    if input_filename == "-":
        input_filename = "stdin.gpx"

    try:
        return generate_output_filename(input_filename)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate output filename: {e}")
        raise


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except Exception as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def setup_logging(log_level: str) -> None:
    """Setup logging configuration."""
    level = getattr(logging, log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


async def play_track(points: List[Position], renderer: MapRenderer) -> List[Position]:
    """
    Replay a track in real time until its last point has been drawn.

    Args:
        points: Raw track points
        renderer: MapRenderer receiving the frames

    Returns:
        The simplified points that were played back
    """
    animator = PathAnimator(renderer.on_tick, renderer.on_fit)
    animation = animator.start(points)

    seconds = len(animation.points) * ANIMATION_INTERVAL
    logger.info(f"Replaying {len(animation.points)} points (~{seconds:.1f} s)")

    while animator.running:
        await asyncio.sleep(ANIMATION_INTERVAL)

    logger.debug(f"Playback finished after {renderer.frames} frames")
    return animation.points


def draw_track(points: List[Position], renderer: MapRenderer) -> List[Position]:
    """
    Draw the whole simplified track as a single frame.

    Args:
        points: Raw track points
        renderer: MapRenderer receiving the frame

    Returns:
        The simplified points that were drawn
    """
    simplified = simplify(points, SIMPLIFY_EPSILON)
    logger.info(f"Simplified from {len(points)} to {len(simplified)} points")
    if simplified:
        renderer.on_fit(calculate_bounds(simplified))
        renderer.on_tick(simplified[-1], simplified)
    return simplified


def main():
    """
    Parses command-line arguments, loads the GPX track, replays it and
    generates an interactive map.
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    if not args.filename:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)
    setup_logging(config.log_level)

    try:
        output_filename = determine_output_filename(args.filename, config.output)
        logger.debug(f"Output filename: {output_filename}")
    except (RuntimeError, ValueError):
        sys.exit(1)

    try:
        points = load_track(args.filename)
    except FileNotFoundError:
        logger.error(f"GPX file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read GPX file (permission denied): {args.filename}")
        sys.exit(1)
    except TrackNotFoundError as e:
        logger.error(f"{e}: {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    logger.info(f"Loaded GPX track with {len(points)} points")

    renderer = MapRenderer()

    tracker = DistanceTracker(renderer.on_update)
    for latitude, longitude in config.measure:
        tracker.add_point(Position(latitude, longitude))
    if renderer.measure_label is not None:
        print(renderer.measure_label)

    if config.no_animate:
        simplified = draw_track(points, renderer)
    else:
        simplified = asyncio.run(play_track(points, renderer))

    try:
        create_track_map(renderer, output_filename, tracker)
    except Exception as e:
        logger.error(f"Failed to create map: {e}")
        sys.exit(1)

    metrics = collect_metrics(points, simplified, renderer.frames, tracker)
    log_metrics(metrics, config.metrics)

    if not config.no_open:
        open_file_in_browser(output_filename)


if __name__ == "__main__":
    main()
