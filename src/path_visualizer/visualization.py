#!/usr/bin/env python3
"""
Track playback rendering using folium maps.
"""

from typing import List, Optional
import logging
import folium
from folium.template import Template

from .config import FIT_PADDING
from .geometry import Bounds, Position, calculate_bounds
from .measurer import DistanceTracker

logger = logging.getLogger(__name__)

MARKER_HTML = (
    '<div style="background-color: red; width: 10px; height: 10px; '
    'border-radius: 50%;"></div>'
)


class MapRenderer:
    """
    Collects the render callbacks of a playback and a measurement.

    Pass on_tick/on_fit to a PathAnimator and on_update to a DistanceTracker;
    the latest state is then drawn by create_track_map().
    """

    def __init__(self):
        self.marker: Optional[Position] = None
        self.path: List[Position] = []
        self.bounds: Optional[Bounds] = None
        self.frames = 0
        self.measure_label: Optional[str] = None

    def on_tick(self, marker: Optional[Position], path: List[Position]) -> None:
        self.marker = marker
        self.path = list(path)
        if marker is not None:
            self.frames += 1

    def on_fit(self, bounds: Bounds) -> None:
        self.bounds = bounds

    def on_update(self, label: str, total: float) -> None:
        self.measure_label = label


class PlaybackLegend(folium.MacroElement):
    """Legend showing playback progress and the current measurement."""

    def __init__(self, drawn_points: int, measure_label: Optional[str]):
        super().__init__()
        self.drawn_points = drawn_points
        self.measure_label = measure_label or ""

        self._template = Template(
            """
        {% macro html(this, kwargs) %}
        <div id="playback-legend" style="
            position: fixed;
            bottom: 50px;
            left: 50px;
            width: 220px;
            background-color: white;
            border: 2px solid grey;
            z-index: 9999;
            font-size: 13px;
            padding: 12px;
            font-family: Arial, sans-serif;
            border-radius: 5px;
            box-shadow: 0 2px 5px rgba(0,0,0,0.2);
            box-sizing: border-box;
        ">
            <b>Legend</b><br>
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: blue; font-size: 18px;">&mdash;</span>
                Track ({{ this.drawn_points }} points drawn)
            </div>
            {% if this.measure_label %}
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: red; font-size: 18px;">&mdash;</span>
                {{ this.measure_label }}
            </div>
            {% endif %}
        </div>
        {% endmacro %}
        """
        )


def _to_folium(positions: List[Position]) -> List[List[float]]:
    return [[pos.latitude, pos.longitude] for pos in positions]


def create_track_map(
    renderer: MapRenderer,
    output_filename: str,
    tracker: Optional[DistanceTracker] = None,
) -> None:
    """
    Draw the current playback and measurement state and save it as HTML.

    Args:
        renderer: MapRenderer holding the latest playback frame
        output_filename: Path where the HTML map file should be saved
        tracker: Optional DistanceTracker whose clicks are drawn as a measured path

    Raises:
        ValueError: If there is neither a fitted track nor a measurement to show
    """
    clicks = tracker.clicks if tracker is not None else []

    bounds = renderer.bounds
    if bounds is None and clicks:
        bounds = calculate_bounds(clicks)
    if bounds is None:
        raise ValueError("Cannot create map without a track or measurement")

    center_lat = (bounds.south + bounds.north) / 2
    center_lon = (bounds.west + bounds.east) / 2
    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    track_map = folium.Map(location=[center_lat, center_lon], tiles=None)

    folium.TileLayer(
        tiles="OpenStreetMap",
        attr=(
            "&copy; <a href='http://www.openstreetmap.org/copyright'>OpenStreetMap</a>"
        ),
        name="OpenStreetMap",
        max_zoom=19,
    ).add_to(track_map)

    if renderer.path:
        folium.PolyLine(
            _to_folium(renderer.path),
            color="blue",
            weight=2,
            opacity=0.5,
        ).add_to(track_map)

    if renderer.marker is not None:
        folium.Marker(
            [renderer.marker.latitude, renderer.marker.longitude],
            icon=folium.DivIcon(class_name="current-position-marker", html=MARKER_HTML),
        ).add_to(track_map)

    if clicks:
        folium.PolyLine(
            _to_folium(clicks),
            color="red",
            weight=2,
            opacity=0.5,
            popup=renderer.measure_label,
        ).add_to(track_map)

        last = clicks[-1]
        folium.Marker(
            [last.latitude, last.longitude],
            icon=folium.DivIcon(class_name="measure-marker", html=MARKER_HTML),
        ).add_to(track_map)

    track_map.add_child(PlaybackLegend(len(renderer.path), renderer.measure_label))

    track_map.fit_bounds(bounds.to_folium(), padding=FIT_PADDING)
    track_map.save(output_filename)

    logger.debug(
        f"Map saved to {output_filename} with {len(renderer.path)} track points "
        f"and {len(clicks)} measured points"
    )
