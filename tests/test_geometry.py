import pytest
import math
from path_visualizer.geometry import (
    Bounds,
    Position,
    calculate_bounds,
    geodesic_distance,
    path_length,
    perpendicular_distance,
)


# Tests for perpendicular_distance
def test_point_above_segment_midpoint():
    point = Position(1.0, 1.0)
    seg_start = Position(0.0, 0.0)
    seg_end = Position(2.0, 0.0)
    assert perpendicular_distance(point, seg_start, seg_end) == pytest.approx(1.0)


def test_point_on_segment():
    point = Position(0.0, 1.0)
    assert perpendicular_distance(point, Position(0.0, 0.0), Position(0.0, 2.0)) == 0.0


def test_projection_clamped_before_start():
    # Projection falls before the start, so distance is to the start point
    point = Position(-3.0, 4.0)
    distance = perpendicular_distance(point, Position(0.0, 0.0), Position(10.0, 0.0))
    assert distance == pytest.approx(5.0)


def test_projection_clamped_after_end():
    point = Position(13.0, 4.0)
    distance = perpendicular_distance(point, Position(0.0, 0.0), Position(10.0, 0.0))
    assert distance == pytest.approx(5.0)


def test_zero_length_segment_measures_to_endpoint():
    point = Position(3.0, 4.0)
    seg = Position(0.0, 0.0)
    assert perpendicular_distance(point, seg, seg) == pytest.approx(5.0)


def test_perpendicular_distance_is_planar_in_degrees():
    # No latitude correction: one degree of longitude counts the same everywhere
    point = Position(60.0, 1.0)
    distance = perpendicular_distance(point, Position(59.0, 0.0), Position(61.0, 0.0))
    assert distance == pytest.approx(1.0)


# Tests for geodesic_distance
def test_geodesic_distance_one_degree_latitude_at_equator():
    distance = geodesic_distance(Position(0.0, 0.0), Position(1.0, 0.0))
    assert distance == pytest.approx(110574.0, rel=1e-3)


def test_geodesic_distance_zero_distance():
    pos = Position(latitude=53.5461, longitude=-113.4938)  # Edmonton
    assert geodesic_distance(pos, pos) == 0.0


def test_geodesic_distance_known_values():
    paris = Position(latitude=48.8566, longitude=2.3522)
    london = Position(latitude=51.5074, longitude=-0.1278)
    assert geodesic_distance(paris, london) / 1000 == pytest.approx(343.9, abs=1.5)


def test_geodesic_distance_is_symmetric():
    a = Position(53.54, -113.50)
    b = Position(53.55, -113.48)
    assert geodesic_distance(a, b) == pytest.approx(geodesic_distance(b, a))


def test_geodesic_distance_shrinks_toward_poles():
    at_equator = geodesic_distance(Position(0.0, 0.0), Position(0.0, 1.0))
    at_sixty = geodesic_distance(Position(60.0, 0.0), Position(60.0, 1.0))
    assert at_sixty < at_equator
    assert at_sixty / at_equator == pytest.approx(math.cos(math.radians(60)), rel=1e-2)


# Tests for path_length
def test_path_length_empty_and_single():
    assert path_length([]) == 0.0
    assert path_length([Position(1.0, 1.0)]) == 0.0


def test_path_length_sums_segments():
    route = [Position(0.0, 0.0), Position(0.0, 1.0), Position(0.0, 2.0)]
    expected = geodesic_distance(route[0], route[1]) + geodesic_distance(route[1], route[2])
    assert path_length(route) == pytest.approx(expected)


# Tests for calculate_bounds
def test_calculate_bounds():
    positions = [Position(53.5, -113.6), Position(53.6, -113.4), Position(53.4, -113.5)]
    bounds = calculate_bounds(positions)
    assert bounds == Bounds(south=53.4, west=-113.6, north=53.6, east=-113.4)


def test_calculate_bounds_single_point():
    bounds = calculate_bounds([Position(10.0, 20.0)])
    assert bounds == Bounds(10.0, 20.0, 10.0, 20.0)


def test_calculate_bounds_empty_raises():
    with pytest.raises(ValueError):
        calculate_bounds([])


def test_bounds_to_folium():
    bounds = Bounds(south=1.0, west=2.0, north=3.0, east=4.0)
    assert bounds.to_folium() == [[1.0, 2.0], [3.0, 4.0]]
