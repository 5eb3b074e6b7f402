import pytest
from routeviz.route import RoutePoint
from routeviz.smoothing import smoothing_strength, smoothing_passes, smooth_points, smooth_for_zoom
from conftest import make_points


def zigzag(n):
    return [RoutePoint(position=(float(i % 2), float(i)), speed=float(i)) for i in range(n)]


@pytest.mark.parametrize("zoom, expected", [
    (18, 0.0),
    (15, 0.0),
    (14, 0.05),
    (12, 0.15),
    (9, 0.30),
    (8, 0.35),
    (2, 0.35),
])
def test_smoothing_strength(zoom, expected):
    assert smoothing_strength(zoom) == pytest.approx(expected)


def test_smoothing_passes():
    assert smoothing_passes(15) == 1
    assert smoothing_passes(12) == 1
    assert smoothing_passes(11) == 2
    assert smoothing_passes(3) == 2


def test_interior_point_weighted_average():
    points = [
        RoutePoint(position=(0.0, 0.0), speed=1.0),
        RoutePoint(position=(1.0, 2.0), speed=2.0),
        RoutePoint(position=(0.0, 4.0), speed=3.0),
    ]
    smoothed = smooth_points(points, 0.25)

    assert smoothed[1].position == pytest.approx((0.5, 2.0))
    assert smoothed[1].speed == 2.0


def test_uses_unsmoothed_neighbors():
    points = zigzag(4)
    smoothed = smooth_points(points, 0.2)
    # Point 2 sees the original point 1 (lat 1.0), not its smoothed value
    assert smoothed[2].position[0] == pytest.approx(0.2 * 1.0 + 0.6 * 0.0 + 0.2 * 1.0)


def test_endpoints_and_speeds_preserved():
    points = zigzag(9)
    smoothed = smooth_points(points, 0.35)

    assert len(smoothed) == len(points)
    assert smoothed[0] == points[0]
    assert smoothed[-1] == points[-1]
    assert [p.speed for p in smoothed] == [p.speed for p in points]


def test_collinear_points_stay_put():
    points = make_points(5)
    smoothed = smooth_points(points, 0.3)
    for original, result in zip(points, smoothed):
        assert result.position == pytest.approx(original.position)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_short_inputs_are_noop(n):
    points = zigzag(n)
    assert smooth_points(points, 0.3) is points


def test_zero_strength_is_noop():
    points = zigzag(6)
    assert smooth_points(points, 0.0) is points


def test_full_detail_zoom_leaves_points_unchanged():
    points = zigzag(6)
    assert smooth_for_zoom(points, 15) == points


def test_low_zoom_applies_two_passes():
    points = zigzag(7)
    w = smoothing_strength(10)
    expected = smooth_points(smooth_points(points, w), w)
    assert smooth_for_zoom(points, 10) == expected
    assert smooth_for_zoom(points, 10) != smooth_points(points, w)


def test_smooth_for_zoom_keeps_endpoints():
    points = zigzag(12)
    for zoom in range(0, 20):
        smoothed = smooth_for_zoom(points, zoom)
        assert smoothed[0] == points[0]
        assert smoothed[-1] == points[-1]
