"""
Positional Smoothing for Route Visualization

This module generalizes a sampled route for display: interior points are
pulled toward their neighbors with a strength that grows as the map zooms
out, and at very low zoom the pass is applied twice.
"""

import numpy as np
from typing import List, Sequence
from . import constants
from .route import RoutePoint


def smoothing_strength(zoom: int) -> float:
    """
    Neighbor weight for a zoom level.

    Args:
        zoom: Map zoom level.

    Returns:
        0.0 at or above FULL_DETAIL_ZOOM, otherwise (15 - zoom) * 0.05
        capped at MAX_SMOOTHING.
    """
    if zoom >= constants.FULL_DETAIL_ZOOM:
        return 0.0
    return min(constants.MAX_SMOOTHING, (constants.FULL_DETAIL_ZOOM - zoom) * constants.SMOOTHING_STEP)


def smoothing_passes(zoom: int) -> int:
    return 2 if zoom < constants.DOUBLE_PASS_ZOOM else 1


def smooth_points(points: Sequence[RoutePoint], strength: float) -> Sequence[RoutePoint]:
    """
    Apply one neighbor-weighted averaging pass to a list of route points.

    Interior point i becomes (prev * w + curr * (1 - 2w) + next * w) / (1 - 2w + 2w)
    for latitude and longitude independently, always reading the unsmoothed
    neighbors. The first and last points and every speed are left as-is.

    Args:
        points: Sampled route points.
        strength: Neighbor weight w, in [0, MAX_SMOOTHING].

    Returns:
        New list of points of the same length, or the input itself when it has
        fewer than 3 points or strength is 0.
    """
    if len(points) < 3 or strength == 0:
        return points

    w = strength
    positions = np.array([p.position for p in points], dtype=float)
    prev = positions[:-2]
    curr = positions[1:-1]
    nxt = positions[2:]

    smoothed = positions.copy()
    smoothed[1:-1] = (prev * w + curr * (1 - 2 * w) + nxt * w) / (1 - 2 * w + 2 * w)

    result = [points[0]]
    for idx in range(1, len(points) - 1):
        lat, lon = smoothed[idx]
        result.append(RoutePoint(position=(float(lat), float(lon)), speed=points[idx].speed))
    result.append(points[-1])

    return result


def smooth_for_zoom(points: Sequence[RoutePoint], zoom: int) -> List[RoutePoint]:
    """Smooth sampled points with the strength and pass count for a zoom level."""
    strength = smoothing_strength(zoom)
    smoothed = points
    for _ in range(smoothing_passes(zoom)):
        smoothed = smooth_points(smoothed, strength)
    return list(smoothed)
