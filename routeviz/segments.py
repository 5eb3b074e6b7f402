"""
Segment Building for Route Visualization

This module pairs consecutive display points into line segments colored by
speed relative to the maximum speed of the full route.
"""

import math
from typing import List, NamedTuple, Sequence, Tuple
from . import constants
from .route import LatLon, RoutePoint


class Segment(NamedTuple):
    endpoints: Tuple[LatLon, LatLon]
    color: str


def velocity_to_color(speed: float, max_speed: float) -> str:
    """
    Map a speed to a discrete color bucket.

    Buckets by speed / max_speed, evaluated top-down:

    - > 0.8: red (#FF0000)
    - > 0.6: light red (#FF6666)
    - > 0.4: orange (#FFA500)
    - > 0.2: yellow (#FFFF00)
    - otherwise: green (#00FF00)

    A zero or non-finite max_speed, or a non-finite ratio, maps to green.

    Args:
        speed: Speed of the segment's first point.
        max_speed: Maximum speed of the undecimated route.

    Returns:
        Hex color code string.
    """
    if not math.isfinite(max_speed) or max_speed <= 0:
        return constants.LOWEST_COLOR

    ratio = speed / max_speed
    if not math.isfinite(ratio):
        return constants.LOWEST_COLOR

    for threshold, color in constants.COLOR_BUCKETS:
        if ratio > threshold:
            return color
    return constants.LOWEST_COLOR


def build_segments(points: Sequence[RoutePoint], max_speed: float) -> List[Segment]:
    """
    Build one colored segment per pair of consecutive points.

    Args:
        points: Sampled (and possibly smoothed) route points.
        max_speed: Maximum speed of the undecimated route.

    Returns:
        List of max(0, len(points) - 1) segments.
    """
    segments = []
    for idx in range(len(points) - 1):
        start, end = points[idx], points[idx + 1]
        segments.append(Segment(
            endpoints=(start.position, end.position),
            color=velocity_to_color(start.speed, max_speed),
        ))
    return segments
