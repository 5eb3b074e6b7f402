"""
Level-of-Detail Sampling for Route Visualization

Each zoom step below FULL_DETAIL_ZOOM doubles the stride through the route,
so on-screen point density stays roughly constant as the map zooms out.

    zoom 15+ -> every point
    zoom 13  -> every 4th point
    zoom 11  -> every 16th point
    zoom 9   -> every 64th point
"""

from typing import Sequence, List
from . import constants


def skip_factor(zoom: int) -> int:
    """Stride through the route for a zoom level, capped at 2**MAX_SKIP_EXPONENT."""
    exponent = min(max(0, constants.FULL_DETAIL_ZOOM - zoom), constants.MAX_SKIP_EXPONENT)
    return max(1, 2 ** exponent)


def sample_route(route: Sequence, zoom: int) -> List:
    """
    Decimate a route for a zoom level.

    Takes indices 0, skip, 2*skip, ... and always appends the final point if
    the stride did not land on it, so the drawn route is never truncated.

    Args:
        route: Full route.
        zoom: Map zoom level.

    Returns:
        New list of sampled points. Routes with fewer than 2 points are
        returned as a list unchanged.
    """
    if len(route) < 2:
        return list(route)

    skip = skip_factor(zoom)
    sampled = list(route[::skip])
    if (len(route) - 1) % skip != 0:
        sampled.append(route[-1])

    return sampled
