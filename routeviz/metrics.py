"""
Metrics Computation for Route Visualization

This module holds the scalar math of the pipeline: the planar -> geographic
projection, the speed reduction of velocity components and the route-wide
maximum speed used for color scaling.
"""

import numpy as np
from typing import Iterable, Tuple
from . import constants


def xy_to_latlon(x: float, y: float, origin_lat: float = constants.LAT0,
                 origin_lon: float = constants.LON0) -> Tuple[float, float]:
    """
    Convert a local planar offset (x, y) to latitude/longitude.

    Uses a simple equirectangular approximation around the origin, suitable
    for offsets of a few tens of kilometers. No curvature or datum handling.

    Args:
        x: East offset from the origin in meters.
        y: North offset from the origin in meters.
        origin_lat: Reference latitude in degrees.
        origin_lon: Reference longitude in degrees.

    Returns:
        Tuple of (lat, lon) in degrees. Non-finite inputs propagate.
    """
    delta_lat = y / constants.METERS_PER_DEGREE
    delta_lon = x / (constants.METERS_PER_DEGREE * np.cos(np.deg2rad(origin_lat)))
    return float(origin_lat + delta_lat), float(origin_lon + delta_lon)


def speed_from_velocity(vx: float, vy: float, vz: float) -> float:
    """Magnitude of a 3D velocity vector. NaN components propagate."""
    return float(np.sqrt(vx ** 2 + vy ** 2 + vz ** 2))


def global_max_speed(speeds: Iterable[float]) -> float:
    """
    Maximum speed across a full route.

    Args:
        speeds: Speeds of every point of the undecimated route.

    Returns:
        The maximum, or 0.0 for an empty route.
    """
    values = np.fromiter(speeds, dtype=float)
    if values.size == 0:
        return 0.0
    return float(values.max())
