"""
Route Construction for Route Visualization

This module turns raw telemetry rows into the canonical in-memory route: an
ordered, immutable sequence of projected positions with scalar speeds.
"""

import logging
from typing import Iterable, Mapping, NamedTuple, Optional, Tuple
from . import constants
from . import metrics
from . import utils

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


class RoutePoint(NamedTuple):
    position: LatLon
    speed: float


Route = Tuple[RoutePoint, ...]


def parse_row(row: Mapping, columns: Mapping[str, str] = constants.DEFAULT_COLUMNS,
              origin: LatLon = (constants.LAT0, constants.LON0)) -> Optional[RoutePoint]:
    """
    Build a RoutePoint from a single telemetry row.

    Args:
        row: Mapping of column name to raw value (string or number).
        columns: Logical field -> column name map (planarX, planarY,
                 velocityX, velocityY, velocityZ).
        origin: Reference (lat, lon) for the projection.

    Returns:
        RoutePoint, or None if any of the five fields is missing or is not a
        finite number.
    """
    values = []
    for field in ("planarX", "planarY", "velocityX", "velocityY", "velocityZ"):
        value = utils.finite_or_none(row.get(columns[field]))
        if value is None:
            return None
        values.append(value)

    x, y, vx, vy, vz = values
    return RoutePoint(
        position=metrics.xy_to_latlon(x, y, origin[0], origin[1]),
        speed=metrics.speed_from_velocity(vx, vy, vz),
    )


def build_route(rows: Iterable[Mapping], columns: Mapping[str, str] = constants.DEFAULT_COLUMNS,
                origin: LatLon = (constants.LAT0, constants.LON0)) -> Route:
    """
    Convert telemetry rows to a route, preserving sample order.

    Rows that fail to parse are dropped, never interpolated.

    Args:
        rows: Raw telemetry rows in temporal order.
        columns: Logical field -> column name map.
        origin: Reference (lat, lon) for the projection.

    Returns:
        Tuple of RoutePoint. Empty if every row was rejected.
    """
    points = []
    rejected = 0

    for row in rows:
        point = parse_row(row, columns, origin)
        if point is None:
            rejected += 1
            continue
        points.append(point)

    if rejected:
        logger.info("Rejected %d telemetry rows with missing or non-finite values", rejected)
    logger.debug("Built route with %d points", len(points))

    return tuple(points)


def route_center(route: Route, origin: LatLon = (constants.LAT0, constants.LON0)) -> LatLon:
    """Initial map center: the first route position, or the origin if empty."""
    if not route:
        return origin
    return route[0].position
