"""
Route Session for Route Visualization

This module wires the pipeline together. compute_segments() is the pure
zoom -> segments derivation; RouteSession holds one loaded route and re-runs
that derivation on the initial render and on every zoom change.
"""

import enum
import logging
import threading
from pathlib import Path
from typing import Iterable, Mapping, NamedTuple, Optional, Tuple
from . import constants
from . import data_loading
from . import level_of_detail
from . import metrics
from . import route as route_builder
from . import smoothing
from .config import RouteConfig
from .route import LatLon, Route
from .segments import Segment, build_segments

logger = logging.getLogger(__name__)


def compute_segments(route: Route, max_speed: float, zoom: int) -> Tuple[Segment, ...]:
    """
    Derive the colored segments to draw at a zoom level.

    Runs level-of-detail sampling, zoom-dependent smoothing and segment
    building. Colors are scaled by max_speed, which must come from the full
    route so colors do not change with zoom.

    Args:
        route: Full, undecimated route.
        max_speed: Maximum speed of the full route.
        zoom: Map zoom level.

    Returns:
        Tuple of segments; empty for routes with fewer than 2 points.
    """
    sampled = level_of_detail.sample_route(route, zoom)
    smoothed = smoothing.smooth_for_zoom(sampled, zoom)
    return tuple(build_segments(smoothed, max_speed))


class SessionState(enum.Enum):
    IDLE = "idle"
    RECOMPUTING = "recomputing"


class RouteView(NamedTuple):
    zoom: int
    segments: Tuple[Segment, ...]


class RouteSession:
    """
    Holds one loaded route and the segments currently rendered for it.

    The route and its max speed are fixed per load. Each recompute builds a
    complete RouteView and publishes it with a single assignment, so readers
    see either the previous view or the new one. Loads and recomputes are
    serialized by a lock; the most recent call wins.
    """

    def __init__(self, config: Optional[RouteConfig] = None,
                 columns: Mapping[str, str] = constants.DEFAULT_COLUMNS):
        self.config = config or RouteConfig()
        self.columns = dict(columns)
        self.route: Route = ()
        self.max_speed = 0.0
        self.state = SessionState.IDLE
        self._view = RouteView(zoom=self.config.default_zoom, segments=())
        self._lock = threading.Lock()

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._view.segments

    @property
    def zoom(self) -> int:
        return self._view.zoom

    @property
    def view(self) -> RouteView:
        return self._view

    @property
    def center(self) -> LatLon:
        return route_builder.route_center(self.route, self.config.origin)

    def load_rows(self, rows: Iterable[Mapping], fieldnames: Optional[Iterable[str]] = None,
                  zoom: Optional[int] = None) -> RouteView:
        """
        Replace the route with one built from telemetry rows and render it.

        Args:
            rows: Raw telemetry rows in temporal order.
            fieldnames: Column names of the input. Defaults to every key seen
                        in the rows.
            zoom: Initial zoom. Defaults to the configured default zoom.

        Returns:
            The published RouteView.

        Raises:
            IngestionSchemaError: If a required column is absent. The session
                                  keeps its previous route in that case.
        """
        rows = list(rows)
        if fieldnames is None and rows:
            fieldnames = set().union(*(row.keys() for row in rows))
        if fieldnames is not None:
            data_loading.check_columns(fieldnames, self.columns)

        zoom = self.config.default_zoom if zoom is None else zoom

        with self._lock:
            self.state = SessionState.RECOMPUTING
            try:
                new_route = route_builder.build_route(rows, self.columns, self.config.origin)
                new_max = metrics.global_max_speed(p.speed for p in new_route)
                view = RouteView(zoom=zoom, segments=compute_segments(new_route, new_max, zoom))
                self.route, self.max_speed, self._view = new_route, new_max, view
            finally:
                self.state = SessionState.IDLE

        logger.info("Loaded route: %d points from %d rows, max speed %.3f",
                    len(self.route), len(rows), self.max_speed)
        return view

    def load_file(self, file_path: Path, zoom: Optional[int] = None) -> RouteView:
        """Load a telemetry CSV export and render it at the initial zoom."""
        rows = data_loading.load_rows(file_path, self.columns)
        return self.load_rows(rows, fieldnames=self.columns.values(), zoom=zoom)

    def on_zoom_changed(self, zoom: int) -> RouteView:
        """
        Re-derive segments for a new zoom level against the current route.

        Args:
            zoom: New map zoom level.

        Returns:
            The published RouteView.
        """
        with self._lock:
            self.state = SessionState.RECOMPUTING
            try:
                view = RouteView(zoom=zoom, segments=compute_segments(self.route, self.max_speed, zoom))
                self._view = view
            finally:
                self.state = SessionState.IDLE

        logger.debug("Recomputed %d segments at zoom %d", len(view.segments), zoom)
        return view
