"""
Route Visualization Package

Turns vehicle telemetry (planar position plus velocity components) into
zoom-dependent, speed-colored map line segments.
"""

from .constants import DATA_DIR, DEFAULT_DATA_FILE, LAT0, LON0, DEFAULT_ZOOM, DEFAULT_COLUMNS

from .config import RouteConfig, load_config

from .errors import IngestionSchemaError

from .data_loading import (
    check_columns,
    load_rows,
    list_datasets,
)

from .metrics import (
    xy_to_latlon,
    speed_from_velocity,
    global_max_speed,
)

from .route import (
    RoutePoint,
    parse_row,
    build_route,
    route_center,
)

from .level_of_detail import (
    skip_factor,
    sample_route,
)

from .smoothing import (
    smoothing_strength,
    smoothing_passes,
    smooth_points,
    smooth_for_zoom,
)

from .segments import (
    Segment,
    velocity_to_color,
    build_segments,
)

from .session import (
    compute_segments,
    RouteSession,
    RouteView,
    SessionState,
)

from .telemetry import (
    segment_records,
    build_route_payload,
    segments_to_geojson,
)

from .export import (
    export_segments_csv,
)

__version__ = "0.1.0"
