"""
Constants for Route Visualization

This module defines the reference origin, projection scale, zoom thresholds,
color buckets and path constants used throughout the route pipeline.
"""

from pathlib import Path

# Telemetry CSV folder is one level up from routeviz/
DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_DATA_FILE = DATA_DIR / "telemetry.csv"

# Reference origin for the planar -> geographic projection
LAT0 = 32.986103
LON0 = -96.751180

METERS_PER_DEGREE = 111_000

# Zoom behaviour
DEFAULT_ZOOM = 15
FULL_DETAIL_ZOOM = 15       # at or above this every point is kept, no smoothing
MAX_SKIP_EXPONENT = 62      # stride 2**62 already reduces any route to its endpoints
DOUBLE_PASS_ZOOM = 12       # below this the smoothing pass runs twice
SMOOTHING_STEP = 0.05
MAX_SMOOTHING = 0.35

# Speed ratio buckets, evaluated top-down; anything else is LOWEST_COLOR
COLOR_BUCKETS = [
    (0.8, "#FF0000"),   # red
    (0.6, "#FF6666"),   # light red
    (0.4, "#FFA500"),   # orange
    (0.2, "#FFFF00"),   # yellow
]
LOWEST_COLOR = "#00FF00"  # green

# Logical field -> column header in the telemetry export
DEFAULT_COLUMNS = {
    "planarX": "Car Coord X",
    "planarY": "Car Coord Y",
    "velocityX": "Chassis Velocity X",
    "velocityY": "Chassis Velocity Y",
    "velocityZ": "Chassis Velocity Z",
}
