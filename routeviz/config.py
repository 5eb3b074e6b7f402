"""
Runtime Configuration for Route Visualization

Settings come from the environment (optionally populated from a .env file)
and fall back to the values in constants.py.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from . import constants


@dataclass(frozen=True)
class RouteConfig:
    origin_latitude: float = constants.LAT0
    origin_longitude: float = constants.LON0
    default_zoom: int = constants.DEFAULT_ZOOM
    data_dir: Path = constants.DATA_DIR

    @property
    def origin(self):
        return self.origin_latitude, self.origin_longitude


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from exc


def load_config(env_file: Optional[Path] = None) -> RouteConfig:
    """
    Build a RouteConfig from environment variables.

    Reads ROUTEVIZ_ORIGIN_LATITUDE, ROUTEVIZ_ORIGIN_LONGITUDE,
    ROUTEVIZ_DEFAULT_ZOOM and ROUTEVIZ_DATA_DIR. Variables already present in
    the environment take precedence over the .env file.

    Args:
        env_file: Optional path to a .env file. Defaults to dotenv's lookup.

    Returns:
        Frozen RouteConfig.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    load_dotenv(dotenv_path=env_file)

    data_dir = os.environ.get("ROUTEVIZ_DATA_DIR")
    return RouteConfig(
        origin_latitude=_env_number("ROUTEVIZ_ORIGIN_LATITUDE", constants.LAT0, float),
        origin_longitude=_env_number("ROUTEVIZ_ORIGIN_LONGITUDE", constants.LON0, float),
        default_zoom=_env_number("ROUTEVIZ_DEFAULT_ZOOM", constants.DEFAULT_ZOOM, int),
        data_dir=Path(data_dir) if data_dir else constants.DATA_DIR,
    )
