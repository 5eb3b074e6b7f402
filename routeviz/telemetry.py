"""
Segment Serialization for Route Visualization

This module converts computed segments into JSON-ready records and GeoJSON
formats suitable for map rendering and API responses.
"""

from typing import Dict, List, Sequence
from . import utils
from .route import LatLon
from .segments import Segment


def segment_records(segments: Sequence[Segment]) -> List[Dict]:
    """
    Convert segments to a list of JSON-serializable dictionaries.

    Args:
        segments: Segments from compute_segments().

    Returns:
        List of {"endpoints": [[lat, lon], [lat, lon]], "color": hex} records.
    """
    records = []

    for segment in segments:
        start, end = segment.endpoints
        records.append({
            "endpoints": [list(start), list(end)],
            "color": segment.color,
        })

    return records


def build_route_payload(segments: Sequence[Segment], center: LatLon, zoom: int,
                        point_count: int, max_speed: float) -> Dict:
    """
    Build the payload consumed by the map surface.

    Args:
        segments: Segments currently rendered.
        center: Initial map center (lat, lon).
        zoom: Zoom level the segments were computed for.
        point_count: Number of points in the full route.
        max_speed: Maximum speed of the full route.

    Returns:
        Dictionary with center, zoom, point_count, segment_count, max_speed
        and segments.
    """
    return {
        "center": list(center),
        "zoom": zoom,
        "point_count": point_count,
        "segment_count": len(segments),
        "max_speed": utils.round_float(max_speed),
        "segments": segment_records(segments),
    }


def segments_to_geojson(segments: Sequence[Segment]) -> Dict:
    """
    Convert segments to a GeoJSON FeatureCollection.

    Each segment becomes a LineString feature with its color as a property.
    GeoJSON coordinates are [lon, lat].

    Args:
        segments: Segments to convert.

    Returns:
        GeoJSON FeatureCollection. Empty feature list for no segments.
    """
    features = []
    for idx, segment in enumerate(segments):
        (start_lat, start_lon), (end_lat, end_lon) = segment.endpoints
        features.append({
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [[start_lon, start_lat], [end_lon, end_lat]],
            },
            "properties": {
                "index": idx,
                "color": segment.color,
            },
        })

    return {
        "type": "FeatureCollection",
        "features": features,
    }
