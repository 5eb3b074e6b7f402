"""
FastAPI Web Application for Route Visualization

This module provides a REST API that serves zoom-dependent, speed-colored
route segments for telemetry datasets, plus GeoJSON and CSV exports.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from routeviz import (
    IngestionSchemaError,
    RouteSession,
    build_route_payload,
    export_segments_csv,
    list_datasets,
    load_config,
    segments_to_geojson,
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION SETUP
# ============================================================================

app = FastAPI(title="Route Visualization")

config = load_config()


# ============================================================================
# SESSION LOADING & CACHING
# ============================================================================

# Loaded sessions (dataset_filename -> RouteSession), kept for the process lifetime
session_cache: Dict[str, RouteSession] = {}


def load_session(dataset_filename: Optional[str] = None) -> RouteSession:
    """
    Load the route session for a specific dataset.

    Builds the route once per dataset; later requests reuse the cached
    session and only recompute segments for the requested zoom.

    Args:
        dataset_filename: Name of the CSV file in the data directory. If None,
                          uses the first available dataset.

    Returns:
        RouteSession with the dataset loaded.

    Raises:
        HTTPException: 404 if the dataset does not exist, 422 if it lacks
                       required columns, 500 for any other load failure.
    """
    if dataset_filename is None:
        datasets = list_datasets(config.data_dir)
        if not datasets:
            raise HTTPException(status_code=404, detail="No datasets available")
        dataset_filename = datasets[0]["filename"]

    if dataset_filename in session_cache:
        return session_cache[dataset_filename]

    data_file = config.data_dir / dataset_filename
    if Path(dataset_filename).name != dataset_filename or not data_file.is_file():
        raise HTTPException(status_code=404, detail=f"Dataset file not found: {dataset_filename}")

    session = RouteSession(config)
    try:
        session.load_file(data_file)
    except IngestionSchemaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to load %s", dataset_filename)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load telemetry: {exc}"
        ) from exc

    session_cache[dataset_filename] = session
    return session


def resolve_view(session: RouteSession, zoom: Optional[int]):
    """Recompute for a requested zoom, or return the current view."""
    view = session.view
    if zoom is None or zoom == view.zoom:
        return view
    return session.on_zoom_changed(zoom)


# ============================================================================
# API ROUTES - DATASET MANAGEMENT
# ============================================================================

@app.get("/api/datasets")
def get_datasets():
    """
    Get list of available datasets.

    Returns:
        List of dictionaries with 'filename' and 'display_name' keys.
    """
    return list_datasets(config.data_dir)


# ============================================================================
# API ROUTES - ROUTE SEGMENTS
# ============================================================================

@app.get("/api/route")
def get_route(dataset: Optional[str] = Query(None, description="Dataset filename to load"),
              zoom: Optional[int] = Query(None, description="Map zoom level")):
    """
    Get the colored route segments for a dataset at a zoom level.

    Args:
        dataset: Optional dataset filename. If not provided, uses the first one.
        zoom: Optional zoom level. If not provided, uses the session's current zoom.

    Returns:
        Dictionary with center, zoom, point_count, segment_count, max_speed
        and segments.
    """
    session = load_session(dataset)
    view = resolve_view(session, zoom)
    return build_route_payload(view.segments, session.center, view.zoom,
                               len(session.route), session.max_speed)


@app.get("/api/route/geojson")
def get_route_geojson(dataset: Optional[str] = Query(None, description="Dataset filename to load"),
                      zoom: Optional[int] = Query(None, description="Map zoom level")):
    """
    Get the route segments as a GeoJSON FeatureCollection.

    Returns:
        GeoJSON FeatureCollection with one LineString per segment.
    """
    session = load_session(dataset)
    view = resolve_view(session, zoom)
    return segments_to_geojson(view.segments)


# ============================================================================
# API ROUTES - EXPORT
# ============================================================================

@app.get("/api/export/segments")
def export_segments(dataset: Optional[str] = Query(None, description="Dataset filename to export"),
                    zoom: Optional[int] = Query(None, description="Map zoom level")):
    """
    Export the route segments as CSV.

    Returns:
        PlainTextResponse: CSV file with Content-Disposition header
        for download. Filename: route_segments_z{zoom}.csv
    """
    session = load_session(dataset)
    view = resolve_view(session, zoom)
    headers = {"Content-Disposition": f"attachment; filename=route_segments_z{view.zoom}.csv"}
    return PlainTextResponse(
        export_segments_csv(view.segments),
        media_type="text/csv",
        headers=headers
    )


@app.get("/api/export/route")
def export_route(dataset: Optional[str] = Query(None, description="Dataset filename to export"),
                 zoom: Optional[int] = Query(None, description="Map zoom level")):
    """
    Export the route payload as a JSON download.

    Returns:
        PlainTextResponse: JSON file with Content-Disposition header
        for download. Filename: route.json
    """
    session = load_session(dataset)
    view = resolve_view(session, zoom)
    payload = build_route_payload(view.segments, session.center, view.zoom,
                                  len(session.route), session.max_speed)
    headers = {"Content-Disposition": "attachment; filename=route.json"}
    return PlainTextResponse(
        json.dumps(payload, indent=2),
        media_type="application/json",
        headers=headers
    )


# ============================================================================
# RUN INSTRUCTIONS
# ============================================================================
# Run with: uvicorn app:app --reload
