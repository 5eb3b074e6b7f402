"""
Export Functions for Route Visualization

This module exports computed segments to CSV for external analysis.
"""

import csv
import io
from typing import Sequence
from .segments import Segment


def export_segments_csv(segments: Sequence[Segment]) -> str:
    """
    Export segments to CSV format.

    Args:
        segments: Segments from compute_segments().

    Returns:
        CSV string with one row per segment.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow([
        "segment_index",
        "start_lat",
        "start_lon",
        "end_lat",
        "end_lon",
        "color",
    ])

    for idx, segment in enumerate(segments):
        (start_lat, start_lon), (end_lat, end_lon) = segment.endpoints
        writer.writerow([idx, start_lat, start_lon, end_lat, end_lon, segment.color])

    return buffer.getvalue()
