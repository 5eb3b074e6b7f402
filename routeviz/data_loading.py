"""
Data Loading for Route Visualization

This module reads telemetry CSV exports into flat row dictionaries and checks
that the columns the route builder needs are present.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping
import pandas as pd
from . import constants
from .errors import IngestionSchemaError

logger = logging.getLogger(__name__)


def normalize_header(name) -> str:
    """Strip whitespace and double quotes from a column header."""
    return str(name).replace('"', "").strip()


def check_columns(fieldnames: Iterable[str],
                  columns: Mapping[str, str] = constants.DEFAULT_COLUMNS) -> None:
    """
    Verify that every required column exists in the input schema.

    Args:
        fieldnames: Column names present in the input.
        columns: Logical field -> column name map.

    Raises:
        IngestionSchemaError: If any required column is absent.
    """
    present = set(fieldnames)
    missing = [name for name in columns.values() if name not in present]
    if missing:
        raise IngestionSchemaError(missing)


def load_rows(file_path: Path = constants.DEFAULT_DATA_FILE,
              columns: Mapping[str, str] = constants.DEFAULT_COLUMNS) -> List[Dict[str, str]]:
    """
    Load a telemetry CSV export into a list of row dictionaries.

    Values are kept as raw strings; parsing and rejection of bad values
    happens in the route builder. Lines with more fields than the header are
    skipped and counted.

    Args:
        file_path: Path to the CSV file. Defaults to DEFAULT_DATA_FILE.
        columns: Logical field -> column name map used for the schema check.

    Returns:
        List of {column name: raw value} dictionaries in file order.

    Raises:
        IngestionSchemaError: If the file has no header or lacks a required column.
    """
    bad_lines = []

    def skip_bad_line(fields):
        # Lines with more fields than the header are dropped, not fatal
        bad_lines.append(fields)
        return None

    try:
        df = pd.read_csv(Path(file_path), dtype=str, keep_default_na=False,
                         skipinitialspace=True, engine="python",
                         on_bad_lines=skip_bad_line)
    except pd.errors.EmptyDataError as exc:
        raise IngestionSchemaError(list(columns.values())) from exc

    if bad_lines:
        logger.info("Rejected %d malformed lines in %s", len(bad_lines), file_path)

    df.columns = [normalize_header(c) for c in df.columns]

    try:
        check_columns(df.columns, columns)
    except IngestionSchemaError as exc:
        logger.error("Cannot load %s: %s", file_path, exc)
        raise

    logger.info("Loaded %d telemetry rows from %s", len(df), file_path)
    return df.to_dict(orient="records")


def list_datasets(data_dir: Path = constants.DATA_DIR) -> List[Dict[str, str]]:
    """
    Discover telemetry CSV files in the data directory.

    Args:
        data_dir: Directory to scan.

    Returns:
        List of dictionaries with 'filename' and 'display_name' keys, sorted
        by filename. Empty if the directory does not exist.
    """
    data_dir = Path(data_dir)
    datasets = []

    if not data_dir.exists():
        return datasets

    for file_path in data_dir.glob("*.csv"):
        display_name = file_path.stem.replace("_", " ").title()
        datasets.append({
            "filename": file_path.name,
            "display_name": display_name,
        })

    datasets.sort(key=lambda x: x["filename"])
    return datasets
