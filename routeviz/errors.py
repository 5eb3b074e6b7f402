"""Exceptions raised by the route pipeline."""

from typing import List


class IngestionSchemaError(ValueError):
    """Raised when telemetry input lacks columns needed to build a route."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Telemetry is missing required columns: {', '.join(self.missing)}")
