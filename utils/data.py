# utils/data.py

"""
Dataset utilities:
- header + rows tables to DataFrame
- dashboard JSON file loading
"""

import json
from pathlib import Path

import pandas as pd

from utils.log import get_logger

logger = get_logger(__name__)


def table_from_rows(rows) -> pd.DataFrame:
    """
    First row is the column header, the remaining rows are records.
    An empty table raises ValueError.
    """
    header, *records = rows
    return pd.DataFrame(records, columns=list(header))


def stats_tables(stats_data: dict) -> dict:
    """Converts every category table of a stats dataset."""
    return {category: table_from_rows(rows) for category, rows in stats_data.items()}


def load_dashboard_data(path) -> tuple:
    """
    Reads {"map": [...], "stats": {...}} from a JSON file.
    Returns (map_rows, stats_rows) exactly as stored.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        payload = json.load(fh)

    map_rows = payload["map"]
    stats_rows = payload["stats"]
    logger.info(
        "Loaded %s: %d map rows, %d stats categories",
        path, max(len(map_rows) - 1, 0), len(stats_rows),
    )
    return map_rows, stats_rows
