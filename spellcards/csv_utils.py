"""Reading spell records from CSV and writing the resulting cards back out.

Input columns are matched case-insensitively and a few common aliases are
accepted (``level`` for class_level, ``cast`` for casting_time, ``sr`` for
spell_resistance, ...). Unknown columns are ignored. Only ``name`` and
``description`` are required; every other field defaults to empty.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence
import logging
import os
import pandas as pd

from .models import Record, record_field_names

COLUMN_ALIASES: Dict[str, str] = {
    "title": "name",
    "spell": "name",
    "text": "description",
    "level": "class_level",
    "class": "class_level",
    "school_text": "school",
    "cast": "casting_time",
    "casting time": "casting_time",
    "target": "target_or_area",
    "area": "target_or_area",
    "saving_throw": "save",
    "sr": "spell_resistance",
    "url": "source_url",
}

REQUIRED_COLUMNS = ("name", "description")


def _resolve_columns(columns: Sequence[str]) -> Dict[str, str]:
    """Map record field name -> actual DataFrame column."""
    known = set(record_field_names())
    resolved: Dict[str, str] = {}
    for col in columns:
        key = str(col).strip().lower()
        field = key if key in known else COLUMN_ALIASES.get(key)
        if field and field not in resolved:
            resolved[field] = col
    return resolved


def read_records_frame(csv_path: str) -> pd.DataFrame:
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Input CSV not found: {csv_path}")
    data = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    # Remove leading/trailing whitespaces across the DataFrame
    return data.map(lambda x: x.strip() if isinstance(x, str) else x)


def frame_to_records(df: pd.DataFrame, logger: Optional[logging.Logger] = None) -> List[Record]:
    if logger is None:
        logger = logging.getLogger(__name__)

    columns = _resolve_columns(list(df.columns))
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise ValueError(f"Input is missing required column(s): {', '.join(missing)}")

    records: List[Record] = []
    for idx, row in df.iterrows():
        values = {field: str(row[col]) for field, col in columns.items()}
        if not values["name"].strip():
            logger.warning("Skipping row %s: empty spell name", idx)
            continue
        records.append(Record(**values))
    return records


def read_records_csv(csv_path: str, logger: Optional[logging.Logger] = None) -> List[Record]:
    """Read records from csv_path (no deduplication)."""
    return frame_to_records(read_records_frame(csv_path), logger=logger)


def records_to_frame(cards: Sequence[Record]) -> pd.DataFrame:
    names = record_field_names()
    return pd.DataFrame([[getattr(card, n) for n in names] for card in cards], columns=names)


def write_cards_csv(cards: Sequence[Record], csv_path: str, logger: Optional[logging.Logger] = None) -> str:
    """Write one row per card to csv_path, creating parent directories."""
    if logger is None:
        logger = logging.getLogger(__name__)

    parent = os.path.dirname(os.path.abspath(csv_path))
    os.makedirs(parent, exist_ok=True)
    records_to_frame(cards).to_csv(csv_path, index=False)
    logger.debug("Wrote %d card(s) to %s", len(cards), csv_path)
    return csv_path
