"""Pre-check utilities for spell card generation.

Runs on the raw record table before any layout work. Currently it removes
duplicate spells from the input DataFrame.
"""
from __future__ import annotations

from typing import Optional, Tuple, List
import pandas as pd
import logging


def remove_duplicates(
    df: pd.DataFrame,
    subset: Optional[List[str]] = None,
    keep: str = "first",
    logger: Optional[logging.Logger] = None,
) -> Tuple[pd.DataFrame, int, List[int]]:
    """Remove duplicate spells from the provided DataFrame.

    By default spells are compared by name, case-insensitively and ignoring
    surrounding whitespace. Without a name column all columns are compared.

    Args:
        df: The input DataFrame.
        subset: Columns to consider when identifying duplicates. If None,
            the name column is used.
        keep: Which duplicate to keep (passed to DataFrame.duplicated).
        logger: Optional logger for informational messages.

    Returns:
        A tuple of (deduped_dataframe, removed_count, removed_row_indices).
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    before = len(df)

    if subset is None:
        lcmap = {str(col).lower(): col for col in df.columns}
        ncol = lcmap.get("name")
        if ncol is not None:
            keys = df[ncol].astype(str).str.strip().str.lower()
            duplicated_mask = keys.duplicated(keep=keep)
            logger.debug("Pre-check: deduplicating using column: %s", ncol)
        else:
            duplicated_mask = df.duplicated(keep=keep)
            logger.debug("Pre-check: no name column detected; falling back to all columns for deduplication")
    else:
        duplicated_mask = df.duplicated(subset=subset, keep=keep)

    removed_row_indices = df[duplicated_mask].index.tolist()
    deduped = df[~duplicated_mask]
    removed = before - len(deduped)

    if removed:
        logger.info("Pre-check: removed %d duplicate rows", removed)
        logger.debug("Removed duplicate row indices: %s", removed_row_indices)

    return deduped, removed, removed_row_indices
