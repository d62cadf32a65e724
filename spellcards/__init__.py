"""
Package initialization for spellcards.

Lays out spell records onto fixed-size cards, splitting a description over
several "part i/n" cards only when it does not fit on one. Fit is decided by
measuring text with font metrics; nothing is drawn.

Modules:
    - constants: card geometry and text metrics
    - text_utils: the text measurement oracle (ReportLab metrics)
    - layout: card height measurement and page chunking
    - splitter: sentence/word/character splitting and part labelling
    - condense: optional description shortening interface
    - csv_utils, precheck: record input/output and deduplication
    - generator: the CSV-to-cards pipeline
"""

from .constants import CardGeometry, CardMetrics, TextMetric, DEFAULT_GEOMETRY, DEFAULT_METRICS
from .layout import CardMeasurer, chunk_pages
from .models import Record
from .splitter import CardSplitter, LayoutInfeasible, split_if_needed
from .text_utils import MeasurementUnavailable, ReportLabOracle, WrappingOracle

__all__ = [
    "CardGeometry",
    "CardMetrics",
    "TextMetric",
    "DEFAULT_GEOMETRY",
    "DEFAULT_METRICS",
    "CardMeasurer",
    "chunk_pages",
    "Record",
    "CardSplitter",
    "LayoutInfeasible",
    "split_if_needed",
    "MeasurementUnavailable",
    "ReportLabOracle",
    "WrappingOracle",
]
