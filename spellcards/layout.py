"""Layout helpers: card height measurement and page chunking."""
from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple, TypeVar

from reportlab.lib.pagesizes import A4

from .constants import DEFAULT_GEOMETRY, DEFAULT_METRICS, PLACEHOLDER_PART_LABEL, CardGeometry, CardMetrics
from .models import Record, metadata_details

T = TypeVar("T")


def sum_with_spacing(values: Iterable[float], spacing: float) -> float:
    """Sum the non-zero values, adding spacing only between consecutive ones."""
    non_zero = [v for v in values if v > 0]
    if not non_zero:
        return 0.0
    return sum(non_zero) + (len(non_zero) - 1) * spacing


class CardMeasurer:
    """Computes the height a card would need, block by block, without drawing.

    oracle must provide measure_wrapped_height(text, metric, available_width).
    """

    def __init__(self, oracle, geometry: CardGeometry = DEFAULT_GEOMETRY, metrics: CardMetrics = DEFAULT_METRICS):
        self.oracle = oracle
        self.geometry = geometry
        self.metrics = metrics

    def _measure(self, text: str, metric, width: float) -> float:
        if not text or not text.strip() or width <= 0:
            return 0.0
        return self.oracle.measure_wrapped_height(text, metric, width)

    def header_height(self, name: str, part: str, force_part_label: bool) -> float:
        g = self.geometry
        lines = [self._measure(name, self.metrics.header_name, g.header_text_width)]
        has_part = bool(part and part.strip())
        if force_part_label or has_part:
            # the real label is unknown until splitting ends, so reserve the widest one
            label = PLACEHOLDER_PART_LABEL if force_part_label else f"({part})"
            lines.append(self._measure(label, self.metrics.header_part, g.header_text_width))
        return max(g.icon_size, sum(lines))

    def _column_height(self, lines: Sequence[str], width: float) -> float:
        heights = [self._measure(line, self.metrics.metadata, width) for line in lines]
        return sum_with_spacing(heights, self.geometry.metadata_inner_spacing)

    def metadata_columns_height(self, lines: Sequence[str]) -> float:
        g = self.geometry
        if not lines:
            return 0.0
        if len(lines) == 1:
            return self._column_height(lines, g.content_width)
        split_index = math.ceil(len(lines) / 2)
        column_width = (g.content_width - g.metadata_column_gap) / 2
        left = self._column_height(lines[:split_index], column_width)
        right = self._column_height(lines[split_index:], column_width)
        return max(left, right)

    def metadata_height(self, record: Record) -> float:
        g = self.geometry
        top_height = sum_with_spacing(
            [
                self._measure(record.class_level, self.metrics.metadata_large, g.content_width),
                self._measure(record.school, self.metrics.metadata_large, g.content_width),
            ],
            g.metadata_line_spacing,
        )
        columns_height = self.metadata_columns_height(metadata_details(record))
        if top_height > 0 and columns_height > 0:
            return top_height + g.metadata_line_spacing + columns_height
        return top_height if top_height > 0 else columns_height

    def tags_height(self, tags: str) -> float:
        text_height = self._measure(tags, self.metrics.tags, self.geometry.content_width)
        return text_height + self.geometry.tag_padding if text_height > 0 else 0.0

    def description_height(self, text: str) -> float:
        return self._measure(text, self.metrics.description, self.geometry.content_width)

    def notes_height(self, notes: str) -> float:
        text_height = self._measure(notes, self.metrics.notes, self.geometry.content_width)
        return self.geometry.notes_padding_top + text_height if text_height > 0 else 0.0

    def card_height(self, record: Record, description: str, force_part_label: bool = False) -> float:
        """Total card height for record carrying description instead of its own."""
        blocks = [self.header_height(record.name, record.part, force_part_label)]

        metadata_height = self.metadata_height(record)
        tags_height = self.tags_height(record.tags)
        blocks.extend([metadata_height, tags_height])

        description_height = self.description_height(description)
        if description_height > 0:
            if metadata_height > 0 or tags_height > 0:
                blocks.append(self.geometry.separator_height)
            blocks.append(description_height)

        blocks.append(self.notes_height(record.notes))
        return self.geometry.vertical_padding + sum_with_spacing(blocks, self.geometry.section_spacing)

    def fits(self, record: Record, description: str, force_part_label: bool = False) -> bool:
        height = self.card_height(record, description, force_part_label)
        return height <= self.geometry.height + self.geometry.tolerance


def cards_per_page(page_size: Tuple[float, float] = A4, geometry: CardGeometry = DEFAULT_GEOMETRY) -> int:
    """How many whole cards a page grid holds (at least one)."""
    page_width, page_height = page_size
    boxes_per_row = int(page_width // geometry.width)
    boxes_per_column = int(page_height // geometry.height)
    return max(1, boxes_per_row * boxes_per_column)


def chunk_pages(cards: Sequence[T], per_page: int) -> List[List[T]]:
    """Order-preserving chunking of cards into pages of per_page."""
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")
    return [list(cards[i:i + per_page]) for i in range(0, len(cards), per_page)]
