"""Shared geometry and typography constants for card layout."""
from __future__ import annotations

from dataclasses import dataclass

POINTS_PER_MILLIMETRE: float = 72.0 / 25.4

# Physical card size (poker card)
CARD_WIDTH_MM: float = 63.0
CARD_HEIGHT_MM: float = 88.0

# Reserved while splitting, before the real "i/n" label is known
PLACEHOLDER_PART_LABEL: str = "(99/99)"

# Font roles resolved by fonts.FONT_NAMES
ROLE_TITLE: str = "title"
ROLE_BODY: str = "body"
ROLE_BODY_BOLD: str = "body-bold"


@dataclass(frozen=True)
class TextMetric:
    """Typeface role, font size (points) and line height multiplier."""

    role: str
    size: float
    line_height: float

    @property
    def line_advance(self) -> float:
        return self.size * self.line_height


@dataclass(frozen=True)
class CardGeometry:
    """Card dimensions and fixed spacing, all in points."""

    width: float
    height: float
    outer_padding: float = 6.0           # applied on every side
    stripe_width: float = 3.0            # school stripe on the left
    content_padding_left: float = 6.0    # between stripe and text column
    section_spacing: float = 1.5         # between major blocks
    metadata_line_spacing: float = 1.5
    metadata_inner_spacing: float = 1.0
    metadata_column_gap: float = 3.0
    icon_size: float = 14.0
    tag_padding: float = 4.0
    notes_padding_top: float = 2.0
    separator_thickness: float = 0.6
    separator_padding: float = 2.0
    # Sub-point font metric rounding
    tolerance: float = 1.5

    @classmethod
    def from_millimetres(cls, width_mm: float, height_mm: float, **kwargs) -> "CardGeometry":
        return cls(width=width_mm * POINTS_PER_MILLIMETRE, height=height_mm * POINTS_PER_MILLIMETRE, **kwargs)

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.outer_padding - self.stripe_width - self.content_padding_left

    @property
    def header_text_width(self) -> float:
        return self.content_width - self.icon_size

    @property
    def vertical_padding(self) -> float:
        return 2 * self.outer_padding

    @property
    def separator_height(self) -> float:
        return self.separator_thickness + self.separator_padding


@dataclass(frozen=True)
class CardMetrics:
    """One text metric per visual role on the card."""

    header_name: TextMetric = TextMetric(ROLE_TITLE, 11.0, 1.15)
    header_part: TextMetric = TextMetric(ROLE_BODY, 7.0, 1.1)
    metadata_large: TextMetric = TextMetric(ROLE_BODY, 7.0, 1.15)
    metadata: TextMetric = TextMetric(ROLE_BODY, 6.5, 1.15)
    tags: TextMetric = TextMetric(ROLE_BODY_BOLD, 6.0, 1.1)
    description: TextMetric = TextMetric(ROLE_BODY, 7.0, 1.05)
    notes: TextMetric = TextMetric(ROLE_BODY, 6.0, 1.1)


DEFAULT_GEOMETRY = CardGeometry.from_millimetres(CARD_WIDTH_MM, CARD_HEIGHT_MM)
DEFAULT_METRICS = CardMetrics()
