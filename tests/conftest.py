from __future__ import annotations

import math
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from spellcards.constants import CardGeometry  # noqa: E402
from spellcards.layout import CardMeasurer  # noqa: E402
from spellcards.splitter import CardSplitter  # noqa: E402

TIMES_FONTS = {"title": "Times-Bold", "body": "Times-Roman", "body-bold": "Times-Bold"}


class CharCountOracle:
    """Every 20 characters (spaces included) take one 10-unit line."""

    def __init__(self, chars_per_line: int = 20, line_height: float = 10.0):
        self.chars_per_line = chars_per_line
        self.line_height = line_height
        self.calls = []

    def measure_wrapped_height(self, text, metric, available_width):
        self.calls.append((text, metric, available_width))
        if not text.strip() or available_width <= 0:
            return 0.0
        return math.ceil(len(text) / self.chars_per_line) * self.line_height


def bare_geometry(height: float = 60.0, **kwargs) -> CardGeometry:
    """No padding, spacing or icon: card height is the plain sum of blocks."""
    params = dict(
        width=100.0,
        height=height,
        outer_padding=0.0,
        stripe_width=0.0,
        content_padding_left=0.0,
        section_spacing=0.0,
        icon_size=0.0,
        tolerance=0.0,
    )
    params.update(kwargs)
    return CardGeometry(**params)


@pytest.fixture
def char_oracle() -> CharCountOracle:
    return CharCountOracle()


@pytest.fixture
def make_splitter(char_oracle):
    def _make(height: float = 60.0, **kwargs) -> CardSplitter:
        return CardSplitter(CardMeasurer(char_oracle, bare_geometry(height, **kwargs)))

    return _make
