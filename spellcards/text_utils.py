"""Text measurement relying on ReportLab width metrics.

Everything here measures; nothing draws. The wrapping rule matches what the
card renderer does: greedy word packing with a character-level fallback for
words wider than the column.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional

from reportlab.pdfbase import pdfmetrics

from . import fonts
from .constants import TextMetric

StringWidth = Callable[[str, TextMetric], float]


class MeasurementUnavailable(RuntimeError):
    """The measurement oracle cannot be built (e.g. a font is not available)."""


def measure_word_segments(word: str, max_width: float, string_width: Callable[[str], float]) -> List[float]:
    """Widths of the pieces a single word is broken into on a column of max_width.

    A word that fits is one segment. Otherwise it is cut into the longest
    character runs that fit; a single character wider than max_width is kept
    as its own segment.
    """
    word_width = string_width(word)
    if max_width <= 0 or word_width <= max_width:
        return [word_width]

    segments: List[float] = []
    current = ""
    for ch in word:
        candidate = current + ch
        candidate_width = string_width(candidate)
        if candidate_width <= max_width:
            current = candidate
            continue
        if current:
            segments.append(string_width(current))
            current = ch
            if string_width(ch) > max_width:
                segments.append(string_width(ch))
                current = ""
        else:
            segments.append(candidate_width)
            current = ""
    if current:
        segments.append(string_width(current))
    return segments


def count_wrapped_lines(text: str, max_width: float, string_width: Callable[[str], float]) -> int:
    """Number of lines text occupies when wrapped to max_width."""
    if text is None or str(text).strip() == "" or max_width <= 0:
        return 0

    space_width = string_width(" ")
    line_count = 1
    current_width = 0.0
    for word in str(text).split():
        for i, segment_width in enumerate(measure_word_segments(word, max_width, string_width)):
            # only the first piece of a word is preceded by a space
            spacer = space_width if (i == 0 and current_width > 0) else 0.0
            if current_width == 0 or current_width + spacer + segment_width <= max_width:
                current_width += spacer + segment_width
            else:
                line_count += 1
                current_width = segment_width
    return line_count


def wrap_text_to_width(text: str, max_width: float, string_width: Callable[[str], float]) -> List[str]:
    """Wrap text into lines using the same rule as count_wrapped_lines.

    Falls back to character-level splitting if a single word exceeds max_width.
    Returns a list of lines (strings).
    """
    if text is None or str(text).strip() == "" or max_width <= 0:
        return []
    lines: List[str] = []
    current = ""
    for w in str(text).split():
        pieces = [w]
        if string_width(w) > max_width:
            pieces = []
            segment = ""
            for ch in w:
                if segment and string_width(segment + ch) > max_width:
                    pieces.append(segment)
                    segment = ch
                else:
                    segment += ch
            if segment:
                pieces.append(segment)
        for i, piece in enumerate(pieces):
            joiner = " " if i == 0 else ""
            candidate = current + joiner + piece if current else piece
            if not current or string_width(candidate) <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = piece
    if current:
        lines.append(current)
    return lines


class WrappingOracle:
    """Wrapped-height oracle over any string width function.

    string_width(text, metric) must be deterministic; the oracle itself keeps
    no state between calls so one instance can be shared across threads.
    """

    def __init__(self, string_width: StringWidth):
        self._string_width = string_width

    def string_width(self, text: str, metric: TextMetric) -> float:
        return self._string_width(text, metric)

    def count_lines(self, text: str, metric: TextMetric, available_width: float) -> int:
        return count_wrapped_lines(text, available_width, lambda s: self._string_width(s, metric))

    def wrap(self, text: str, metric: TextMetric, available_width: float) -> List[str]:
        return wrap_text_to_width(text, available_width, lambda s: self._string_width(s, metric))

    def measure_wrapped_height(self, text: str, metric: TextMetric, available_width: float) -> float:
        return self.count_lines(text, metric, available_width) * metric.size * metric.line_height


class ReportLabOracle(WrappingOracle):
    """Oracle measuring with ReportLab font metrics (pdfmetrics.stringWidth)."""

    def __init__(self, font_names: Optional[Mapping[str, str]] = None):
        resolved: Dict[str, str] = dict(fonts.FONT_NAMES if font_names is None else font_names)
        for role, font_name in resolved.items():
            try:
                pdfmetrics.getFont(font_name)
            except Exception as exc:
                raise MeasurementUnavailable(f"Font {font_name!r} for role {role!r} is not available: {exc}") from exc
        self.font_names = resolved
        super().__init__(self._reportlab_width)

    def font_for(self, metric: TextMetric) -> str:
        try:
            return self.font_names[metric.role]
        except KeyError:
            raise MeasurementUnavailable(f"No font configured for role {metric.role!r}") from None

    def _reportlab_width(self, text: str, metric: TextMetric) -> float:
        return pdfmetrics.stringWidth(text, self.font_for(metric), metric.size)
