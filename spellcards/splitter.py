"""Splitting of spell descriptions across as many cards as they need.

A record that fits one card is returned as is. Otherwise its description is
cut into fragments, each of which fits the card together with the repeated
chrome (header, metadata, tags, notes). Fragments are grown greedily, falling
back from whole sentences to words to single characters only when a unit
does not fit on an otherwise empty card. Every probe during splitting
reserves room for a "(99/99)" part label.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .layout import CardMeasurer
from .models import Record
from .text_utils import ReportLabOracle

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")

logger = logging.getLogger(__name__)


class LayoutInfeasible(ValueError):
    """Not even one character of description fits next to the card chrome."""

    def __init__(self, name: str):
        super().__init__(
            f"Card layout for {name!r} leaves no space for description text. "
            "Increase card size or reduce font sizes."
        )
        self.name = name


def normalize_description(text: str) -> str:
    """Collapse whitespace and drop stray one-character punctuation tokens."""
    if not text:
        return ""
    tokens = text.replace("\r", "").replace("\n", " ").split()
    return " ".join(t for t in tokens if len(t) > 1 or t.isalnum()).strip()


def tokenize_sentences(text: str) -> List[str]:
    sentences = [s.strip() for s in SENTENCE_BOUNDARY.split(text)]
    sentences = [s for s in sentences if s]
    return sentences or ([text] if text.strip() else [])


def _join(buffer: str, fragment: str) -> str:
    return f"{buffer} {fragment}" if buffer else fragment


class CardSplitter:
    """Splits records into card-sized parts using a CardMeasurer."""

    def __init__(self, measurer: CardMeasurer):
        self.measurer = measurer

    def _fits(self, record: Record, text: str) -> bool:
        return self.measurer.fits(record, text, force_part_label=True)

    def split_if_needed(self, record: Record) -> List[Record]:
        clean = normalize_description(record.description)

        # no placeholder here: a record that fits never shows a label (or keeps its own)
        if self.measurer.fits(record, clean, force_part_label=False):
            logger.debug("%s fits on one card", record.name)
            return [record.with_description(clean)]
        if not clean:
            raise LayoutInfeasible(record.name)

        parts = self.split_description(record, clean)
        total = len(parts)
        logger.debug("%s split into %d parts", record.name, total)
        return [record.with_part(f"{index}/{total}", text) for index, text in enumerate(parts, start=1)]

    def split_all(self, records: Iterable[Record]) -> List[Record]:
        cards: List[Record] = []
        for record in records:
            cards.extend(self.split_if_needed(record))
        return cards

    def split_description(self, record: Record, description: str) -> List[str]:
        """Sentence-level accumulation; over-long sentences go word by word."""
        fragments: List[str] = []
        buffer = ""
        for sentence in tokenize_sentences(description):
            candidate = _join(buffer, sentence)
            if self._fits(record, candidate):
                buffer = candidate
                continue
            if buffer:
                fragments.append(buffer)
                buffer = ""
                if self._fits(record, sentence):
                    buffer = sentence
                    continue
            fragments.extend(self._split_words(record, sentence))
        if buffer:
            fragments.append(buffer)
        return fragments

    def _split_words(self, record: Record, sentence: str) -> List[str]:
        fragments: List[str] = []
        buffer = ""
        for word in sentence.split():
            candidate = _join(buffer, word)
            if self._fits(record, candidate):
                buffer = candidate
                continue
            if buffer:
                fragments.append(buffer)
                buffer = ""
                if self._fits(record, word):
                    buffer = word
                    continue
            for chunk in self._split_characters(record, word):
                candidate = _join(buffer, chunk)
                if self._fits(record, candidate):
                    buffer = candidate
                    continue
                if buffer:
                    fragments.append(buffer)
                # chunks from _split_characters always fit alone
                buffer = chunk
        if buffer:
            fragments.append(buffer)
        return fragments

    def _split_characters(self, record: Record, word: str) -> List[str]:
        chunks: List[str] = []
        buffer = ""
        for ch in word:
            candidate = buffer + ch
            if self._fits(record, candidate):
                buffer = candidate
                continue
            if buffer:
                # the overflowing character opens the next chunk
                chunks.append(buffer)
                buffer = ""
                if self._fits(record, ch):
                    buffer = ch
                    continue
            raise LayoutInfeasible(record.name)
        if buffer:
            chunks.append(buffer)
        return chunks


def split_if_needed(record: Record, measurer: Optional[CardMeasurer] = None) -> List[Record]:
    """Split one record with the given measurer (ReportLab fonts by default)."""
    if measurer is None:
        measurer = CardMeasurer(ReportLabOracle())
    return CardSplitter(measurer).split_if_needed(record)
