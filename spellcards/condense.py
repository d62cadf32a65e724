"""Optional description shortening before layout.

A condenser proposes a shorter description for a record that needs several
cards. The shorter text is only used when it saves at least one card.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol

from .models import Record
from .splitter import CardSplitter


class SpellCondenser(Protocol):
    def condense(self, record: Record) -> Optional[str]:
        """Return a shorter description, or None to keep the original."""


class NoOpCondenser:
    def condense(self, record: Record) -> Optional[str]:
        return None


def prepare_cards(
    records: Iterable[Record],
    splitter: CardSplitter,
    condenser: Optional[SpellCondenser] = None,
    logger: Optional[logging.Logger] = None,
) -> List[Record]:
    """Split every record, trying the condenser on those needing several cards.

    Args:
        records: Records in output order.
        splitter: The splitter to lay records out with.
        condenser: Optional text shortener. A failing condenser never aborts
            the run; the original text is used instead.
        logger: Optional logger for informational messages.

    Returns:
        The cards for all records, in order.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    can_condense = condenser is not None and not isinstance(condenser, NoOpCondenser)
    cards: List[Record] = []
    for record in records:
        baseline = splitter.split_if_needed(record)
        if not can_condense or len(baseline) == 1:
            cards.extend(baseline)
            continue

        try:
            condensed_text = condenser.condense(record)
        except Exception as exc:
            logger.warning("[condense] Failed for %s: %s. Using original text.", record.name, exc)
            cards.extend(baseline)
            continue

        if not condensed_text or not condensed_text.strip():
            cards.extend(baseline)
            continue

        condensed = splitter.split_if_needed(record.with_description(condensed_text))
        if len(condensed) < len(baseline):
            logger.info("[condense] %s: %d -> %d cards", record.name, len(baseline), len(condensed))
            cards.extend(condensed)
        else:
            cards.extend(baseline)
    return cards
