"""Card generation orchestrator: CSV of spells in, CSV of card-sized parts out."""
from __future__ import annotations

from typing import List, Optional
from pathlib import Path
import logging

from . import fonts
from .condense import SpellCondenser, prepare_cards
from .constants import CARD_HEIGHT_MM, CARD_WIDTH_MM, CardGeometry
from .csv_utils import frame_to_records, read_records_frame, write_cards_csv
from .layout import CardMeasurer, cards_per_page as grid_capacity, chunk_pages
from .models import Record
from .precheck import remove_duplicates
from .splitter import CardSplitter
from .text_utils import ReportLabOracle


def main(
    csv_file_path: str,
    output_csv_path: Optional[str] = None,
    fonts_dir: Optional[str] = None,
    card_width_mm: float = CARD_WIDTH_MM,
    card_height_mm: float = CARD_HEIGHT_MM,
    cards_per_page: Optional[int] = None,
    condenser: Optional[SpellCondenser] = None,
    logger: Optional[logging.Logger] = None,
) -> List[Record]:
    if logger is None:
        logger = logging.getLogger(__name__)

    # Fonts must be registered before the oracle resolves them
    font_names = fonts.setup_card_fonts(fonts_dir)
    logger.debug("Using fonts: %s", font_names)

    data = read_records_frame(csv_file_path)

    # Run pre-checks (deduplication) before layout
    data, removed_count, _ = remove_duplicates(data, logger=logger)
    if removed_count:
        logger.info("Removed %d duplicate rows during pre-check. Remaining rows: %d", removed_count, len(data))
    records = frame_to_records(data, logger=logger)

    geometry = CardGeometry.from_millimetres(card_width_mm, card_height_mm)
    measurer = CardMeasurer(ReportLabOracle(font_names), geometry)
    splitter = CardSplitter(measurer)

    cards = prepare_cards(records, splitter, condenser, logger=logger)

    split_counts = {}
    for card in cards:
        if card.part:
            split_counts[card.name] = split_counts.get(card.name, 0) + 1
    for name, count in split_counts.items():
        if count > 1:
            logger.info("%s: split into %d cards", name, count)

    # If output path not provided, create a default path under output/ using the CSV file name
    if not output_csv_path:
        output_dir = Path("output")
        output_dir.mkdir(parents=True, exist_ok=True)
        output_csv_path = str(output_dir / f"{Path(csv_file_path).stem}_cards.csv")
    write_cards_csv(cards, output_csv_path, logger=logger)

    if cards_per_page is None:
        cards_per_page = grid_capacity(geometry=geometry)
    pages = chunk_pages(cards, cards_per_page)

    logger.info(
        "🎉 Card layout complete!\n\n"
        "📥 Input: %s\n"
        "📤 Output: %s\n"
        "📜 Spells: %d\n"
        "🧾 Cards: %d\n"
        "📦 Cards/page: %d\n"
        "📄 Pages: %d",
        csv_file_path,
        output_csv_path,
        len(records),
        len(cards),
        cards_per_page,
        len(pages),
    )
    return cards
