import argparse
import logging
import sys

from spellcards.generator import main
from spellcards.splitter import LayoutInfeasible
from spellcards.text_utils import MeasurementUnavailable


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Lay out spell records onto fixed-size cards, splitting long descriptions")
    parser.add_argument("csv_file", help="Path to the CSV file with one spell per row")
    parser.add_argument("output_csv", nargs="?", default=None, help="Path to the output CSV (one row per card). Default: output/<input>_cards.csv")
    parser.add_argument("--fonts-dir", default=None, help="Directory holding Cinzel-SemiBold.ttf and SourceSerif4-*.ttf (default: ./assets/fonts). Missing fonts fall back to Times.")
    parser.add_argument("--card-width-mm", type=float, default=63.0, help="Card width in millimetres (default: 63)")
    parser.add_argument("--card-height-mm", type=float, default=88.0, help="Card height in millimetres (default: 88)")
    parser.add_argument("--cards-per-page", type=int, default=None, help="Cards per printed page, used for the page count in the summary (default: as many as fit on A4)")
    parser.add_argument("--verbose", action="store_true", help="Log debug details (fonts, per-spell fit decisions)")
    args = parser.parse_args(argv)

    # configure basic logging to console so users are kept up-to-date
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")
    logger = logging.getLogger("spellcards")
    try:
        main(
            args.csv_file,
            args.output_csv,
            fonts_dir=args.fonts_dir,
            card_width_mm=args.card_width_mm,
            card_height_mm=args.card_height_mm,
            cards_per_page=args.cards_per_page,
        )
    except (LayoutInfeasible, MeasurementUnavailable, ValueError, FileNotFoundError) as exc:
        logger.error("Error: %s", exc)
        logger.error(
            "Troubleshooting:\n"
            "- The CSV needs at least 'name' and 'description' columns.\n"
            "- If no description text fits, use a larger --card-height-mm / --card-width-mm.\n"
            "- Check --fonts-dir if custom fonts cannot be loaded."
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
