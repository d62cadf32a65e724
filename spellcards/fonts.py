import logging
import os
from typing import Dict, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .constants import ROLE_BODY, ROLE_BODY_BOLD, ROLE_TITLE

# Public role -> font name map used by the measurement oracle (and by any
# renderer drawing the cards). Populated by setup_card_fonts() with the card
# TrueType faces when they can be found, otherwise left on the built-in
# Times family.
FONT_NAMES: Dict[str, str] = {
    ROLE_TITLE: "Times-Bold",
    ROLE_BODY: "Times-Roman",
    ROLE_BODY_BOLD: "Times-Bold",
}

DEFAULT_FONTS_DIR = os.path.join("assets", "fonts")

# role -> (registered name, candidate file names)
_CARD_FACES = {
    ROLE_TITLE: ("Cinzel-SemiBold", ["Cinzel-SemiBold.ttf", "CINZEL-SEMIBOLD.TTF"]),
    ROLE_BODY: ("SourceSerif4-Regular", ["SourceSerif4-Regular.ttf", "SOURCESERIF4-REGULAR.TTF"]),
    ROLE_BODY_BOLD: ("SourceSerif4-Semibold", ["SourceSerif4-Semibold.ttf", "SOURCESERIF4-SEMIBOLD.TTF"]),
}

logger = logging.getLogger(__name__)


def _try_register_ttf_font(font_name, font_path):
    """Register a TTF font with ReportLab under font_name. Returns the name."""
    if font_name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(font_name, font_path))
    return font_name


def setup_card_fonts(fonts_dir: Optional[str] = None) -> Dict[str, str]:
    """Best-effort registration of the card typefaces.

    Looks in fonts_dir (default ./assets/fonts) and the working directory.
    Roles whose file is missing or unreadable keep their built-in fallback.
    """
    font_dirs = [os.path.abspath(fonts_dir or DEFAULT_FONTS_DIR), os.path.abspath(".")]

    def find_file(possible_names):
        for d in font_dirs:
            for name in possible_names:
                p = os.path.join(d, name)
                if os.path.isfile(p):
                    return p
        return None

    for role, (font_name, file_names) in _CARD_FACES.items():
        path = find_file(file_names)
        if not path:
            logger.debug("Font for role %r not found; using %s", role, FONT_NAMES[role])
            continue
        try:
            FONT_NAMES[role] = _try_register_ttf_font(font_name, path)
            logger.debug("Registered %s for role %r from %s", font_name, role, path)
        except Exception as exc:
            logger.warning("Could not register %s (%s); using %s", path, exc, FONT_NAMES[role])
    return dict(FONT_NAMES)
