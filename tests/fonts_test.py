import logging

from spellcards import fonts
from spellcards.text_utils import ReportLabOracle


def test_missing_fonts_fall_back_to_times(tmp_path):
    names = fonts.setup_card_fonts(str(tmp_path))
    assert names == {"title": "Times-Bold", "body": "Times-Roman", "body-bold": "Times-Bold"}
    ReportLabOracle(names)


def test_unreadable_font_file_is_skipped(tmp_path, caplog):
    (tmp_path / "Cinzel-SemiBold.ttf").write_bytes(b"not a font")
    with caplog.at_level(logging.WARNING):
        names = fonts.setup_card_fonts(str(tmp_path))
    assert names["title"] == "Times-Bold"
    assert "Could not register" in caplog.text
