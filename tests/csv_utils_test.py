import pandas as pd
import pytest

from spellcards.csv_utils import read_records_csv, records_to_frame, write_cards_csv
from spellcards.models import Record, record_field_names
from spellcards.precheck import remove_duplicates


def test_read_records_maps_aliases_and_strips(tmp_path):
    path = tmp_path / "spells.csv"
    path.write_text(
        "Name,Level,School,Cast,Range,SR,Description,Extra\n"
        " Fireball ,Wizard 3,Evocation [Fire],1 standard action,Long,Yes,  Boom.  ,ignored\n",
        encoding="utf-8",
    )
    [record] = read_records_csv(str(path))
    assert record == Record(
        name="Fireball",
        class_level="Wizard 3",
        school="Evocation [Fire]",
        casting_time="1 standard action",
        range="Long",
        spell_resistance="Yes",
        description="Boom.",
    )


def test_missing_cells_become_empty_strings(tmp_path):
    path = tmp_path / "spells.csv"
    path.write_text("name,description,notes\nLight,,\n", encoding="utf-8")
    [record] = read_records_csv(str(path))
    assert record.description == ""
    assert record.notes == ""


def test_missing_required_column_raises(tmp_path):
    path = tmp_path / "spells.csv"
    path.write_text("name,school\nLight,Evocation\n", encoding="utf-8")
    with pytest.raises(ValueError, match="description"):
        read_records_csv(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_records_csv(str(tmp_path / "nope.csv"))


def test_rows_without_name_are_skipped(tmp_path, caplog):
    path = tmp_path / "spells.csv"
    path.write_text("name,description\n,Orphan text.\nLight,Glow.\n", encoding="utf-8")
    records = read_records_csv(str(path))
    assert [r.name for r in records] == ["Light"]
    assert "empty spell name" in caplog.text


def test_write_cards_csv_round_trips(tmp_path):
    cards = [
        Record(name="Fireball", part="1/2", description="Boom."),
        Record(name="Fireball", part="2/2", description="More boom."),
    ]
    out = tmp_path / "out" / "cards.csv"
    write_cards_csv(cards, str(out))
    frame = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert list(frame.columns) == record_field_names()
    assert frame["part"].tolist() == ["1/2", "2/2"]
    assert read_records_csv(str(out)) == cards


def test_records_to_frame_empty():
    frame = records_to_frame([])
    assert frame.empty
    assert list(frame.columns) == record_field_names()


def test_remove_duplicates_by_name_case_insensitive():
    df = pd.DataFrame(
        {
            "Name": ["Fireball", "fireball ", "Light"],
            "Description": ["a", "b", "c"],
        }
    )
    deduped, removed, indices = remove_duplicates(df)
    assert removed == 1
    assert indices == [1]
    assert deduped["Description"].tolist() == ["a", "c"]


def test_remove_duplicates_without_name_column_uses_all_columns():
    df = pd.DataFrame({"spell": ["A", "A", "B"], "description": ["x", "x", "x"]})
    deduped, removed, indices = remove_duplicates(df)
    assert removed == 1
    assert indices == [1]
    assert len(deduped) == 2


def test_remove_duplicates_explicit_subset():
    df = pd.DataFrame({"name": ["A", "B"], "school": ["Evocation", "Evocation"]})
    deduped, removed, _ = remove_duplicates(df, subset=["school"], keep="last")
    assert removed == 1
    assert deduped["name"].tolist() == ["B"]
