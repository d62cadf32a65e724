from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import List

# Scraped sources use these for "not applicable" saves / spell resistance
PLACEHOLDER_VALUES = frozenset({"-", "—", "014"})


@dataclass(frozen=True)
class Record:
    """Content of one spell, laid out onto one or more cards.

    Optional fields are empty strings when absent. Only `description` may be
    split across cards; everything else is chrome repeated on every part.
    """

    name: str
    description: str = ""
    part: str = ""
    class_level: str = ""
    school: str = ""
    casting_time: str = ""
    range: str = ""
    target_or_area: str = ""
    duration: str = ""
    save: str = ""
    spell_resistance: str = ""
    components: str = ""
    tags: str = ""
    notes: str = ""
    school_key: str = ""
    source_url: str = ""

    def with_description(self, description: str) -> "Record":
        return replace(self, description=description)

    def with_part(self, part: str, description: str) -> "Record":
        return replace(self, part=part, description=description)

    @property
    def has_part(self) -> bool:
        return bool(self.part and self.part.strip())


def record_field_names() -> List[str]:
    return [f.name for f in fields(Record)]


def should_render_value(value: str) -> bool:
    if not value or not value.strip():
        return False
    return value.strip() not in PLACEHOLDER_VALUES


def metadata_details(record: Record) -> List[str]:
    """Detail lines shown in the two-column metadata area, in display order."""
    details: List[str] = []
    if record.casting_time.strip():
        details.append(f"Cast: {record.casting_time}")
    if record.range.strip():
        details.append(f"Range: {record.range}")
    if record.target_or_area.strip():
        details.append(record.target_or_area)
    if record.duration.strip():
        details.append(f"Duration: {record.duration}")
    if should_render_value(record.save):
        details.append(f"Save: {record.save}")
    if should_render_value(record.spell_resistance):
        details.append(f"SR: {record.spell_resistance}")
    if record.components.strip():
        details.append(f"Components: {record.components}")
    return details
