"""Parsing of the fixed-column plant data file."""

from __future__ import annotations

import math
import re

from loguru import logger

from nearplants.models import PlantRecord

# Leading decimal number, e.g. "-75.25", "1e3", "12.5m" -> "12.5"
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_FIELD_COUNT = 11

# Column positions in a data row
_COL_ID = 0
_COL_COMMON_NAME = 1
_COL_COMMON_NAME_ALT = 2
_COL_GENUS = 4
_COL_SPECIES = 5
_COL_LONGITUDE = 7
_COL_LATITUDE = 8
_COL_HEIGHT = 10


def parse_number(text: str, default: float = 0.0) -> float:
    """
    Read the leading decimal number in *text*.

    Returns *default* for empty, non-numeric or non-finite input
    instead of raising.
    """
    match = _NUMBER_RE.match(text.strip())
    if match is None:
        return default
    value = float(match.group(0))
    if not math.isfinite(value):
        return default
    return value


def parse_row(line: str, delimiter: str = ",") -> PlantRecord:
    """
    Build a PlantRecord from one data line.

    Short rows are padded with empty fields, so this never fails;
    the result may still be missing its id or coordinates.
    """
    cells = [c.strip() for c in line.split(delimiter)]
    if len(cells) < _FIELD_COUNT:
        cells.extend([""] * (_FIELD_COUNT - len(cells)))

    return PlantRecord(
        id=cells[_COL_ID],
        common_name=cells[_COL_COMMON_NAME] or "Unknown",
        common_name_alt=cells[_COL_COMMON_NAME_ALT],
        genus=cells[_COL_GENUS] or "Unknown",
        species=cells[_COL_SPECIES],
        longitude=parse_number(cells[_COL_LONGITUDE]),
        latitude=parse_number(cells[_COL_LATITUDE]),
        height=parse_number(cells[_COL_HEIGHT]) or 1.0,
    )


def is_locatable(record: PlantRecord) -> bool:
    """True if the record has an id and non-zero coordinates."""
    return bool(record.id) and record.latitude != 0 and record.longitude != 0


def parse(raw_text: str, delimiter: str = ",") -> list[PlantRecord]:
    """
    Parse the full text of a plant data file.

    The first line is a header and is skipped unchecked. Rows without
    an id or with a zero/unparsable latitude or longitude are dropped.
    """
    lines = raw_text.split("\n")[1:]
    records = [parse_row(line, delimiter) for line in lines]
    kept = [r for r in records if is_locatable(r)]
    logger.debug(f"Parsed {len(kept)} of {len(records)} rows")
    return kept
