"""
Raw CSV rows -> canonical wine records.

Every field of a record is a string; anything missing becomes "".
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from .models import WineRecord
from .rules import COLUMNS


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_row(raw: Mapping[str, Any]) -> WineRecord:
    fields = {field: _as_text(raw.get(header)) for field, header in COLUMNS.items()}
    fields["type"] = fields["type"].strip().lower()
    return WineRecord(**fields)


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> List[WineRecord]:
    return [normalize_row(r) for r in rows]
