from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

ALL_DATA = "All Data"


@dataclass(frozen=True)
class DashboardSelection:
    column: Optional[str] = None

    @property
    def is_all(self) -> bool:
        return self.column == ALL_DATA


def _as_column(value: object) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def normalize_selection(raw: dict | str | None, *, available_columns: Optional[Iterable[str]] = None) -> DashboardSelection:
    """Normalize a raw selection into a DashboardSelection.

    A missing column falls back to ``All Data`` once the source has columns.
    Unknown names are kept as-is so that they render an empty chart.
    """
    if isinstance(raw, dict):
        column = _as_column(raw.get("column"))
    else:
        column = _as_column(raw)

    available: List[str] = list(available_columns or [])
    if column is None and available:
        column = ALL_DATA
    return DashboardSelection(column=column)
