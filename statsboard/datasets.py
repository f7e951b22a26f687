from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from statsboard.colors import ColorAssigner
from statsboard.filters import ALL_DATA
from statsboard.tabular import ParsedTable

LABEL_LIMIT = 10
ELLIPSIS = "..."


@dataclass(frozen=True)
class ColumnSeries:
    name: str
    values: List[str]
    color: str


@dataclass(frozen=True)
class ChartDataset:
    labels: List[str] = field(default_factory=list)
    series: List[ColumnSeries] = field(default_factory=list)
    key_column: Optional[str] = None

    @property
    def names(self) -> List[str]:
        return [s.name for s in self.series]

    @property
    def is_empty(self) -> bool:
        return not self.labels


def build_chart_dataset(table: ParsedTable, colors: ColorAssigner) -> ChartDataset:
    """Turn parsed records into x-axis labels plus one series per non-key column.

    The first header is the category key. With no records nothing is built
    and no colors are allocated.
    """
    if not table.headers or not table.records:
        return ChartDataset(key_column=table.key_column)

    key = table.headers[0]
    labels = [r.get(key, "") for r in table.records]
    series = [
        ColumnSeries(
            name=header,
            values=[r.get(header, "") for r in table.records],
            color=colors.color_for(header),
        )
        for header in table.headers[1:]
    ]
    return ChartDataset(labels=labels, series=series, key_column=key)


def column_options(dataset: ChartDataset) -> List[str]:
    if dataset.is_empty:
        return []
    return [ALL_DATA] + dataset.names


def select_columns(dataset: ChartDataset, column: Optional[str]) -> ChartDataset:
    """Keep every series for ``All Data``, one series for a real column, none otherwise."""
    if column == ALL_DATA:
        series = list(dataset.series)
    else:
        series = [s for s in dataset.series if s.name == column]
    return ChartDataset(labels=list(dataset.labels), series=series, key_column=dataset.key_column)


def truncate_label(label: str, limit: int = LABEL_LIMIT) -> str:
    label = str(label)
    return label[:limit] + ELLIPSIS if len(label) > limit else label


def display_labels(dataset: ChartDataset) -> List[str]:
    return [truncate_label(label) for label in dataset.labels]


def dataset_version(dataset: ChartDataset) -> str:
    """Short content hash, used as the chart redraw key."""
    payload = json.dumps(
        {"labels": dataset.labels, "series": [[s.name, s.values] for s in dataset.series]},
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()[:12]


def chartjs_datasets(dataset: ChartDataset) -> List[Dict[str, Any]]:
    return [{"label": s.name, "data": list(s.values), "backgroundColor": s.color} for s in dataset.series]


def dataset_frame(dataset: ChartDataset) -> pd.DataFrame:
    """Long-form frame (one row per label/series pair) for charting."""
    columns = ["position", "label", "series", "raw", "value", "color"]
    rows = [
        {"position": i, "label": label, "series": s.name, "raw": s.values[i], "color": s.color}
        for s in dataset.series
        for i, label in enumerate(dataset.labels)
    ]
    if not rows:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(rows)
    df["value"] = pd.to_numeric(df["raw"], errors="coerce")
    return df[columns]


def export_frame(dataset: ChartDataset) -> pd.DataFrame:
    key = dataset.key_column or "label"
    data: Dict[str, List[str]] = {key: list(dataset.labels)}
    for s in dataset.series:
        data[s.name] = list(s.values)
    return pd.DataFrame(data)
