from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Literal

import altair as alt

from statsboard.charts import series_bar_chart, to_vega_spec
from statsboard.colors import ColorAssigner
from statsboard.datasets import (
    ChartDataset,
    build_chart_dataset,
    chartjs_datasets,
    column_options,
    dataset_frame,
    dataset_version,
    display_labels,
    select_columns,
)
from statsboard.filters import DashboardSelection, normalize_selection
from statsboard.tabular import ParsedTable

Status = Literal["loading", "ready"]


@dataclass(frozen=True)
class HomeView:
    status: Status
    selection: DashboardSelection
    columns: List[str]
    full: ChartDataset
    visible: ChartDataset
    version: str

    @property
    def title(self) -> str:
        return f"{self.selection.column} Stats"


def build_home_view(table: ParsedTable, raw_selection: dict | str | None, colors: ColorAssigner) -> HomeView:
    full = build_chart_dataset(table, colors)
    columns = column_options(full)
    selection = normalize_selection(raw_selection, available_columns=columns)
    if full.is_empty:
        return HomeView("loading", selection, columns, full, full, dataset_version(full))
    visible = select_columns(full, selection.column)
    return HomeView("ready", selection, columns, full, visible, dataset_version(visible))


def home_chart(view: HomeView) -> alt.Chart:
    return series_bar_chart(dataset_frame(view.visible), view.visible)


def compute_home(table: ParsedTable, raw_selection: dict | str | None, colors: ColorAssigner) -> Dict[str, Any]:
    view = build_home_view(table, raw_selection, colors)
    if view.status == "loading":
        return {"selection": asdict(view.selection), "status": view.status, "columns": [], "charts": {}}

    return {
        "selection": asdict(view.selection),
        "status": view.status,
        "title": view.title,
        "columns": view.columns,
        "key_column": view.visible.key_column,
        "labels": view.visible.labels,
        "display_labels": display_labels(view.visible),
        "datasets": chartjs_datasets(view.visible),
        "version": view.version,
        "charts": {"bar": to_vega_spec(home_chart(view))},
    }
