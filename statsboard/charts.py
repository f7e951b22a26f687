from __future__ import annotations

import json
from typing import Any, Dict, List

import altair as alt
import pandas as pd

from statsboard.datasets import ELLIPSIS, LABEL_LIMIT, ChartDataset

alt.data_transformers.disable_max_rows()

PRICE_SERIES_LABEL = "Yearly Cost Saving over default build on ARM"
PRICE_COLOR = "#4BC0C0"


def position_label_expr(labels: List[str], *, truncate: bool = False) -> str:
    """Vega axis expression mapping a row position back to its label text.

    With ``truncate`` it mirrors datasets.truncate_label, for axis labels only.
    """
    lookup = f"{json.dumps([str(label) for label in labels], ensure_ascii=False)}[datum.value]"
    if not truncate:
        return lookup
    return f"length({lookup}) > {LABEL_LIMIT} ? substring({lookup}, 0, {LABEL_LIMIT}) + '{ELLIPSIS}' : {lookup}"


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def series_bar_chart(frame: pd.DataFrame, dataset: ChartDataset) -> alt.Chart:
    """Grouped bar chart, one bar per series for each row; repeated labels keep their own slot."""
    key_title = dataset.key_column or "Label"
    names = dataset.names
    colors = [s.color for s in dataset.series]
    color_scale = alt.Scale(domain=names, range=colors) if names else alt.Undefined

    chart = (
        alt.Chart(frame)
        .mark_bar()
        .encode(
            x=alt.X(
                "position:O",
                title=None,
                axis=alt.Axis(labelExpr=position_label_expr(dataset.labels, truncate=True), labelAngle=0, grid=False),
            ),
            xOffset=alt.XOffset("series:N", sort=names or alt.Undefined),
            y=alt.Y("value:Q", title=None, scale=alt.Scale(zero=True), axis=alt.Axis(gridDash=[4, 4], domain=False, ticks=False)),
            color=alt.Color("series:N", title="Series", scale=color_scale, sort=names or alt.Undefined),
            tooltip=[
                alt.Tooltip("label:N", title=key_title),
                alt.Tooltip("series:N", title="Series"),
                alt.Tooltip("raw:N", title="Value"),
            ],
        )
    )
    return chart


def price_bar_chart(frame: pd.DataFrame) -> alt.Chart:
    flags = frame["flags"].tolist() if not frame.empty else []
    chart = (
        alt.Chart(frame)
        .mark_bar(color=PRICE_COLOR, opacity=0.5)
        .encode(
            x=alt.X(
                "position:O",
                title="Flags",
                axis=alt.Axis(labelExpr=position_label_expr(flags), labelAngle=0, grid=False),
            ),
            y=alt.Y("price:Q", title=PRICE_SERIES_LABEL, axis=alt.Axis(format="$,.0f", gridDash=[4, 4], domain=False, ticks=False)),
            tooltip=[
                alt.Tooltip("flags:N", title="Flags"),
                alt.Tooltip("time:N", title="Time"),
                alt.Tooltip("improvement:Q", title="Improvement", format=".2f"),
                alt.Tooltip("price:Q", title="Savings", format="$,.2f"),
            ],
        )
    )
    return chart
