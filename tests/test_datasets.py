import math

import pytest

from statsboard.datasets import (
    ChartDataset,
    build_chart_dataset,
    chartjs_datasets,
    column_options,
    dataset_frame,
    dataset_version,
    display_labels,
    export_frame,
    select_columns,
    truncate_label,
)
from statsboard.filters import ALL_DATA
from statsboard.tabular import parse_table


@pytest.fixture
def dataset(colors):
    table = parse_table("K,A,B\nx,1,2\ny,3,4\nz,5,oops\n")
    return build_chart_dataset(table, colors)


def test_labels_and_series_are_aligned(dataset):
    assert dataset.labels == ["x", "y", "z"]
    assert dataset.names == ["A", "B"]
    for series in dataset.series:
        assert len(series.values) == len(dataset.labels)
    assert dataset.series[0].values == ["1", "3", "5"]
    assert dataset.key_column == "K"


def test_series_colors_come_from_assigner(dataset, colors):
    assert dataset.series[0].color == colors.color_for("A")
    assert dataset.series[1].color == colors.color_for("B")


def test_rebuilding_keeps_colors(colors):
    table = parse_table("K,A\nx,1\n")
    first = build_chart_dataset(table, colors)
    second = build_chart_dataset(table, colors)
    assert first.series[0].color == second.series[0].color


def test_header_only_builds_nothing(colors):
    dataset = build_chart_dataset(parse_table("K,A,B\n"), colors)
    assert dataset.labels == []
    assert dataset.series == []
    assert dataset.is_empty
    assert len(colors) == 0
    assert column_options(dataset) == []


def test_column_options(dataset):
    assert column_options(dataset) == [ALL_DATA, "A", "B"]


def test_column_options_without_series(colors):
    dataset = build_chart_dataset(parse_table("K\nx\n"), colors)
    assert dataset.series == []
    assert column_options(dataset) == [ALL_DATA]


def test_select_all_data(dataset):
    selected = select_columns(dataset, ALL_DATA)
    assert selected.names == ["A", "B"]
    assert selected.labels == dataset.labels


def test_select_single_column(dataset):
    selected = select_columns(dataset, "A")
    assert len(selected.series) == 1
    assert selected.series[0].name == "A"
    assert selected.labels == dataset.labels


@pytest.mark.parametrize("column", ["missing", None])
def test_select_unknown_column_is_empty(dataset, column):
    selected = select_columns(dataset, column)
    assert selected.series == []
    assert selected.labels == dataset.labels


def test_truncate_label():
    assert truncate_label("abcdefghijklm") == "abcdefghij..."
    assert truncate_label("abcdefghij") == "abcdefghij"
    assert truncate_label("short") == "short"


def test_display_labels_do_not_touch_data(colors):
    dataset = build_chart_dataset(parse_table("K,A\nabcdefghijklm,1\n"), colors)
    assert display_labels(dataset) == ["abcdefghij..."]
    assert dataset.labels == ["abcdefghijklm"]


def test_version_tracks_content(dataset):
    assert dataset_version(dataset) == dataset_version(select_columns(dataset, ALL_DATA))
    assert dataset_version(dataset) != dataset_version(select_columns(dataset, "A"))
    assert dataset_version(ChartDataset()) == dataset_version(ChartDataset())


def test_chartjs_datasets(dataset):
    out = chartjs_datasets(dataset)
    assert out[0] == {"label": "A", "data": ["1", "3", "5"], "backgroundColor": dataset.series[0].color}


def test_dataset_frame_is_long_form(dataset):
    df = dataset_frame(dataset)
    assert len(df) == 6
    assert list(df.columns) == ["position", "label", "series", "raw", "value", "color"]
    b = df[df["series"] == "B"]
    assert b["value"].iloc[0] == 2
    assert math.isnan(b["value"].iloc[2])
    assert b["raw"].iloc[2] == "oops"


def test_dataset_frame_empty():
    df = dataset_frame(ChartDataset())
    assert df.empty
    assert "value" in df.columns


def test_export_frame_is_wide(dataset):
    df = export_frame(select_columns(dataset, "B"))
    assert list(df.columns) == ["K", "B"]
    assert df["K"].tolist() == ["x", "y", "z"]
