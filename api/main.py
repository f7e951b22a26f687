from __future__ import annotations

import logging
import math
from typing import Literal

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from api.schemas import DashboardSelectionModel, MetaColumnsResponse
from statsboard.colors import ColorAssigner
from statsboard.data import load_performance_table, load_price_report, source_status
from statsboard.datasets import build_chart_dataset, column_options, export_frame, select_columns
from statsboard.filters import normalize_selection
from statsboard.page_home import compute_home
from statsboard.page_price import compute_price
from statsboard.pricing import price_frame


app = FastAPI(title="HACO Stats API", version="0.1.0")
app.state.colors = ColorAssigner()
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8501", "http://127.0.0.1:8501"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _colors() -> ColorAssigner:
    return app.state.colors


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


@app.get("/health")
def health():
    return {"status": "ok", "sources": source_status()}


@app.get("/meta/columns", response_model=MetaColumnsResponse)
def meta_columns():
    try:
        dataset = build_chart_dataset(load_performance_table(), _colors())
        return _json({"columns": column_options(dataset)})
    except Exception as exc:
        logger.exception("meta_columns failed")
        return _error(exc)


@app.post("/home")
def home(selection: DashboardSelectionModel):
    try:
        return _json(compute_home(load_performance_table(), selection.model_dump(), _colors()))
    except Exception as exc:
        logger.exception("home failed")
        return _error(exc)


@app.get("/price")
def price():
    try:
        return _json(compute_price(load_price_report()))
    except Exception as exc:
        logger.exception("price failed")
        return _error(exc)


@app.post("/export/{page}")
def export_page(page: Literal["home", "price"], selection: DashboardSelectionModel = DashboardSelectionModel()):
    try:
        if page == "home":
            dataset = build_chart_dataset(load_performance_table(), _colors())
            sel = normalize_selection(selection.model_dump(), available_columns=column_options(dataset))
            export_df = export_frame(select_columns(dataset, sel.column)) if not dataset.is_empty else pd.DataFrame()
        else:
            export_df = price_frame(load_price_report()).drop(columns=["position"])
    except Exception as exc:
        logger.exception("export_page failed")
        return _error(exc)

    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={page}.csv"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
