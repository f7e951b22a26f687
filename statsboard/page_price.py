from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import altair as alt

from statsboard.charts import PRICE_COLOR, PRICE_SERIES_LABEL, price_bar_chart, to_vega_spec
from statsboard.pricing import PriceReport, price_frame

PRICE_TITLE = "Improvement Graph"


def price_chart(report: PriceReport) -> alt.Chart:
    return price_bar_chart(price_frame(report))


def compute_price(report: PriceReport) -> Dict[str, Any]:
    malformed = [asdict(m) for m in report.malformed]
    if report.is_empty:
        return {"status": "loading", "malformed": malformed, "malformed_count": len(malformed), "charts": {}}

    prices = [r.price for r in report.records]
    return {
        "status": "ready",
        "title": PRICE_TITLE,
        "labels": [r.flags for r in report.records],
        "records": [{**asdict(r), "price": r.price} for r in report.records],
        "datasets": [{"label": PRICE_SERIES_LABEL, "data": prices, "backgroundColor": PRICE_COLOR}],
        "malformed": malformed,
        "malformed_count": len(malformed),
        "charts": {"bar": to_vega_spec(price_chart(report))},
    }
