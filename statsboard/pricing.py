"""Price derivation for benchmark log lines.

Each line of the benchmark log reads ``flags,time,improvement``. The yearly
cost saving ("price") is an affine function of the improvement ratio:

    price = (improvement + IMPROVEMENT_OFFSET) * PRICE_FACTOR

Lines that do not have exactly three fields, or whose improvement is not a
finite number, are kept as ``MalformedLine`` entries so they can be counted
and shown in diagnostics. They never reach the chart.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

IMPROVEMENT_OFFSET = 0.72
PRICE_FACTOR = 2540.4
FIELD_COUNT = 3


@dataclass(frozen=True)
class DerivedMetricRecord:
    flags: str
    time: str
    improvement: float

    @property
    def price(self) -> float:
        return (self.improvement + IMPROVEMENT_OFFSET) * PRICE_FACTOR


@dataclass(frozen=True)
class MalformedLine:
    line_number: int
    raw: str
    reason: str


ParsedLine = Union[DerivedMetricRecord, MalformedLine]


@dataclass(frozen=True)
class PriceReport:
    records: List[DerivedMetricRecord] = field(default_factory=list)
    malformed: List[MalformedLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records


def _as_finite_float(value: str) -> Optional[float]:
    try:
        out = float(value)
    except ValueError:
        return None
    if math.isnan(out) or math.isinf(out):
        return None
    return out


def parse_log_line(line: str, line_number: int = 1) -> ParsedLine:
    parts = [p.strip() for p in line.split(",")]
    if len(parts) != FIELD_COUNT:
        return MalformedLine(line_number, line, f"expected {FIELD_COUNT} fields, got {len(parts)}")
    flags, time, improvement_raw = parts
    improvement = _as_finite_float(improvement_raw)
    if improvement is None:
        return MalformedLine(line_number, line, f"improvement is not numeric: {improvement_raw!r}")
    return DerivedMetricRecord(flags=flags, time=time, improvement=improvement)


def derive_prices(text: Optional[str]) -> PriceReport:
    if not text or not text.strip():
        return PriceReport()

    records: List[DerivedMetricRecord] = []
    malformed: List[MalformedLine] = []
    for idx, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        parsed = parse_log_line(line, idx)
        if isinstance(parsed, MalformedLine):
            malformed.append(parsed)
        else:
            records.append(parsed)

    if malformed:
        logger.warning("Skipped %d malformed benchmark log line(s)", len(malformed))
    return PriceReport(records=records, malformed=malformed)


def price_frame(report: PriceReport) -> pd.DataFrame:
    columns = ["position", "flags", "time", "improvement", "price"]
    if not report.records:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(
        [
            {"position": i, "flags": r.flags, "time": r.time, "improvement": r.improvement, "price": r.price}
            for i, r in enumerate(report.records)
        ],
        columns=columns,
    )
