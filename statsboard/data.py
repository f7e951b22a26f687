from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

from statsboard.pricing import PriceReport, derive_prices
from statsboard.tabular import ParsedTable, parse_table

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1]
CSV_SOURCE = DATA_DIR / "data.csv"
LOG_SOURCE = DATA_DIR / "benchmark.log"
SOURCE_ENCODING = "utf-8"

FileSignature = Tuple[str, float]


def file_signature(path: Path) -> Optional[FileSignature]:
    try:
        return (str(path), path.stat().st_mtime)
    except OSError:
        return None


def read_source(path: Path) -> Optional[str]:
    """Read a source file as UTF-8 text; None when it is missing or unreadable."""
    try:
        return path.read_text(encoding=SOURCE_ENCODING, errors="replace")
    except FileNotFoundError:
        logger.warning("Source not found: %s", path)
    except OSError as exc:
        logger.warning("Could not read source %s: %s", path, exc)
    return None


@lru_cache(maxsize=4)
def _load_table_cached(sig: FileSignature) -> ParsedTable:
    text = read_source(Path(sig[0]))
    return parse_table(text)


@lru_cache(maxsize=4)
def _load_price_report_cached(sig: FileSignature) -> PriceReport:
    text = read_source(Path(sig[0]))
    return derive_prices(text)


# ---------------- Public API (Streamlit + FastAPI use) ----------------
def load_performance_table(path: Optional[Path] = None) -> ParsedTable:
    """Parsed CSV source, read once per file signature."""
    sig = file_signature(Path(path or CSV_SOURCE))
    if sig is None:
        logger.warning("Source not found: %s", path or CSV_SOURCE)
        return ParsedTable()
    return _load_table_cached(sig)


def load_price_report(path: Optional[Path] = None) -> PriceReport:
    """Derived prices for the benchmark log, read once per file signature."""
    sig = file_signature(Path(path or LOG_SOURCE))
    if sig is None:
        logger.warning("Source not found: %s", path or LOG_SOURCE)
        return PriceReport()
    return _load_price_report_cached(sig)


def clear_caches() -> None:
    _load_table_cached.cache_clear()
    _load_price_report_cached.cache_clear()


def source_status() -> Dict[str, bool]:
    return {"csv": CSV_SOURCE.exists(), "log": LOG_SOURCE.exists()}
