from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

Record = Dict[str, str]


@dataclass(frozen=True)
class ParsedTable:
    headers: List[str] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)

    @property
    def key_column(self) -> Optional[str]:
        return self.headers[0] if self.headers else None

    @property
    def is_empty(self) -> bool:
        return not self.records


def parse_table(text: Optional[str], *, delimiter: str = ",") -> ParsedTable:
    """Parse delimited text with a header row into ordered records.

    Every cell stays a string (no NA conversion). Blank lines, including a
    trailing newline, never produce records. A single extra trailing field
    (e.g. a trailing comma) is dropped; text pandas cannot parse gives an
    empty table.
    """
    if not text or not text.strip():
        return ParsedTable()

    try:
        df = pd.read_csv(
            io.StringIO(text),
            sep=delimiter,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return ParsedTable()
    except pd.errors.ParserError as exc:
        logger.warning("Could not parse tabular source: %s", exc)
        return ParsedTable()

    headers = [str(c) for c in df.columns]
    df = df.fillna("")
    records = [{h: str(row[i]) for i, h in enumerate(headers)} for row in df.itertuples(index=False, name=None)]
    return ParsedTable(headers=headers, records=records)
