from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd


Row = Dict[str, Optional[str]]
Dataset = List[Row]


def parse_csv(text: str) -> Dataset:
    """Parse comma-delimited text into rows keyed by the header line.

    Blank lines are skipped. There is no quoting support: every line is split
    on ``,``. Extra fields are dropped and missing trailing fields map to
    ``None``. Values are left as raw (trimmed) strings.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return []

    headers = [h.strip() for h in lines[0].split(",")]
    rows: Dataset = []
    for line in lines[1:]:
        values = line.split(",")
        row: Row = {}
        for idx, header in enumerate(headers):
            row[header] = values[idx].strip() if idx < len(values) else None
        rows.append(row)
    return rows


def rows_to_frame(rows: Sequence[Row], columns: Iterable[str]) -> pd.DataFrame:
    """Frame restricted to ``columns``; columns absent from the rows come back as missing values."""
    return pd.DataFrame(list(rows), columns=list(columns), dtype=object)
