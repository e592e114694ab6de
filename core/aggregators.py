"""Per-dataset reductions from parsed rows to chart-ready series.

Every aggregator is a pure function of its rows. Numeric columns are coerced
with ``pd.to_numeric(errors="coerce")`` and NaN is allowed to propagate into
sums and means: a malformed value shows up as a broken point on the chart
rather than as an error.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from core.csv_parser import Row, rows_to_frame
from core.series import CategorySeries, PointSeries


def to_float(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors="coerce").astype(float)


def _strict_sum(values: pd.Series) -> float:
    return float(values.sum(skipna=False))


def _strict_mean(values: pd.Series) -> float:
    return float(values.sum(skipna=False) / len(values))


def _label(value: object) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    return str(value)


def _category_series(grouped: pd.Series) -> CategorySeries:
    labels: List[Optional[str]] = [_label(k) for k in grouped.index]
    values = [float(v) for v in grouped.tolist()]
    return CategorySeries(labels=labels, values=values)


def _group_reduce(df: pd.DataFrame, key: str, value_col: str, reducer, *, sort: bool) -> CategorySeries:
    if df.empty:
        return CategorySeries()
    df = df.copy()
    df[value_col] = to_float(df[value_col])
    grouped = df.groupby(key, sort=sort, dropna=False)[value_col].agg(reducer)
    return _category_series(grouped)


def aggregate_delivery(rows: Sequence[Row]) -> CategorySeries:
    """Average actual delivery duration per day, days sorted ascending."""
    df = rows_to_frame(rows, ["date", "actual_duration_hrs"])
    return _group_reduce(df, "date", "actual_duration_hrs", _strict_mean, sort=True)


def aggregate_fuel(rows: Sequence[Row]) -> CategorySeries:
    """Fuel burned per 100 km for each aircraft, in first-seen order.

    Only the first row for an aircraft id is used; later rows for the same id
    are ignored rather than averaged in.
    """
    df = rows_to_frame(rows, ["aircraft_id", "fuel_liters", "distance_km"])
    if df.empty:
        return CategorySeries()
    first = df.drop_duplicates(subset=["aircraft_id"], keep="first")
    efficiency = (to_float(first["fuel_liters"]) / (to_float(first["distance_km"]) / 100)).round(2)
    efficiency.index = first["aircraft_id"]
    return _category_series(efficiency)


def aggregate_cargo(rows: Sequence[Row]) -> CategorySeries:
    """Total cargo weight per cargo type, in first-seen order."""
    df = rows_to_frame(rows, ["cargo_type", "weight_kg"])
    return _group_reduce(df, "cargo_type", "weight_kg", _strict_sum, sort=False)


def aggregate_routes(rows: Sequence[Row]) -> PointSeries:
    df = rows_to_frame(rows, ["optimal_time_hrs", "actual_time_hrs"])
    if df.empty:
        return PointSeries()
    xs = to_float(df["optimal_time_hrs"]).tolist()
    ys = to_float(df["actual_time_hrs"]).tolist()
    return PointSeries(points=[(float(x), float(y)) for x, y in zip(xs, ys)])


def aggregate_maintenance(rows: Sequence[Row]) -> CategorySeries:
    """Average inspection score per check type, in first-seen order."""
    df = rows_to_frame(rows, ["check_type", "score"])
    return _group_reduce(df, "check_type", "score", _strict_mean, sort=False)
