from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol

import altair as alt
import pandas as pd

from core.series import CategorySeries, PointSeries, Series

alt.data_transformers.disable_max_rows()

CHART_KINDS = ("line", "bar", "pie", "scatter", "radar")


class ChartRenderer(Protocol):
    def render(self, mount_id: str, kind: str, series: Series, options: Mapping[str, Any]) -> Any:
        ...


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _mark_style(options: Mapping[str, Any]) -> Dict[str, Any]:
    return {"color": options["color"]} if options.get("color") else {}


def _require_category(kind: str, series: Series) -> pd.DataFrame:
    if not isinstance(series, CategorySeries):
        raise TypeError(f"{kind} chart needs a CategorySeries, got {type(series).__name__}")
    return series.to_frame()


def _line_chart(series: Series, options: Mapping[str, Any]) -> alt.Chart:
    df = _require_category("line", series)
    label = options.get("label", "value")
    return (
        alt.Chart(df)
        .mark_line(point=True, interpolate="monotone", **_mark_style(options))
        .encode(
            x=alt.X("label:O", title=options.get("x_title", "")),
            y=alt.Y("value:Q", title=options.get("y_title", label)),
            tooltip=[alt.Tooltip("label:N", title=options.get("x_title", "Label")), alt.Tooltip("value:Q", title=label, format=",.2f")],
        )
    )


def _bar_chart(series: Series, options: Mapping[str, Any]) -> alt.Chart:
    df = _require_category("bar", series)
    label = options.get("label", "value")
    return (
        alt.Chart(df)
        .mark_bar(**_mark_style(options))
        .encode(
            x=alt.X("label:N", title=options.get("x_title", ""), sort=None),
            y=alt.Y("value:Q", title=options.get("y_title", label)),
            tooltip=[alt.Tooltip("label:N", title=options.get("x_title", "Label")), alt.Tooltip("value:Q", title=label, format=",.2f")],
        )
    )


def _pie_chart(series: Series, options: Mapping[str, Any]) -> alt.Chart:
    df = _require_category("pie", series)
    colors = options.get("colors")
    color_scale = alt.Scale(range=list(colors)) if colors else alt.Undefined
    return (
        alt.Chart(df)
        .mark_arc()
        .encode(
            theta=alt.Theta("value:Q"),
            color=alt.Color("label:N", title=options.get("legend_title", ""), scale=color_scale, sort=None),
            tooltip=["label", alt.Tooltip("value:Q", format=",.0f")],
        )
    )


def _scatter_chart(series: Series, options: Mapping[str, Any]) -> alt.Chart:
    if not isinstance(series, PointSeries):
        raise TypeError(f"scatter chart needs a PointSeries, got {type(series).__name__}")
    df = series.to_frame()
    return (
        alt.Chart(df)
        .mark_point(filled=True, **_mark_style(options))
        .encode(
            x=alt.X("x:Q", title=options.get("x_title", "x")),
            y=alt.Y("y:Q", title=options.get("y_title", "y")),
            tooltip=[alt.Tooltip("x:Q", format=".2f"), alt.Tooltip("y:Q", format=".2f")],
        )
    )


def _radar_chart(series: Series, options: Mapping[str, Any]) -> alt.Chart:
    # Vega-Lite has no polar line mark; equal slices with radius = value stand in for it.
    df = _require_category("radar", series).assign(slice=1)
    lo = options.get("scale_min")
    hi = options.get("scale_max")
    radius_scale = alt.Scale(domain=[lo, hi]) if lo is not None and hi is not None else alt.Scale(zero=True)
    return (
        alt.Chart(df)
        .mark_arc(stroke="#ffffff", opacity=options.get("opacity", 0.6))
        .encode(
            theta=alt.Theta("slice:Q", stack=True),
            radius=alt.Radius("value:Q", scale=radius_scale),
            color=alt.Color("label:N", title=options.get("legend_title", ""), sort=None),
            tooltip=["label", alt.Tooltip("value:Q", title=options.get("label", "value"), format=".1f")],
        )
    )


_BUILDERS = {
    "line": _line_chart,
    "bar": _bar_chart,
    "pie": _pie_chart,
    "scatter": _scatter_chart,
    "radar": _radar_chart,
}


def build_chart(kind: str, series: Series, options: Optional[Mapping[str, Any]] = None) -> alt.Chart:
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise ValueError(f"Unsupported chart kind: {kind!r} (expected one of {', '.join(CHART_KINDS)})")
    options = options or {}
    chart = builder(series, options)
    return chart.properties(
        title=options.get("label", ""),
        width="container",
        height=int(options.get("height", 300)),
    )


class AltairRenderer:
    """Renders series to Vega-Lite specs and keeps them by mount point."""

    def __init__(self) -> None:
        self.rendered: Dict[str, Dict[str, Any]] = {}

    def render(self, mount_id: str, kind: str, series: Series, options: Mapping[str, Any]) -> Dict[str, Any]:
        spec = to_vega_spec(build_chart(kind, series, options))
        self.rendered[mount_id] = spec
        return spec
