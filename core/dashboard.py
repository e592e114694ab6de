from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from core.aggregators import (
    aggregate_cargo,
    aggregate_delivery,
    aggregate_fuel,
    aggregate_maintenance,
    aggregate_routes,
)
from core.charts import AltairRenderer, ChartRenderer
from core.csv_parser import Row
from core.loader import Loader, Location, load_and_parse, load_csv, resolve_location
from core.series import Series
from core.settings import STATIC_DIR


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartDefinition:
    mount_id: str
    path: str
    kind: str
    aggregate: Callable[[Sequence[Row]], Series]
    options: Dict[str, Any] = field(default_factory=dict)


CHARTS: Tuple[ChartDefinition, ...] = (
    ChartDefinition(
        mount_id="deliveryChart",
        path="data/delivery_times.csv",
        kind="line",
        aggregate=aggregate_delivery,
        options={"label": "Average Duration (Hours)", "color": "#4e73df", "x_title": "Date"},
    ),
    ChartDefinition(
        mount_id="fuelChart",
        path="data/fuel_usage.csv",
        kind="bar",
        aggregate=aggregate_fuel,
        options={"label": "Fuel per 100km (Liters)", "color": "#1cc88a", "x_title": "Aircraft"},
    ),
    ChartDefinition(
        mount_id="cargoChart",
        path="data/cargo.csv",
        kind="pie",
        aggregate=aggregate_cargo,
        options={
            "label": "Cargo Weight by Type (kg)",
            "colors": ["#36b9cc", "#1cc88a", "#f6c23e", "#e74a3b"],
            "legend_title": "Cargo Type",
        },
    ),
    ChartDefinition(
        mount_id="routeChart",
        path="data/routes.csv",
        kind="scatter",
        aggregate=aggregate_routes,
        options={
            "label": "Route Efficiency",
            "color": "#f6c23e",
            "x_title": "Optimal Time (Hours)",
            "y_title": "Actual Time (Hours)",
        },
    ),
    ChartDefinition(
        mount_id="maintenanceChart",
        path="data/maintenance.csv",
        kind="radar",
        aggregate=aggregate_maintenance,
        options={"label": "Average Scores", "scale_min": 0, "scale_max": 100, "legend_title": "Check Type"},
    ),
)


def get_chart(mount_id: str, charts: Sequence[ChartDefinition] = CHARTS) -> Optional[ChartDefinition]:
    for chart in charts:
        if chart.mount_id == mount_id:
            return chart
    return None


async def initialize(
    renderer: ChartRenderer,
    *,
    base: Optional[Location] = None,
    charts: Sequence[ChartDefinition] = CHARTS,
    loader: Loader = load_csv,
) -> Dict[str, Any]:
    """Load every dataset concurrently, then aggregate and render each chart.

    Returns the renderer output keyed by mount point. A dataset whose load
    failed is skipped with a warning instead of being aggregated.
    """
    base = STATIC_DIR if base is None else base
    datasets = await asyncio.gather(
        *(load_and_parse(resolve_location(base, chart.path), loader=loader) for chart in charts)
    )

    rendered: Dict[str, Any] = {}
    for chart, rows in zip(charts, datasets):
        if rows is None:
            logger.warning("No data for %s (%s); chart skipped", chart.mount_id, chart.path)
            continue
        series = chart.aggregate(rows)
        rendered[chart.mount_id] = renderer.render(chart.mount_id, chart.kind, series, chart.options)
    logger.info("Dashboard initialized: %d/%d charts rendered", len(rendered), len(charts))
    return rendered


async def load_series(chart: ChartDefinition, *, base: Optional[Location] = None, loader: Loader = load_csv) -> Optional[Series]:
    base = STATIC_DIR if base is None else base
    rows = await load_and_parse(resolve_location(base, chart.path), loader=loader)
    if rows is None:
        return None
    return chart.aggregate(rows)


def build_dashboard(base: Optional[Location] = None, renderer: Optional[ChartRenderer] = None) -> Dict[str, Any]:
    """Synchronous wrapper around :func:`initialize` for scripts and Streamlit."""
    return asyncio.run(initialize(renderer or AltairRenderer(), base=base))
