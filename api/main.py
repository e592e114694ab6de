from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from api.schemas import (
    CategorySeriesModel,
    ChartsResponse,
    DatasetModel,
    DatasetsResponse,
    PointSeriesModel,
)
from core.charts import AltairRenderer
from core.dashboard import CHARTS, get_chart, initialize, load_series
from core.series import CategorySeries
from core.settings import STATIC_DIR


app = FastAPI(title="Fleet Operations Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)


def _json(data: object, status_code: int = 200) -> JSONResponse:
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
        status_code=status_code,
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
        ),
    )


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": message})


@app.get("/meta/datasets")
def meta_datasets():
    payload = DatasetsResponse(
        datasets=[DatasetModel(mount_id=c.mount_id, path=c.path, kind=c.kind) for c in CHARTS]
    )
    return _json(payload.model_dump())


@app.get("/charts")
async def charts():
    try:
        rendered = await initialize(AltairRenderer(), base=STATIC_DIR)
        missing = [c.mount_id for c in CHARTS if c.mount_id not in rendered]
        return _json(ChartsResponse(charts=rendered, missing=missing).model_dump())
    except Exception as exc:
        logger.exception("charts failed")
        return _error(exc)


@app.get("/charts/{mount_id}")
async def chart(mount_id: str):
    definition = get_chart(mount_id)
    if definition is None:
        return _not_found(f"Unknown chart: {mount_id}")
    try:
        rendered = await initialize(AltairRenderer(), base=STATIC_DIR, charts=[definition])
        if mount_id not in rendered:
            return _not_found(f"No data for chart: {mount_id}")
        return _json(rendered[mount_id])
    except Exception as exc:
        logger.exception("chart %s failed", mount_id)
        return _error(exc)


@app.get("/series/{mount_id}")
async def series(mount_id: str):
    definition = get_chart(mount_id)
    if definition is None:
        return _not_found(f"Unknown chart: {mount_id}")
    try:
        result = await load_series(definition, base=STATIC_DIR)
        if result is None:
            return _not_found(f"No data for chart: {mount_id}")
        if isinstance(result, CategorySeries):
            model = CategorySeriesModel(mount_id=mount_id, kind=definition.kind, labels=result.labels, values=result.values)
        else:
            model = PointSeriesModel(mount_id=mount_id, kind=definition.kind, points=result.points)
        return _json(model.model_dump())
    except Exception as exc:
        logger.exception("series %s failed", mount_id)
        return _error(exc)


# Mounted last so the JSON routes above take precedence over static paths.
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
