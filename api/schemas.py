from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class DatasetModel(BaseModel):
    mount_id: str
    path: str
    kind: str


class DatasetsResponse(BaseModel):
    datasets: List[DatasetModel]


class ChartsResponse(BaseModel):
    charts: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    missing: List[str] = Field(default_factory=list)


class CategorySeriesModel(BaseModel):
    mount_id: str
    kind: str
    labels: List[Optional[str]]
    values: List[Optional[float]]


class PointSeriesModel(BaseModel):
    mount_id: str
    kind: str
    points: List[Tuple[Optional[float], Optional[float]]]
