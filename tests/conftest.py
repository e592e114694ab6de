"""Pytest fixtures shared across dashboard tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import pytest

from core.series import Series


DATASET_FILES: Dict[str, str] = {
    "delivery_times.csv": "date,actual_duration_hrs\n2024-01-02,5\n2024-01-01,2\n2024-01-01,4\n",
    "fuel_usage.csv": "aircraft_id,fuel_liters,distance_km\nN1,500,1000\nN2,300,200\nN1,900,100\n",
    "cargo.csv": "cargo_type,weight_kg\nA,5\nB,2\nA,3\n",
    "routes.csv": "optimal_time_hrs,actual_time_hrs\n1.5,2\n3,3.5\n",
    "maintenance.csv": "check_type,score\nEngine,80\nAvionics,90\nEngine,70\n",
}


class RecordingRenderer:
    """Renderer stub that records every render call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, Series, Mapping[str, Any]]] = []

    def render(self, mount_id: str, kind: str, series: Series, options: Mapping[str, Any]) -> str:
        self.calls.append((mount_id, kind, series, options))
        return f"{kind}:{mount_id}"


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int = 200, text: str = "", reason: str = "OK") -> None:
        self.status_code = status_code
        self.text = text
        self.reason = reason


@pytest.fixture
def renderer() -> RecordingRenderer:
    """Return a fresh recording renderer."""

    return RecordingRenderer()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Return a directory laid out like ``web/`` with small datasets under ``data/``."""

    data_dir = tmp_path / "data"
    data_dir.mkdir()
    for name, text in DATASET_FILES.items():
        (data_dir / name).write_text(text, encoding="utf-8")
    return tmp_path
