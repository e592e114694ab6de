"""Integration tests for the HTTP surface."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import api.main as api_main
from api.main import app

pytestmark = pytest.mark.integration

MOUNT_IDS = ["deliveryChart", "fuelChart", "cargoChart", "routeChart", "maintenanceChart"]


@pytest.fixture
def client() -> TestClient:
    """Return a test client for the dashboard app."""

    return TestClient(app)


def test_meta_datasets_lists_registry(client: TestClient) -> None:
    """The dataset listing mirrors the chart registry."""

    response = client.get("/meta/datasets")

    assert response.status_code == 200
    datasets = response.json()["datasets"]
    assert [d["mount_id"] for d in datasets] == MOUNT_IDS
    assert datasets[2] == {"mount_id": "cargoChart", "path": "data/cargo.csv", "kind": "pie"}


def test_charts_returns_all_specs(client: TestClient) -> None:
    """Every bundled dataset is rendered to a Vega-Lite spec."""

    response = client.get("/charts")

    assert response.status_code == 200
    payload = response.json()
    assert sorted(payload["charts"]) == sorted(MOUNT_IDS)
    assert payload["missing"] == []


def test_single_chart_and_unknown_chart(client: TestClient) -> None:
    """One chart can be fetched by mount id; unknown ids are 404."""

    ok = client.get("/charts/routeChart")
    missing = client.get("/charts/doesNotExist")

    assert ok.status_code == 200
    assert ok.json()["encoding"]["x"]["title"] == "Optimal Time (Hours)"
    assert missing.status_code == 404


def test_series_endpoints(client: TestClient) -> None:
    """Raw series are exposed as labels/values or points."""

    cargo = client.get("/series/cargoChart").json()
    routes = client.get("/series/routeChart").json()

    assert cargo["kind"] == "pie"
    assert cargo["labels"] == ["General", "Perishable", "Hazardous", "Express"]
    assert cargo["values"] == [3660.0, 1155.0, 310.0, 695.0]
    assert routes["points"][0] == [5.8, 6.4]


def test_missing_data_is_reported(client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Charts without data are listed as missing and 404 individually."""

    monkeypatch.setattr(api_main, "STATIC_DIR", tmp_path)

    charts = client.get("/charts").json()

    assert charts["charts"] == {}
    assert charts["missing"] == MOUNT_IDS
    assert client.get("/charts/fuelChart").status_code == 404
    assert client.get("/series/fuelChart").status_code == 404


def test_nan_series_values_encode_as_null(client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Malformed numbers come back as JSON nulls rather than invalid JSON."""

    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "maintenance.csv").write_text("check_type,score\nEngine,n/a\n", encoding="utf-8")
    monkeypatch.setattr(api_main, "STATIC_DIR", tmp_path)

    payload = client.get("/series/maintenanceChart").json()

    assert payload["labels"] == ["Engine"]
    assert payload["values"] == [None]


def test_static_files_are_served(client: TestClient) -> None:
    """The page markup and the CSV files are served as static files."""

    index = client.get("/")
    csv = client.get("/data/cargo.csv")

    assert index.status_code == 200
    for mount_id in MOUNT_IDS:
        assert f'id="{mount_id}"' in index.text
    assert csv.status_code == 200
    assert csv.text.startswith("shipment_id,cargo_type,weight_kg")
