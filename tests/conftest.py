"""Shared pytest fixtures and helpers.

The InfluxDB client is replaced by a lightweight mock so tests run without a
live database.  The HTTP surface uses FastAPI's ``dependency_overrides``.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from influx_bridge.clients.influxdb import InfluxDBClient
from influx_bridge.config import Settings
from influx_bridge.deps import get_influxdb_client, get_settings
from influx_bridge.endpoint import InfluxDBEndpoint
from influx_bridge.main import app
from influx_bridge.points import BatchPoints, Point

# ── Sample payloads ───────────────────────────────────────────────────────────

POINT_JSON = {
    "measurement": "cpu",
    "tags": {"host": "edge-01"},
    "fields": {"usage": 42.5},
    "time": 1700000000000,
}

BATCH_JSON = {
    "database": "batch_db",
    "retention_policy": "one_week",
    "tags": {"site": "plant-a"},
    "points": [
        {"measurement": "cpu", "fields": {"usage": 10}},
        {"measurement": "mem", "fields": {"used": 2048}},
    ],
}


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture()
def point_json() -> dict[str, Any]:
    return copy.deepcopy(POINT_JSON)


@pytest.fixture()
def batch_json() -> dict[str, Any]:
    return copy.deepcopy(BATCH_JSON)


@pytest.fixture()
def point() -> Point:
    return Point.model_validate(POINT_JSON)


@pytest.fixture()
def batch() -> BatchPoints:
    return BatchPoints.model_validate(BATCH_JSON)


@pytest.fixture()
def mock_influxdb() -> InfluxDBClient:
    client: InfluxDBClient = MagicMock(spec=InfluxDBClient)
    client.write = AsyncMock(return_value=None)  # type: ignore[method-assign]
    client.write_batch = AsyncMock(return_value=None)  # type: ignore[method-assign]
    client.ping = AsyncMock(return_value=True)  # type: ignore[method-assign]
    return client


@pytest.fixture()
def endpoint(mock_influxdb: InfluxDBClient) -> InfluxDBEndpoint:
    return InfluxDBEndpoint(
        influxdb=mock_influxdb,
        database_name="default_db",
        retention_policy="default",
    )


@pytest.fixture()
def batch_endpoint(mock_influxdb: InfluxDBClient) -> InfluxDBEndpoint:
    return InfluxDBEndpoint(
        influxdb=mock_influxdb,
        database_name="default_db",
        retention_policy="default",
        batch=True,
    )


def _client_with(settings: Settings, influx: InfluxDBClient) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_influxdb_client] = lambda: influx
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def test_client(mock_influxdb: InfluxDBClient) -> Iterator[TestClient]:
    settings = Settings(influx_database="default_db", influx_retention_policy="default")
    yield from _client_with(settings, mock_influxdb)


@pytest.fixture()
def batch_test_client(mock_influxdb: InfluxDBClient) -> Iterator[TestClient]:
    settings = Settings(
        influx_database="default_db", influx_retention_policy="default", influx_batch=True
    )
    yield from _client_with(settings, mock_influxdb)
