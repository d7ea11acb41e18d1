"""FastAPI dependency providers.

The client, endpoint and producer are created here and injected via
``Depends``.  Tests override these functions via ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from influx_bridge.clients.influxdb import InfluxDBClient
from influx_bridge.config import Settings
from influx_bridge.endpoint import InfluxDBEndpoint
from influx_bridge.producer import InfluxDBProducer


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def get_influxdb_client(settings: Settings = Depends(get_settings)) -> InfluxDBClient:
    return InfluxDBClient(
        url=settings.influx_url,
        username=settings.influx_username,
        password=settings.influx_password,
        token=settings.influx_token,
        timeout=settings.influx_timeout,
    )


def get_endpoint(
    settings: Settings = Depends(get_settings),
    influx: InfluxDBClient = Depends(get_influxdb_client),
) -> InfluxDBEndpoint:
    return InfluxDBEndpoint.from_settings(settings, influx)


def get_producer(endpoint: InfluxDBEndpoint = Depends(get_endpoint)) -> InfluxDBProducer:
    return endpoint.create_producer()
