"""Endpoint configuration for the InfluxDB producer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from influx_bridge.clients.influxdb import InfluxDBClient
from influx_bridge.constants import DEFAULT_RETENTION_POLICY

if TYPE_CHECKING:
    from influx_bridge.config import Settings
    from influx_bridge.producer import InfluxDBProducer


@dataclass
class InfluxDBEndpoint:
    """Defaults and the live client handle shared by every message.

    ``batch`` is fixed for the endpoint's lifetime: when set, message bodies
    are :class:`~influx_bridge.points.BatchPoints`, otherwise single points.
    """

    influxdb: InfluxDBClient | None
    database_name: str | None = None
    retention_policy: str = DEFAULT_RETENTION_POLICY
    batch: bool = False

    @classmethod
    def from_settings(cls, settings: Settings, influxdb: InfluxDBClient) -> InfluxDBEndpoint:
        return cls(
            influxdb=influxdb,
            database_name=settings.influx_database,
            retention_policy=settings.influx_retention_policy,
            batch=settings.influx_batch,
        )

    def create_producer(self) -> InfluxDBProducer:
        from influx_bridge.producer import InfluxDBProducer

        return InfluxDBProducer(self)
