"""InfluxDB producer – writes the body of each exchange to InfluxDB.

For every exchange the producer:
1.  Resolves the database name and retention policy from the exchange headers,
    falling back to the endpoint defaults.
2.  Converts the body to a :class:`Point` (or :class:`BatchPoints` when the
    endpoint is in batch mode).  A body that cannot be converted raises
    :class:`InvalidPayloadError` to the caller.
3.  Writes it through the endpoint's client.  A failed write is wrapped in
    :class:`InfluxBridgeError` and stored on ``exchange.exception``; it is
    never raised.
"""

from __future__ import annotations

import logging

from influx_bridge.clients.influxdb import InfluxDBClient
from influx_bridge.constants import DBNAME_HEADER, RETENTION_POLICY_HEADER
from influx_bridge.endpoint import InfluxDBEndpoint
from influx_bridge.exceptions import InfluxBridgeError
from influx_bridge.exchange import Exchange
from influx_bridge.points import BatchPoints, Point

logger = logging.getLogger(__name__)


def _header_or_default(exchange: Exchange, header: str, default: str | None) -> str | None:
    # A header that is present wins, even when it is an empty string
    value = exchange.get_header(header)
    return value if value is not None else default


class InfluxDBProducer:
    """Forwards exchanges to InfluxDB through an already connected client."""

    def __init__(self, endpoint: InfluxDBEndpoint | None) -> None:
        if endpoint is None:
            raise ValueError("Can't create a producer when the endpoint is None")
        if endpoint.influxdb is None:
            raise ValueError("Can't create a producer when the database connection is None")
        self.endpoint = endpoint
        self.connection: InfluxDBClient = endpoint.influxdb

    def database_name(self, exchange: Exchange) -> str | None:
        return _header_or_default(exchange, DBNAME_HEADER, self.endpoint.database_name)

    def retention_policy(self, exchange: Exchange) -> str | None:
        return _header_or_default(
            exchange, RETENTION_POLICY_HEADER, self.endpoint.retention_policy
        )

    async def process(self, exchange: Exchange) -> None:
        """Write the exchange body to InfluxDB.

        Raises:
            InvalidPayloadError: if the body is not a point (or batch of points
                in batch mode).  Write failures are recorded on the exchange.
        """
        database = self.database_name(exchange)
        retention_policy = self.retention_policy(exchange)

        if not self.endpoint.batch:
            point = exchange.get_mandatory_body(Point)
            try:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Writing point %s", point.line_protocol())
                await self.connection.write(database, retention_policy, point)
            except Exception as exc:
                logger.warning("InfluxDB write to %s failed: %s", database, exc)
                exchange.exception = InfluxBridgeError(exc)
        else:
            batch = exchange.get_mandatory_body(BatchPoints)
            try:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Writing BatchPoints %s", batch.line_protocol())
                await self.connection.write_batch(batch)
            except Exception as exc:
                logger.warning("InfluxDB batch write to %s failed: %s", batch.database, exc)
                exchange.exception = InfluxBridgeError(exc)
