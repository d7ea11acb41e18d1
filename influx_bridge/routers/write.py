"""POST /write – hand a message to the InfluxDB producer.

The JSON body is a point (or a batch of points when the service runs in batch
mode).  The optional ``X-InfluxDB-Database`` and ``X-InfluxDB-Retention-Policy``
request headers become exchange headers overriding the configured defaults.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Header, HTTPException

from influx_bridge.constants import DBNAME_HEADER, RETENTION_POLICY_HEADER
from influx_bridge.deps import get_producer
from influx_bridge.exceptions import InvalidPayloadError
from influx_bridge.exchange import Exchange
from influx_bridge.models import WriteResponse
from influx_bridge.points import BatchPoints, Point
from influx_bridge.producer import InfluxDBProducer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["write"])


@router.post(
    "/write",
    response_model=WriteResponse,
    summary="Write a point or a batch of points",
    description=(
        "Wraps the request in an exchange and passes it to the InfluxDB "
        "producer.  Returns 422 if the body is not a point (or batch), "
        "503 if the write to InfluxDB failed."
    ),
)
async def write(
    body: dict[str, Any] = Body(...),
    x_influxdb_database: str | None = Header(None),
    x_influxdb_retention_policy: str | None = Header(None),
    producer: InfluxDBProducer = Depends(get_producer),
) -> WriteResponse:
    headers: dict[str, Any] = {}
    if x_influxdb_database is not None:
        headers[DBNAME_HEADER] = x_influxdb_database
    if x_influxdb_retention_policy is not None:
        headers[RETENTION_POLICY_HEADER] = x_influxdb_retention_policy
    exchange = Exchange(body=body, headers=headers)
    body_type = BatchPoints if producer.endpoint.batch else Point

    try:
        # Convert once; the producer then receives the typed body as-is
        exchange.body = exchange.get_mandatory_body(body_type)
        await producer.process(exchange)
    except InvalidPayloadError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if exchange.failed:
        raise HTTPException(
            status_code=503,
            detail=f"InfluxDB write failed: {exchange.exception}",
        ) from exchange.exception

    if isinstance(exchange.body, BatchPoints):
        batch = exchange.body
        return WriteResponse(
            status="written",
            database=batch.database,
            retention_policy=batch.retention_policy,
            points_written=len(batch.points),
        )
    return WriteResponse(
        status="written",
        database=producer.database_name(exchange),
        retention_policy=producer.retention_policy(exchange),
        points_written=1,
    )
