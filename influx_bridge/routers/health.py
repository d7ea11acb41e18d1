"""GET /health – liveness probe; GET /health/influxdb – InfluxDB reachability."""

from fastapi import APIRouter, Depends, HTTPException

from influx_bridge.clients.influxdb import InfluxDBClient
from influx_bridge.deps import get_influxdb_client
from influx_bridge.models import HealthResponse

router = APIRouter(tags=["ops"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return service liveness status."""
    return HealthResponse()


@router.get("/health/influxdb", response_model=HealthResponse)
async def influxdb_health(
    influx: InfluxDBClient = Depends(get_influxdb_client),
) -> HealthResponse:
    """Return 200 if InfluxDB answers ``/ping``, 503 otherwise."""
    if not await influx.ping():
        raise HTTPException(status_code=503, detail=f"InfluxDB unreachable at {influx.url}")
    return HealthResponse(service="influxdb")
