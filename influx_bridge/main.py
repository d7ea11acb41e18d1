import os

from fastapi import FastAPI

from influx_bridge.routers import health, write

app = FastAPI(
    title="InfluxDB Bridge",
    description=(
        "Glue service that forwards pipeline messages (points or batches of "
        "points) to InfluxDB."
    ),
    version="0.1.0",
    # root_path allows FastAPI to generate correct OpenAPI URLs when served
    # behind a reverse proxy at a sub-path (e.g. nginx /api/ prefix).
    root_path=os.getenv("ROOT_PATH", ""),
)

app.include_router(health.router)
app.include_router(write.router)
