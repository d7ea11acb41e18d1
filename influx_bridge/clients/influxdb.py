"""InfluxDB HTTP write client.

Uses the InfluxDB 1.x ``/write`` endpoint (line protocol) via httpx.  The same
endpoint is served by InfluxDB 2.x through its v1 compatibility API, where the
database / retention policy pair is mapped onto a bucket.
"""

from __future__ import annotations

import logging

import httpx

from influx_bridge.points import BatchPoints, Point

logger = logging.getLogger(__name__)


class InfluxDBError(Exception):
    """Raised when an InfluxDB write operation fails."""


class InfluxDBClient:
    """Async client for the InfluxDB line-protocol write endpoint."""

    def __init__(
        self,
        url: str,
        username: str = "",
        password: str = "",
        token: str = "",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url.rstrip("/")
        self._username = username
        self._password = password
        self._token = token
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def write(self, database: str, retention_policy: str | None, point: Point) -> None:
        """Write a single point.

        Raises:
            InfluxDBError: on a non-2xx response.
        """
        params = {"db": database, "precision": point.precision}
        if retention_policy:
            params["rp"] = retention_policy
        await self._post_lines(point.line_protocol(), params)

    async def write_batch(self, batch: BatchPoints) -> None:
        """Write every point of *batch* in one request.

        Database, retention policy, precision and consistency come from the
        batch itself.

        Raises:
            InfluxDBError: on a non-2xx response.
        """
        if not batch.points:
            logger.debug("Empty batch for database %s – nothing to write.", batch.database)
            return
        params = {
            "db": batch.database,
            "precision": batch.precision,
            "consistency": batch.consistency,
        }
        if batch.retention_policy:
            params["rp"] = batch.retention_policy
        await self._post_lines(batch.line_protocol(), params)

    async def ping(self) -> bool:
        """Return ``True`` if the server answers ``/ping`` with a 2xx status."""
        try:
            async with self._client() as client:
                resp = await client.get(f"{self._url}/ping", timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.warning("InfluxDB ping to %s failed: %s", self._url, exc)
            return False
        return resp.is_success

    # ── Internal helpers ─────────────────────────────────────────────────────

    def _client(self) -> httpx.AsyncClient:
        headers: dict[str, str] = {}
        auth: tuple[str, str] | None = None
        if self._token:
            headers["Authorization"] = f"Token {self._token}"
        elif self._username:
            auth = (self._username, self._password)
        return httpx.AsyncClient(headers=headers, auth=auth, transport=self._transport)

    async def _post_lines(self, body: str, params: dict[str, str]) -> None:
        async with self._client() as client:
            resp = await client.post(
                f"{self._url}/write",
                params=params,
                headers={"Content-Type": "text/plain; charset=utf-8"},
                content=body.encode(),
                timeout=self._timeout,
            )
        if not resp.is_success:
            raise InfluxDBError(
                f"InfluxDB write failed (HTTP {resp.status_code}): {resp.text}"
            )
