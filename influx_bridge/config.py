"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All settings are read from environment variables (case-insensitive)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── InfluxDB connection ───────────────────────────────────────────────────
    influx_url: str = "http://influxdb:8086"
    influx_username: str = ""
    influx_password: str = ""
    # Takes precedence over username/password when set (InfluxDB 2.x v1 compat API)
    influx_token: str = ""
    influx_timeout: float = 10.0

    # ── Endpoint defaults ─────────────────────────────────────────────────────
    # Used when a message carries no database / retention policy header
    influx_database: str = "iot-metrics"
    influx_retention_policy: str = "default"
    # When True, message bodies are batches of points instead of single points
    influx_batch: bool = False
