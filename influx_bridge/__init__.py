"""InfluxDB bridge – forwards pipeline messages to InfluxDB."""
