"""Header names and defaults shared by the producer and the HTTP surface."""

# Exchange header overriding the endpoint's database name
DBNAME_HEADER = "InfluxDB.databaseName"
# Exchange header overriding the endpoint's retention policy
RETENTION_POLICY_HEADER = "InfluxDB.retentionPolicy"

# HTTP request headers mapped onto the exchange headers above
HTTP_DBNAME_HEADER = "X-InfluxDB-Database"
HTTP_RETENTION_POLICY_HEADER = "X-InfluxDB-Retention-Policy"

DEFAULT_RETENTION_POLICY = "default"
