"""Point and BatchPoints – the write units accepted by the producer.

Both render themselves as InfluxDB line protocol so the HTTP client can post
them unchanged to the ``/write`` endpoint.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field, field_validator

Precision = Literal["ns", "us", "ms", "s"]
FieldValue = bool | int | float | str

# Nanoseconds per unit, used to rescale timestamps between precisions
_NS_PER_UNIT: dict[str, int] = {"ns": 1, "us": 1_000, "ms": 1_000_000, "s": 1_000_000_000}


def _escape_measurement(value: str) -> str:
    return value.replace(",", r"\,").replace(" ", r"\ ")


def _escape_key(value: str) -> str:
    """Escape a tag key, tag value or field key."""
    return value.replace(",", r"\,").replace("=", r"\=").replace(" ", r"\ ")


def _reject_line_breaks(value: str, what: str) -> str:
    # A line break would end the point and start another one
    if "\n" in value or "\r" in value:
        raise ValueError(f"{what} must not contain line breaks: {value!r}")
    return value


def _check_tags(tags: dict[str, str]) -> dict[str, str]:
    for key, val in tags.items():
        _reject_line_breaks(key, "tag key")
        _reject_line_breaks(val, "tag value")
    return tags


def _format_field(value: FieldValue) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return repr(value)
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class Point(BaseModel):
    """A single timestamped measurement."""

    measurement: str = Field(..., min_length=1)
    tags: dict[str, str] = Field(default_factory=dict)
    fields: dict[str, FieldValue]
    time: int | None = Field(None, description="Timestamp expressed in *precision* units")
    precision: Precision = "ms"

    @field_validator("measurement")
    @classmethod
    def _check_measurement(cls, value: str) -> str:
        return _reject_line_breaks(value, "measurement")

    @field_validator("tags")
    @classmethod
    def _check_point_tags(cls, value: dict[str, str]) -> dict[str, str]:
        return _check_tags(value)

    @field_validator("fields")
    @classmethod
    def _check_fields(cls, value: dict[str, FieldValue]) -> dict[str, FieldValue]:
        # InfluxDB rejects a line without at least one field
        if not value:
            raise ValueError("a point needs at least one field")
        for key, val in value.items():
            _reject_line_breaks(key, "field key")
            if isinstance(val, str):
                _reject_line_breaks(val, "string field")
            elif isinstance(val, float) and not math.isfinite(val):
                raise ValueError(f"field {key!r} is not a finite number: {val!r}")
        return value

    def line_protocol(
        self,
        precision: Precision | None = None,
        extra_tags: dict[str, str] | None = None,
    ) -> str:
        """Render the point as one line of InfluxDB line protocol.

        Args:
            precision:  Target timestamp precision; defaults to the point's own.
            extra_tags: Tags merged underneath the point's tags (the point wins).
        """
        tags = {**(extra_tags or {}), **self.tags}
        line = _escape_measurement(self.measurement)
        tag_str = ",".join(
            f"{_escape_key(k)}={_escape_key(v)}" for k, v in sorted(tags.items()) if v
        )
        if tag_str:
            line = f"{line},{tag_str}"
        line += " " + ",".join(
            f"{_escape_key(k)}={_format_field(v)}" for k, v in self.fields.items()
        )
        if self.time is not None:
            target = precision or self.precision
            ts = self.time * _NS_PER_UNIT[self.precision] // _NS_PER_UNIT[target]
            line += f" {ts}"
        return line


class BatchPoints(BaseModel):
    """Several points bound for one database / retention policy."""

    database: str = Field(..., min_length=1)
    retention_policy: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)
    consistency: Literal["any", "one", "quorum", "all"] = "one"
    precision: Precision = "ms"
    points: list[Point] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _check_batch_tags(cls, value: dict[str, str]) -> dict[str, str]:
        return _check_tags(value)

    def line_protocol(self) -> str:
        return "\n".join(
            p.line_protocol(precision=self.precision, extra_tags=self.tags)
            for p in self.points
        )
