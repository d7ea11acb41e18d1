"""Errors raised or recorded by the InfluxDB producer."""

from __future__ import annotations


class InfluxBridgeError(Exception):
    """A write to InfluxDB failed; wraps the underlying cause.

    Instances are attached to the exchange rather than raised.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
        self.__cause__ = cause


class InvalidPayloadError(Exception):
    """The exchange body cannot be converted to the type the producer needs."""
