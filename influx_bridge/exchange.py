"""The message that flows through the pipeline into the producer.

An :class:`Exchange` is owned by whoever created it (the HTTP surface in this
service).  The producer only reads ``body`` / ``headers`` and writes the
``exception`` slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from influx_bridge.exceptions import InvalidPayloadError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class Exchange:
    body: Any = None
    headers: dict[str, Any] = field(default_factory=dict)
    exception: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.exception is not None

    def get_header(self, name: str) -> str | None:
        """Return header *name* as a string, or ``None`` if it is not set."""
        value = self.headers.get(name)
        if value is None:
            return None
        return str(value)

    def get_mandatory_body(self, type_: type[ModelT]) -> ModelT:
        """Return the body converted to *type_*.

        A dict body is validated field by field; a ``str`` / ``bytes`` body is
        parsed as JSON first.

        Raises:
            InvalidPayloadError: if the body is missing or cannot be converted.
        """
        body = self.body
        if isinstance(body, type_):
            return body
        try:
            if isinstance(body, dict):
                return type_.model_validate(body)
            if isinstance(body, (str, bytes, bytearray)):
                return type_.model_validate_json(body)
        except ValidationError as exc:
            raise InvalidPayloadError(
                f"Body cannot be converted to {type_.__name__}: {exc}"
            ) from exc
        raise InvalidPayloadError(
            f"No body available of type {type_.__name__}"
            f" (got {type(body).__name__})"
        )
