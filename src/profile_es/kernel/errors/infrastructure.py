"""Infrastructure errors — persistence boundary failures."""

from __future__ import annotations

from typing import Any

from profile_es.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class StreamInconsistencyError(InfrastructureError):
    """A stored stream (or snapshot) does not line up with the aggregate version."""

    default_code = "stream_inconsistency"

    def __init__(self, stream_id: str, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            f"Stream '{stream_id}' is inconsistent: "
            f"expected event version {expected}, found {actual}",
            detail={"stream_id": stream_id, "expected": expected, "actual": actual},
            **kwargs,
        )
        self.stream_id = stream_id
        self.expected = expected
        self.actual = actual


__all__ = [
    "InfrastructureError",
    "SerializationError",
    "StreamInconsistencyError",
]
