"""Application event sourcing – EventSerializer."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from profile_es.application.event_sourcing.codec import decode_dataclass, encode_value
from profile_es.application.event_sourcing.stored_event import StoredEvent
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.errors.infrastructure import SerializationError


class EventSerializer:
    """JSON codec for a closed set of registered domain event types.

    Example::

        serializer = EventSerializer([OrderPlaced, OrderCancelled])
        payload = serializer.serialise(OrderPlaced(order_id=oid))
        event = serializer.deserialise(stored_event)
    """

    def __init__(self, event_types: Iterable[type[DomainEvent]] = ()) -> None:
        self._types: dict[str, type[DomainEvent]] = {}
        for event_type in event_types:
            self.register(event_type)

    def register(self, event_type: type[DomainEvent]) -> None:
        self._types[event_type.__name__] = event_type

    def knows(self, event_type: str) -> bool:
        return event_type in self._types

    def serialise(self, event: DomainEvent) -> bytes:
        if event.event_type not in self._types:
            raise SerializationError(
                f"Event type '{event.event_type}' is not registered",
                payload_type=event.event_type,
            )
        data: dict[str, Any] = encode_value(event)
        return json.dumps(data, ensure_ascii=False).encode()

    def deserialise(self, stored: StoredEvent) -> DomainEvent:
        event_cls = self._types.get(stored.event_type)
        if event_cls is None:
            raise SerializationError(
                f"Event type '{stored.event_type}' is not registered",
                payload_type=stored.event_type,
            )
        try:
            raw = json.loads(stored.payload)
        except ValueError as exc:
            raise SerializationError(
                f"Malformed payload for '{stored.event_type}'",
                payload_type=stored.event_type,
                cause=exc,
            ) from exc
        event: DomainEvent = decode_dataclass(event_cls, raw)
        return event


__all__ = ["EventSerializer"]
