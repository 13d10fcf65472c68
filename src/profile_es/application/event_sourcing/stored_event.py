"""Application event sourcing – StoredEvent."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any


@dataclasses.dataclass(frozen=True)
class StoredEvent:
    """An event as persisted in the event store.

    ``payload`` is the serialised representation of the original domain event
    (JSON bytes, see :class:`EventSerializer`).  ``metadata`` carries
    infrastructure-level concerns (correlation id, causation id, …).
    """

    stream_id: str
    """Identifies the aggregate stream (``"<AggregateType>-<id>"``)."""

    version: int
    """1-based, monotonically increasing sequence number within the stream."""

    event_type: str
    """Logical name of the domain event (its class name)."""

    payload: bytes

    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)

    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC)
    )


__all__ = ["StoredEvent"]
