"""Application event sourcing – EventStore port and InMemoryEventStore."""

from __future__ import annotations

import abc
from collections.abc import Awaitable, Callable

from profile_es.application.event_sourcing.stored_event import StoredEvent
from profile_es.kernel.errors.domain import ConflictError
from profile_es.observability.logging import get_logger

EventHandler = Callable[[StoredEvent], Awaitable[None]]

logger = get_logger(__name__)


class OptimisticConcurrencyError(ConflictError):
    """Raised when the expected stream version does not match the current one.

    The caller may reload the aggregate and retry the command.
    """

    default_code = "optimistic_concurrency_conflict"

    def __init__(self, stream_id: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Concurrency conflict on stream '{stream_id}': "
            f"expected version {expected}, found {actual}",
            detail={"stream_id": stream_id, "expected": expected, "actual": actual},
        )
        self.stream_id = stream_id
        self.expected = expected
        self.actual = actual


class EventStore(abc.ABC):
    """Port — durable append-only event store.

    Implementations must return a stream's events in append order.
    ``expected_version`` is used for **optimistic concurrency control**:
    the store raises :class:`OptimisticConcurrencyError` if the stream's
    actual version differs from it.

    Handlers registered with :meth:`subscribe` receive every appended event,
    per stream in append order, once the append succeeded.  This is the feed
    projections consume.  A handler that raises is logged and skipped; the
    append and the other handlers are unaffected.
    """

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        """Register *handler* for events appended from now on."""
        self._handlers.append(handler)

    async def _publish(self, events: list[StoredEvent]) -> None:
        # the append is already durable; a failing handler must not undo it
        for event in events:
            for handler in self._handlers:
                try:
                    await handler(event)
                except Exception:
                    logger.exception(
                        "event_store.handler_failed",
                        stream_id=event.stream_id,
                        version=event.version,
                        event_type=event.event_type,
                        handler=getattr(handler, "__qualname__", repr(handler)),
                    )

    async def start_stream(self, stream_id: str, events: list[StoredEvent]) -> None:
        """Create *stream_id* with its first *events*."""
        await self.append(stream_id, events, expected_version=0)

    @abc.abstractmethod
    async def append(
        self,
        stream_id: str,
        events: list[StoredEvent],
        expected_version: int,
    ) -> None:
        """Append *events* to *stream_id*, enforcing optimistic locking."""

    @abc.abstractmethod
    async def read_stream(
        self,
        stream_id: str,
        *,
        from_version: int = 0,
        to_version: int | None = None,
    ) -> list[StoredEvent]:
        """Return events with ``from_version < version <= to_version``."""


class InMemoryEventStore(EventStore):
    """In-memory :class:`EventStore` for tests and local development."""

    def __init__(self) -> None:
        super().__init__()
        # stream_id → ordered list of StoredEvent
        self._streams: dict[str, list[StoredEvent]] = {}

    async def append(
        self,
        stream_id: str,
        events: list[StoredEvent],
        expected_version: int,
    ) -> None:
        stream = self._streams.get(stream_id, [])
        actual_version = len(stream)
        if actual_version != expected_version:
            raise OptimisticConcurrencyError(stream_id, expected_version, actual_version)
        self._streams[stream_id] = stream + list(events)
        await self._publish(list(events))

    async def read_stream(
        self,
        stream_id: str,
        *,
        from_version: int = 0,
        to_version: int | None = None,
    ) -> list[StoredEvent]:
        stream = self._streams.get(stream_id, [])
        return [
            e
            for e in stream
            if e.version > from_version and (to_version is None or e.version <= to_version)
        ]

    def stream_version(self, stream_id: str) -> int:
        """Return the current number of events in *stream_id*."""
        return len(self._streams.get(stream_id, []))

    def all_events(self, stream_id: str | None = None) -> list[StoredEvent]:
        """Return all stored events, optionally filtered by *stream_id*."""
        if stream_id is not None:
            return list(self._streams.get(stream_id, []))
        return [e for stream in self._streams.values() for e in stream]


__all__ = ["EventHandler", "EventStore", "InMemoryEventStore", "OptimisticConcurrencyError"]
