"""Application event sourcing – EventSourcedRepository.

Loading goes through the reconciliation procedure: resume from the latest
snapshot when one exists, otherwise replay the whole stream.  Both paths end
in the same state and version for the same history.
"""

from __future__ import annotations

import abc
import json
from typing import Any, Callable, Generic, TypeVar

from profile_es.kernel.ddd.event_sourced import EventSourcedAggregate
from profile_es.application.event_sourcing.codec import decode_dataclass, encode_value
from profile_es.application.event_sourcing.serializer import EventSerializer
from profile_es.application.event_sourcing.snapshot import SnapshotRecord, SnapshotStore
from profile_es.application.event_sourcing.store import EventStore
from profile_es.application.event_sourcing.stored_event import StoredEvent
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.errors.application import ApplicationError
from profile_es.kernel.errors.infrastructure import SerializationError, StreamInconsistencyError
from profile_es.kernel.types.ids import EntityId
from profile_es.observability.logging import get_logger

T = TypeVar("T", bound=EventSourcedAggregate)

logger = get_logger(__name__)


class EventSourcedRepository(Generic[T], abc.ABC):
    """Generic repository for event-sourced aggregates.

    Example::

        class OrderRepository(EventSourcedRepository[Order]):
            def _aggregate_class(self) -> type[Order]:
                return Order

        repo = OrderRepository(store, EventSerializer(ORDER_EVENTS), snapshots)
        order = await repo.load(order_id)
        order.place()
        await repo.save(order)

    ``snapshot_every`` > 0 takes a snapshot whenever a save crosses a multiple
    of that many events.
    """

    def __init__(
        self,
        store: EventStore,
        serializer: EventSerializer,
        snapshots: SnapshotStore | None = None,
        *,
        snapshot_every: int = 0,
        metadata_factory: Callable[[DomainEvent], dict[str, Any]] | None = None,
    ) -> None:
        if snapshot_every < 0:
            raise ValueError("snapshot_every must be >= 0")
        self._store = store
        self._serializer = serializer
        self._snapshots = snapshots
        self._snapshot_every = snapshot_every
        self._metadata_factory = metadata_factory or (lambda _: {})

    @abc.abstractmethod
    def _aggregate_class(self) -> type[T]:
        """Return the concrete aggregate type."""

    async def load(self, agg_id: EntityId) -> T | None:
        """Rebuild the current state; ``None`` when the stream is empty."""
        return await self._reconcile(agg_id, to_version=None)

    async def load_at(self, agg_id: EntityId, version: int) -> T | None:
        """Rebuild the state as it was after event *version*."""
        return await self._reconcile(agg_id, to_version=version)

    async def _reconcile(self, agg_id: EntityId, to_version: int | None) -> T | None:
        cls = self._aggregate_class()
        stream_id = cls.stream_id_for(agg_id)

        record = None
        if self._snapshots is not None:
            record = await self._snapshots.load_latest(stream_id)
            if record is not None and to_version is not None and record.version > to_version:
                record = None

        if record is not None:
            agg = self._restore(cls, agg_id, record)
            events = await self._store.read_stream(
                stream_id, from_version=record.version, to_version=to_version
            )
        else:
            events = await self._store.read_stream(stream_id, to_version=to_version)
            if not events:
                logger.debug("repository.not_found", stream_id=stream_id)
                return None
            agg = cls(agg_id)

        self._replay(agg, stream_id, events)
        logger.debug(
            "repository.loaded",
            stream_id=stream_id,
            snapshot_version=record.version if record is not None else None,
            replayed=len(events),
            version=agg.version,
        )
        return agg

    def _restore(self, cls: type[T], agg_id: EntityId, record: SnapshotRecord) -> T:
        try:
            raw = json.loads(record.state_bytes)
        except ValueError as exc:
            raise SerializationError(
                f"Malformed snapshot for '{record.stream_id}'",
                payload_type=cls.state_type.__name__,
                cause=exc,
            ) from exc
        state = decode_dataclass(cls.state_type, raw)
        return cls.from_snapshot(agg_id, state, record.version)

    def _replay(self, agg: T, stream_id: str, events: list[StoredEvent]) -> None:
        for stored in events:
            expected = agg.version + 1
            if stored.version != expected:
                raise StreamInconsistencyError(stream_id, expected, stored.version)
            agg.replay(self._serializer.deserialise(stored))

    async def save(self, agg: T, *, snapshot: bool = False) -> None:
        """Append pending events, then drain them from the aggregate."""
        pending = agg.pending_events
        if pending:
            await self._append(agg, list(pending))
        if snapshot or self._threshold_crossed(agg.version - len(pending), agg.version):
            await self.take_snapshot(agg)

    async def _append(self, agg: T, domain_events: list[DomainEvent]) -> None:
        cls = self._aggregate_class()
        stream_id = cls.stream_id_for(agg.id)
        prior_version = agg.version - len(domain_events)

        stored = [
            StoredEvent(
                stream_id=stream_id,
                version=prior_version + i + 1,
                event_type=de.event_type,
                payload=self._serializer.serialise(de),
                metadata=self._metadata_factory(de),
                occurred_at=de.occurred_at,
            )
            for i, de in enumerate(domain_events)
        ]

        if prior_version == 0:
            await self._store.start_stream(stream_id, stored)
        else:
            await self._store.append(stream_id, stored, expected_version=prior_version)
        agg.drain_pending_events()
        logger.info(
            "repository.saved",
            stream_id=stream_id,
            appended=len(stored),
            version=agg.version,
        )

    def _threshold_crossed(self, before: int, after: int) -> bool:
        if self._snapshots is None or self._snapshot_every == 0:
            return False
        return after // self._snapshot_every > before // self._snapshot_every

    async def take_snapshot(self, agg: T) -> None:
        """Materialise *agg* at its current version in the snapshot store."""
        if self._snapshots is None:
            raise ApplicationError("No snapshot store configured")
        if agg.pending_events:
            raise ApplicationError(
                "Cannot snapshot an aggregate with unsaved events",
                detail={"pending": len(agg.pending_events)},
            )
        stream_id = self._aggregate_class().stream_id_for(agg.id)
        state_bytes = json.dumps(encode_value(agg.snapshot_state()), ensure_ascii=False).encode()
        await self._snapshots.save(stream_id, agg.version, state_bytes)
        logger.info("repository.snapshot_taken", stream_id=stream_id, version=agg.version)


__all__ = ["EventSourcedRepository"]
