"""Application — Event Sourcing."""

from profile_es.kernel.ddd.event_sourced import EventSourcedAggregate
from profile_es.application.event_sourcing.projector import Projector
from profile_es.application.event_sourcing.repository import EventSourcedRepository
from profile_es.application.event_sourcing.serializer import EventSerializer
from profile_es.application.event_sourcing.snapshot import (
    InMemorySnapshotStore,
    SnapshotRecord,
    SnapshotStore,
)
from profile_es.application.event_sourcing.store import (
    EventHandler,
    EventStore,
    InMemoryEventStore,
    OptimisticConcurrencyError,
)
from profile_es.application.event_sourcing.stored_event import StoredEvent

__all__ = [
    "EventHandler",
    "EventSerializer",
    "EventSourcedAggregate",
    "EventSourcedRepository",
    "EventStore",
    "InMemoryEventStore",
    "InMemorySnapshotStore",
    "OptimisticConcurrencyError",
    "Projector",
    "SnapshotRecord",
    "SnapshotStore",
    "StoredEvent",
]
