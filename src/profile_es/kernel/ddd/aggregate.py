"""AggregateRoot — emits, applies and buffers domain events."""

from __future__ import annotations

import abc
from typing import ClassVar

import structlog

from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.ddd.entity import Entity
from profile_es.kernel.errors.domain import UnknownEventError
from profile_es.kernel.types.ids import EntityId

logger = structlog.get_logger(__name__)


class AggregateRoot(Entity, abc.ABC):
    """Aggregate root: the emit/apply protocol every aggregate reuses.

    State changes only happen by emitting an event: :meth:`emit` routes it
    through :meth:`_try_apply_domain_event` and, when a branch handled it,
    bumps :attr:`version` by one and buffers the event in
    :attr:`pending_events`.  The buffer is emptied by the persistence
    boundary via :meth:`drain_pending_events` once the append succeeded.

    An event the subclass does not recognise is dropped: it is not buffered
    and the version does not move.  Set ``raise_on_unknown_event = True`` on a
    subclass to get :class:`UnknownEventError` instead.
    """

    raise_on_unknown_event: ClassVar[bool] = False

    _version: int
    _pending_events: list[DomainEvent]

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        super().__init__(id)
        self._version = 0
        self._pending_events = []

    @property
    def version(self) -> int:
        return self._version

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Events applied in memory but not yet confirmed persisted."""
        return tuple(self._pending_events)

    def drain_pending_events(self) -> list[DomainEvent]:
        """Return the buffered events in emission order and clear the buffer."""
        events = list(self._pending_events)
        self._pending_events.clear()
        return events

    def emit(self, event: DomainEvent) -> bool:
        """Apply *event* and buffer it; return ``False`` when it was dropped."""
        if not self._apply(event):
            if self.raise_on_unknown_event:
                raise UnknownEventError(type(self).__name__, event.event_type)
            logger.warning(
                "aggregate.event_ignored",
                aggregate_type=type(self).__name__,
                aggregate_id=str(self.id),
                event_type=event.event_type,
            )
            return False
        self._pending_events.append(event)
        return True

    def _apply(self, event: DomainEvent) -> bool:
        """Dispatch *event* to the subclass and advance the version on success."""
        if not self._try_apply_domain_event(event):
            return False
        self._version += 1
        return True

    @abc.abstractmethod
    def _try_apply_domain_event(self, event: DomainEvent) -> bool:
        """Mutate state for *event*; return ``False`` for unrecognised types."""


__all__ = ["AggregateRoot"]
