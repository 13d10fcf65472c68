"""EventSourcedAggregate — aggregate rebuilt from its stream or a snapshot."""

from __future__ import annotations

import abc
from typing import Any, ClassVar, TypeVar

from profile_es.kernel.ddd.aggregate import AggregateRoot
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.errors.domain import UnknownEventError
from profile_es.kernel.types.ids import EntityId

A = TypeVar("A", bound="EventSourcedAggregate")


class EventSourcedAggregate(AggregateRoot, abc.ABC):
    """Aggregate root that can be rebuilt from its stream or from a snapshot.

    Subclasses keep their fields in a dataclass named by ``state_type`` and
    must be constructible as ``cls(agg_id)`` without emitting anything; that
    blank instance is what replay starts from.

    Example::

        class Order(EventSourcedAggregate):
            state_type = OrderState

            def __init__(self, id: EntityId) -> None:
                super().__init__(id)
                self._state = OrderState()

            def _try_apply_domain_event(self, event: DomainEvent) -> bool:
                match event:
                    case OrderPlaced():
                        self._state.status = "PLACED"
                    case _:
                        return False
                return True

            def snapshot_state(self) -> OrderState:
                return dataclasses.replace(self._state)

            def _restore_state(self, state: OrderState) -> None:
                self._state = dataclasses.replace(state)
    """

    state_type: ClassVar[type[Any]]

    @classmethod
    def stream_prefix(cls) -> str:
        """Prefix used to build the stream identifier (defaults to class name)."""
        return cls.__name__

    @classmethod
    def stream_id_for(cls, agg_id: EntityId) -> str:
        """Build the canonical stream id: ``"<Prefix>-<id>"``."""
        return f"{cls.stream_prefix()}-{agg_id}"

    def replay(self, event: DomainEvent) -> None:
        """Apply a persisted event without buffering it.

        Persisted history must be fully understood, so an unrecognised event
        always raises here.
        """
        if not self._apply(event):
            raise UnknownEventError(type(self).__name__, event.event_type)

    @abc.abstractmethod
    def snapshot_state(self) -> Any:
        """Return a detached copy of the aggregate's state dataclass."""

    @abc.abstractmethod
    def _restore_state(self, state: Any) -> None:
        """Replace the aggregate's state with *state* (from a snapshot)."""

    @classmethod
    def from_snapshot(cls: type[A], agg_id: EntityId, state: Any, version: int) -> A:
        """Rebuild an aggregate materialised at *version*."""
        agg = cls(agg_id)
        agg._restore_state(state)  # noqa: SLF001
        agg._version = version  # noqa: SLF001
        return agg


__all__ = ["EventSourcedAggregate"]
