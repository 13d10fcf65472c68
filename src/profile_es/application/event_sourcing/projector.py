"""Application event sourcing – Projector abstract base class."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from profile_es.application.event_sourcing.stored_event import StoredEvent

E = TypeVar("E")


class Projector(Generic[E], abc.ABC):
    """Updates a read model by processing a stream of stored events.

    The type parameter *E* is the read-model record this projector produces.
    Events must be handed over in append order per stream; :meth:`project`
    has the signature :meth:`EventStore.subscribe` expects, so a projector
    can be fed live::

        store.subscribe(projector.project)
    """

    @abc.abstractmethod
    async def project(self, event: StoredEvent) -> None:
        """Process a single stored event and update the read model."""

    async def project_all(self, events: list[StoredEvent]) -> None:
        """Process a list of events in order (catch-up / rebuild)."""
        for event in events:
            await self.project(event)


__all__ = ["Projector"]
