"""Customers – CustomerInfo read model and its projection.

The read model is derived from the event stream alone; it never looks at a
:class:`Customer` instance.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from profile_es.application.event_sourcing import EventSerializer, Projector, StoredEvent
from profile_es.domain.customer import (
    Address,
    CustomerRegistered,
    SubscriptionCanceled,
    SubscriptionStarted,
)
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.types.ids import EntityId
from profile_es.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class CustomerInfo:
    """Read-optimised view of a customer."""

    customer_id: EntityId
    first_name: str
    last_name: str
    invoice_address: Address
    shipping_address: Address
    subscribed: bool


def apply_customer_info(current: CustomerInfo | None, event: DomainEvent) -> CustomerInfo | None:
    """Fold one event into the read model record for its customer."""
    match event:
        case CustomerRegistered():
            return CustomerInfo(
                customer_id=event.customer_id,
                first_name=event.first_name,
                last_name=event.last_name,
                invoice_address=event.invoice_address,
                shipping_address=event.shipping_address,
                subscribed=True,
            )
        case SubscriptionStarted() if current is not None:
            return dataclasses.replace(current, subscribed=True)
        case SubscriptionCanceled() if current is not None:
            return dataclasses.replace(current, subscribed=False)
        case _:
            return current


def fold_customer_info(events: Iterable[DomainEvent]) -> CustomerInfo | None:
    info: CustomerInfo | None = None
    for event in events:
        info = apply_customer_info(info, event)
    return info


class CustomerInfoProjection(Projector[CustomerInfo]):
    """Keeps :class:`CustomerInfo` records current from stored events.

    Subscribe it to the event store so it sees every append::

        store.subscribe(projection.project)

    Stored events of types the serializer does not know belong to other
    streams and are skipped.
    """

    def __init__(self, serializer: EventSerializer) -> None:
        self._serializer = serializer
        self._infos: dict[EntityId, CustomerInfo] = {}

    async def project(self, event: StoredEvent) -> None:
        if not self._serializer.knows(event.event_type):
            logger.debug(
                "projection.event_skipped",
                stream_id=event.stream_id,
                event_type=event.event_type,
            )
            return
        domain_event = self._serializer.deserialise(event)
        customer_id: EntityId = domain_event.customer_id  # type: ignore[attr-defined]
        current = self._infos.get(customer_id)
        updated = apply_customer_info(current, domain_event)
        if updated is None:
            logger.warning(
                "projection.orphan_event",
                stream_id=event.stream_id,
                event_type=event.event_type,
            )
            return
        self._infos[customer_id] = updated

    def get(self, customer_id: EntityId) -> CustomerInfo | None:
        return self._infos.get(customer_id)

    def all(self) -> list[CustomerInfo]:
        return list(self._infos.values())


__all__ = [
    "CustomerInfo",
    "CustomerInfoProjection",
    "apply_customer_info",
    "fold_customer_info",
]
