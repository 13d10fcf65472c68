"""Customer domain events."""

from __future__ import annotations

import dataclasses
from datetime import date

from profile_es.domain.customer.values import Address
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.types.ids import EntityId


@dataclasses.dataclass(frozen=True)
class CustomerRegistered(DomainEvent):
    customer_id: EntityId
    first_name: str
    last_name: str
    invoice_address: Address
    shipping_address: Address
    email_address: str


@dataclasses.dataclass(frozen=True)
class SubscriptionStarted(DomainEvent):
    customer_id: EntityId
    start_date: date


@dataclasses.dataclass(frozen=True)
class SubscriptionCanceled(DomainEvent):
    customer_id: EntityId
    end_date: date


CUSTOMER_EVENTS: tuple[type[DomainEvent], ...] = (
    CustomerRegistered,
    SubscriptionStarted,
    SubscriptionCanceled,
)

__all__ = [
    "CUSTOMER_EVENTS",
    "CustomerRegistered",
    "SubscriptionCanceled",
    "SubscriptionStarted",
]
