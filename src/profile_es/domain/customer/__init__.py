"""Domain — Customer aggregate, value objects and events."""

from profile_es.domain.customer.aggregate import Customer, CustomerState
from profile_es.domain.customer.events import (
    CUSTOMER_EVENTS,
    CustomerRegistered,
    SubscriptionCanceled,
    SubscriptionStarted,
)
from profile_es.domain.customer.values import Address, Subscription

__all__ = [
    "CUSTOMER_EVENTS",
    "Address",
    "Customer",
    "CustomerRegistered",
    "CustomerState",
    "Subscription",
    "SubscriptionCanceled",
    "SubscriptionStarted",
]
