"""Customer aggregate."""

from __future__ import annotations

import dataclasses

from profile_es.domain.customer.events import (
    CustomerRegistered,
    SubscriptionCanceled,
    SubscriptionStarted,
)
from profile_es.domain.customer.values import Address, Subscription
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.ddd.event_sourced import EventSourcedAggregate
from profile_es.kernel.errors.domain import InvariantViolationError
from profile_es.kernel.time.clock import Clock, SystemClock
from profile_es.kernel.types.ids import EntityId


@dataclasses.dataclass
class CustomerState:
    """Fields of a :class:`Customer`; written only by its apply branches."""

    first_name: str = ""
    last_name: str = ""
    invoice_address: Address | None = None
    shipping_address: Address | None = None
    email_address: str = ""
    subscription: Subscription | None = None


class Customer(EventSourcedAggregate):
    """A registered customer and their newsletter subscription.

    Create customers with :meth:`register`.  ``Customer(customer_id)`` builds
    the blank instance replay starts from and emits nothing.

    Subscription commands are not guarded: cancelling twice or subscribing
    while active records another event each time.
    """

    state_type = CustomerState

    def __init__(self, customer_id: EntityId) -> None:
        super().__init__(customer_id)
        self._state = CustomerState()

    @classmethod
    def register(
        cls,
        customer_id: EntityId,
        first_name: str,
        last_name: str,
        invoice_address: Address,
        shipping_address: Address,
        email_address: str,
        *,
        clock: Clock | None = None,
    ) -> Customer:
        clock = clock or SystemClock()
        customer = cls(customer_id)
        customer.emit(
            CustomerRegistered(
                customer_id,
                first_name,
                last_name,
                invoice_address,
                shipping_address,
                email_address,
                occurred_at=clock.now(),
            )
        )
        return customer

    # -- commands ---------------------------------------------------------

    def unsubscribe(self, *, clock: Clock | None = None) -> None:
        clock = clock or SystemClock()
        self.emit(SubscriptionCanceled(self.id, clock.today(), occurred_at=clock.now()))

    def subscribe(self, *, clock: Clock | None = None) -> None:
        clock = clock or SystemClock()
        self.emit(SubscriptionStarted(self.id, clock.today(), occurred_at=clock.now()))

    # -- read access ------------------------------------------------------

    @property
    def first_name(self) -> str:
        return self._state.first_name

    @property
    def last_name(self) -> str:
        return self._state.last_name

    @property
    def invoice_address(self) -> Address | None:
        return self._state.invoice_address

    @property
    def shipping_address(self) -> Address | None:
        return self._state.shipping_address

    @property
    def email_address(self) -> str:
        return self._state.email_address

    @property
    def subscription(self) -> Subscription | None:
        return self._state.subscription

    @property
    def is_subscribed(self) -> bool:
        return self._state.subscription is not None and self._state.subscription.is_active

    # -- event application ------------------------------------------------

    def _try_apply_domain_event(self, event: DomainEvent) -> bool:
        match event:
            case CustomerRegistered():
                self._apply_registered(event)
            case SubscriptionCanceled():
                self._apply_canceled(event)
            case SubscriptionStarted():
                self._apply_started(event)
            case _:
                return False
        return True

    def _apply_registered(self, event: CustomerRegistered) -> None:
        self._id = event.customer_id
        self._state.first_name = event.first_name
        self._state.last_name = event.last_name
        self._state.invoice_address = event.invoice_address
        self._state.shipping_address = event.shipping_address
        self._state.email_address = event.email_address
        # the registration instant, so replay reproduces the same start date
        self._state.subscription = Subscription.started_on(event.occurred_at.date())

    def _apply_canceled(self, event: SubscriptionCanceled) -> None:
        subscription = self._require_subscription(event)
        self._state.subscription = subscription.canceled_on(event.end_date)

    def _apply_started(self, event: SubscriptionStarted) -> None:
        self._require_subscription(event)
        self._state.subscription = Subscription.started_on(event.start_date)

    def _require_subscription(self, event: DomainEvent) -> Subscription:
        if self._state.subscription is None:
            raise InvariantViolationError(
                f"Customer '{self.id}' is not registered",
                detail={"event_type": event.event_type},
            )
        return self._state.subscription

    # -- snapshots --------------------------------------------------------

    def snapshot_state(self) -> CustomerState:
        return dataclasses.replace(self._state)

    def _restore_state(self, state: CustomerState) -> None:
        self._state = dataclasses.replace(state)


__all__ = ["Customer", "CustomerState"]
