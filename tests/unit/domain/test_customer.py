"""Unit tests for the Customer aggregate."""

from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime

import pytest
from hypothesis import given

from profile_es.application.customers import fold_customer_info
from profile_es.domain.customer import (
    Address,
    Customer,
    CustomerRegistered,
    Subscription,
    SubscriptionCanceled,
    SubscriptionStarted,
)
from profile_es.kernel.ddd import DomainEvent
from profile_es.kernel.errors import InvariantViolationError, UnknownEventError
from profile_es.kernel.time import FrozenClock
from profile_es.kernel.types import EntityId
from profile_es.testing import FakeClock
from profile_es.testing.strategies import (
    clock_instant_strategy,
    command_history_strategy,
    registration_strategy,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class CustomerNicknamed(DomainEvent):
    customer_id: EntityId
    nickname: str


def _address() -> Address:
    return Address("Street", "1", "ZipCode", "City")


def _register(clock: FrozenClock | None = None, customer_id: str = "cust-1") -> Customer:
    return Customer.register(
        EntityId(customer_id),
        "Willem",
        "Meints",
        _address(),
        _address(),
        "test@domain.org",
        clock=clock or FakeClock(),
    )


def _run(customer: Customer, commands: list[str], clock: FrozenClock) -> None:
    for command in commands:
        clock.advance(days=1)
        getattr(customer, command)(clock=clock)


def _replay(events: list[DomainEvent], customer_id: EntityId) -> Customer:
    customer = Customer(customer_id)
    for event in events:
        customer.replay(event)
    return customer


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


class TestValues:
    def test_address_structural_equality(self) -> None:
        assert _address() == Address("Street", "1", "ZipCode", "City")
        assert _address() != Address("Street", "2", "ZipCode", "City")

    def test_subscription_started_is_active(self) -> None:
        sub = Subscription.started_on(date(2026, 1, 1))
        assert sub.is_active
        assert sub.end_date is None

    def test_canceled_on_keeps_start_and_returns_copy(self) -> None:
        sub = Subscription.started_on(date(2026, 1, 1))
        canceled = sub.canceled_on(date(2026, 2, 1))
        assert canceled == Subscription(date(2026, 1, 1), date(2026, 2, 1))
        assert sub.is_active


# ---------------------------------------------------------------------------
# Registration and commands
# ---------------------------------------------------------------------------


class TestRegistration:
    def test_register_sets_fields(self) -> None:
        customer = _register()
        assert customer.id == EntityId("cust-1")
        assert customer.first_name == "Willem"
        assert customer.last_name == "Meints"
        assert customer.invoice_address == _address()
        assert customer.shipping_address == _address()
        assert customer.email_address == "test@domain.org"

    def test_register_emits_single_event_at_version_one(self) -> None:
        customer = _register()
        assert [type(e) for e in customer.pending_events] == [CustomerRegistered]
        assert customer.version == 1

    def test_register_starts_subscription_on_registration_date(self) -> None:
        customer = _register()
        assert customer.subscription == Subscription(date(2026, 1, 1))
        assert customer.is_subscribed

    def test_blank_customer_emits_nothing(self) -> None:
        customer = Customer(EntityId("blank"))
        assert customer.version == 0
        assert customer.pending_events == ()
        assert customer.subscription is None


class TestSubscriptionCommands:
    def test_willem_scenario(self) -> None:
        clock = FakeClock()
        customer = _register(clock)

        customer.unsubscribe(clock=clock)
        assert customer.subscription is not None
        assert customer.subscription.end_date == clock.today()
        assert [type(e) for e in customer.pending_events] == [
            CustomerRegistered,
            SubscriptionCanceled,
        ]

        customer.subscribe(clock=clock)
        assert customer.subscription.end_date is None
        assert [type(e) for e in customer.pending_events] == [
            CustomerRegistered,
            SubscriptionCanceled,
            SubscriptionStarted,
        ]
        assert customer.version == 3

    def test_unsubscribe_preserves_start_date(self) -> None:
        clock = FakeClock()
        customer = _register(clock)
        clock.advance(days=10)
        customer.unsubscribe(clock=clock)
        assert customer.subscription == Subscription(date(2026, 1, 1), date(2026, 1, 11))
        assert not customer.is_subscribed

    def test_resubscribe_starts_fresh_subscription(self) -> None:
        clock = FakeClock()
        customer = _register(clock)
        clock.advance(days=3)
        customer.unsubscribe(clock=clock)
        clock.advance(days=3)
        customer.subscribe(clock=clock)
        assert customer.subscription == Subscription(date(2026, 1, 7))

    def test_double_cancel_emits_two_events(self) -> None:
        clock = FakeClock()
        customer = _register(clock)
        customer.unsubscribe(clock=clock)
        clock.advance(days=1)
        customer.unsubscribe(clock=clock)
        canceled = [e for e in customer.pending_events if isinstance(e, SubscriptionCanceled)]
        assert len(canceled) == 2
        assert customer.subscription is not None
        assert customer.subscription.end_date == date(2026, 1, 2)
        assert customer.version == 3

    def test_subscribe_while_active_is_not_guarded(self) -> None:
        customer = _register()
        customer.subscribe(clock=FakeClock())
        assert customer.version == 2
        assert customer.is_subscribed

    def test_subscription_event_on_blank_customer_is_rejected(self) -> None:
        customer = Customer(EntityId("blank"))
        with pytest.raises(InvariantViolationError):
            customer.unsubscribe(clock=FakeClock())
        assert customer.pending_events == ()
        assert customer.version == 0


class TestUnknownEvents:
    def test_emit_drops_unknown_event(self) -> None:
        customer = _register()
        assert customer.emit(CustomerNicknamed(customer.id, "Wim")) is False
        assert len(customer.pending_events) == 1
        assert customer.version == 1

    def test_replay_rejects_unknown_event(self) -> None:
        customer = _register()
        with pytest.raises(UnknownEventError):
            customer.replay(CustomerNicknamed(customer.id, "Wim"))


# ---------------------------------------------------------------------------
# Replay and snapshots
# ---------------------------------------------------------------------------


class TestReplay:
    def test_replay_does_not_buffer(self) -> None:
        source = _register()
        replayed = _replay(list(source.pending_events), source.id)
        assert replayed.pending_events == ()
        assert replayed.version == 1

    def test_from_snapshot_restores_state_and_version(self) -> None:
        clock = FakeClock()
        source = _register(clock)
        source.unsubscribe(clock=clock)
        restored = Customer.from_snapshot(source.id, source.snapshot_state(), source.version)
        assert restored.snapshot_state() == source.snapshot_state()
        assert restored.version == 2
        assert restored.pending_events == ()

    def test_snapshot_state_is_detached(self) -> None:
        source = _register()
        state = source.snapshot_state()
        source.unsubscribe(clock=FakeClock())
        assert state.subscription is not None
        assert state.subscription.is_active


class TestProperties:
    @given(registration_strategy(), command_history_strategy(), clock_instant_strategy())
    def test_replay_is_deterministic(
        self, registration: dict, commands: list[str], start: datetime
    ) -> None:
        clock = FrozenClock(start)
        source = Customer.register(**registration, clock=clock)
        _run(source, commands, clock)
        events = list(source.pending_events)

        first = _replay(events, source.id)
        second = _replay(events, source.id)
        assert first.snapshot_state() == second.snapshot_state() == source.snapshot_state()
        assert first.version == second.version == len(events) == source.version

    @given(registration_strategy(), command_history_strategy(), clock_instant_strategy())
    def test_snapshot_split_matches_full_replay(
        self, registration: dict, commands: list[str], start: datetime
    ) -> None:
        clock = FrozenClock(start)
        source = Customer.register(**registration, clock=clock)
        _run(source, commands, clock)
        events = list(source.pending_events)
        full = _replay(events, source.id)

        for k in range(1, len(events) + 1):
            head = _replay(events[:k], source.id)
            resumed = Customer.from_snapshot(source.id, head.snapshot_state(), head.version)
            for event in events[k:]:
                resumed.replay(event)
            assert resumed.snapshot_state() == full.snapshot_state()
            assert resumed.version == full.version

    @given(registration_strategy(), command_history_strategy(), clock_instant_strategy())
    def test_projection_agrees_with_aggregate(
        self, registration: dict, commands: list[str], start: datetime
    ) -> None:
        clock = FrozenClock(start)
        customer = Customer.register(**registration, clock=clock)
        _run(customer, commands, clock)

        info = fold_customer_info(customer.pending_events)
        assert info is not None
        assert customer.subscription is not None
        assert info.subscribed == (customer.subscription.end_date is None)

    @given(registration_strategy(), command_history_strategy())
    def test_unsubscribe_then_subscribe_is_active(self, registration: dict, commands: list[str]) -> None:
        clock = FrozenClock(datetime(2026, 5, 1, tzinfo=UTC))
        customer = Customer.register(**registration, clock=clock)
        _run(customer, commands, clock)
        before = sum(isinstance(e, SubscriptionStarted) for e in customer.pending_events)

        customer.unsubscribe(clock=clock)
        customer.subscribe(clock=clock)

        assert customer.subscription is not None
        assert customer.subscription.end_date is None
        after = sum(isinstance(e, SubscriptionStarted) for e in customer.pending_events)
        assert after == before + 1
