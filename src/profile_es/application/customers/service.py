"""Customers – command handlers and read access.

Each command loads (or creates) a :class:`Customer`, runs one domain
operation and saves the pending events.  The read side is served from the
:class:`CustomerInfoProjection`, which the event store feeds on append.
"""

from __future__ import annotations

from profile_es.application.customers.projection import CustomerInfo, CustomerInfoProjection
from profile_es.application.customers.repository import CustomerRepository
from profile_es.application.event_sourcing import (
    EventSerializer,
    EventStore,
    InMemoryEventStore,
    InMemorySnapshotStore,
    SnapshotStore,
)
from profile_es.config.settings import ProfileSettings
from profile_es.domain.customer import CUSTOMER_EVENTS, Address, Customer
from profile_es.kernel.errors.domain import NotFoundError
from profile_es.kernel.time.clock import Clock, SystemClock
from profile_es.kernel.types.ids import EntityId
from profile_es.observability.logging import get_logger

logger = get_logger(__name__)


class CustomerService:
    def __init__(
        self,
        repository: CustomerRepository,
        projection: CustomerInfoProjection,
        clock: Clock | None = None,
    ) -> None:
        self._repository = repository
        self._projection = projection
        self._clock = clock or SystemClock()

    @classmethod
    def from_settings(
        cls,
        settings: ProfileSettings,
        *,
        store: EventStore | None = None,
        snapshots: SnapshotStore | None = None,
        clock: Clock | None = None,
    ) -> CustomerService:
        """Wire repository and projection, defaulting to in-memory stores."""
        store = store if store is not None else InMemoryEventStore()
        snapshots = snapshots if snapshots is not None else InMemorySnapshotStore()
        serializer = EventSerializer(CUSTOMER_EVENTS)
        repository = CustomerRepository(
            store,
            serializer,
            snapshots,
            snapshot_every=settings.snapshot_every,
        )
        projection = CustomerInfoProjection(serializer)
        store.subscribe(projection.project)
        return cls(repository, projection, clock)

    async def register_customer(
        self,
        first_name: str,
        last_name: str,
        invoice_address: Address,
        shipping_address: Address,
        email_address: str,
    ) -> EntityId:
        customer_id = EntityId.generate()
        customer = Customer.register(
            customer_id,
            first_name,
            last_name,
            invoice_address,
            shipping_address,
            email_address,
            clock=self._clock,
        )
        await self._repository.save(customer)
        logger.info("customer.registered", customer_id=str(customer_id), email_address=email_address)
        return customer_id

    async def cancel_subscription(self, customer_id: EntityId) -> None:
        customer = await self._require(customer_id)
        customer.unsubscribe(clock=self._clock)
        await self._repository.save(customer, snapshot=True)
        logger.info("customer.subscription_canceled", customer_id=str(customer_id))

    async def start_subscription(self, customer_id: EntityId) -> None:
        customer = await self._require(customer_id)
        customer.subscribe(clock=self._clock)
        await self._repository.save(customer)
        logger.info("customer.subscription_started", customer_id=str(customer_id))

    async def get_customer(self, customer_id: EntityId) -> Customer:
        """Write-side state, rebuilt through the repository."""
        return await self._require(customer_id)

    def get_customer_details(self, customer_id: EntityId) -> CustomerInfo:
        info = self._projection.get(customer_id)
        if info is None:
            raise NotFoundError("Customer", str(customer_id))
        return info

    def list_customers(self) -> list[CustomerInfo]:
        return self._projection.all()

    async def _require(self, customer_id: EntityId) -> Customer:
        customer = await self._repository.load(customer_id)
        if customer is None:
            raise NotFoundError("Customer", str(customer_id))
        return customer


__all__ = ["CustomerService"]
