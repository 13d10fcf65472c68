"""Customers – event-sourced repository."""

from __future__ import annotations

from profile_es.application.event_sourcing import EventSourcedRepository
from profile_es.domain.customer import Customer


class CustomerRepository(EventSourcedRepository[Customer]):
    def _aggregate_class(self) -> type[Customer]:
        return Customer


__all__ = ["CustomerRepository"]
