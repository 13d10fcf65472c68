"""DDD building blocks — public re-export surface."""

from profile_es.kernel.ddd.aggregate import AggregateRoot
from profile_es.kernel.ddd.domain_event import DomainEvent
from profile_es.kernel.ddd.entity import Entity
from profile_es.kernel.ddd.event_sourced import EventSourcedAggregate
from profile_es.kernel.ddd.value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "EventSourcedAggregate",
    "ValueObject",
]
