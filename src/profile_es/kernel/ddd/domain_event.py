"""Domain events."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    The envelope fields are keyword-only so subclasses can declare required
    payload fields positionally.

    Example::

        @dataclasses.dataclass(frozen=True)
        class OrderPlaced(DomainEvent):
            order_id: EntityId
    """

    event_id: str = dataclasses.field(
        default_factory=lambda: str(uuid4()), kw_only=True
    )
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC), kw_only=True
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__


__all__ = ["DomainEvent"]
