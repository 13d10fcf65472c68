"""Customer value objects."""

from __future__ import annotations

import dataclasses
from datetime import date

from profile_es.kernel.ddd.value_object import ValueObject


@dataclasses.dataclass(frozen=True)
class Address(ValueObject):
    street: str
    house_number: str
    zip_code: str
    city: str


@dataclasses.dataclass(frozen=True)
class Subscription(ValueObject):
    """A subscription period; an absent ``end_date`` means it is active."""

    start_date: date
    end_date: date | None = None

    @classmethod
    def started_on(cls, start_date: date) -> Subscription:
        return cls(start_date=start_date)

    def canceled_on(self, end_date: date) -> Subscription:
        return self.copy_with(end_date=end_date)

    @property
    def is_active(self) -> bool:
        return self.end_date is None


__all__ = ["Address", "Subscription"]
