"""Domain errors — business rule and invariant violations."""

from __future__ import annotations

from typing import Any

from profile_es.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An aggregate invariant was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class UnknownEventError(DomainError):
    """An aggregate was handed an event type it has no apply branch for."""

    default_code = "unknown_event"

    def __init__(self, aggregate_type: str, event_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"{aggregate_type} cannot apply event '{event_type}'",
            detail={"aggregate_type": aggregate_type, "event_type": event_type},
            **kwargs,
        )
        self.aggregate_type = aggregate_type
        self.event_type = event_type


__all__ = [
    "ConflictError",
    "DomainError",
    "InvariantViolationError",
    "NotFoundError",
    "UnknownEventError",
    "ValidationError",
]
