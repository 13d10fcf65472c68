"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   ├── NotFoundError
    │   ├── ConflictError
    │   └── UnknownEventError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        └── StreamInconsistencyError
"""

from profile_es.kernel.errors.application import ApplicationError
from profile_es.kernel.errors.base import BaseError
from profile_es.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotFoundError,
    UnknownEventError,
    ValidationError,
)
from profile_es.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    StreamInconsistencyError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "SerializationError",
    "StreamInconsistencyError",
    "UnknownEventError",
    "ValidationError",
]
