"""Application — customer use cases and read model."""

from profile_es.application.customers.projection import (
    CustomerInfo,
    CustomerInfoProjection,
    apply_customer_info,
    fold_customer_info,
)
from profile_es.application.customers.repository import CustomerRepository
from profile_es.application.customers.service import CustomerService

__all__ = [
    "CustomerInfo",
    "CustomerInfoProjection",
    "CustomerRepository",
    "CustomerService",
    "apply_customer_info",
    "fold_customer_info",
]
