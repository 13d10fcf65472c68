"""
profile_es – Event-sourced customer profile toolkit.

Import path convention::

    from profile_es.kernel.ddd import AggregateRoot, DomainEvent
    from profile_es.domain.customer import Customer, Address
    from profile_es.application.customers import CustomerService
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
