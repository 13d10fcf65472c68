"""Kernel types – identifiers."""
from profile_es.kernel.types.ids import EntityId

__all__ = ["EntityId"]
