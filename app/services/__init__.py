"""Service layer orchestrating the page lookups."""
from .lookup_controller import LookupController, is_confirm_key

__all__ = [
    'LookupController',
    'is_confirm_key',
]
