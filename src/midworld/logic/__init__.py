"""
Business Logic Layer Module.

This module contains the domain operations of the logistics services. It sits
between the Lambda handlers and the data access / event publishing layers.
"""

from midworld.logic.inventory_service import CargoValidationError, InventoryService
from midworld.logic.transport_service import dispatch_transport, extract_cargo_id

__all__ = [
    "CargoValidationError",
    "InventoryService",
    "dispatch_transport",
    "extract_cargo_id",
]
