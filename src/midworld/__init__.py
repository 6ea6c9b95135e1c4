"""
Mid-World Logistics Service Module.

This package contains the service implementation behind the two Lambda
functions, following the three-layer architecture pattern:

- handlers: Lambda entry points and error boundaries
- logic: cargo storage and transport dispatch
- dal: DynamoDB persistence
- events: EventBridge schemas and publishing
- models: Pydantic request, response and domain models
"""

__version__ = "1.0.0"
__description__ = "Mid-World cargo inventory and transport services"

# Re-export commonly used classes for convenience
from midworld.models.cargo import CargoRecord, CargoStatus
from midworld.models.input import StoreCargoRequest
from midworld.models.output import StoreCargoOutput, TransportAcknowledgement
from midworld.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "CargoRecord",
    "CargoStatus",
    "StoreCargoRequest",
    "StoreCargoOutput",
    "TransportAcknowledgement",
    "logger",
    "tracer",
    "metrics",
]
