"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including input validation models, output response models, and domain models.
"""

from .input import StoreCargoRequest
from .output import ErrorOutput, StoreCargoOutput, TransportAcknowledgement
from .cargo import CargoRecord, CargoStatus

__all__ = [
    # Input models
    "StoreCargoRequest",

    # Output models
    "StoreCargoOutput",
    "ErrorOutput",
    "TransportAcknowledgement",

    # Domain models
    "CargoRecord",
    "CargoStatus",
]
