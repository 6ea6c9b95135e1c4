"""
Business Logic Layer for cargo storage.

Storing cargo is a strict two step sequence: the record is written first and
the ``CargoStored`` event is only published once the write succeeded.
"""

from typing import Optional

from aws_lambda_powertools.metrics import MetricUnit

from midworld.dal import CargoDalHandler
from midworld.events.event_publisher import EventPublisher
from midworld.events.event_schemas import CargoStoredEvent
from midworld.handlers.utils.errors import ValidationError
from midworld.handlers.utils.observability import logger, metrics, tracer
from midworld.models.cargo import CargoRecord, split_extra_fields
from midworld.models.input import StoreCargoRequest

MISSING_FIELDS_MESSAGE = 'Missing required fields: cargoId or location'


class CargoValidationError(ValidationError):
    """Raised when a cargo request does not carry cargoId and location."""

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE, field_errors: Optional[list] = None):
        super().__init__(message=message, field_errors=field_errors)


class InventoryService:
    """Business logic service for cargo storage."""

    def __init__(self, cargo_dal: CargoDalHandler, event_publisher: EventPublisher):
        """
        Initialize inventory service.

        Args:
            cargo_dal: Data access handler for the cargo table
            event_publisher: Publisher for the logistics event bus
        """
        self.cargo_dal = cargo_dal
        self.event_publisher = event_publisher

    @tracer.capture_method
    def store_cargo(self, request: StoreCargoRequest) -> CargoRecord:
        """
        Store a cargo item and announce it on the event bus.

        Args:
            request: Validated cargo request

        Returns:
            The stored record

        Raises:
            CargoStorageError: If the write fails; nothing is published
            EventPublishError: If the write succeeded but publishing failed
        """
        extra_fields, dropped = split_extra_fields(request.extra_fields)
        if dropped:
            logger.warning("Ignoring caller fields that collide with computed attributes", extra={
                "cargo_id": request.cargoId,
                "dropped_fields": dropped,
            })

        record = CargoRecord.create(
            cargo_id=request.cargoId,
            location=request.location,
            extra_fields=extra_fields,
        )

        self.cargo_dal.put_cargo_record(record)
        metrics.add_metric(name="CargoStored", unit=MetricUnit.Count, value=1)
        logger.info(f'Cargo {record.cargo_id} stored at {record.location}')

        self.event_publisher.publish_event(CargoStoredEvent(detail=record.to_item()))
        metrics.add_metric(name="CargoEventPublished", unit=MetricUnit.Count, value=1)

        return record
