"""
Event Schemas and Publishing for EventBridge Integration.
"""

from .event_schemas import (
    CargoStoredEvent,
    EventSource,
    EventType,
)

from .event_publisher import (
    EventPublisher,
    EventPublishError,
)

__all__ = [
    # Event Schemas
    'CargoStoredEvent',
    'EventSource',
    'EventType',

    # Event Publisher
    'EventPublisher',
    'EventPublishError',
]
