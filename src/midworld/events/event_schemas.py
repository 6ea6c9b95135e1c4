"""
Event Schemas for EventBridge Integration.

This module defines the domain events exchanged over the logistics bus. The
inventory service publishes ``CargoStored`` after every successful write and
the transport service consumes it.
"""

import json
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class EventSource(str, Enum):
    """Event sources on the logistics bus."""

    INVENTORY = "mid-world.inventory"


class EventType(str, Enum):
    """Event detail types on the logistics bus."""

    CARGO_STORED = "CargoStored"


class CargoStoredEvent(BaseModel):
    """Notification that a cargo record was written."""

    model_config = ConfigDict(frozen=True)

    source: EventSource = EventSource.INVENTORY
    detail_type: EventType = EventType.CARGO_STORED
    detail: Dict[str, Any] = Field(default_factory=dict)

    def to_eventbridge_entry(self, event_bus_name: str) -> Dict[str, Any]:
        """Convert to EventBridge PutEvents entry format."""
        return {
            "Source": self.source.value,
            "DetailType": self.detail_type.value,
            "Detail": json.dumps(self.detail, default=str),
            "EventBusName": event_bus_name,
        }
