"""
EventBridge publisher for logistics domain events.

Publishing is a single ``put_events`` call. Retries and dead-lettering belong
to EventBridge and the rule targets, so a failed call is reported to the
caller as ``EventPublishError`` and never retried here.
"""

import time
from typing import Any, Dict, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from midworld.events.event_schemas import CargoStoredEvent
from midworld.handlers.utils.errors import DependencyError
from midworld.handlers.utils.observability import logger, metrics, tracer


class EventPublishError(DependencyError):
    """Exception raised when event publishing fails."""

    def __init__(self, message: str, event_data: Optional[Dict[str, Any]] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            service_name="eventbridge",
            error_code="EVENT_PUBLISH_FAILED",
            original_error=original_error,
        )
        self.event_data = event_data


class EventPublisher:
    """Publishes domain events onto a single EventBridge bus."""

    def __init__(
        self,
        event_bus_name: str,
        client: Optional[Any] = None,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize EventBridge publisher.

        Args:
            event_bus_name: Name of the EventBridge bus
            client: Pre-built EventBridge client, mostly for tests
            region_name: AWS region
            endpoint_url: EventBridge endpoint URL (for local testing)
        """
        self.event_bus_name = event_bus_name

        client_config = {}
        if region_name:
            client_config['region_name'] = region_name
        if endpoint_url:
            client_config['endpoint_url'] = endpoint_url

        self.eventbridge = client or boto3.client('events', **client_config)

        logger.info("EventPublisher initialized", extra={"event_bus_name": event_bus_name})

    @tracer.capture_method
    def publish_event(self, event: CargoStoredEvent) -> str:
        """
        Publish a single event to EventBridge.

        Args:
            event: Event to publish

        Returns:
            EventBridge event id

        Raises:
            EventPublishError: If the call fails or the entry is rejected
        """
        start_time = time.time()
        entry = event.to_eventbridge_entry(self.event_bus_name)

        try:
            result = self.eventbridge.put_events(Entries=[entry])
        except (ClientError, BotoCoreError) as e:
            logger.error("EventBridge put_events failed", extra={
                "error": str(e),
                "event_bus_name": self.event_bus_name,
                "detail_type": entry["DetailType"],
            })
            metrics.add_metric(name="EventPublishError", unit=MetricUnit.Count, value=1)
            raise EventPublishError(f"Failed to publish event: {e}", event_data=entry, original_error=e) from e

        if result.get('FailedEntryCount', 0) > 0:
            failed_entry = (result.get('Entries') or [{}])[0]
            error_message = failed_entry.get('ErrorMessage', 'Unknown error')
            logger.error("EventBridge rejected event", extra={
                "error_code": failed_entry.get('ErrorCode'),
                "error_message": error_message,
                "event_bus_name": self.event_bus_name,
            })
            metrics.add_metric(name="EventPublishFailed", unit=MetricUnit.Count, value=1)
            raise EventPublishError(f"Event rejected by EventBridge: {error_message}", event_data=entry)

        event_id = (result.get('Entries') or [{}])[0].get('EventId', '')
        duration_ms = (time.time() - start_time) * 1000

        metrics.add_metric(name="EventPublishSuccess", unit=MetricUnit.Count, value=1)
        metrics.add_metric(name="EventPublishDuration", unit=MetricUnit.Milliseconds, value=duration_ms)
        logger.info("Event published", extra={
            "event_id": event_id,
            "source": entry["Source"],
            "detail_type": entry["DetailType"],
        })

        return event_id
