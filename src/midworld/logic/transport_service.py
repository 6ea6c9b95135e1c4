"""
Business Logic Layer for transport dispatch.

The transport service is a pure consumer of ``CargoStored`` events: it only
needs the event schema, never the sender. Any input shape is accepted and
missing data degrades to defaults.
"""

from typing import Any, Mapping

from aws_lambda_powertools.metrics import MetricUnit

from midworld.handlers.utils.observability import logger, metrics, tracer
from midworld.models.output import UNKNOWN_CARGO_ID, TransportAcknowledgement


def extract_cargo_id(event: Mapping[str, Any]) -> str:
    """Return detail.cargoId, or UNKNOWN when it cannot be found."""
    detail = event.get('detail') if isinstance(event, Mapping) else None
    if not isinstance(detail, Mapping):
        return UNKNOWN_CARGO_ID
    cargo_id = detail.get('cargoId')
    if not cargo_id:
        return UNKNOWN_CARGO_ID
    return str(cargo_id)


@tracer.capture_method
def dispatch_transport(event: Mapping[str, Any]) -> TransportAcknowledgement:
    """
    Log the incoming cargo event and acknowledge the dispatch.

    Args:
        event: EventBridge event, possibly malformed

    Returns:
        Acknowledgement with the extracted cargo id
    """
    event = event if isinstance(event, Mapping) else {}

    logger.info('Transport service woke up', extra={
        'event_source': event.get('source'),
        'event_type': event.get('detail-type'),
        'cargo_details': event.get('detail'),
    })

    cargo_id = extract_cargo_id(event)
    tracer.put_annotation('cargo_id', cargo_id)
    logger.info(f'Dispatching transport for cargo: {cargo_id}')
    metrics.add_metric(name="TransportDispatched", unit=MetricUnit.Count, value=1)

    return TransportAcknowledgement(cargoId=cargo_id)
