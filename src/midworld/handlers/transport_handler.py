"""
Transport Handler - Lambda function consuming ``CargoStored`` events.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from midworld.handlers.utils.observability import logger, metrics, tracer
from midworld.logic.transport_service import dispatch_transport


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.EVENT_BRIDGE)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda entry point for the transport service.

    Never fails on malformed events; a missing cargo id is reported as UNKNOWN.

    Returns:
        ``{"status": "dispatched", "cargoId": ...}``
    """
    return dispatch_transport(event).model_dump()
