"""
Inventory Handler - Lambda function for cargo storage requests.

This module implements the handler layer for API Gateway ``POST`` requests:
it resolves and validates the request body, delegates to ``InventoryService``
and converts every failure into a structured ``500`` response. Dependencies
are built once per execution environment by ``create_inventory_service`` and
passed in explicitly on each invocation.
"""

import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from midworld.dal import get_dal_handler
from midworld.events.event_publisher import EventPublisher
from midworld.handlers.models.env_vars import InventoryHandlerEnvVars, get_inventory_env_vars
from midworld.handlers.utils.errors import (
    INTERNAL_ERROR_MESSAGE,
    BaseServiceError,
    format_error_response,
    log_error_metrics,
)
from midworld.handlers.utils.observability import logger, metrics, tracer
from midworld.handlers.utils.responses import create_api_response
from midworld.logic.inventory_service import CargoValidationError, InventoryService
from midworld.models.input import StoreCargoRequest
from midworld.models.output import ErrorOutput, StoreCargoOutput

# Validation failures also answer 500; existing clients depend on it.
ERROR_STATUS_CODE = 500


def create_inventory_service(env_vars: Optional[InventoryHandlerEnvVars] = None) -> InventoryService:
    """
    Build the inventory service and its AWS clients.

    Args:
        env_vars: Parsed configuration, read from the environment when omitted

    Raises:
        ConfigurationError: If TABLE_NAME or EVENT_BUS_NAME is missing
    """
    env_vars = env_vars or get_inventory_env_vars()

    cargo_dal = get_dal_handler(
        table_name=env_vars.TABLE_NAME,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )
    event_publisher = EventPublisher(
        event_bus_name=env_vars.EVENT_BUS_NAME,
        endpoint_url=env_vars.EVENTBRIDGE_ENDPOINT,
    )
    return InventoryService(cargo_dal=cargo_dal, event_publisher=event_publisher)


def parse_store_cargo_request(event: Dict[str, Any]) -> StoreCargoRequest:
    """
    Resolve the payload and validate it.

    A string ``body`` is parsed as JSON; without one the event itself is the
    payload (direct invocation).

    Raises:
        CargoValidationError: If the payload is not a JSON object or lacks
            cargoId/location
    """
    body = event.get('body') if isinstance(event, dict) else None

    if isinstance(body, str):
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise CargoValidationError(message='Invalid JSON in request body') from e
    else:
        payload = event

    if not isinstance(payload, dict):
        raise CargoValidationError()

    try:
        return StoreCargoRequest.model_validate(payload)
    except PydanticValidationError as e:
        field_errors = [
            {"field": str(error["loc"][-1]), "message": error["msg"]}
            for error in e.errors()
        ]
        raise CargoValidationError(field_errors=field_errors) from e


def handle_store_cargo(event: Dict[str, Any], inventory_service: InventoryService) -> Dict[str, Any]:
    """
    Validate, store and publish one cargo item.

    Returns:
        API Gateway response; 200 with ``{message, id}`` or 500 with ``{error}``
    """
    try:
        request = parse_store_cargo_request(event)
        tracer.put_annotation('cargo_id', request.cargoId)

        record = inventory_service.store_cargo(request)

    except BaseServiceError as e:
        log_error_metrics(e)
        return create_api_response(
            status_code=ERROR_STATUS_CODE,
            body=ErrorOutput(**format_error_response(e)).model_dump_json(),
        )

    except Exception as e:
        logger.exception("Unexpected error in inventory handler", extra={"error": str(e)})
        metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)
        return create_api_response(
            status_code=ERROR_STATUS_CODE,
            body=ErrorOutput(error=INTERNAL_ERROR_MESSAGE).model_dump_json(),
        )

    return create_api_response(
        status_code=200,
        body=StoreCargoOutput(id=record.cargo_id).model_dump_json(),
    )


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
def lambda_handler(
    event: Dict[str, Any],
    context: LambdaContext,
    inventory_service: InventoryService,
) -> Dict[str, Any]:
    """
    Lambda entry point for the inventory API.

    Args:
        event: API Gateway proxy event, or the cargo payload itself
        context: Lambda context object
        inventory_service: Service built once at cold start

    Returns:
        API Gateway response dictionary
    """
    return handle_store_cargo(event, inventory_service)
