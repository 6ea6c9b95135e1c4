"""
Environment variable models for type-safe configuration.

This module defines Pydantic models for the environment variables each Lambda
handler needs. They are parsed once at cold start; a missing or empty required
variable is a ``ConfigurationError`` and the function must not serve requests.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

from midworld.handlers.utils.errors import ConfigurationError


class _CommonEnvVars(BaseModel):
    """Settings shared by every handler."""

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'mid-world-logistics'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # EventBridge bus carrying cargo events
    EVENT_BUS_NAME: Annotated[str, Field(
        description='EventBridge bus name for logistics events',
        min_length=1
    )]

    # Local endpoint for EventBridge (tests, localstack)
    EVENTBRIDGE_ENDPOINT: Annotated[Optional[str], Field(
        description='Override endpoint URL for EventBridge'
    )] = None


class InventoryHandlerEnvVars(_CommonEnvVars):
    """Environment variables for the inventory handler."""

    # DynamoDB table storing cargo records
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for cargo storage',
        min_length=1
    )]

    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='Override endpoint URL for DynamoDB'
    )] = None


class TransportHandlerEnvVars(_CommonEnvVars):
    """Environment variables for the transport handler.

    EVENT_BUS_NAME is not used by the transport service itself; it is still
    required so existing deployment configuration keeps validating.
    """


def get_inventory_env_vars() -> InventoryHandlerEnvVars:
    """
    Get typed environment variables for the inventory handler.

    Raises:
        ConfigurationError: If TABLE_NAME or EVENT_BUS_NAME is missing or empty
    """
    try:
        return get_environment_variables(model=InventoryHandlerEnvVars)
    except ValueError as exc:
        raise ConfigurationError(f'Invalid inventory configuration: {exc}') from exc


def get_transport_env_vars() -> TransportHandlerEnvVars:
    """
    Get typed environment variables for the transport handler.

    Raises:
        ConfigurationError: If EVENT_BUS_NAME is missing or empty
    """
    try:
        return get_environment_variables(model=TransportHandlerEnvVars)
    except ValueError as exc:
        raise ConfigurationError(f'Invalid transport configuration: {exc}') from exc
