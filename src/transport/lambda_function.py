"""
Transport Lambda Function - Entry point for CargoStored events.

Configuration is validated once per execution environment; a missing
EVENT_BUS_NAME fails the cold start.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from midworld.handlers.models.env_vars import get_transport_env_vars
from midworld.handlers.transport_handler import lambda_handler as transport_handler

transport_env_vars = get_transport_env_vars()


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the transport service.

    Args:
        event: EventBridge event
        context: Lambda context object

    Returns:
        Dispatch acknowledgement
    """
    return transport_handler(event, context)
