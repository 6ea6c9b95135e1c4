"""
Inventory Lambda Function - Entry point for the cargo storage API.

The inventory service is built once per execution environment. Missing
configuration raises ConfigurationError here and fails the cold start.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from midworld.handlers.inventory_handler import create_inventory_service
from midworld.handlers.inventory_handler import lambda_handler as inventory_handler

inventory_service = create_inventory_service()


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the inventory API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return inventory_handler(event, context, inventory_service=inventory_service)
