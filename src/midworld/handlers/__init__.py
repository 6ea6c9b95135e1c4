"""
AWS Lambda Handlers Module.

This module contains the Lambda function handlers of the logistics services:

1. Handler Layer (this module): request/event parsing, error boundary
2. Logic Layer: cargo storage and transport dispatch
3. Data Access Layer: DynamoDB persistence and EventBridge publishing

Handler Types:
- REST API handler: inventory_handler, invoked through API Gateway
- Event handler: transport_handler, invoked by an EventBridge rule
"""

# Re-export handler utilities for convenience
from midworld.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
