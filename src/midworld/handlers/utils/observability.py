"""
Powertools logger, tracer and metrics shared by the inventory and transport handlers.

Service name, log level and tracing switches come from the standard
``POWERTOOLS_*`` environment variables of each function.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

DEFAULT_METRICS_NAMESPACE = 'MidWorldLogistics'
METRICS_NAMESPACE = os.environ.get('POWERTOOLS_METRICS_NAMESPACE', DEFAULT_METRICS_NAMESPACE)

logger: Logger = Logger()

tracer: Tracer = Tracer()

metrics = Metrics(namespace=METRICS_NAMESPACE)
