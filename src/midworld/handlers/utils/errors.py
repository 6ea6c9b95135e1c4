"""
Error taxonomy and error reporting utilities for the Lambda handlers.

Service errors carry a machine readable code, a category and a caller-facing
message. Handlers catch them at their boundary, log them with
``log_error_metrics`` and turn them into API responses with
``format_error_response``; only ``user_message`` ever reaches the caller.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit

from midworld.handlers.utils.observability import logger, metrics, tracer

INTERNAL_ERROR_MESSAGE = 'Internal server error'


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    CONFIGURATION = "CONFIGURATION"
    VALIDATION = "VALIDATION"
    DEPENDENCY = "DEPENDENCY"
    INTERNAL = "INTERNAL"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.user_message = user_message or INTERNAL_ERROR_MESSAGE
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ConfigurationError(BaseServiceError):
    """Raised at cold start when required environment configuration is missing."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )


class ValidationError(BaseServiceError):
    """Raised when request validation fails. The message is shown to the caller."""

    def __init__(self, message: str, field_errors: Optional[list] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            user_message=message,
        )
        self.field_errors = field_errors or []


class DependencyError(BaseServiceError):
    """Raised when a downstream AWS service call fails."""

    def __init__(
        self,
        message: str,
        service_name: str,
        error_code: str = "DEPENDENCY_ERROR",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.DEPENDENCY,
        )
        self.service_name = service_name
        self.original_error = original_error


def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value.title()}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    logger.error(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_severity": error.severity.value,
            "error_category": error.category.value,
            "error_message": error.message,
        }
    )


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Build the caller-facing error body. Internal detail stays in the logs."""
    return {"error": error.user_message}
