"""
API Gateway proxy response helpers.
"""

import json
from typing import Any, Dict, Optional

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "OPTIONS,POST",
}


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
    cors_enabled: bool = True,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""

    default_headers = {"Content-Type": "application/json"}

    if cors_enabled:
        default_headers.update(CORS_HEADERS)

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body if isinstance(body, str) else json.dumps(body),
    }
