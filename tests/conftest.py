"""
Pytest configuration and shared fixtures for the Mid-World logistics services.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os
from typing import Any, Dict
from unittest.mock import Mock

import pytest

# Powertools reads its settings when the shared logger/tracer/metrics are
# created at import time, so the environment must be in place first.
TEST_ENVIRONMENT = {
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "AWS_SECURITY_TOKEN": "test",
    "AWS_SESSION_TOKEN": "test",
    "TABLE_NAME": "test-waystation-table",
    "EVENT_BUS_NAME": "test-logistics-bus",
    "POWERTOOLS_SERVICE_NAME": "test-mid-world-logistics",
    "POWERTOOLS_METRICS_NAMESPACE": "TestMidWorldLogistics",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
}
os.environ.update(TEST_ENVIRONMENT)

import boto3  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from moto import mock_aws  # noqa: E402

TABLE_NAME = TEST_ENVIRONMENT["TABLE_NAME"]
EVENT_BUS_NAME = TEST_ENVIRONMENT["EVENT_BUS_NAME"]


@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Restore the test environment variables for every test."""
    for key, value in TEST_ENVIRONMENT.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def aws_mock():
    """Run the test against moto's in-memory AWS."""
    with mock_aws():
        yield


@pytest.fixture
def dynamodb_table(aws_mock):
    """Create a mock DynamoDB cargo table for testing."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

    table = dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[
            {"AttributeName": "partitionKey", "KeyType": "HASH"},
            {"AttributeName": "sortKey", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "partitionKey", "AttributeType": "S"},
            {"AttributeName": "sortKey", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )

    table.wait_until_exists()
    yield table


@pytest.fixture
def event_bus(aws_mock):
    """Create a mock EventBridge bus for testing."""
    client = boto3.client("events", region_name="us-east-1")
    client.create_event_bus(Name=EVENT_BUS_NAME)
    yield EVENT_BUS_NAME


@pytest.fixture
def eventbridge_client():
    """Mock EventBridge client that accepts every entry."""
    client = Mock()
    client.put_events.return_value = {
        "FailedEntryCount": 0,
        "Entries": [{"EventId": "evt-11111111"}],
    }
    return client


@pytest.fixture
def sample_cargo_payload() -> Dict[str, Any]:
    """Minimal valid cargo request body."""
    return {"cargoId": "TEST-1", "location": "DOCK-Z"}


@pytest.fixture
def api_gateway_event(sample_cargo_payload) -> Dict[str, Any]:
    """Create a sample API Gateway event for testing."""
    return {
        "resource": "/cargo",
        "httpMethod": "POST",
        "path": "/cargo",
        "headers": {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "body": json.dumps(sample_cargo_payload),
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "prod",
            "httpMethod": "POST",
            "path": "/prod/cargo",
            "protocol": "HTTP/1.1",
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": None,
        "queryStringParameters": None,
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def cargo_stored_event() -> Dict[str, Any]:
    """EventBridge event as delivered to the transport function."""
    return {
        "version": "0",
        "id": "6a7e8feb-b491-4cf7-a9f1-bf3703467718",
        "detail-type": "CargoStored",
        "source": "mid-world.inventory",
        "account": "123456789012",
        "time": "2024-01-01T12:00:00Z",
        "region": "us-east-1",
        "resources": [],
        "detail": {
            "cargoId": "CARGO-999",
            "location": "Sector 7",
            "status": "IN_STORAGE",
        },
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# Error simulation fixtures
@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors."""

    def create_error(error_code: str, message: str = "Test error", operation_name: str = "TestOperation"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
