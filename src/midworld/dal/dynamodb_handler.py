"""
DynamoDB implementation of the cargo Data Access Layer.

Records are written with an unconditional ``put_item`` keyed by
``partitionKey``/``sortKey``: storing the same cargo id again replaces the
earlier item.
"""

import json
from decimal import Decimal
from typing import Any, Dict, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from midworld.handlers.utils.errors import DependencyError
from midworld.handlers.utils.observability import logger, metrics, tracer
from midworld.models.cargo import METADATA_SORT_KEY, CargoRecord, build_partition_key


class CargoStorageError(DependencyError):
    """Raised when a DynamoDB operation on the cargo table fails."""

    def __init__(self, message: str, operation: str, table_name: str, original_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            service_name="dynamodb",
            error_code="CARGO_STORAGE_FAILED",
            original_error=original_error,
        )
        self.operation = operation
        self.table_name = table_name


def to_dynamodb_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """Convert floats to Decimal; the boto3 serializer rejects float."""
    return json.loads(json.dumps(item), parse_float=Decimal)


class DynamoDBHandler:
    """DynamoDB handler for the cargo table."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        self.table_name = table_name

        session_config = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)
        self.table = self.dynamodb.Table(table_name)

        logger.info("DynamoDB handler initialized", extra={
            "table_name": table_name,
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        })

    @tracer.capture_method
    def put_cargo_record(self, record: CargoRecord) -> CargoRecord:
        """
        Upsert a cargo record.

        Args:
            record: Record to store

        Returns:
            The stored record

        Raises:
            CargoStorageError: If the DynamoDB call fails
        """
        item = to_dynamodb_item(record.to_item())

        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error storing cargo: {error_code}', extra={
                'error': str(e),
                'cargo_id': record.cargo_id,
            })
            metrics.add_metric(name="DynamoDBPutError", unit=MetricUnit.Count, value=1)
            raise CargoStorageError(
                f'Failed to store cargo {record.cargo_id}: {error_code}',
                operation='put_item',
                table_name=self.table_name,
                original_error=e,
            ) from e
        except BotoCoreError as e:
            logger.error(f'DynamoDB client error storing cargo: {e}', extra={'cargo_id': record.cargo_id})
            metrics.add_metric(name="DynamoDBPutError", unit=MetricUnit.Count, value=1)
            raise CargoStorageError(
                f'Failed to store cargo {record.cargo_id}: {e}',
                operation='put_item',
                table_name=self.table_name,
                original_error=e,
            ) from e

        logger.info('Cargo record stored', extra={
            'partition_key': record.partition_key,
            'cargo_location': record.location,
        })
        tracer.put_annotation('cargo_stored', record.cargo_id)

        return record

    @tracer.capture_method
    def get_cargo_record(self, cargo_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve the stored item for a cargo id.

        Not part of ``CargoDalHandler``: no handler reads cargo back. It exists
        to verify what a write persisted, e.g. from integration tests.

        Returns:
            The raw DynamoDB item if found, None otherwise

        Raises:
            CargoStorageError: If the DynamoDB call fails
        """
        try:
            response = self.table.get_item(
                Key={
                    'partitionKey': build_partition_key(cargo_id),
                    'sortKey': METADATA_SORT_KEY,
                }
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f'DynamoDB error retrieving cargo {cargo_id}: {e}')
            raise CargoStorageError(
                f'Failed to read cargo {cargo_id}',
                operation='get_item',
                table_name=self.table_name,
                original_error=e,
            ) from e

        item = response.get('Item')
        if not item:
            logger.info(f'Cargo not found: {cargo_id}')
            return None

        return item
