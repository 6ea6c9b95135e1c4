"""
Data Access Layer (DAL) for cargo records.

This module provides the data access layer interface and a factory function
for the DynamoDB implementation.
"""

from typing import Optional, Protocol, runtime_checkable

from midworld.models.cargo import CargoRecord


@runtime_checkable
class CargoDalHandler(Protocol):
    """Protocol defining the data access layer interface.

    Storing cargo only ever writes; the service layer never reads records back.
    """

    def put_cargo_record(self, record: CargoRecord) -> CargoRecord:
        """Create or overwrite a cargo record."""
        ...


def get_dal_handler(table_name: str, endpoint_url: Optional[str] = None) -> CargoDalHandler:
    """
    Factory function to get the appropriate DAL handler.

    Args:
        table_name: Name of the DynamoDB table
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from midworld.dal.dynamodb_handler import DynamoDBHandler

    return DynamoDBHandler(table_name=table_name, endpoint_url=endpoint_url)


__all__ = [
    'CargoDalHandler',
    'get_dal_handler',
]
