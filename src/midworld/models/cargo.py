"""
Cargo domain model for the business logic layer.

A ``CargoRecord`` is the single DynamoDB item describing a physical cargo
item. It is keyed by ``partitionKey``/``sortKey`` so storing the same cargo id
twice overwrites the earlier record.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CARGO_KEY_PREFIX = 'CARGO#'
METADATA_SORT_KEY = 'METADATA'


class CargoStatus(str, Enum):
    """Cargo status enumeration."""

    IN_STORAGE = 'IN_STORAGE'


# Attributes computed by the service; callers may not override them.
RESERVED_ATTRIBUTES = frozenset({'partitionKey', 'sortKey', 'status', 'updatedAt'})


def build_partition_key(cargo_id: str) -> str:
    return f'{CARGO_KEY_PREFIX}{cargo_id}'


def split_extra_fields(extra_fields: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Separate storable caller fields from ones colliding with computed attributes.

    Returns:
        Tuple of (fields to store, names that were dropped)
    """
    fields = CargoRecord.model_fields
    protected = RESERVED_ATTRIBUTES | set(fields) | {field.alias for field in fields.values() if field.alias}
    kept = {key: value for key, value in extra_fields.items() if key not in protected}
    dropped = sorted(key for key in extra_fields if key in protected)
    return kept, dropped


class CargoRecord(BaseModel):
    """Core cargo domain model, serialized with camelCase attribute names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='allow',
    )

    partition_key: Annotated[str, Field(
        description='DynamoDB partition key, CARGO#<cargoId>',
        examples=['CARGO#TEST-1']
    )]

    sort_key: Annotated[str, Field(
        description='DynamoDB sort key of the primary record'
    )] = METADATA_SORT_KEY

    cargo_id: Annotated[str, Field(
        min_length=1,
        description='Identifier of the cargo item'
    )]

    location: Annotated[str, Field(
        min_length=1,
        description='Where the cargo is stored'
    )]

    status: Annotated[CargoStatus, Field(
        description='Current status of the cargo'
    )] = CargoStatus.IN_STORAGE

    updated_at: Annotated[str, Field(
        description='ISO timestamp of the last write'
    )]

    @classmethod
    def create(
        cls,
        cargo_id: str,
        location: str,
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> 'CargoRecord':
        """
        Build a new record stamped with the current time.

        Args:
            cargo_id: Identifier of the cargo item
            location: Where the cargo is stored
            extra_fields: Caller-supplied attributes stored verbatim

        Returns:
            CargoRecord with status IN_STORAGE
        """
        return cls.model_validate({
            **(extra_fields or {}),
            'partition_key': build_partition_key(cargo_id),
            'sort_key': METADATA_SORT_KEY,
            'cargo_id': cargo_id,
            'location': location,
            'status': CargoStatus.IN_STORAGE,
            'updated_at': datetime.now(timezone.utc).isoformat(),
        })

    def to_item(self) -> Dict[str, Any]:
        """Plain JSON-compatible dict, as stored and as published."""
        return self.model_dump(mode='json', by_alias=True)
