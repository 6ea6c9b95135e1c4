"""
Input models for request validation using Pydantic.

This module defines the input model used for validating cargo storage
requests arriving at the inventory Lambda function.
"""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class StoreCargoRequest(BaseModel):
    """Request model for storing a cargo item. Unknown fields are kept."""

    model_config = ConfigDict(extra='allow')

    cargoId: Annotated[str, Field(
        min_length=1,
        description='Identifier of the cargo item',
        examples=['CARGO-999', 'TEST-1']
    )]

    location: Annotated[str, Field(
        min_length=1,
        description='Where the cargo is being stored',
        examples=['DOCK-Z', 'Sector 7']
    )]

    @property
    def extra_fields(self) -> Dict[str, Any]:
        """Caller-supplied fields beyond cargoId and location."""
        return dict(self.model_extra or {})
