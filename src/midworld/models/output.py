"""
Output models for handler responses using Pydantic.

This module defines the response bodies returned by the inventory handler and
the acknowledgement returned by the transport handler.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

CARGO_STORED_MESSAGE = 'Cargo Stored'
UNKNOWN_CARGO_ID = 'UNKNOWN'


class StoreCargoOutput(BaseModel):
    """Response body for a successfully stored cargo item."""

    message: Annotated[str, Field(
        description='Human readable outcome',
        examples=[CARGO_STORED_MESSAGE]
    )] = CARGO_STORED_MESSAGE

    id: Annotated[str, Field(
        description='Identifier of the stored cargo item',
        examples=['TEST-1']
    )]


class ErrorOutput(BaseModel):
    """Response body for any failed request."""

    error: Annotated[str, Field(
        description='Caller-facing error description',
        examples=['Missing required fields: cargoId or location', 'Internal server error']
    )]


class TransportAcknowledgement(BaseModel):
    """Acknowledgement returned after a cargo event is consumed."""

    status: Annotated[Literal['dispatched'], Field(
        description='Transport outcome'
    )] = 'dispatched'

    cargoId: Annotated[str, Field(
        description='Cargo the transport was dispatched for'
    )] = UNKNOWN_CARGO_ID
