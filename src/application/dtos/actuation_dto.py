"""DTOs for lock actuation records."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.actuation import (
    ActuationOutcome,
    ActuationRecord,
    ActuationStatus,
)


class ActuationDTO(BaseModel):
    """Serializable view of a dispatched vendor call."""

    id: UUID = Field(description="Actuation identifier")
    device_id: str = Field(description="Device the command targeted")
    status: ActuationStatus = Field(description="Status sent to the vendor")
    outcome: ActuationOutcome = Field(description="Result of the vendor call")
    requested_at: datetime = Field(description="When the call was dispatched")
    completed_at: Optional[datetime] = Field(
        default=None, description="When the call finished"
    )
    response_status: Optional[int] = Field(
        default=None, description="HTTP status returned by the vendor"
    )
    response_body: Optional[str] = Field(
        default=None, description="Raw vendor response body"
    )
    error: Optional[str] = Field(default=None, description="Failure reason")

    @classmethod
    def from_domain(cls, record: ActuationRecord) -> "ActuationDTO":
        return cls(
            id=record.id,
            device_id=record.device_id,
            status=record.status,
            outcome=record.outcome,
            requested_at=record.requested_at,
            completed_at=record.completed_at,
            response_status=record.response_status,
            response_body=record.response_body,
            error=record.error,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "3f0e2f5c-3c8a-4f57-9a43-1d2d7c0e6b1a",
                "device_id": "lock",
                "status": "SECURED",
                "outcome": "succeeded",
                "requested_at": "2024-09-09T12:00:00Z",
                "completed_at": "2024-09-09T12:00:01Z",
                "response_status": 200,
                "response_body": "{}",
                "error": None,
            }
        }
    }


class ActuationListDTO(BaseModel):
    actuations: List[ActuationDTO] = Field(
        default_factory=list, description="Most recent actuations first"
    )
