"""Domain entities for the downstream lock actuator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class ActuationStatus(str, Enum):
    """Physical lock position requested from the vendor API."""

    SECURED = "SECURED"
    UNSECURED = "UNSECURED"

    @classmethod
    def for_lock(cls, lock: bool) -> "ActuationStatus":
        return cls.SECURED if lock else cls.UNSECURED


class ActuationOutcome(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class ActuationRecord:
    """Tracks one fire-and-forget call to the lock vendor."""

    device_id: str
    status: ActuationStatus
    id: UUID = field(default_factory=uuid4)
    outcome: ActuationOutcome = ActuationOutcome.PENDING
    requested_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None
    response_status: Optional[int] = None
    response_body: Optional[str] = None
    error: Optional[str] = None

    def mark_succeeded(self, response_status: int, response_body: str) -> None:
        self.outcome = ActuationOutcome.SUCCEEDED
        self.response_status = response_status
        self.response_body = response_body
        self.completed_at = datetime.now(timezone.utc)

    def mark_failed(self, error: str) -> None:
        self.outcome = ActuationOutcome.FAILED
        self.error = error
        self.completed_at = datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class ActuatorResponse:
    """Raw vendor response. The body is logged, never interpreted."""

    status_code: int
    body: str
