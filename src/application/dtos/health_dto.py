"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import BridgeHealth, DependencyStatus, ServiceStatus


class StoreHealthDTO(BaseModel):
    """Device state store check."""

    status: ServiceStatus
    backend: Optional[str] = Field(default=None, description="mongo or memory")
    message: Optional[str] = None
    latency_ms: Optional[float] = None
    checked_at: datetime

    @classmethod
    def from_domain(cls, check: DependencyStatus) -> "StoreHealthDTO":
        return cls(
            status=check.status,
            backend=check.target,
            message=check.message,
            latency_ms=check.latency_ms,
            checked_at=check.checked_at,
        )


class EndpointHealthDTO(BaseModel):
    """Reachability of an outbound HTTP dependency."""

    status: ServiceStatus
    url: Optional[str] = None
    http_status: Optional[int] = Field(
        default=None, description="Status code of the probe, when one was received"
    )
    message: Optional[str] = None
    latency_ms: Optional[float] = None
    checked_at: datetime

    @classmethod
    def from_domain(cls, check: DependencyStatus) -> "EndpointHealthDTO":
        return cls(
            status=check.status,
            url=check.target,
            http_status=check.http_status,
            message=check.message,
            latency_ms=check.latency_ms,
            checked_at=check.checked_at,
        )


class BridgeHealthDTO(BaseModel):
    """Body of GET /health."""

    status: ServiceStatus = Field(description="Overall bridge status")
    device_store: StoreHealthDTO
    homegraph: EndpointHealthDTO
    lock_vendor: EndpointHealthDTO

    @classmethod
    def from_domain(cls, health: BridgeHealth) -> "BridgeHealthDTO":
        return cls(
            status=health.status,
            device_store=StoreHealthDTO.from_domain(health.device_store),
            homegraph=EndpointHealthDTO.from_domain(health.homegraph),
            lock_vendor=EndpointHealthDTO.from_domain(health.lock_vendor),
        )


class StoreInfoDTO(BaseModel):
    backend: str
    mongo_uri: Optional[str] = Field(
        default=None, description="Connection URI without credentials"
    )
    collection: Optional[str] = None


class HomeGraphInfoDTO(BaseModel):
    url: str
    agent_user_id: str


class LockVendorInfoDTO(BaseModel):
    url: str
    lock_id: str
    recent_actuations: Dict[str, int] = Field(
        default_factory=dict,
        description="Outcome counts over the most recent actuations",
    )


class BridgeInfoDTO(BaseModel):
    """Body of GET /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    device_ids: List[str] = Field(description="Devices exposed during SYNC")
    store: StoreInfoDTO
    homegraph: HomeGraphInfoDTO
    lock_vendor: LockVendorInfoDTO

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Smart Home Lock Bridge",
                "description": "Smart home fulfillment for a vendor door lock",
                "version": "1.0.0",
                "environment": "production",
                "git_commit": "abcdef1",
                "build_time": "2024-09-09T11:30:00Z",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "degraded",
                "device_ids": ["lock"],
                "store": {
                    "backend": "mongo",
                    "mongo_uri": "mongodb://mongo:27017/smarthome_db",
                    "collection": "device_states",
                },
                "homegraph": {
                    "url": "https://homegraph.googleapis.com/v1",
                    "agent_user_id": "123",
                },
                "lock_vendor": {
                    "url": "https://api.littlebirdliving.com",
                    "lock_id": "front-door",
                    "recent_actuations": {"succeeded": 12, "failed": 1},
                },
            }
        }
    }
