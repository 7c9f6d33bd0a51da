"""
Health domain entities.

Availability of the three things the bridge talks to: the device state
store, HomeGraph and the lock vendor API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class ServiceStatus(str, Enum):
    """High-level availability for a dependency or the bridge."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


class Dependency(str, Enum):
    DEVICE_STORE = "device_store"
    HOMEGRAPH = "homegraph"
    LOCK_VENDOR = "lock_vendor"


@dataclass(slots=True)
class DependencyStatus:
    """Result of one check.

    ``target`` is the store backend for the device store and the probed URL
    for the HTTP dependencies.
    """

    dependency: Dependency
    status: ServiceStatus
    target: Optional[str] = None
    message: Optional[str] = None
    http_status: Optional[int] = None
    latency_ms: Optional[float] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class BridgeHealth:
    """Checks of every dependency, taken together.

    Intents are answered from the store alone, so only the store can take
    the bridge down. HomeGraph or vendor failures leave it degraded: state
    reports or actuations are lost while QUERY and EXECUTE keep working.
    """

    device_store: DependencyStatus
    homegraph: DependencyStatus
    lock_vendor: DependencyStatus

    @property
    def status(self) -> ServiceStatus:
        store = self.device_store.status
        if store in (ServiceStatus.DOWN, ServiceStatus.UNKNOWN):
            return store

        outbound = {self.homegraph.status, self.lock_vendor.status}
        if store is ServiceStatus.DEGRADED or outbound & {
            ServiceStatus.DOWN,
            ServiceStatus.DEGRADED,
        }:
            return ServiceStatus.DEGRADED
        if ServiceStatus.UNKNOWN in outbound:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    def failing(self) -> List[Dependency]:
        return [
            check.dependency
            for check in (self.device_store, self.homegraph, self.lock_vendor)
            if check.status is not ServiceStatus.UP
        ]
