"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import BridgeHealth


class IHealthCheckService(Protocol):
    """Interface for retrieving bridge health information."""

    async def evaluate(self) -> BridgeHealth:
        """Check the state store, HomeGraph and the lock vendor."""
        ...
