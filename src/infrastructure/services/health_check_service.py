"""Infrastructure implementation of the bridge health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Union

import httpx

from src.domain.entities.health import (
    BridgeHealth,
    Dependency,
    DependencyStatus,
    ServiceStatus,
)
from src.domain.ports.health_check import IHealthCheckService
from src.domain.repositories.device_state_repository import IDeviceStateRepository
from src.shared import get_logger

logger = get_logger(__name__)


def _elapsed_ms(start: float) -> float:
    return (perf_counter() - start) * 1000


class HealthCheckService(IHealthCheckService):
    """Pings the state store and probes HomeGraph and the lock vendor over HTTP."""

    def __init__(
        self,
        state_repository: IDeviceStateRepository,
        store_backend: str,
        home_graph_url: str,
        lock_vendor_url: str,
        *,
        http_timeout: float = 5.0,
    ) -> None:
        self._state_repository = state_repository
        self._store_backend = store_backend
        self._home_graph_url = home_graph_url
        self._lock_vendor_url = lock_vendor_url
        self._http_timeout = http_timeout

    async def evaluate(self) -> BridgeHealth:
        store, homegraph, lock_vendor = await asyncio.gather(
            self._check_store(),
            self._probe(Dependency.HOMEGRAPH, self._home_graph_url),
            self._probe(Dependency.LOCK_VENDOR, self._lock_vendor_url),
            return_exceptions=True,
        )
        return BridgeHealth(
            device_store=self._settle(Dependency.DEVICE_STORE, store),
            homegraph=self._settle(Dependency.HOMEGRAPH, homegraph),
            lock_vendor=self._settle(Dependency.LOCK_VENDOR, lock_vendor),
        )

    @staticmethod
    def _settle(
        dependency: Dependency, result: Union[DependencyStatus, BaseException]
    ) -> DependencyStatus:
        if isinstance(result, BaseException):
            logger.error(
                "health.check.crashed", dependency=dependency.value, error=str(result)
            )
            return DependencyStatus(
                dependency=dependency, status=ServiceStatus.DOWN, message=str(result)
            )
        return result

    async def _check_store(self) -> DependencyStatus:
        start = perf_counter()
        try:
            await self._state_repository.ping()
        except Exception as exc:
            return DependencyStatus(
                dependency=Dependency.DEVICE_STORE,
                status=ServiceStatus.DOWN,
                target=self._store_backend,
                message=f"{self._store_backend} store ping failed: {exc}",
                latency_ms=_elapsed_ms(start),
            )
        return DependencyStatus(
            dependency=Dependency.DEVICE_STORE,
            status=ServiceStatus.UP,
            target=self._store_backend,
            message=f"{self._store_backend} store reachable",
            latency_ms=_elapsed_ms(start),
        )

    async def _probe(self, dependency: Dependency, url: str) -> DependencyStatus:
        """Reachability only. Any answer below 500 counts as up, auth errors included."""
        if not url:
            return DependencyStatus(
                dependency=dependency,
                status=ServiceStatus.UNKNOWN,
                message="URL not configured",
            )

        start = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            return DependencyStatus(
                dependency=dependency,
                status=ServiceStatus.DOWN,
                target=url,
                message=f"HTTP request failed: {exc}",
                latency_ms=_elapsed_ms(start),
            )

        return DependencyStatus(
            dependency=dependency,
            status=(
                ServiceStatus.DOWN
                if response.status_code >= 500
                else ServiceStatus.UP
            ),
            target=url,
            message=f"HTTP {response.status_code}",
            http_status=response.status_code,
            latency_ms=_elapsed_ms(start),
        )
