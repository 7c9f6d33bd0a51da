"""Use cases behind GET /health and GET /info."""

from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from src.application.dtos.health_dto import (
    BridgeHealthDTO,
    BridgeInfoDTO,
    HomeGraphInfoDTO,
    LockVendorInfoDTO,
    StoreInfoDTO,
)
from src.application.models import SystemInfo
from src.domain.entities.health import BridgeHealth
from src.domain.ports.actuation_dispatcher import IActuationDispatcher
from src.domain.ports.device_catalog import IDeviceCatalog
from src.domain.ports.health_check import IHealthCheckService
from src.shared import EnumStoreBackend, get_logger

logger = get_logger(__name__)


def redact_credentials(url: str) -> str:
    """Drop user and password from a connection URI."""
    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url
    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit(
        (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
    )


class GetBridgeHealthUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> BridgeHealthDTO:
        health = await self._health_check_service.evaluate()
        _log_failing(health)
        return BridgeHealthDTO.from_domain(health)


class GetBridgeInfoUseCase:
    """
    Describe the running bridge: build metadata, catalog devices, where state
    is stored and reported, and how recent lock actuations went.
    """

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
        device_catalog: IDeviceCatalog,
        actuation_dispatcher: IActuationDispatcher,
        actuation_window: int = 50,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info
        self._catalog = device_catalog
        self._dispatcher = actuation_dispatcher
        self._actuation_window = actuation_window

    async def execute(self, started_at: Optional[datetime]) -> BridgeInfoDTO:
        health = await self._health_check_service.evaluate()
        _log_failing(health)

        now = datetime.now(timezone.utc)
        started = started_at or now

        return BridgeInfoDTO(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            status=health.status,
            device_ids=[device.device_id for device in self._catalog.list_devices()],
            store=self._store_info(),
            homegraph=HomeGraphInfoDTO(
                url=self._info.homegraph_url,
                agent_user_id=self._info.agent_user_id,
            ),
            lock_vendor=LockVendorInfoDTO(
                url=self._info.lock_vendor_url,
                lock_id=self._info.lock_id,
                recent_actuations=self._actuation_outcomes(),
            ),
        )

    def _store_info(self) -> StoreInfoDTO:
        if self._info.store_backend != EnumStoreBackend.MONGO.value:
            return StoreInfoDTO(backend=self._info.store_backend)
        return StoreInfoDTO(
            backend=self._info.store_backend,
            mongo_uri=redact_credentials(self._info.mongo_uri),
            collection=self._info.state_collection,
        )

    def _actuation_outcomes(self) -> Dict[str, int]:
        records = self._dispatcher.list_recent(self._actuation_window)
        return dict(Counter(record.outcome.value for record in records))


def _log_failing(health: BridgeHealth) -> None:
    failing = health.failing()
    if failing:
        logger.warning(
            "health.dependencies.failing",
            status=health.status.value,
            dependencies=[dependency.value for dependency in failing],
        )
