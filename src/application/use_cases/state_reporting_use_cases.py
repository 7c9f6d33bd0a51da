"""
State Reporting Use Cases - Application Layer

Keep the platform's view of the devices current: report every committed
store change, ask the platform to re-SYNC, and accept state observed
outside the fulfillment flow.
"""

from typing import Any, Dict
from uuid import uuid4

from src.application.dtos.device_dto import DeviceStateDTO, DeviceStateUpdateDTO
from src.domain.entities.device import Trait
from src.domain.entities.errors import DeviceNotFoundError, PlatformIngestionError
from src.domain.entities.state_change import ChangeSource, StateChange
from src.domain.gateways.home_graph_gateway import IHomeGraphGateway
from src.domain.ports.account_resolver import IAccountResolver
from src.domain.ports.device_catalog import IDeviceCatalog
from src.domain.repositories.device_state_repository import IDeviceStateRepository
from src.shared import get_logger

logger = get_logger(__name__)


class ReportStateUseCase:
    """Forward committed device state to HomeGraph. Failures are logged only."""

    def __init__(
        self,
        home_graph_gateway: IHomeGraphGateway,
        account_resolver: IAccountResolver,
    ) -> None:
        self._gateway = home_graph_gateway
        self._account_resolver = account_resolver

    async def on_state_change(self, change: StateChange) -> None:
        """Bus listener entry point."""
        await self.execute(change)

    async def execute(self, change: StateChange) -> bool:
        states = {change.device_id: change.state.to_platform_state()}
        request_id = str(uuid4())
        agent_user_id = self._account_resolver.default_account()

        try:
            await self._gateway.report_state(
                request_id=request_id,
                agent_user_id=agent_user_id,
                states=states,
            )
        except PlatformIngestionError as exc:
            logger.error(
                "report_state.failed",
                device_id=change.device_id,
                change_id=str(change.change_id),
                source=change.source.value,
                request_id=request_id,
                error=exc.message,
            )
            return False

        logger.info(
            "report_state.sent",
            device_id=change.device_id,
            change_id=str(change.change_id),
            source=change.source.value,
            request_id=request_id,
        )
        return True


class RequestSyncUseCase:
    """Ask HomeGraph to issue a fresh SYNC for the default account."""

    def __init__(
        self,
        home_graph_gateway: IHomeGraphGateway,
        account_resolver: IAccountResolver,
    ) -> None:
        self._gateway = home_graph_gateway
        self._account_resolver = account_resolver

    async def execute(self) -> Dict[str, Any]:
        """
        Raises:
            PlatformIngestionError: If HomeGraph rejects or cannot be reached
        """
        agent_user_id = self._account_resolver.default_account()
        body = await self._gateway.request_sync(agent_user_id)
        logger.info("request_sync.completed", agent_user_id=agent_user_id)
        return body


class UpdateDeviceStateUseCase:
    """Overwrite the LockUnlock state of a catalog device."""

    def __init__(
        self,
        device_state_repository: IDeviceStateRepository,
        device_catalog: IDeviceCatalog,
        default_device_id: str,
    ) -> None:
        self._repository = device_state_repository
        self._catalog = device_catalog
        self._default_device_id = default_device_id

    async def execute(
        self, update: DeviceStateUpdateDTO, device_id: str = ""
    ) -> DeviceStateDTO:
        """
        Raises:
            DeviceNotFoundError: If the device is not in the catalog
            StoreWriteError: If the store rejects the write
        """
        target = device_id or self._default_device_id
        if self._catalog.get(target) is None:
            raise DeviceNotFoundError(target)

        state = await self._repository.replace_trait(
            target,
            Trait.LOCK_UNLOCK,
            update.to_trait_values(),
            source=ChangeSource.EXTERNAL,
        )
        logger.info("device_state.updated", device_id=target)
        return DeviceStateDTO.from_domain(state)
