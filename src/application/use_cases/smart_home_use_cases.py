"""
Smart Home Use Cases - Application Layer

Fulfillment of the four platform intents. SYNC describes the catalog, QUERY
reads the device state store, EXECUTE turns commands into store writes and
vendor actuations, and DISCONNECT acknowledges account unlinking.
"""

import asyncio
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from src.application.dtos.intent_dto import (
    DeviceDescriptorDTO,
    DisconnectResponseDTO,
    ExecuteCommandResultDTO,
    ExecutePayloadDTO,
    ExecutePayloadResponseDTO,
    ExecuteResponseDTO,
    ExecutionDTO,
    FulfillmentRequestDTO,
    QueryPayloadDTO,
    QueryPayloadResponseDTO,
    QueryResponseDTO,
    SyncPayloadDTO,
    SyncResponseDTO,
)
from src.domain.entities.errors import (
    DeviceNotFoundError,
    DomainError,
    StoreWriteError,
    UnsupportedCommandError,
    UnsupportedIntentError,
)
from src.domain.entities.intents import CommandOutcome, CommandStatus, Intent
from src.domain.entities.state_change import ChangeSource
from src.domain.ports.account_resolver import IAccountResolver
from src.domain.ports.actuation_dispatcher import IActuationDispatcher
from src.domain.ports.device_catalog import IDeviceCatalog
from src.domain.repositories.device_state_repository import IDeviceStateRepository
from src.domain.services.command_mapper import plan_command
from src.shared import bind_request_context, get_logger

logger = get_logger(__name__)

FulfillmentResponse = Union[
    SyncResponseDTO, QueryResponseDTO, ExecuteResponseDTO, DisconnectResponseDTO
]


def _error_placeholder(error: DomainError) -> Dict[str, Any]:
    return {"status": CommandStatus.ERROR.value, "errorCode": error.error_code}


def _unique(device_ids: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(device_ids))


class SyncDevicesUseCase:
    """Describe every catalog device for the linked account."""

    def __init__(
        self, device_catalog: IDeviceCatalog, account_resolver: IAccountResolver
    ) -> None:
        self._catalog = device_catalog
        self._account_resolver = account_resolver

    async def execute(
        self, request: FulfillmentRequestDTO, access_token: Optional[str] = None
    ) -> SyncResponseDTO:
        agent_user_id = self._account_resolver.resolve(access_token)
        devices = [
            DeviceDescriptorDTO.from_domain(device)
            for device in self._catalog.list_devices()
        ]
        logger.info(
            "sync.completed",
            agent_user_id=agent_user_id,
            device_count=len(devices),
        )
        return SyncResponseDTO(
            request_id=request.request_id,
            payload=SyncPayloadDTO(agent_user_id=agent_user_id, devices=devices),
        )


class QueryDevicesUseCase:
    """Read the current state of each requested device."""

    def __init__(self, device_state_repository: IDeviceStateRepository) -> None:
        self._repository = device_state_repository

    async def execute(self, request: FulfillmentRequestDTO) -> QueryResponseDTO:
        payload = QueryPayloadDTO.model_validate(request.payload)
        device_ids = _unique([device.id for device in payload.devices])

        results = await asyncio.gather(
            *(self._query_device(device_id) for device_id in device_ids)
        )

        logger.info("query.completed", device_ids=device_ids)
        return QueryResponseDTO(
            request_id=request.request_id,
            payload=QueryPayloadResponseDTO(devices=dict(zip(device_ids, results))),
        )

    async def _query_device(self, device_id: str) -> Dict[str, Any]:
        try:
            state = await self._repository.get(device_id)
        except Exception as exc:
            logger.error(
                "query.device_read_failed",
                device_id=device_id,
                error=str(exc),
                exc_info=exc,
            )
            return _error_placeholder(StoreWriteError(str(exc)))

        platform_state = state.to_platform_state() if state is not None else {}
        if not platform_state:
            logger.warning("query.device_not_found", device_id=device_id)
            return _error_placeholder(DeviceNotFoundError(device_id))
        return platform_state


PairResult = Union[Dict[str, Any], DomainError]


class ExecuteCommandsUseCase:
    """
    Apply every (device, command) pair of an EXECUTE request.

    Pairs run concurrently. For each pair the vendor actuation is dispatched
    in the background and the trait delta is merged into the store, which
    in turn publishes the change for state reporting. Devices with the same
    outcome share one entry of the response.
    """

    def __init__(
        self,
        device_state_repository: IDeviceStateRepository,
        device_catalog: IDeviceCatalog,
        actuation_dispatcher: IActuationDispatcher,
        actuated_device_ids: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Args:
            device_state_repository: Store receiving the trait deltas
            device_catalog: Devices that may be commanded
            actuation_dispatcher: Background runner for vendor calls
            actuated_device_ids: Devices wired to the physical lock. Every
                catalog device is actuated when omitted.
        """
        self._repository = device_state_repository
        self._catalog = device_catalog
        self._dispatcher = actuation_dispatcher
        self._actuated_device_ids = (
            set(actuated_device_ids) if actuated_device_ids is not None else None
        )

    async def execute(self, request: FulfillmentRequestDTO) -> ExecuteResponseDTO:
        payload = ExecutePayloadDTO.model_validate(request.payload)
        pairs: List[Tuple[str, ExecutionDTO]] = [
            (device.id, execution)
            for group in payload.commands
            for device in group.devices
            for execution in group.execution
        ]

        results = await asyncio.gather(
            *(self._execute_pair(device_id, execution) for device_id, execution in pairs)
        )

        outcomes = self._collect_outcomes(
            [device_id for device_id, _ in pairs], list(results)
        )
        commands = self._group_outcomes(outcomes)

        logger.info(
            "execute.completed",
            pair_count=len(pairs),
            device_count=len(outcomes),
            failed_devices=[
                outcome.device_id
                for outcome in outcomes
                if outcome.status is CommandStatus.ERROR
            ],
        )
        return ExecuteResponseDTO(
            request_id=request.request_id,
            payload=ExecutePayloadResponseDTO(commands=commands),
        )

    async def _execute_pair(
        self, device_id: str, execution: ExecutionDTO
    ) -> PairResult:
        try:
            device = self._catalog.get(device_id)
            if device is None:
                raise DeviceNotFoundError(device_id)

            plan = plan_command(execution.command, execution.params)
            if not device.supports(plan.delta.trait):
                raise UnsupportedCommandError(
                    execution.command, details={"device_id": device_id}
                )

            if plan.actuation is not None and self._is_actuated(device_id):
                self._dispatcher.dispatch(device_id, plan.actuation)

            await self._repository.merge_trait(
                device_id,
                plan.delta.trait,
                plan.delta.values,
                source=ChangeSource.COMMAND,
            )
            return dict(plan.delta.values)

        except DomainError as exc:
            logger.warning(
                "execute.command_failed",
                device_id=device_id,
                command=execution.command,
                error_code=exc.error_code,
                error=exc.message,
            )
            return exc

        except Exception as exc:
            logger.error(
                "execute.command_crashed",
                device_id=device_id,
                command=execution.command,
                error=str(exc),
                exc_info=exc,
            )
            return StoreWriteError(str(exc))

    def _is_actuated(self, device_id: str) -> bool:
        return self._actuated_device_ids is None or device_id in self._actuated_device_ids

    @staticmethod
    def _collect_outcomes(
        device_ids: List[str], results: List[PairResult]
    ) -> List[CommandOutcome]:
        """Fold pair results into one outcome per device, in first-seen order."""
        outcomes: Dict[str, CommandOutcome] = {}
        for device_id, result in zip(device_ids, results):
            outcome = outcomes.setdefault(
                device_id,
                CommandOutcome(
                    device_id=device_id,
                    status=CommandStatus.SUCCESS,
                    states={"online": True},
                ),
            )
            if isinstance(result, DomainError):
                if outcome.status is not CommandStatus.ERROR:
                    outcome.status = CommandStatus.ERROR
                    outcome.error_code = result.error_code
                    outcome.states = {}
            elif outcome.status is CommandStatus.SUCCESS:
                outcome.states.update(result)
        return list(outcomes.values())

    @staticmethod
    def _group_outcomes(
        outcomes: List[CommandOutcome],
    ) -> List[ExecuteCommandResultDTO]:
        groups: Dict[Tuple[Any, ...], ExecuteCommandResultDTO] = {}
        for outcome in outcomes:
            key = (
                outcome.status,
                outcome.error_code,
                tuple(sorted(outcome.states.items())),
            )
            entry = groups.get(key)
            if entry is None:
                groups[key] = ExecuteCommandResultDTO(
                    ids=[outcome.device_id],
                    status=outcome.status,
                    states=dict(outcome.states) or None,
                    error_code=outcome.error_code,
                )
            else:
                entry.ids.append(outcome.device_id)
        return list(groups.values())


class DisconnectUseCase:
    """Acknowledge that the user unlinked the account."""

    def __init__(self, account_resolver: IAccountResolver) -> None:
        self._account_resolver = account_resolver

    async def execute(
        self, request: FulfillmentRequestDTO, access_token: Optional[str] = None
    ) -> DisconnectResponseDTO:
        logger.info(
            "disconnect.account_unlinked",
            agent_user_id=self._account_resolver.resolve(access_token),
        )
        return DisconnectResponseDTO()


class FulfillmentUseCase:
    """Route a fulfillment request to the handler of its first intent."""

    def __init__(
        self,
        sync_use_case: SyncDevicesUseCase,
        query_use_case: QueryDevicesUseCase,
        execute_use_case: ExecuteCommandsUseCase,
        disconnect_use_case: DisconnectUseCase,
    ) -> None:
        self._sync = sync_use_case
        self._query = query_use_case
        self._execute = execute_use_case
        self._disconnect = disconnect_use_case

    async def execute(
        self, request: FulfillmentRequestDTO, access_token: Optional[str] = None
    ) -> FulfillmentResponse:
        """
        Raises:
            UnsupportedIntentError: If the intent is not one of the four known ones
            pydantic.ValidationError: If the payload does not fit the intent
        """
        intent = request.intent
        bind_request_context(request_id=request.request_id, intent=intent)
        logger.info("fulfillment.received", intent=intent)

        if intent == Intent.SYNC.value:
            return await self._sync.execute(request, access_token)
        if intent == Intent.QUERY.value:
            return await self._query.execute(request)
        if intent == Intent.EXECUTE.value:
            return await self._execute.execute(request)
        if intent == Intent.DISCONNECT.value:
            return await self._disconnect.execute(request, access_token)

        logger.warning("fulfillment.unsupported_intent", intent=intent)
        raise UnsupportedIntentError(intent)
