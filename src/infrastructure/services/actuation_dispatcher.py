"""Background dispatcher for lock vendor calls."""

from __future__ import annotations

import asyncio
from collections import OrderedDict
from typing import List, Optional, Set
from uuid import UUID

from src.domain.entities.actuation import ActuationRecord, ActuationStatus
from src.domain.entities.errors import ActuatorError
from src.domain.gateways.lock_actuator_gateway import ILockActuatorGateway
from src.domain.ports.actuation_dispatcher import IActuationDispatcher
from src.shared import get_logger

logger = get_logger(__name__)


class BackgroundActuationDispatcher(IActuationDispatcher):
    """Runs each actuation as an asyncio task bounded by ``timeout_seconds``.

    The newest ``history_size`` records are kept so failures can be inspected
    after the command response has been sent.
    """

    def __init__(
        self,
        gateway: ILockActuatorGateway,
        timeout_seconds: float = 15.0,
        history_size: int = 100,
    ) -> None:
        self._gateway = gateway
        self._timeout_seconds = timeout_seconds
        self._history_size = history_size
        self._records: "OrderedDict[UUID, ActuationRecord]" = OrderedDict()
        self._pending: Set[asyncio.Task] = set()

    def dispatch(self, device_id: str, status: ActuationStatus) -> ActuationRecord:
        record = ActuationRecord(device_id=device_id, status=status)
        self._remember(record)

        logger.info(
            "actuation.dispatched",
            actuation_id=str(record.id),
            device_id=device_id,
            status=status.value,
        )

        task = asyncio.get_running_loop().create_task(self._run(record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return record

    def get(self, actuation_id: UUID) -> Optional[ActuationRecord]:
        return self._records.get(actuation_id)

    def list_recent(self, limit: int = 50) -> List[ActuationRecord]:
        return list(reversed(self._records.values()))[:limit]

    async def drain(self) -> None:
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _run(self, record: ActuationRecord) -> None:
        try:
            response = await asyncio.wait_for(
                self._gateway.set_status(record.status),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            record.mark_failed(f"Timed out after {self._timeout_seconds}s")
            logger.error(
                "actuation.timeout",
                actuation_id=str(record.id),
                device_id=record.device_id,
                timeout_seconds=self._timeout_seconds,
            )
            return
        except ActuatorError as exc:
            record.mark_failed(exc.message)
            logger.error(
                "actuation.failed",
                actuation_id=str(record.id),
                device_id=record.device_id,
                error=exc.message,
            )
            return
        except Exception as exc:
            record.mark_failed(str(exc))
            logger.error(
                "actuation.unexpected_error",
                actuation_id=str(record.id),
                device_id=record.device_id,
                error=str(exc),
                exc_info=exc,
            )
            return

        if response.status_code >= 400:
            record.mark_failed(f"Vendor returned HTTP {response.status_code}")
            record.response_status = response.status_code
            record.response_body = response.body
            logger.warning(
                "actuation.rejected",
                actuation_id=str(record.id),
                device_id=record.device_id,
                status_code=response.status_code,
            )
            return

        record.mark_succeeded(response.status_code, response.body)
        logger.info(
            "actuation.completed",
            actuation_id=str(record.id),
            device_id=record.device_id,
            status_code=response.status_code,
            response_body=response.body,
        )

    def _remember(self, record: ActuationRecord) -> None:
        self._records[record.id] = record
        while len(self._records) > self._history_size:
            self._records.popitem(last=False)
