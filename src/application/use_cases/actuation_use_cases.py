"""Use cases exposing the history of vendor lock actuations."""

from typing import Optional
from uuid import UUID

from src.application.dtos.actuation_dto import ActuationDTO, ActuationListDTO
from src.domain.ports.actuation_dispatcher import IActuationDispatcher


class GetActuationsUseCase:
    def __init__(self, actuation_dispatcher: IActuationDispatcher) -> None:
        self._dispatcher = actuation_dispatcher

    async def execute(self, limit: int = 50) -> ActuationListDTO:
        records = self._dispatcher.list_recent(limit=limit)
        return ActuationListDTO(
            actuations=[ActuationDTO.from_domain(record) for record in records]
        )


class GetActuationByIdUseCase:
    def __init__(self, actuation_dispatcher: IActuationDispatcher) -> None:
        self._dispatcher = actuation_dispatcher

    async def execute(self, actuation_id: UUID) -> Optional[ActuationDTO]:
        record = self._dispatcher.get(actuation_id)
        return ActuationDTO.from_domain(record) if record is not None else None
