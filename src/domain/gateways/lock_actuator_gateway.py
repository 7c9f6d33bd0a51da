"""Lock vendor gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.entities.actuation import ActuationStatus, ActuatorResponse


class ILockActuatorGateway(ABC):
    """Drives the physical lock through the vendor's REST API."""

    @abstractmethod
    async def set_status(self, status: ActuationStatus) -> ActuatorResponse:
        """Request the lock to move to ``status``.

        Raises:
            ActuatorError: If the vendor cannot be reached or rejects the call
        """
        raise NotImplementedError
