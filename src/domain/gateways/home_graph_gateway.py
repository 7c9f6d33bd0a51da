"""
HomeGraph Gateway Interface - Domain Layer

This module defines the interface for the smart home platform's
HomeGraph API, which ingests state reports and catalog sync requests.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IHomeGraphGateway(ABC):
    """Interface for HomeGraph Gateway."""

    @abstractmethod
    async def request_sync(self, agent_user_id: str) -> Dict[str, Any]:
        """
        Ask the platform to re-pull the device catalog for an account.

        Args:
            agent_user_id: Account owning the devices

        Returns:
            The platform's response body

        Raises:
            PlatformIngestionError: If the call fails
        """
        pass

    @abstractmethod
    async def report_state(
        self,
        *,
        request_id: str,
        agent_user_id: str,
        states: Dict[str, Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Push device states into the platform's state cache.

        Args:
            request_id: Correlation identifier for the report
            agent_user_id: Account owning the devices
            states: Platform state objects keyed by device id

        Returns:
            The platform's response body

        Raises:
            PlatformIngestionError: If the call fails
        """
        pass
