"""Little Bird lock vendor gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Dict

import httpx

from src.domain.entities.actuation import ActuationStatus, ActuatorResponse
from src.domain.entities.errors import ActuatorError
from src.domain.gateways.lock_actuator_gateway import ILockActuatorGateway
from src.shared import get_logger

logger = get_logger(__name__)


class LittleBirdLockGateway(ILockActuatorGateway):
    """HTTP client for the vendor endpoint that locks and unlocks a panel lock."""

    def __init__(
        self,
        base_url: str,
        property_id: str,
        unit_id: str,
        lock_id: str,
        auth_token: str,
        api_version: str = ">=0.8.0 <2.0.0",
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._property_id = property_id
        self._unit_id = unit_id
        self._lock_id = lock_id
        self._auth_token = auth_token
        self._api_version = api_version
        self._timeout = timeout

    @property
    def lock_url(self) -> str:
        return (
            f"{self._base_url}/properties/{self._property_id}"
            f"/units/{self._unit_id}/panel/devices/locks/{self._lock_id}"
        )

    async def set_status(self, status: ActuationStatus) -> ActuatorResponse:
        """POST the requested status. The response body is logged, not parsed."""

        url = self.lock_url
        logger.info(
            "lock_vendor.set_status.request",
            url=url,
            status=status.value,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    url,
                    headers=self._build_headers(),
                    json={"status": status.value},
                )
        except httpx.RequestError as exc:
            logger.error(
                "lock_vendor.set_status.request_error",
                url=url,
                status=status.value,
                error=str(exc),
                exc_info=exc,
            )
            raise ActuatorError(
                f"Failed to reach lock vendor: {exc}",
                details={"status": status.value},
            ) from exc

        if response.status_code >= 400:
            logger.warning(
                "lock_vendor.set_status.http_error",
                status_code=response.status_code,
                response_text=response.text,
                status=status.value,
            )
        else:
            logger.info(
                "lock_vendor.set_status.response",
                status_code=response.status_code,
                response_text=response.text,
                status=status.value,
            )

        return ActuatorResponse(status_code=response.status_code, body=response.text)

    def _build_headers(self) -> Dict[str, str]:
        token = self._auth_token
        if token and not token.lower().startswith("bearer "):
            token = f"Bearer {token}"
        return {
            "authorization": token,
            "api-version": self._api_version,
            "accept": "application/json",
            "content-type": "application/json",
        }
