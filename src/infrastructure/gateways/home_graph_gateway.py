"""HomeGraph gateway implementation - Infrastructure layer."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import google.auth
import google.auth.exceptions
import httpx
from google.auth.credentials import Credentials
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from src.domain.entities.errors import PlatformIngestionError
from src.domain.gateways.home_graph_gateway import IHomeGraphGateway
from src.shared import get_logger

logger = get_logger(__name__)

HOMEGRAPH_SCOPE = "https://www.googleapis.com/auth/homegraph"


class HomeGraphGateway(IHomeGraphGateway):
    """HTTP client for the HomeGraph v1 API."""

    def __init__(
        self,
        base_url: str,
        credentials_path: Optional[str] = None,
        timeout: float = 30.0,
        credentials: Optional[Credentials] = None,
    ):
        """
        Initialize HomeGraph Gateway.

        Args:
            base_url: HomeGraph API root, e.g. https://homegraph.googleapis.com/v1
            credentials_path: Service account key file. Application default
                credentials are used when omitted.
            timeout: Timeout in seconds for each HTTP call
            credentials: Pre-built credentials, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._credentials_path = credentials_path
        self._credentials = credentials

    async def request_sync(self, agent_user_id: str) -> Dict[str, Any]:
        logger.info("homegraph.request_sync.request", agent_user_id=agent_user_id)
        return await self._post(
            "devices:requestSync",
            {"agentUserId": agent_user_id},
            operation="request_sync",
        )

    async def report_state(
        self,
        *,
        request_id: str,
        agent_user_id: str,
        states: Dict[str, Dict[str, Any]],
    ) -> Dict[str, Any]:
        payload = {
            "requestId": request_id,
            "agentUserId": agent_user_id,
            "payload": {"devices": {"states": states}},
        }
        logger.info(
            "homegraph.report_state.request",
            request_id=request_id,
            agent_user_id=agent_user_id,
            device_ids=sorted(states),
        )
        return await self._post(
            "devices:reportStateAndNotification",
            payload,
            operation="report_state",
        )

    async def _post(
        self, path: str, payload: Dict[str, Any], *, operation: str
    ) -> Dict[str, Any]:
        url = f"{self.base_url}/{path}"

        try:
            headers = await self._build_headers()
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, headers=headers, json=payload)
                response.raise_for_status()

                body = response.json() if response.content else {}
                logger.info(
                    f"homegraph.{operation}.response",
                    status_code=response.status_code,
                    body=body,
                )
                return body

        except google.auth.exceptions.GoogleAuthError as e:
            logger.error(
                f"homegraph.{operation}.auth_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise PlatformIngestionError(
                f"Failed to authenticate against HomeGraph: {str(e)}"
            ) from e

        except httpx.HTTPStatusError as e:
            logger.error(
                f"homegraph.{operation}.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
                exc_info=e,
            )
            raise PlatformIngestionError(
                f"HomeGraph returned HTTP {e.response.status_code}: "
                f"{e.response.text}",
                details={"status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                f"homegraph.{operation}.request_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise PlatformIngestionError(
                f"Failed to communicate with HomeGraph: {str(e)}"
            ) from e

    async def _build_headers(self) -> Dict[str, str]:
        token = await asyncio.to_thread(self._access_token)
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def _access_token(self) -> str:
        if self._credentials is None:
            self._credentials = self._load_credentials()
        if not self._credentials.valid:
            self._credentials.refresh(Request())
        return self._credentials.token

    def _load_credentials(self) -> Credentials:
        if self._credentials_path:
            try:
                return service_account.Credentials.from_service_account_file(
                    self._credentials_path, scopes=[HOMEGRAPH_SCOPE]
                )
            except (OSError, ValueError) as e:
                logger.error(
                    "homegraph.credentials.load_failed",
                    path=self._credentials_path,
                    error=str(e),
                )
                raise PlatformIngestionError(
                    f"Failed to load HomeGraph credentials: {str(e)}",
                    details={"path": self._credentials_path},
                ) from e
        credentials, _ = google.auth.default(scopes=[HOMEGRAPH_SCOPE])
        return credentials
