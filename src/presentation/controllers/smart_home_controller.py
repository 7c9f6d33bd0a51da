"""
Smart Home Router - Presentation Layer

Fulfillment webhook called by the smart home platform, plus the trigger
that asks the platform to re-SYNC the linked account.
"""

from typing import Any, Dict, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from src.application.dtos.intent_dto import FulfillmentRequestDTO
from src.application.use_cases.smart_home_use_cases import FulfillmentUseCase
from src.application.use_cases.state_reporting_use_cases import RequestSyncUseCase
from src.domain.entities.errors import PlatformIngestionError, UnsupportedIntentError
from src.shared import clear_request_context, get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Smart Home"])


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return None


@router.post("/smarthome")
@inject
async def fulfillment(
    request_body: FulfillmentRequestDTO,
    authorization: Optional[str] = Header(default=None),
    fulfillment_use_case: FulfillmentUseCase = Depends(
        Provide["fulfillment_use_case"]
    ),
) -> Dict[str, Any]:
    """
    Handle a SYNC, QUERY, EXECUTE or DISCONNECT intent.

    Per-device failures are reported inside the payload. Only an unknown
    intent or a payload that does not fit its intent fails the request.
    """
    try:
        response = await fulfillment_use_case.execute(
            request_body, _bearer_token(authorization)
        )
        return response.model_dump(mode="json", by_alias=True, exclude_none=True)

    except UnsupportedIntentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        logger.warning(
            "fulfillment.payload_invalid", intent=request_body.intent, errors=errors
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=errors
        )
    finally:
        clear_request_context()


@router.post("/requestsync")
@inject
async def request_sync(
    request_sync_use_case: RequestSyncUseCase = Depends(
        Provide["request_sync_use_case"]
    ),
):
    """Ask HomeGraph to call SYNC again, e.g. after the catalog changed."""
    headers = {"Access-Control-Allow-Origin": "*"}
    try:
        body = await request_sync_use_case.execute()
        return JSONResponse(content=body, headers=headers)

    except PlatformIngestionError as e:
        logger.error("request_sync.failed", error=e.message)
        return PlainTextResponse(
            f"Error requesting sync: {e.message}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=headers,
        )
