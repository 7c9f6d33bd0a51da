"""
Account-linking stub endpoints - Presentation Layer

NON-PRODUCTION. Fake OAuth authorize, login and token endpoints that let
the platform complete account linking against fixed credentials.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Form, HTTPException, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse

from src.application.dtos.auth_dto import TokenResponseDTO
from src.application.use_cases.auth_use_cases import (
    AuthorizeUseCase,
    IssueTokenUseCase,
    LoginPageUseCase,
    UnsupportedGrantTypeError,
)

router = APIRouter(tags=["Account linking (non-production)"])


@router.get("/login", response_class=HTMLResponse)
@inject
async def login_page(
    responseurl: str = Query(default="", description="Where to send the user"),
    login_page_use_case: LoginPageUseCase = Depends(Provide["login_page_use_case"]),
) -> HTMLResponse:
    return HTMLResponse(content=login_page_use_case.render(responseurl))


@router.post("/login")
@inject
async def login(
    responseurl: str = Form(default="/"),
    login_page_use_case: LoginPageUseCase = Depends(Provide["login_page_use_case"]),
) -> RedirectResponse:
    return RedirectResponse(
        url=login_page_use_case.redirect_target(responseurl),
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/fakeauth")
@inject
async def fake_authorize(
    redirect_uri: str = Query(description="Platform redirect URI"),
    state: str = Query(default="", description="Opaque OAuth state"),
    authorize_use_case: AuthorizeUseCase = Depends(Provide["authorize_use_case"]),
) -> RedirectResponse:
    return RedirectResponse(
        url=authorize_use_case.execute(redirect_uri, state),
        status_code=status.HTTP_302_FOUND,
    )


@router.api_route(
    "/faketoken", methods=["GET", "POST"], response_model=TokenResponseDTO,
    response_model_exclude_none=True,
)
@inject
async def fake_token(
    grant_type_query: Optional[str] = Query(default=None, alias="grant_type"),
    grant_type_form: Optional[str] = Form(default=None, alias="grant_type"),
    issue_token_use_case: IssueTokenUseCase = Depends(
        Provide["issue_token_use_case"]
    ),
) -> TokenResponseDTO:
    """Grant type is read from the query string first, then the form body."""
    grant_type = grant_type_query or grant_type_form or ""
    try:
        return issue_token_use_case.execute(grant_type)
    except UnsupportedGrantTypeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="unsupported_grant_type",
        )
