from __future__ import annotations

import pytest
from fastapi import HTTPException

from src.application.use_cases.auth_use_cases import (
    AuthorizeUseCase,
    IssueTokenUseCase,
    LoginPageUseCase,
)
from src.presentation.controllers.auth_controller import (
    fake_authorize,
    fake_token,
    login,
    login_page,
)


@pytest.mark.asyncio
async def test_login_page_and_submit() -> None:
    page = await login_page(
        responseurl="https://platform.example/cb?code=xxxxxx",
        login_page_use_case=LoginPageUseCase(),
    )
    redirect = await login(
        responseurl="https://platform.example/cb?code=xxxxxx",
        login_page_use_case=LoginPageUseCase(),
    )

    assert b"<form" in page.body
    assert redirect.status_code == 302
    assert redirect.headers["location"] == "https://platform.example/cb?code=xxxxxx"


@pytest.mark.asyncio
async def test_fake_authorize_redirects_to_login() -> None:
    response = await fake_authorize(
        redirect_uri="https://platform.example/cb",
        state="abc",
        authorize_use_case=AuthorizeUseCase("xxxxxx"),
    )

    assert response.status_code == 302
    assert response.headers["location"].startswith("/login?responseurl=")


@pytest.mark.asyncio
async def test_fake_token_reads_query_before_form() -> None:
    use_case = IssueTokenUseCase("123access", "123refresh", 86400)

    from_query = await fake_token(
        grant_type_query="authorization_code",
        grant_type_form="refresh_token",
        issue_token_use_case=use_case,
    )
    from_form = await fake_token(
        grant_type_query=None,
        grant_type_form="refresh_token",
        issue_token_use_case=use_case,
    )

    assert from_query.refresh_token == "123refresh"
    assert from_form.refresh_token is None


@pytest.mark.asyncio
async def test_fake_token_rejects_unknown_grant() -> None:
    with pytest.raises(HTTPException) as exc:
        await fake_token(
            grant_type_query=None,
            grant_type_form=None,
            issue_token_use_case=IssueTokenUseCase("a", "r", 1),
        )

    assert exc.value.status_code == 400
