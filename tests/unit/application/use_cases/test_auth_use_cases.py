from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from src.application.use_cases.auth_use_cases import (
    AuthorizeUseCase,
    IssueTokenUseCase,
    LoginPageUseCase,
    UnsupportedGrantTypeError,
)


def test_authorize_redirects_to_login_with_response_url() -> None:
    location = AuthorizeUseCase("xxxxxx").execute(
        "https://oauth-redirect.example/r/project", "state-1"
    )

    parsed = urlsplit(location)
    assert parsed.path == "/login"
    response_url = parse_qs(parsed.query)["responseurl"][0]
    assert response_url == (
        "https://oauth-redirect.example/r/project?code=xxxxxx&state=state-1"
    )


def test_login_page_escapes_response_url() -> None:
    html = LoginPageUseCase().render('https://x.example/?a=1&b="2"')

    assert 'name="responseurl"' in html
    assert "&amp;b=&quot;2&quot;" in html


def test_code_exchange_returns_refresh_token() -> None:
    token = IssueTokenUseCase("123access", "123refresh", 86400).execute(
        "authorization_code"
    )

    assert token.model_dump() == {
        "token_type": "bearer",
        "access_token": "123access",
        "refresh_token": "123refresh",
        "expires_in": 86400,
    }


def test_refresh_grant_omits_refresh_token() -> None:
    token = IssueTokenUseCase("123access", "123refresh", 86400).execute(
        "refresh_token"
    )

    assert token.refresh_token is None
    assert token.access_token == "123access"


def test_unknown_grant_type() -> None:
    with pytest.raises(UnsupportedGrantTypeError):
        IssueTokenUseCase("a", "r", 1).execute("password")
