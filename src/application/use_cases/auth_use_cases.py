"""
Account-linking stub use cases - Application Layer

NON-PRODUCTION. These emulate the OAuth authorization and token endpoints
with fixed values so the platform can complete account linking during
development. No credential is ever checked.
"""

from html import escape
from urllib.parse import quote

from src.application.dtos.auth_dto import TokenResponseDTO
from src.shared import get_logger

logger = get_logger(__name__)

GRANT_AUTHORIZATION_CODE = "authorization_code"
GRANT_REFRESH_TOKEN = "refresh_token"


class UnsupportedGrantTypeError(ValueError):
    """Raised when the token endpoint receives an unknown grant type."""


class LoginPageUseCase:
    """Render the fake login form and resolve where it redirects to."""

    def render(self, response_url: str) -> str:
        return (
            "<html>\n"
            "  <body>\n"
            '    <form action="/login" method="post">\n'
            '      <input type="hidden" name="responseurl" '
            f'value="{escape(response_url, quote=True)}" />\n'
            '      <button type="submit" style="font-size:14pt">'
            "Link this service to Google</button>\n"
            "    </form>\n"
            "  </body>\n"
            "</html>\n"
        )

    def redirect_target(self, response_url: str) -> str:
        logger.info("auth_stub.login.redirect", response_url=response_url)
        return response_url


class AuthorizeUseCase:
    """Build the login redirect that will hand the fixed code back to the platform."""

    def __init__(self, authorization_code: str) -> None:
        self._code = authorization_code

    def execute(self, redirect_uri: str, state: str) -> str:
        response_url = (
            f"{redirect_uri}?code={quote(self._code, safe='')}"
            f"&state={quote(state, safe='')}"
        )
        logger.info("auth_stub.authorize", redirect_uri=redirect_uri)
        return f"/login?responseurl={quote(response_url, safe='')}"


class IssueTokenUseCase:
    """Return fixed tokens for code exchange and refresh grants."""

    def __init__(self, access_token: str, refresh_token: str, expires_in: int) -> None:
        self._access_token = access_token
        self._refresh_token = refresh_token
        self._expires_in = expires_in

    def execute(self, grant_type: str) -> TokenResponseDTO:
        logger.info("auth_stub.token", grant_type=grant_type)

        if grant_type == GRANT_AUTHORIZATION_CODE:
            return TokenResponseDTO(
                access_token=self._access_token,
                refresh_token=self._refresh_token,
                expires_in=self._expires_in,
            )
        if grant_type == GRANT_REFRESH_TOKEN:
            return TokenResponseDTO(
                access_token=self._access_token,
                expires_in=self._expires_in,
            )
        raise UnsupportedGrantTypeError(grant_type)
