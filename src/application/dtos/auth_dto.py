"""DTOs for the account-linking stub endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class TokenResponseDTO(BaseModel):
    """OAuth token endpoint response."""

    token_type: str = Field(default="bearer", description="Token type")
    access_token: str = Field(description="Access token")
    refresh_token: Optional[str] = Field(
        default=None, description="Refresh token, only for code exchange"
    )
    expires_in: int = Field(description="Lifetime of the access token in seconds")

    model_config = {
        "json_schema_extra": {
            "example": {
                "token_type": "bearer",
                "access_token": "123access",
                "refresh_token": "123refresh",
                "expires_in": 86400,
            }
        }
    }
