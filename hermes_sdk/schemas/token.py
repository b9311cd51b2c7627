from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hermes_sdk.core.constants import DEFAULT_TOKEN_LIFETIME


class TokenResponse(BaseModel):
    """Body returned by /identity/v1/oauth2/token for the client credentials grant."""

    access_token: str = Field(min_length=1)
    expires_in: int = Field(default=DEFAULT_TOKEN_LIFETIME, ge=0)
    token_type: str = "Application Access Token"
    scope: Optional[str] = None


class AccessToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    expires_at: datetime
    token_type: str = "Bearer"
    scope: Optional[str] = None

    def is_fresh(self, now: datetime, safety_margin: float) -> bool:
        """True while now is before expires_at minus the safety margin."""
        return now < self.expires_at - timedelta(seconds=safety_margin)

    @classmethod
    def from_response(cls, body: TokenResponse, issued_at: datetime) -> "AccessToken":
        return cls(
            value=body.access_token,
            expires_at=issued_at + timedelta(seconds=body.expires_in),
            token_type=body.token_type,
            scope=body.scope,
        )

    def __repr__(self) -> str:
        return f"AccessToken(value='{self.value[:6]}...', expires_at={self.expires_at.isoformat()})"
