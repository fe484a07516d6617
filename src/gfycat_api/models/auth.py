"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class TokenType(str, Enum):
    BEARER = "bearer"


class TokenResponse(BaseModel):
    """Response from the Gfycat OAuth2 token endpoint."""
    token_type: TokenType
    expires_in: int = Field(ge=0)
    access_token: str


class Token(BaseModel):
    """A live bearer token.

    ``value`` already carries the scheme prefix and is sent verbatim as the
    Authorization header. Instances are frozen; a refresh builds a new one.
    """
    token_type: TokenType = TokenType.BEARER
    value: str
    expires_at: datetime

    model_config = {"frozen": True}

    def is_valid(self, now: datetime | None = None) -> bool:
        """True while the token has not yet expired."""
        return (now or datetime.now()) < self.expires_at


class TokenStatus(BaseModel):
    """Current state of the held access token."""
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
