"""OAuth2 client-credentials authentication for the Gfycat API.

Handles the token exchange and expiry tracking. A refresh re-runs the
exchange and swaps in a new frozen Token, so readers never see a
half-updated token.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta

import httpx
from pydantic import ValidationError

from gfycat_api.config import Config, Credentials
from gfycat_api.errors import AuthDecodeError, ExpirationError, auth_error_from
from gfycat_api.models.auth import Token, TokenResponse, TokenStatus

logger = logging.getLogger(__name__)


def build_token(token_data: TokenResponse, now: datetime | None = None) -> Token:
    """Turn a token endpoint response into a Token with an absolute expiry.

    Raises:
        ExpirationError: ``expires_in`` overflows the datetime range, or the
            token is already expired on arrival.
    """
    now = now or datetime.now()
    try:
        expires_at = now + timedelta(seconds=token_data.expires_in)
    except OverflowError as e:
        raise auth_error_from(e) from e

    if expires_at <= now:
        raise ExpirationError(f"Token expired on arrival (expires_in={token_data.expires_in})")

    return Token(
        token_type=token_data.token_type,
        value=f"Bearer {token_data.access_token}",
        expires_at=expires_at,
    )


class TokenManager:
    """Owns the current bearer token for one set of client credentials."""

    def __init__(
        self,
        config: Config,
        credentials: Credentials,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._credentials = credentials
        self._http = http or httpx.AsyncClient(timeout=config.settings.timeout)
        self._token: Token | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def token(self) -> Token | None:
        return self._token

    async def acquire(self) -> Token:
        """Exchange the client credentials for a new token and hold it.

        Raises:
            AuthTransportError: The token request failed in transit.
            AuthDecodeError: The response was not a valid token body.
            ExpirationError: The expiry is not representable or already past.
        """
        token = await self._exchange()
        self._token = token
        return token

    async def refresh(self) -> Token:
        """Re-run the exchange and install the new token.

        Concurrent refreshes are serialized; requests already holding the
        previous token complete with it.
        """
        async with self._refresh_lock:
            token = await self._exchange()
            self._token = token
            logger.info("Token refreshed, expires at %s", token.expires_at)
            return token

    def is_token_valid(self) -> bool:
        """True while the held token has not yet expired."""
        return self._token is not None and self._token.is_valid()

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        token = self._token
        if token is None:
            return TokenStatus(has_token=False, is_expired=True)

        now = datetime.now()
        is_expired = not token.is_valid(now)
        seconds_remaining = None
        if not is_expired:
            seconds_remaining = int((token.expires_at - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            expires_at=token.expires_at,
            seconds_remaining=seconds_remaining,
        )

    async def _exchange(self) -> Token:
        """POST the client-credentials grant to the token endpoint."""
        url = self._config.endpoints.token_url
        try:
            response = await self._http.post(
                url,
                json={
                    "client_id": self._credentials.client_id,
                    "client_secret": self._credentials.client_secret,
                    "grant_type": "client_credentials",
                },
            )
        except httpx.HTTPError as e:
            logger.warning("Token request to %s failed: %s", url, e)
            raise auth_error_from(e) from e

        if not response.is_success:
            error_detail = response.text
            try:
                error_detail = response.json().get("errorMessage", response.text)
            except (ValueError, AttributeError):
                pass
            raise AuthDecodeError(
                f"Token request failed (HTTP {response.status_code}): {error_detail}",
                status_code=response.status_code,
            )

        try:
            token_data = TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise auth_error_from(e) from e

        token = build_token(token_data)
        logger.info("Acquired %s token, expires at %s", token.token_type.value, token.expires_at)
        return token

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
