"""User and account service.

Each operation declares its own status table; the service is inconsistent
across endpoints so there is no shared "2xx means success" rule.
"""

from __future__ import annotations

from urllib.parse import quote

from gfycat_api.client import GfycatClient, decode, resolve_status
from gfycat_api.errors import (
    InvalidValueError,
    MissingEmailError,
    NotSupportedError,
    UnauthorizedError,
    UnknownStatusError,
)
from gfycat_api.models.users import SelfUser, User

USERNAME_AVAILABLE_STATUS = {
    200: False,
    404: True,
    401: UnauthorizedError,
    422: InvalidValueError,
}

EMAIL_VERIFIED_STATUS = {
    200: True,
    404: False,
    401: UnauthorizedError,
}

SEND_VERIFICATION_STATUS = {
    400: UnknownStatusError,
    401: UnauthorizedError,
    404: MissingEmailError,
}

RESET_PASSWORD_STATUS = {
    400: InvalidValueError,
    404: InvalidValueError,
    422: MissingEmailError,
}


class UserService:
    """Service for user lookups and account email management."""

    def __init__(self, client: GfycatClient) -> None:
        self._client = client

    async def is_username_available(self, username: str, timeout: float | None = None) -> bool:
        """Check whether a username is free to register."""
        response = await self._client.get(f"users/{quote(username, safe='')}", timeout=timeout)
        return resolve_status(response, USERNAME_AVAILABLE_STATUS, "is_username_available")

    async def is_email_verified(self, timeout: float | None = None) -> bool:
        """Check whether the authenticated account's email is verified."""
        response = await self._client.get("me/email_verified", timeout=timeout)
        return resolve_status(response, EMAIL_VERIFIED_STATUS, "is_email_verified")

    async def send_verification_email(self, timeout: float | None = None) -> None:
        """Ask the service to send a verification email to the account."""
        response = await self._client.post("me/send_verification_email", timeout=timeout)
        resolve_status(response, SEND_VERIFICATION_STATUS, "send_verification_email", any_2xx=None)

    async def reset_password(self, email: str, timeout: float | None = None) -> None:
        """Send a password reset email to ``email``."""
        response = await self._client.patch(
            "users/",
            body={"value": email, "action": "send_password_reset_email"},
            timeout=timeout,
        )
        resolve_status(response, RESET_PASSWORD_STATUS, "reset_password", any_2xx=None)

    async def get_user(self, user_id: str, timeout: float | None = None) -> User:
        """Fetch a user's public profile."""
        response = await self._client.get(f"users/{quote(user_id, safe='')}", timeout=timeout)
        resolve_status(response, {}, "get_user", any_2xx=True)
        return decode(response, User, "get_user")

    async def get_self(self, timeout: float | None = None) -> SelfUser:
        """Fetch the authenticated account's own profile."""
        response = await self._client.get("me", timeout=timeout)
        resolve_status(response, {}, "get_self", any_2xx=True)
        return decode(response, SelfUser, "get_self")

    # Not supported yet. These raise immediately rather than return a coroutine.

    def follow_user(self, username: str) -> None:
        raise NotSupportedError("follow_user")

    def unfollow_user(self, username: str) -> None:
        raise NotSupportedError("unfollow_user")

    def get_following(self) -> None:
        raise NotSupportedError("get_following")

    def get_followers(self) -> None:
        raise NotSupportedError("get_followers")

    def create_account(self, username: str, password: str, email: str | None = None) -> None:
        raise NotSupportedError("create_account")

    def update_user_details(self, **changes: str) -> None:
        raise NotSupportedError("update_user_details")

    def upload_profile_image(self, image: bytes) -> None:
        raise NotSupportedError("upload_profile_image")
