"""Client facade for the Gfycat API.

``GfycatApi.connect`` is the only way to build a client: it either returns
a client holding a live token or raises an AuthError, so a client is never
usable before it is authenticated.

Usage::

    async with await GfycatApi.connect(Credentials(client_id="abc", client_secret="xyz")) as api:
        item = await api.get_media_item("xyz")
"""

from __future__ import annotations

from typing import Any

import httpx

from gfycat_api.auth import TokenManager
from gfycat_api.client import GfycatClient
from gfycat_api.config import Config, Credentials, get_config
from gfycat_api.models.auth import Token, TokenStatus
from gfycat_api.models.media import MediaItem
from gfycat_api.models.users import SelfUser, User
from gfycat_api.services.media import MediaService
from gfycat_api.services.users import UserService


class GfycatApi:
    """Authenticated Gfycat API session."""

    def __init__(self, auth: TokenManager, client: GfycatClient, http: httpx.AsyncClient) -> None:
        self._auth = auth
        self._client = client
        self._http = http
        self.users = UserService(client)
        self.media = MediaService(client)

    @classmethod
    async def connect(
        cls,
        credentials: Credentials,
        config: Config | None = None,
        *,
        verbose: bool = False,
        http: httpx.AsyncClient | None = None,
    ) -> GfycatApi:
        """Authenticate with ``credentials`` and return a ready client.

        A caller-supplied ``http`` client is never closed on failure; it
        stays the caller's to manage.

        Raises:
            AuthError: Token acquisition failed. Nothing is left open.
        """
        config = config or get_config()
        owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(timeout=config.settings.timeout)
        auth = TokenManager(config, credentials, http)
        try:
            await auth.acquire()
        except BaseException:
            if owns_http:
                await http.aclose()
            raise

        client = GfycatClient(config, auth, http, verbose=verbose)
        return cls(auth, client, http)

    @classmethod
    async def from_config(cls, config: Config | None = None, *, verbose: bool = False) -> GfycatApi:
        """Connect using credentials from the environment or credentials file."""
        config = config or get_config()
        return await cls.connect(config.get_credentials(), config, verbose=verbose)

    # ── Token ────────────────────────────────────────────────────────

    @property
    def token(self) -> Token:
        return self._auth.token  # type: ignore[return-value]

    @property
    def authorization_header(self) -> str:
        """Value sent in the Authorization header."""
        return self.token.value

    def is_token_valid(self) -> bool:
        return self._auth.is_token_valid()

    def token_status(self) -> TokenStatus:
        return self._auth.get_status()

    async def refresh(self) -> Token:
        """Re-authenticate with the original credentials and swap in the new token."""
        return await self._auth.refresh()

    # ── Users ────────────────────────────────────────────────────────

    async def is_username_available(self, username: str, timeout: float | None = None) -> bool:
        return await self.users.is_username_available(username, timeout=timeout)

    async def is_email_verified(self, timeout: float | None = None) -> bool:
        return await self.users.is_email_verified(timeout=timeout)

    async def send_verification_email(self, timeout: float | None = None) -> None:
        await self.users.send_verification_email(timeout=timeout)

    async def reset_password(self, email: str, timeout: float | None = None) -> None:
        await self.users.reset_password(email, timeout=timeout)

    async def get_user(self, user_id: str, timeout: float | None = None) -> User:
        return await self.users.get_user(user_id, timeout=timeout)

    async def get_self(self, timeout: float | None = None) -> SelfUser:
        return await self.users.get_self(timeout=timeout)

    def follow_user(self, username: str) -> None:
        self.users.follow_user(username)

    def unfollow_user(self, username: str) -> None:
        self.users.unfollow_user(username)

    def get_following(self) -> None:
        self.users.get_following()

    def get_followers(self) -> None:
        self.users.get_followers()

    def create_account(self, username: str, password: str, email: str | None = None) -> None:
        self.users.create_account(username, password, email)

    def update_user_details(self, **changes: str) -> None:
        self.users.update_user_details(**changes)

    def upload_profile_image(self, image: bytes) -> None:
        self.users.upload_profile_image(image)

    # ── Media ────────────────────────────────────────────────────────

    async def get_media_item(self, gfy_id: str, timeout: float | None = None) -> MediaItem:
        return await self.media.get_media_item(gfy_id, timeout=timeout)

    def get_albums(self, username: str | None = None) -> None:
        self.media.get_albums(username)

    def get_album(self, album_id: str) -> None:
        self.media.get_album(album_id)

    def get_folders(self) -> None:
        self.media.get_folders()

    def get_folder(self, folder_id: str) -> None:
        self.media.get_folder(folder_id)

    def get_bookmarks(self) -> None:
        self.media.get_bookmarks()

    def get_user_feed(self, username: str) -> None:
        self.media.get_user_feed(username)

    def get_trending_feed(self) -> None:
        self.media.get_trending_feed()

    # ── Lifecycle ────────────────────────────────────────────────────

    async def close(self) -> None:
        """Close the shared HTTP transport."""
        await self._http.aclose()

    async def __aenter__(self) -> GfycatApi:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
