"""Media item service."""

from __future__ import annotations

from urllib.parse import quote

from gfycat_api.client import GfycatClient, decode, resolve_status
from gfycat_api.errors import NotSupportedError
from gfycat_api.models.media import MediaItem, MediaItemResponse


class MediaService:
    """Service for media item lookups."""

    def __init__(self, client: GfycatClient) -> None:
        self._client = client

    async def get_media_item(self, gfy_id: str, timeout: float | None = None) -> MediaItem:
        """Fetch metadata for one media item."""
        response = await self._client.get(f"gfycats/{quote(gfy_id, safe='')}", timeout=timeout)
        resolve_status(response, {}, "get_media_item", any_2xx=True)
        return decode(response, MediaItemResponse, "get_media_item").gfy_item

    def get_albums(self, username: str | None = None) -> None:
        raise NotSupportedError("get_albums")

    def get_album(self, album_id: str) -> None:
        raise NotSupportedError("get_album")

    def get_folders(self) -> None:
        raise NotSupportedError("get_folders")

    def get_folder(self, folder_id: str) -> None:
        raise NotSupportedError("get_folder")

    def get_bookmarks(self) -> None:
        raise NotSupportedError("get_bookmarks")

    def get_user_feed(self, username: str) -> None:
        raise NotSupportedError("get_user_feed")

    def get_trending_feed(self) -> None:
        raise NotSupportedError("get_trending_feed")
