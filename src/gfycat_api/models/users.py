"""User resource models.

Only the identity fields are required. Everything else decodes to ``None``
when the service leaves it out, so an absent counter is distinguishable
from a real zero.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
    """Public profile returned by ``GET users/{id}``."""
    userid: str
    username: str
    create_date: int = Field(alias="createDate")
    description: str | None = None
    profile_url: str | None = Field(default=None, alias="profileUrl")
    name: str | None = None
    views: int | None = None
    email_verified: bool | None = Field(default=None, alias="emailVerified")
    url: str | None = None
    profile_image_url: str | None = Field(default=None, alias="profileImageUrl")
    verified: bool | None = None
    followers: int | None = None
    following: int | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class SelfUser(User):
    """Profile of the authenticated account, returned by ``GET me``."""
    email: str | None = None
    upload_notices: bool | None = Field(default=None, alias="uploadNotices")
    iframe_profile_image_visible: bool | None = Field(default=None, alias="iframeProfileImageVisible")
    geo_whitelist: list[str] | None = Field(default=None, alias="geoWhitelist")
    domain_whitelist: list[str] | None = Field(default=None, alias="domainWhitelist")
    total_gfycats: int | None = Field(default=None, alias="totalGfycats")
    total_bookmarks: int | None = Field(default=None, alias="totalBookmarks")
    total_albums: int | None = Field(default=None, alias="totalAlbums")
