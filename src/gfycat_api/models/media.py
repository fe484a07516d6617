"""Media item (gfycat) models.

Fields that the service may omit are typed ``X | None`` and decode to
``None`` when missing, so "not sent" never reads as zero or "".
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MediaItem(BaseModel):
    gfy_id: str = Field(alias="gfyId")
    gfy_name: str = Field(alias="gfyName")
    gfy_number: int = Field(alias="gfyNumber")
    webm_url: str = Field(alias="webmUrl")
    gif_url: str = Field(alias="gifUrl")
    mobile_url: str = Field(alias="mobileUrl")
    mobile_poster_url: str = Field(alias="mobilePosterUrl")
    mini_url: str = Field(alias="miniUrl")
    mini_poster_url: str = Field(alias="miniPosterUrl")
    poster_url: str = Field(alias="posterUrl")
    thumb_100_poster_url: str = Field(alias="thumb100PosterUrl")
    five_mb_gif: str = Field(alias="max5mbGif")
    two_mb_gif: str = Field(alias="max2mbGif")
    one_mb_gif: str = Field(alias="max1mbGif")
    hundred_px_gif: str = Field(alias="gif100px")
    width: int
    height: int
    avg_color: str = Field(alias="avgColor")
    frame_rate: float = Field(alias="frameRate")
    num_frames: int = Field(alias="numFrames")
    mp4_size: int = Field(alias="mp4Size")
    webm_size: int = Field(alias="webmSize")
    gif_size: int | None = Field(default=None, alias="gifSize")
    source: int
    create_date: int = Field(alias="createDate")
    nsfw: str
    mp4_url: str = Field(alias="mp4Url")
    likes: int
    published: int
    dislikes: int
    extra_lemmas: str = Field(alias="extraLemmas")
    md5: str | None = None
    views: int
    tags: list[str]
    username: str = Field(alias="userName")
    title: str
    description: str
    language_text: str = Field(alias="languageText")
    language_categories: list[str] | None = Field(default=None, alias="languageCategories")
    subreddit: str | None = None
    reddit_id: str | None = Field(default=None, alias="redditId")
    reddit_id_text: str | None = Field(default=None, alias="redditIdText")
    domain_whitelist: list[str] = Field(alias="domainWhitelist")

    model_config = {"populate_by_name": True, "frozen": True}


class MediaItemResponse(BaseModel):
    """Envelope returned by ``GET gfycats/{id}``."""
    gfy_item: MediaItem = Field(alias="gfyItem")

    model_config = {"populate_by_name": True}
