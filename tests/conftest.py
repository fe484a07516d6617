"""Shared fixtures for the gfycat-api test suite."""
from __future__ import annotations

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from gfycat_api.client import GfycatClient
from gfycat_api.config import Config, Credentials, ServiceEndpoints, Settings
from gfycat_api.models.auth import Token


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        client_id="abc",
        client_secret="xyz",
        credentials_file="./test-config.json",
        timeout=5.0,
    )


@pytest.fixture
def fake_config(fake_settings) -> Config:
    return Config(
        settings=fake_settings,
        endpoints=ServiceEndpoints(base_url="https://api.gfycat.com/v1/"),
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="abc", client_secret="xyz")


@pytest.fixture
def token() -> Token:
    return Token(value="Bearer tok123", expires_at=datetime.now() + timedelta(hours=1))


@pytest.fixture
def mock_auth(token):
    """MagicMock standing in for TokenManager."""
    auth = MagicMock()
    auth.token = token
    return auth


@pytest.fixture
def mock_http():
    """MagicMock standing in for httpx.AsyncClient."""
    http = MagicMock()
    http.request = AsyncMock(return_value=httpx.Response(200))
    http.post = AsyncMock()
    http.aclose = AsyncMock()
    return http


@pytest.fixture
def client(fake_config, mock_auth, mock_http) -> GfycatClient:
    return GfycatClient(fake_config, mock_auth, http=mock_http)


def token_body(access_token="tok123", expires_in=3600, token_type="bearer"):
    return {
        "token_type": token_type,
        "expires_in": expires_in,
        "access_token": access_token,
    }


def user_body(userid="alice", **overrides):
    body = {
        "userid": userid,
        "username": userid,
        "description": "hello",
        "profileUrl": "https://example.com/alice",
        "name": "Alice",
        "views": 1200,
        "emailVerified": True,
        "url": f"https://gfycat.com/@{userid}",
        "createDate": 1514764800,
        "profileImageUrl": "https://profiles.gfycat.com/alice.png",
        "verified": False,
        "followers": 10,
        "following": 3,
    }
    body.update(overrides)
    return body


def media_body(gfy_id="xyz", **overrides):
    body = {
        "gfyId": gfy_id,
        "gfyName": "ElegantWideEyedDuck",
        "gfyNumber": 123456789,
        "webmUrl": "https://giant.gfycat.com/ElegantWideEyedDuck.webm",
        "gifUrl": "https://giant.gfycat.com/ElegantWideEyedDuck.gif",
        "mobileUrl": "https://thumbs.gfycat.com/ElegantWideEyedDuck-mobile.mp4",
        "mobilePosterUrl": "https://thumbs.gfycat.com/ElegantWideEyedDuck-mobile.jpg",
        "miniUrl": "https://thumbs.gfycat.com/ElegantWideEyedDuck-mini.mp4",
        "miniPosterUrl": "https://thumbs.gfycat.com/ElegantWideEyedDuck-mini.jpg",
        "posterUrl": "https://thumbs.gfycat.com/ElegantWideEyedDuck-poster.jpg",
        "thumb100PosterUrl": "https://thumbs.gfycat.com/ElegantWideEyedDuck-thumb100.jpg",
        "max5mbGif": "https://thumbs.gfycat.com/ElegantWideEyedDuck-size_restricted.gif",
        "max2mbGif": "https://thumbs.gfycat.com/ElegantWideEyedDuck-small.gif",
        "max1mbGif": "https://thumbs.gfycat.com/ElegantWideEyedDuck-max-1mb.gif",
        "gif100px": "https://thumbs.gfycat.com/ElegantWideEyedDuck-100px.gif",
        "width": 640,
        "height": 360,
        "avgColor": "#7C6A5B",
        "frameRate": 29.97,
        "numFrames": 300,
        "mp4Size": 1048576,
        "webmSize": 524288,
        "gifSize": 8388608,
        "source": 1,
        "createDate": 1514764800,
        "nsfw": "0",
        "mp4Url": "https://giant.gfycat.com/ElegantWideEyedDuck.mp4",
        "likes": 42,
        "published": 1,
        "dislikes": 2,
        "extraLemmas": "",
        "md5": "d41d8cd98f00b204e9800998ecf8427e",
        "views": 9001,
        "tags": ["duck", "cute"],
        "userName": "alice",
        "title": "A duck",
        "description": "It is a duck",
        "languageText": "duck",
        "languageCategories": ["animals"],
        "subreddit": "aww",
        "redditId": "7abcde",
        "redditIdText": "A duck on reddit",
        "domainWhitelist": ["example.com"],
    }
    body.update(overrides)
    return body
