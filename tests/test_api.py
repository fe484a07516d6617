"""Tests for api.py — construction, token accessors, concurrency, lifecycle."""
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from conftest import media_body, token_body, user_body
from gfycat_api.api import GfycatApi
from gfycat_api.errors import (
    AuthDecodeError,
    AuthTransportError,
    ExpirationError,
    NotSupportedError,
)


@pytest.fixture
def http():
    http = MagicMock()
    http.post = AsyncMock(return_value=httpx.Response(200, json=token_body("tok123")))
    http.request = AsyncMock(return_value=httpx.Response(200))
    http.aclose = AsyncMock()
    return http


async def _connect(credentials, fake_config, http):
    return await GfycatApi.connect(credentials, fake_config, http=http)


# ── Construction ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_connect_example_scenario(credentials, fake_config, http):
    api = await _connect(credentials, fake_config, http)

    assert api.authorization_header == "Bearer tok123"
    assert api.is_token_valid() is True
    assert http.post.call_args.kwargs["json"]["client_id"] == "abc"
    assert http.post.call_args.kwargs["json"]["client_secret"] == "xyz"


@pytest.mark.asyncio
async def test_connect_overflow_fails_keeps_caller_client(credentials, fake_config, http):
    http.post.return_value = httpx.Response(200, json=token_body(expires_in=10**18))

    with pytest.raises(ExpirationError):
        await _connect(credentials, fake_config, http)
    http.aclose.assert_not_awaited()


@pytest.mark.asyncio
async def test_connect_transport_failure_keeps_caller_client(credentials, fake_config, http):
    http.post.side_effect = httpx.ConnectError("refused")

    with pytest.raises(AuthTransportError):
        await _connect(credentials, fake_config, http)
    http.aclose.assert_not_awaited()


@pytest.mark.asyncio
async def test_connect_failure_closes_own_client(credentials, fake_config, http):
    http.post.side_effect = httpx.ConnectError("refused")

    with patch("gfycat_api.api.httpx.AsyncClient", return_value=http):
        with pytest.raises(AuthTransportError):
            await GfycatApi.connect(credentials, fake_config)
    http.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_connect_negative_expires_in(credentials, fake_config, http):
    http.post.return_value = httpx.Response(200, json=token_body(expires_in=-5))

    with pytest.raises(AuthDecodeError):
        await _connect(credentials, fake_config, http)


@pytest.mark.asyncio
async def test_connect_zero_expires_in(credentials, fake_config, http):
    http.post.return_value = httpx.Response(200, json=token_body(expires_in=0))

    with pytest.raises(ExpirationError):
        await _connect(credentials, fake_config, http)


@pytest.mark.asyncio
async def test_connect_bad_body(credentials, fake_config, http):
    http.post.return_value = httpx.Response(200, json={"nope": True})

    with pytest.raises(AuthDecodeError):
        await _connect(credentials, fake_config, http)


@pytest.mark.asyncio
async def test_from_config_uses_config_credentials(fake_config, http):
    with patch("gfycat_api.api.httpx.AsyncClient", return_value=http):
        api = await GfycatApi.from_config(fake_config)

    assert api.is_token_valid() is True
    assert http.post.call_args.kwargs["json"]["client_id"] == "abc"


# ── Operations ───────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_username_available_example(credentials, fake_config, http):
    http.request.return_value = httpx.Response(404)
    api = await _connect(credentials, fake_config, http)

    assert await api.is_username_available("alice") is True
    assert http.request.call_args.args == ("GET", "https://api.gfycat.com/v1/users/alice")


@pytest.mark.asyncio
async def test_media_item_example(credentials, fake_config, http):
    http.request.return_value = httpx.Response(200, json={"gfyItem": media_body("xyz")})
    api = await _connect(credentials, fake_config, http)

    item = await api.get_media_item("xyz")
    assert item.gfy_id == "xyz"
    assert http.request.call_args.kwargs["headers"]["Authorization"] == "Bearer tok123"


@pytest.mark.asyncio
async def test_facade_delegates_account_operations(credentials, fake_config, http):
    api = await _connect(credentials, fake_config, http)

    http.request.return_value = httpx.Response(200)
    assert await api.is_email_verified() is True
    http.request.return_value = httpx.Response(204)
    assert await api.send_verification_email() is None
    http.request.return_value = httpx.Response(200)
    assert await api.reset_password("a@example.com") is None
    http.request.return_value = httpx.Response(200, json=user_body("me"))
    assert (await api.get_self()).userid == "me"


# ── Concurrency ──────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_concurrent_user_lookups(credentials, fake_config, http):
    async def fake_request(method, url, **kwargs):
        await asyncio.sleep(0)
        return httpx.Response(200, json=user_body(url.rsplit("/", 1)[-1]))

    http.request.side_effect = fake_request
    api = await _connect(credentials, fake_config, http)

    first, second = await asyncio.gather(api.get_user("u1"), api.get_user("u2"))
    assert first.userid == "u1"
    assert second.userid == "u2"
    for call in http.request.call_args_list:
        assert call.kwargs["headers"]["Authorization"] == "Bearer tok123"
    assert api.authorization_header == "Bearer tok123"


@pytest.mark.asyncio
async def test_in_flight_request_keeps_old_token(credentials, fake_config, http):
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow_request(method, url, **kwargs):
        started.set()
        await release.wait()
        return httpx.Response(200, json=user_body("u1"))

    http.request.side_effect = slow_request
    http.post.side_effect = [
        httpx.Response(200, json=token_body("tok123")),
        httpx.Response(200, json=token_body("tok456")),
    ]
    api = await _connect(credentials, fake_config, http)

    task = asyncio.create_task(api.get_user("u1"))
    await started.wait()
    await api.refresh()
    release.set()
    user = await task

    assert user.userid == "u1"
    assert http.request.call_args_list[0].kwargs["headers"]["Authorization"] == "Bearer tok123"
    assert api.authorization_header == "Bearer tok456"


@pytest.mark.asyncio
async def test_requests_after_refresh_use_new_token(credentials, fake_config, http):
    http.post.side_effect = [
        httpx.Response(200, json=token_body("tok123")),
        httpx.Response(200, json=token_body("tok456")),
    ]
    api = await _connect(credentials, fake_config, http)
    await api.refresh()

    http.request.return_value = httpx.Response(200)
    await api.is_email_verified()
    assert http.request.call_args.kwargs["headers"]["Authorization"] == "Bearer tok456"


# ── Token status ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_token_status(credentials, fake_config, http):
    api = await _connect(credentials, fake_config, http)

    status = api.token_status()
    assert status.has_token is True
    assert status.is_expired is False
    assert 0 < status.seconds_remaining <= 3600


# ── Not supported ────────────────────────────────────────────────────

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,args",
    [
        ("follow_user", ("bob",)),
        ("unfollow_user", ("bob",)),
        ("get_following", ()),
        ("get_followers", ()),
        ("create_account", ("bob", "pw")),
        ("upload_profile_image", (b"",)),
        ("get_albums", ()),
        ("get_album", ("a",)),
        ("get_folders", ()),
        ("get_folder", ("f",)),
        ("get_bookmarks", ()),
        ("get_user_feed", ("bob",)),
        ("get_trending_feed", ()),
    ],
)
async def test_unsupported_operations(credentials, fake_config, http, method, args):
    api = await _connect(credentials, fake_config, http)

    with pytest.raises(NotSupportedError) as excinfo:
        getattr(api, method)(*args)
    assert isinstance(excinfo.value, NotImplementedError)
    assert excinfo.value.operation == method
    http.request.assert_not_called()


# ── Lifecycle ────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_context_manager_closes(credentials, fake_config, http):
    async with await _connect(credentials, fake_config, http) as api:
        assert api.is_token_valid()
    http.aclose.assert_awaited_once()
