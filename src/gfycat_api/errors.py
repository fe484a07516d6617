"""Exception hierarchy for the Gfycat API client.

Errors are split by phase: ``AuthError`` for anything that happens while
obtaining a token, ``ApiError`` for authenticated calls made afterwards.
Each failure source (transport, body decoding, local I/O) has its own
subclass so callers can tell a dead network from a garbage response body.
"""

from __future__ import annotations

import httpx


class GfycatError(Exception):
    """Base exception for all Gfycat client errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.operation = operation


# ── Authentication phase ─────────────────────────────────────────────

class AuthError(GfycatError):
    """Raised when token acquisition fails."""


class AuthTransportError(AuthError):
    """The token request never produced a response."""


class AuthDecodeError(AuthError):
    """The token endpoint returned a body that could not be decoded."""


class AuthIOError(AuthError):
    """Reading the local credentials source failed."""


class ExpirationError(AuthError):
    """``expires_in`` does not fit in a representable expiry instant."""


# ── Authenticated calls ──────────────────────────────────────────────

class ApiError(GfycatError):
    """Raised when an authenticated API call fails."""


class ApiTransportError(ApiError):
    """The request failed before a response arrived (includes timeouts)."""


class ApiDecodeError(ApiError):
    """The response body did not match the expected resource."""


class ApiIOError(ApiError):
    """A local I/O operation backing an API call failed."""


class InvalidValueError(ApiError):
    """The service rejected a request value as invalid."""


class UnauthorizedError(ApiError):
    """The service rejected the bearer token."""


class MissingEmailError(ApiError):
    """The account has no usable email for this operation."""


class UnknownStatusError(ApiError):
    """The service answered with a status code the operation does not map."""


class NotSupportedError(GfycatError, NotImplementedError):
    """The operation is part of the API surface but not supported yet."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"'{operation}' is not supported yet", operation=operation)


def _classify(exc: Exception) -> str | None:
    if isinstance(exc, httpx.HTTPError):
        return "transport"
    # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
    if isinstance(exc, ValueError):
        return "decode"
    if isinstance(exc, OSError):
        return "io"
    return None


def auth_error_from(exc: Exception) -> AuthError:
    """Wrap a low-level exception raised during authentication."""
    kind = _classify(exc)
    if kind == "transport":
        return AuthTransportError(f"Token request failed: {exc}")
    if kind == "decode":
        return AuthDecodeError(f"Could not decode token response: {exc}")
    if kind == "io":
        return AuthIOError(f"Could not read credentials: {exc}")
    if isinstance(exc, OverflowError):
        return ExpirationError(f"Token expiry out of range: {exc}")
    raise TypeError(f"Cannot convert {type(exc).__name__} into an AuthError") from exc


def api_error_from(exc: Exception, operation: str | None = None) -> ApiError:
    """Wrap a low-level exception raised during an authenticated call."""
    kind = _classify(exc)
    if kind == "transport":
        return ApiTransportError(f"Request failed: {exc}", operation=operation)
    if kind == "decode":
        return ApiDecodeError(f"Could not decode response: {exc}", operation=operation)
    if kind == "io":
        return ApiIOError(f"I/O error: {exc}", operation=operation)
    raise TypeError(f"Cannot convert {type(exc).__name__} into an ApiError") from exc
