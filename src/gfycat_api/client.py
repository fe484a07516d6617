"""Authenticated request dispatch for the Gfycat API.

Handles header injection, transport error wrapping, per-operation status
mapping and response decoding. One request is one network round trip: no
retry, no caching.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from gfycat_api.auth import TokenManager
from gfycat_api.config import Config
from gfycat_api.errors import ApiError, UnauthorizedError, UnknownStatusError, api_error_from

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Sentinel for "no outcome" in a status table lookup
_UNMAPPED = object()

StatusTable = Mapping[int, Any]


def resolve_status(
    response: httpx.Response,
    table: StatusTable,
    operation: str,
    any_2xx: Any = _UNMAPPED,
) -> Any:
    """Map a response status code to an operation outcome.

    Args:
        response: The response to classify.
        table: Status code to outcome. An outcome is either a value to return
            or an ApiError subclass to raise.
        operation: Operation name, carried on raised errors.
        any_2xx: Outcome for 2xx codes missing from ``table``.

    Raises:
        ApiError: The mapped error, or UnknownStatusError for unmapped codes.
    """
    status = response.status_code
    outcome = table.get(status, _UNMAPPED)
    if outcome is _UNMAPPED and response.is_success:
        outcome = any_2xx

    if outcome is _UNMAPPED:
        raise UnknownStatusError(
            f"{operation}: unexpected HTTP {status}",
            status_code=status,
            operation=operation,
        )

    if isinstance(outcome, type) and issubclass(outcome, ApiError):
        raise outcome(
            f"{operation}: HTTP {status}",
            status_code=status,
            operation=operation,
        )

    return outcome


def decode(response: httpx.Response, model: type[ModelT], operation: str | None = None) -> ModelT:
    """Decode a JSON response body into ``model``.

    Raises:
        ApiDecodeError: The body is not JSON or does not fit the model.
    """
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise api_error_from(e, operation) from e


class GfycatClient:
    """HTTP client for the Gfycat API with bearer-token injection."""

    def __init__(
        self,
        config: Config,
        auth: TokenManager,
        http: httpx.AsyncClient | None = None,
        verbose: bool = False,
    ) -> None:
        self._config = config
        self._auth = auth
        self._verbose = verbose
        self._http = http or httpx.AsyncClient(timeout=config.settings.timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Make one authenticated API request.

        Args:
            method: HTTP method (GET, POST, PATCH).
            path: API path relative to the base URL (e.g. "users/alice").
            body: JSON request body.
            timeout: Deadline for this call in seconds. None uses the client default.

        Returns:
            The httpx.Response object, whatever its status.

        Raises:
            ApiTransportError: The request failed or timed out.
            UnauthorizedError: No token is held.
        """
        url = self._config.endpoints.base_url + path
        headers = self._build_headers()

        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body
        if timeout is not None:
            kwargs["timeout"] = timeout

        if self._verbose:
            logger.info("%s %s", method, url)
            if body:
                logger.info("Body: %s", body)

        try:
            response = await self._http.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise api_error_from(e, f"{method} {path}") from e

        if self._verbose:
            logger.info("Response: %s", response.status_code)

        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for GET requests."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for POST requests."""
        return await self.request("POST", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for PATCH requests."""
        return await self.request("PATCH", path, **kwargs)

    def _build_headers(self) -> dict[str, str]:
        """Build request headers from a snapshot of the current token."""
        token = self._auth.token
        if token is None:
            raise UnauthorizedError("No access token held; authenticate first")

        return {
            "Authorization": token.value,
            "Content-Type": "application/json",
        }

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
