"""Structured error handling for agent-friendly output."""

from __future__ import annotations

import json
import sys

from rich.console import Console

from gfycat_api.errors import (
    ApiDecodeError,
    ApiIOError,
    ApiTransportError,
    AuthDecodeError,
    AuthError,
    AuthIOError,
    AuthTransportError,
    ExpirationError,
    InvalidValueError,
    MissingEmailError,
    NotSupportedError,
    UnauthorizedError,
    UnknownStatusError,
)

console = Console(stderr=True)

# Most specific classes first; the first isinstance match wins.
_ERROR_CODES: list[tuple[type[Exception], str]] = [
    (NotSupportedError, "NOT_SUPPORTED"),
    (ExpirationError, "AUTH_ERROR"),
    (AuthTransportError, "CONNECTION_ERROR"),
    (ApiTransportError, "CONNECTION_ERROR"),
    (AuthDecodeError, "DECODE_ERROR"),
    (ApiDecodeError, "DECODE_ERROR"),
    (AuthIOError, "IO_ERROR"),
    (ApiIOError, "IO_ERROR"),
    (UnauthorizedError, "UNAUTHORIZED"),
    (InvalidValueError, "INVALID_VALUE"),
    (MissingEmailError, "MISSING_EMAIL"),
    (UnknownStatusError, "UNKNOWN_STATUS"),
    (AuthError, "AUTH_ERROR"),
]

_ERROR_HINTS: dict[str, str] = {
    "UNAUTHORIZED": "Token was rejected. Run `gfycat auth login` to check your credentials",
    "AUTH_ERROR": "Check GFYCAT_CLIENT_ID / GFYCAT_CLIENT_SECRET or your credentials file",
    "CONNECTION_ERROR": "Connection error. Check network connectivity or raise --timeout",
    "IO_ERROR": "Could not read the credentials file. Check GFYCAT_CREDENTIALS_FILE",
    "DECODE_ERROR": "The service returned an unexpected body",
    "MISSING_EMAIL": "The account has no verified email address",
    "INVALID_VALUE": "The service rejected the value. Check parameter values",
    "NOT_SUPPORTED": "This operation is not supported yet",
}


def _get_code(error: Exception) -> str:
    """Map an exception to a stable error code."""
    for cls, code in _ERROR_CODES:
        if isinstance(error, cls):
            return code
    return "RUNTIME_ERROR"


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for agent consumption:
    {"error": true, "code": "UNAUTHORIZED", "message": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    code = _get_code(error)
    hint = _ERROR_HINTS.get(code)

    error_obj: dict[str, object] = {
        "error": True,
        "code": code,
        "message": message,
    }
    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        error_obj["status_code"] = status_code
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
