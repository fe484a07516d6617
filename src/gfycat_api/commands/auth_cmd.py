"""CLI commands for authentication."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from gfycat_api.api import GfycatApi
from gfycat_api.errors import GfycatError
from gfycat_api.models.auth import TokenStatus
from gfycat_api.utils.errors import handle_error
from gfycat_api.utils.output import OutputFormat, print_output
from gfycat_api.utils.session import run_api_call

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Check authentication against the Gfycat API.")


@app.callback()
def auth() -> None:
    """Check authentication against the Gfycat API."""


async def _token_status(api: GfycatApi) -> TokenStatus:
    return api.token_status()


@app.command()
def login(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Authenticate with the configured credentials and display token status."""
    try:
        console.print("Authenticating...", style="yellow")
        status = run_api_call(_token_status, verbose=verbose)
        result = {
            "status": "authenticated",
            "expires_at": str(status.expires_at),
            "seconds_remaining": status.seconds_remaining,
        }
        print_output(result, output, title="Authentication")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)
