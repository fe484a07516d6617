"""CLI commands for media items."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from gfycat_api.errors import GfycatError
from gfycat_api.utils.errors import handle_error
from gfycat_api.utils.output import OutputFormat, print_output
from gfycat_api.utils.session import run_api_call

app = typer.Typer(name="media", help="Look up media items.")


@app.callback()
def media() -> None:
    """Look up media items."""


@app.command()
def info(
    gfy_id: Annotated[str, typer.Argument(help="Media item ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
    timeout: Annotated[Optional[float], typer.Option("--timeout", "-t", help="Request deadline in seconds")] = None,
) -> None:
    """Show metadata for one media item."""
    try:
        item = run_api_call(lambda api: api.get_media_item(gfy_id, timeout=timeout), verbose=verbose)
        print_output(item, output, title=item.title or gfy_id)
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)
