"""Gfycat CLI entry point."""

from __future__ import annotations

import logging

import typer

from gfycat_api.commands.auth_cmd import app as auth_app
from gfycat_api.commands.media_cmd import app as media_app
from gfycat_api.commands.users_cmd import app as users_app

app = typer.Typer(
    name="gfycat",
    help="Command-line client for the Gfycat media-hosting API.",
    no_args_is_help=True,
)

app.add_typer(auth_app, name="auth")
app.add_typer(users_app, name="users")
app.add_typer(media_app, name="media")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Gfycat CLI: check usernames, look up users and media items."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
