"""CLI commands for users and account email management."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console

from gfycat_api.errors import GfycatError
from gfycat_api.utils.errors import handle_error
from gfycat_api.utils.output import OutputFormat, print_output
from gfycat_api.utils.session import run_api_call

console = Console(stderr=True)
app = typer.Typer(name="users", help="Look up users and manage the account email.")

OutputOpt = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")]
TimeoutOpt = Annotated[Optional[float], typer.Option("--timeout", "-t", help="Request deadline in seconds")]


@app.command()
def available(
    username: Annotated[str, typer.Argument(help="Username to check")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Check whether a username is free to register."""
    try:
        is_free = run_api_call(
            lambda api: api.is_username_available(username, timeout=timeout), verbose=verbose
        )
        print_output({"username": username, "available": is_free}, output, title="Username")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("get")
def get_user(
    user_id: Annotated[str, typer.Argument(help="User ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Show a user's public profile."""
    try:
        user = run_api_call(lambda api: api.get_user(user_id, timeout=timeout), verbose=verbose)
        print_output(user, output, title=f"User {user_id}")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command()
def me(
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Show the authenticated account's profile."""
    try:
        user = run_api_call(lambda api: api.get_self(timeout=timeout), verbose=verbose)
        print_output(user, output, title="Me")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("email-verified")
def email_verified(
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Check whether the account's email is verified."""
    try:
        verified = run_api_call(lambda api: api.is_email_verified(timeout=timeout), verbose=verbose)
        print_output({"email_verified": verified}, output, title="Email")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("send-verification")
def send_verification(
    verbose: VerboseOpt = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Send a verification email to the account's address."""
    try:
        run_api_call(lambda api: api.send_verification_email(timeout=timeout), verbose=verbose)
        console.print("[green]Verification email sent.[/green]")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("reset-password")
def reset_password(
    email: Annotated[str, typer.Argument(help="Account email address")],
    verbose: VerboseOpt = False,
    timeout: TimeoutOpt = None,
) -> None:
    """Send a password reset email."""
    try:
        run_api_call(lambda api: api.reset_password(email, timeout=timeout), verbose=verbose)
        console.print(f"[green]Password reset email sent to {email}.[/green]")
    except GfycatError as e:
        handle_error(e)
        raise typer.Exit(1)
