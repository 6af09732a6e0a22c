"""Session commands — login, logout, status."""

from __future__ import annotations

import os
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from gwconsole.client.errors import error_handler
from gwconsole.commands._common import FormatOpt, load_session, make_authenticator, mask_token
from gwconsole.config.constants import ENV_DOMAIN, ENV_PASSWORD, ENV_SERVER_URL, ENV_USERNAME
from gwconsole.output.formatter import output

console = Console()


@error_handler
def login(
    server: Annotated[
        Optional[str],
        typer.Option("--server", "-s", help=f"Management server URL [env: {ENV_SERVER_URL}]"),
    ] = None,
    username: Annotated[
        Optional[str], typer.Option("--username", "-u", help="Administrator name"),
    ] = None,
    password: Annotated[
        Optional[str], typer.Option("--password", "-p", help="Password (prompted if omitted)"),
    ] = None,
    domain: Annotated[
        Optional[str], typer.Option("--domain", "-d", help="Domain to log in to"),
    ] = None,
) -> None:
    """Log in to a management server and remember the session."""
    auth = make_authenticator()
    # Precedence: CLI flags > env vars > last used server
    server_url = (
        server
        or os.environ.get(ENV_SERVER_URL)
        or auth.current_session().server_url
    )
    username = username or os.environ.get(ENV_USERNAME) or Prompt.ask("Username")
    password = (
        password
        or os.environ.get(ENV_PASSWORD)
        or Prompt.ask("Password", password=True)
    )
    domain = domain or os.environ.get(ENV_DOMAIN)

    session = auth.login(server_url or "", username, password, domain)
    console.print(f"[green]Logged in to {session.server_url}.[/]")


@error_handler
def logout(
    forget: Annotated[
        bool, typer.Option("--forget", help="Also forget the server URL"),
    ] = False,
) -> None:
    """Log out and forget the stored session."""
    auth = make_authenticator()
    auth.logout(auth.current_session())
    if forget:
        auth.clear()
    console.print("[green]Logged out.[/]")


@error_handler
def status(fmt: FormatOpt = "table") -> None:
    """Show the stored session."""
    session = load_session()
    data = {
        "server_url": session.server_url or "(not set)",
        "authenticated": session.is_authenticated,
        "session_token": mask_token(session.session_token),
    }
    output(data, fmt, title="Session")
