"""Authenticate with Ops Manager.

The `opsman login` command exchanges the operator's username and password
for a UAA bearer token and stores it for later commands.

Usage:
    opsman login            # Reuse the stored session if it is still valid
    opsman login --force    # Always ask for credentials
"""

import sys

import click

from opsman.cli.context import build_session_manager
from opsman.cli.platform.exceptions import AuthenticationError


@click.command()
@click.option("--force", "-f", is_flag=True, help="Log in even if a session is valid")
@click.pass_obj
def login(obj: dict, force: bool) -> None:
    """Authenticate with Ops Manager.

    Credentials are exchanged with the appliance's UAA and the resulting
    token is stored in ~/.opsman/credentials.json.

    Examples:
        opsman login            # Prompt only when needed
        opsman login --force    # Always prompt
    """
    sessions = build_session_manager(obj["target"])

    if not force and sessions.has_valid_token():
        click.echo("Already logged in. Use 'opsman logout' to sign out.")
        return

    try:
        sessions.login(force=True)
    except AuthenticationError as e:
        click.echo(f"Error: Authentication failed: {e.message}", err=True)
        sys.exit(1)

    click.echo(click.style("Authenticated successfully.", fg="green"))
