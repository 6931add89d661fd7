"""Log out from Ops Manager.

The `opsman logout` command clears the stored UAA session.

Usage:
    opsman logout    # Clear stored credentials
"""

import click

from opsman.cli.context import build_session_manager
from opsman.cli.platform.auth import is_authenticated


@click.command()
@click.pass_obj
def logout(obj: dict) -> None:
    """Log out from Ops Manager.

    Clears stored credentials from ~/.opsman/credentials.json.
    """
    if not is_authenticated(obj["target"]):
        click.echo("Not logged in.")
        return

    build_session_manager(obj["target"]).logout()
    click.echo("Logged out successfully.")
