"""Unlock an encrypted Ops Manager appliance.

Usage:
    opsman unlock                                      # Prompt for passphrase
    OPSMAN_DECRYPTION_PASSPHRASE=... opsman unlock     # Non-interactive
"""

import sys

import click

from opsman.cli.platform.client import OpsManagerClient
from opsman.cli.platform.exceptions import APIError, WrongPassphraseError


@click.command()
@click.option(
    "--passphrase",
    prompt="Decryption passphrase",
    hide_input=True,
    envvar="OPSMAN_DECRYPTION_PASSPHRASE",
    help="Decryption passphrase (prompted when omitted)",
)
@click.pass_obj
def unlock(obj: dict, passphrase: str) -> None:
    """Unlock Ops Manager with its decryption passphrase.

    Needed after every reboot of the appliance. Does not require login.
    """
    client = OpsManagerClient(obj["target"])

    try:
        client.unlock(passphrase)
    except WrongPassphraseError:
        click.echo("Error: Wrong decryption passphrase.", err=True)
        sys.exit(1)
    except APIError as e:
        click.echo(f"Error: Unlock failed: {e}", err=True)
        sys.exit(1)

    click.echo("Ops Manager unlocked.")
