#!/usr/bin/env python3
"""opsman CLI - Ops Manager from the command line

Usage:
    opsman login [--force]
    opsman logout
    opsman unlock
    opsman upload <files>...
    opsman get-vm-types
    opsman delete-vm-types
    opsman set-vm-type --name NAME --cpu N --ram MB --disk MB
"""

import logging
import sys

import click

from .commands import login, logout, unlock, upload
from .commands.vm_types import delete_vm_types, get_vm_types, set_vm_type
from .platform.config import OPSMAN_TARGET, PACKAGE_VERSION
from .platform.exceptions import APIError, OpsManagerError


@click.group()
@click.version_option(version=PACKAGE_VERSION)
@click.option(
    "--target",
    "-t",
    default=OPSMAN_TARGET,
    show_default=True,
    help="Ops Manager URL (or set OPSMAN_TARGET)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP traffic to stderr")
@click.pass_context
def cli(ctx: click.Context, target: str, verbose: bool):
    """opsman CLI - Ops Manager from the command line"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["target"] = target


# Session
cli.add_command(login.login)
cli.add_command(logout.logout)
cli.add_command(unlock.unlock)

# Artifacts
cli.add_command(upload.upload)

# VM types
cli.add_command(get_vm_types)
cli.add_command(delete_vm_types)
cli.add_command(set_vm_type)


def main():
    """Main entry point for the CLI."""
    try:
        cli(standalone_mode=False)
    except click.ClickException as e:
        # Usage errors exit with 1 like every other failure
        e.show()
        sys.exit(1)
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        hint = {
            0: "Hint: Check the --target URL and that Ops Manager is reachable.",
            401: "Hint: Run 'opsman login' to authenticate.",
            403: "Hint: You don't have permission for this action.",
            404: "Hint: Check the --target URL points at Ops Manager.",
            422: "Hint: Check your input and try again.",
            503: "Hint: Ops Manager may still be locked. Run 'opsman unlock'.",
        }.get(e.status_code)
        if hint:
            click.echo(hint, err=True)
        sys.exit(1)
    except OpsManagerError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except click.Abort as e:
        # click wraps Ctrl-C inside a command as Abort from KeyboardInterrupt
        if isinstance(e.__cause__, KeyboardInterrupt):
            sys.exit(130)
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo(err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
