"""Upload stemcells and product tiles.

Files named like "*stemcell*.tgz" go to the stemcell endpoint, everything
else is uploaded as a product tile.

Usage:
    opsman upload bosh-stemcell-3363.24-vsphere.tgz
    opsman upload cf-1.8.5-build.4.pivotal p-mysql-1.7.8.pivotal
"""

import os
import sys

import click

from opsman.cli.context import build_client
from opsman.cli.platform.artifacts import UploadTarget
from opsman.cli.platform.exceptions import (
    APIError,
    AuthenticationError,
    InvalidInputError,
)
from opsman.cli.utils import Spinner, format_size


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.pass_obj
def upload(obj: dict, files: tuple[str, ...]) -> None:
    """Upload one or more artifacts to Ops Manager.

    Files are uploaded one at a time in the order given. The command stops
    at the first failed upload; files uploaded before it stay uploaded.

    Arguments:

        FILES: Stemcell (.tgz) or product tile (.pivotal) files
    """
    client = build_client(obj["target"])
    spinner = Spinner()
    in_flight: list[str] = []

    def on_start(path: str, target: UploadTarget) -> None:
        in_flight.append(path)
        size = format_size(os.path.getsize(path))
        spinner.start(f"Uploading {target.label} {os.path.basename(path)} ({size})")

    def on_done(path: str, target: UploadTarget) -> None:
        in_flight.remove(path)
        spinner.done()

    try:
        uploaded = client.upload_artifacts(files, on_start=on_start, on_done=on_done)
    except InvalidInputError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except APIError as e:
        if in_flight:
            spinner.fail()
        if isinstance(e, AuthenticationError):
            click.echo(f"Error: Authentication failed: {e.message}", err=True)
        else:
            click.echo(f"Error: Upload failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"Uploaded {len(uploaded)} file(s).")
