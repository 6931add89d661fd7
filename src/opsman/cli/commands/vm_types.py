"""CLI commands for managing VM types.

The vm_types endpoint only accepts the whole collection, so set-vm-type
fetches the current list, changes one entry and sends everything back.
API errors are reported by the entry point.
"""

import json

import click

from opsman.cli.context import build_client


def _print_vm_types(vm_types: list[dict]) -> None:
    click.echo(f"{'NAME':<25} {'CPU':>5} {'RAM (MB)':>10} {'DISK (MB)':>10}")
    click.echo("-" * 53)
    for vm_type in vm_types:
        click.echo(
            f"{str(vm_type.get('name', '')):<25} "
            f"{str(vm_type.get('cpu', '')):>5} "
            f"{str(vm_type.get('ram', '')):>10} "
            f"{str(vm_type.get('ephemeral_disk', '')):>10}"
        )


@click.command("get-vm-types")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def get_vm_types(obj: dict, as_json: bool) -> None:
    """List the VM types configured in Ops Manager."""
    client = build_client(obj["target"])
    vm_types = client.list_vm_types()

    if as_json:
        click.echo(json.dumps({"vm_types": vm_types}, indent=2))
        return

    if not vm_types:
        click.echo("No VM types found.")
        return

    _print_vm_types(vm_types)


@click.command("delete-vm-types")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_obj
def delete_vm_types(obj: dict, yes: bool) -> None:
    """Delete the custom VM types.

    Ops Manager falls back to its built-in VM types afterwards.
    """
    if not yes:
        click.confirm("Delete all custom VM types?", abort=True)

    client = build_client(obj["target"])
    client.delete_vm_types()

    click.echo("Custom VM types deleted.")


@click.command("set-vm-type")
@click.option("--name", required=True, help="VM type name")
@click.option("--cpu", required=True, type=click.IntRange(min=1), help="Number of CPUs")
@click.option("--ram", required=True, type=click.IntRange(min=1), help="Memory in MB")
@click.option(
    "--disk", required=True, type=click.IntRange(min=1), help="Ephemeral disk in MB"
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def set_vm_type(
    obj: dict, name: str, cpu: int, ram: int, disk: int, as_json: bool
) -> None:
    """Create a VM type, or update it if one with NAME exists.

    Other VM types are sent back unchanged.

    Examples:

        opsman set-vm-type --name small --cpu 1 --ram 512 --disk 4096
    """
    client = build_client(obj["target"])
    vm_types = client.upsert_vm_type(name, cpu, ram, disk)

    if as_json:
        click.echo(json.dumps({"vm_types": vm_types}, indent=2))
        return

    click.echo(f"VM type '{name}' saved.")
    _print_vm_types(vm_types)
