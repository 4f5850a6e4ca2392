"""kickstart templates - List bundled templates."""

import click
from rich.console import Console
from rich.table import Table

from kickstart.templates import get_available_templates

console = Console()


@click.command()
def templates_cmd():
    """List bundled templates."""
    console.print("\n[bold]Available Templates[/]\n")

    table = Table()
    table.add_column("Template", style="cyan")
    table.add_column("Description")

    for name, description in get_available_templates().items():
        table.add_row(name, description)

    console.print(table)

    console.print("\n[bold]Usage:[/]")
    console.print("  kickstart new my-app")
    console.print("  kickstart new my-app -t electron   (external template)")
