"""kickstart config - Show and edit configuration."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from kickstart.core.config import get_config_path, load_config, set_config_value
from kickstart.errors import ConfigError

console = Console()

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.kickstart/config.json)",
)


@click.group()
def config_group():
    """Show and edit the default data bundle."""
    pass


@config_group.command("show")
@_config_option
def show_cmd(config_path: Optional[Path]):
    """Show current configuration."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    table = Table(title=str(get_config_path(config_path)))
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in config.to_dict().items():
        table.add_row(key, str(value))
    console.print(table)


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@_config_option
def set_cmd(key: str, value: str, config_path: Optional[Path]):
    """Set KEY to VALUE."""
    try:
        set_config_value(key, value, config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)
    console.print(f"[green]✓[/] {key} = {value}")
