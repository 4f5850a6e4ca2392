"""kickstart new - Create a new umi project."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kickstart.core.config import load_config
from kickstart.core.generator import GenerationResult, ProjectGenerator, resolve_target
from kickstart.core.models import External, RawChoices
from kickstart.core.probes import detect_user_registry
from kickstart.core.reconcile import STEP_DONE, STEP_FAILED
from kickstart.errors import KickstartError
from kickstart.logs import setup_logging
from kickstart.prompts import collect_choices

console = Console()


@click.command()
@click.argument("name", required=False)
@click.option(
    "--template",
    "-t",
    "external_template",
    help="External template package (e.g. electron or @scope/pkg)",
)
@click.option(
    "--default",
    "use_defaults",
    is_flag=True,
    help="Use the default data bundle, skip prompts and install",
)
@click.option(
    "--git/--no-git",
    default=True,
    help="Initialize a git repository (default: yes)",
)
@click.option(
    "--install/--no-install",
    default=True,
    help="Install dependencies (default: yes)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.kickstart/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def new_cmd(
    name: Optional[str],
    external_template: Optional[str],
    use_defaults: bool,
    git: bool,
    install: bool,
    config_path: Optional[Path],
    verbose: bool,
):
    """Create a new project.

    NAME is the project directory name; without it the project is
    created in the current directory.
    """
    setup_logging(verbose, console)

    try:
        config = load_config(config_path)
    except KickstartError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    choices = RawChoices(
        name=name,
        external_template=external_template,
        use_defaults=use_defaults,
        git=git,
        install=install,
    )

    custom_registry = None
    if not use_defaults or external_template:
        custom_registry = detect_user_registry()
    collect_choices(choices, custom_registry)

    target = resolve_target(Path.cwd(), name)
    console.print(Panel.fit(
        f"[bold blue]kickstart new[/] - Creating [cyan]{target.name}[/]",
        border_style="blue"
    ))

    try:
        result = ProjectGenerator(Path.cwd(), config).run(choices, custom_registry)
    except KickstartError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    _print_summary(result)
    _print_next_steps(name, result)


def _print_summary(result: GenerationResult) -> None:
    """Show resolved parameters and reconciliation outcomes."""
    params = result.params

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="dim")
    table.add_column("Value")

    if isinstance(result.source, External):
        table.add_row("Template", f"{result.source.template_ref} (external)")
    else:
        table.add_row("Template", result.source.template_id.value)
    table.add_row("Npm client", params.npm_client.value)
    table.add_row("Registry", params.registry)
    if result.context.in_monorepo:
        table.add_row("Monorepo", str(result.context.project_root))

    icons = {STEP_DONE: "[green]✓[/]", STEP_FAILED: "[red]✗[/]"}
    for step in result.report.steps:
        icon = icons.get(step.status, "[dim]-[/]")
        table.add_row(step.name, f"{icon} {step.detail}")

    console.print(table)
    console.print(f"\n[green]✓[/] Project created at [cyan]{result.context.target}[/]")


def _print_next_steps(name: Optional[str], result: GenerationResult) -> None:
    client = result.params.npm_client.value
    console.print("\n[bold]Next steps:[/]")
    if name:
        console.print(f"  cd {name}")
    if result.params.is_pnpm8 and not result.params.install:
        console.print("  pnpm up -L")
    elif not result.params.install:
        console.print(f"  {client} install")
    console.print(f"  {client} run dev")
