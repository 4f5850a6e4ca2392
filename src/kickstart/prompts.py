"""Interactive prompts for `kickstart new`.

Fills a RawChoices value in place. Cancelling any prompt (Ctrl-C or EOF)
prints "Exit kickstart" and exits with status 1.
"""

from typing import List, Optional, Sequence, Tuple

import click
from rich.console import Console
from rich.panel import Panel

from kickstart.core.models import AppTemplate, NpmClient, RawChoices, Registry
from kickstart.templates import TEMPLATES

console = Console()

# (label, value, hint)
Option = Tuple[str, object, str]


def exit_prompt() -> None:
    console.print("[red]Exit kickstart[/]")
    raise SystemExit(1)


def select(message: str, options: Sequence[Option], initial_value=None):
    """Numbered single choice; returns the chosen option's value."""
    console.print(f"\n[bold cyan]?[/] [bold]{message}[/]")
    default = 1
    for i, (label, value, hint) in enumerate(options, start=1):
        suffix = f" [dim]({hint})[/]" if hint else ""
        console.print(f"  [cyan]{i}[/]. {label}{suffix}")
        if value == initial_value:
            default = i
    try:
        index = click.prompt(
            "  Select",
            type=click.IntRange(1, len(options)),
            default=default,
        )
    except click.Abort:
        exit_prompt()
    return options[index - 1][1]


def text(message: str, placeholder: str) -> str:
    try:
        value = click.prompt(f"\n? {message}", default=placeholder)
    except click.Abort:
        exit_prompt()
    if not value.strip():
        console.print("[red]Please input plugin name[/]")
        return text(message, placeholder)
    return value.strip()


def template_options() -> List[Option]:
    hints = {
        AppTemplate.MAX: "more plugins and ready to use features",
        AppTemplate.PLUGIN: "for plugin development",
    }
    labels = {
        AppTemplate.APP: "Simple App",
        AppTemplate.MAX: "Ant Design Pro",
        AppTemplate.VUE_APP: "Vue Simple App",
        AppTemplate.PLUGIN: "Umi Plugin",
    }
    return [(labels[t], t, hints.get(t, "")) for t in TEMPLATES]


def npm_client_options() -> List[Option]:
    return [
        (client.value, client, "recommended" if client == NpmClient.PNPM else "")
        for client in NpmClient
    ]


def registry_options(custom_registry: Optional[str]) -> List[Option]:
    options = [
        ("Npm", Registry.NPM.value, ""),
        ("Taobao", Registry.TAOBAO.value, "recommended for China"),
    ]
    if custom_registry:
        options.append(("Your npm config", custom_registry, custom_registry))
    return options


def select_npm_client(choices: RawChoices) -> None:
    choices.npm_client = select("Pick Npm Client", npm_client_options(), NpmClient.PNPM)


def select_registry(choices: RawChoices, custom_registry: Optional[str]) -> None:
    choices.registry = select("Pick Npm Registry", registry_options(custom_registry), Registry.NPM.value)


def collect_external_choices(choices: RawChoices, custom_registry: Optional[str]) -> RawChoices:
    """External templates only need an npm client and a registry."""
    select_npm_client(choices)
    select_registry(choices, custom_registry)
    return choices


def collect_internal_choices(choices: RawChoices, custom_registry: Optional[str]) -> RawChoices:
    """Full question sequence for bundled templates."""
    console.print(Panel.fit("[bold] kickstart [/]", border_style="cyan"))

    choices.app_template = select("Pick Umi App Template", template_options(), AppTemplate.APP)
    select_npm_client(choices)
    select_registry(choices, custom_registry)

    if choices.app_template == AppTemplate.PLUGIN:
        placeholder = choices.plugin_name or f"umi-plugin-{choices.name or 'demo'}"
        choices.plugin_name = text("What's the plugin name?", placeholder)

    console.print("\n[green]You're all set![/]")
    return choices


def collect_choices(choices: RawChoices, custom_registry: Optional[str] = None) -> RawChoices:
    """Run the prompts appropriate for the chosen generation path."""
    if choices.external_template:
        return collect_external_choices(choices, custom_registry)
    if choices.use_defaults:
        return choices
    return collect_internal_choices(choices, custom_registry)
