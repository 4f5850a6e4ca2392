"""Main CLI entry point for kickstart."""

import click

from kickstart import __version__
from kickstart.commands.config import config_group
from kickstart.commands.new import new_cmd
from kickstart.commands.templates import templates_cmd


@click.group()
@click.version_option(version=__version__, prog_name="kickstart")
def main():
    """kickstart - Scaffold umi projects.

    \b
    Quick Start:
      kickstart new my-app               Create a project interactively
      kickstart new my-app --default     Use the default data, no prompts
      kickstart new my-app -t electron   Use an external template package

    \b
    Other:
      kickstart templates                List bundled templates
      kickstart config show              Show configuration
    """
    pass


main.add_command(new_cmd, name="new")
main.add_command(templates_cmd, name="templates")
main.add_command(config_group, name="config")


if __name__ == "__main__":
    main()
