"""Bundled project templates.

render() is the contract the orchestrator depends on:
render(template_id, destination, data) writes the template into
destination or raises TemplateError.

Templates available:
- app: simple umi application
- max: Ant Design Pro application on @umijs/max
- vue-app: umi application with Vue
- plugin: umi plugin package
"""

import logging
from pathlib import Path

from kickstart.core.models import AppTemplate
from kickstart.errors import TemplateError

logger = logging.getLogger(__name__)

# Template registry
TEMPLATES = {
    AppTemplate.APP: "Simple App",
    AppTemplate.MAX: "Ant Design Pro, more plugins and ready to use features",
    AppTemplate.VUE_APP: "Vue Simple App",
    AppTemplate.PLUGIN: "Umi Plugin, for plugin development",
}


def get_available_templates() -> dict:
    """Get dictionary of available templates."""
    return {t.value: desc for t, desc in TEMPLATES.items()}


def render(template_id: AppTemplate, destination: Path, data: dict) -> None:
    """Render a bundled template into destination.

    Args:
        template_id: Which template to render
        destination: Target directory (created if missing)
        data: Template data from GenerationParameters.to_template_data()

    Raises:
        TemplateError: If the template is unknown or files cannot be written
    """
    from kickstart.templates.apps import create_app, create_max, create_vue_app
    from kickstart.templates.plugin import create_plugin

    creators = {
        AppTemplate.APP: create_app,
        AppTemplate.MAX: create_max,
        AppTemplate.VUE_APP: create_vue_app,
        AppTemplate.PLUGIN: create_plugin,
    }
    try:
        creator = creators[AppTemplate(template_id)]
    except (KeyError, ValueError):
        raise TemplateError(
            f"Unknown template: {template_id}. Available: {list(get_available_templates())}"
        )

    destination = Path(destination)
    logger.debug("Rendering %s into %s", AppTemplate(template_id).value, destination)
    try:
        destination.mkdir(parents=True, exist_ok=True)
        creator(destination, data)
    except OSError as e:
        raise TemplateError(f"Failed to render {AppTemplate(template_id).value}: {e}") from e
