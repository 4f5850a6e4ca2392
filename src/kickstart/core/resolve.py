"""Parameter resolution.

Turns the collected RawChoices plus probe results into one immutable
GenerationParameters value. Pure: no prompting, no I/O.
"""

from typing import Optional

from kickstart.core.config import KickstartConfig
from kickstart.core.models import (
    AppTemplate,
    External,
    GenerationParameters,
    GenerationSource,
    Internal,
    NpmClient,
    PNPM_STRICT_PEER_MAJOR,
    PNPM_STRICT_PEER_NPMRC,
    ProbeResults,
    RawChoices,
    Registry,
)

DEFAULT_NPM_CLIENT = NpmClient.PNPM
DEFAULT_REGISTRY = Registry.NPM.value
DEFAULT_TEMPLATE = AppTemplate.APP


def resolve_source(choices: RawChoices, config: Optional[KickstartConfig] = None) -> GenerationSource:
    """Decide once whether to unpack an external template or render a bundled one."""
    if choices.external_template:
        return External(choices.external_template)
    if choices.use_defaults and config is not None:
        return Internal(AppTemplate(config.app_template))
    return Internal(choices.app_template or DEFAULT_TEMPLATE)


def default_plugin_name(name: Optional[str]) -> str:
    return f"umi-plugin-{name or 'demo'}"


def format_version(version: str) -> str:
    """Caret range for releases, exact pin for canaries."""
    if "-canary." in version:
        return version
    return f"^{version}"


def selected_npm_client(choices: RawChoices, config: KickstartConfig) -> NpmClient:
    """npm client the run will use (needed before probing its version).

    A collected choice always wins; the default bundle only fills the gap.
    """
    if choices.npm_client:
        return NpmClient(choices.npm_client)
    if choices.use_defaults:
        return NpmClient(config.npm_client)
    return DEFAULT_NPM_CLIENT


def registry_url(registry) -> str:
    """Registry enum members map to their URL; custom URLs pass through verbatim."""
    if isinstance(registry, Registry):
        return registry.value
    return registry or DEFAULT_REGISTRY


def extra_npmrc_for(npm_client: NpmClient, major: Optional[int]) -> str:
    if npm_client == NpmClient.PNPM and major == PNPM_STRICT_PEER_MAJOR:
        return PNPM_STRICT_PEER_NPMRC
    return ""


def resolve_parameters(
    choices: RawChoices,
    probes: ProbeResults,
    config: Optional[KickstartConfig] = None,
    npm_client: Optional[NpmClient] = None,
) -> GenerationParameters:
    """Combine choices and probe results into GenerationParameters.

    Args:
        choices: Collected user choices
        probes: Environment probe results
        config: Configuration holding the default data bundle
        npm_client: Client already selected by the caller, if any

    Returns:
        Frozen GenerationParameters with every field populated
    """
    config = config or KickstartConfig()
    npm_client = npm_client or selected_npm_client(choices, config)

    if choices.use_defaults:
        template = AppTemplate(config.app_template)
        registry = registry_url(choices.registry) if choices.registry else config.registry
        author = config.author
        email = config.email
        plugin_name = config.plugin_name
    else:
        template = choices.app_template or DEFAULT_TEMPLATE
        registry = registry_url(choices.registry)
        author = probes.author
        email = probes.email
        plugin_name = choices.plugin_name or default_plugin_name(choices.name)

    init_git = choices.git is not False
    # husky is not supported inside a monorepo
    with_husky = init_git and not probes.in_monorepo

    major = probes.npm_client_major if npm_client == NpmClient.PNPM else None

    return GenerationParameters(
        template=template,
        npm_client=npm_client,
        registry=registry,
        author=author,
        email=email,
        version=format_version(config.framework_version),
        init_git=init_git,
        with_husky=with_husky,
        extra_npmrc=extra_npmrc_for(npm_client, major),
        plugin_name=plugin_name,
        install=not choices.use_defaults and choices.install is not False,
        npm_client_major=major,
    )
