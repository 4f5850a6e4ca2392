"""Core modules for kickstart.

This package contains the scaffolding pipeline:
- models: choices, parameters and project context
- probes: environment inspection
- resolve: parameter resolution
- reconcile: post-generation adjustments
- generator: the orchestrator tying them together

Only config and models are re-exported here; import the pipeline
modules directly.
"""

from kickstart.core.config import (
    KickstartConfig,
    load_config,
    save_config,
)

from kickstart.core.models import (
    AppTemplate,
    External,
    GenerationParameters,
    Internal,
    NpmClient,
    ProbeResults,
    ProjectContext,
    RawChoices,
    Registry,
)

__all__ = [
    # Config
    "KickstartConfig",
    "load_config",
    "save_config",
    # Models
    "AppTemplate",
    "External",
    "GenerationParameters",
    "Internal",
    "NpmClient",
    "ProbeResults",
    "ProjectContext",
    "RawChoices",
    "Registry",
]
