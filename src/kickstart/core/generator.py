"""Scaffolding orchestrator.

Sequences one run: probe the environment, resolve parameters, render or
unpack the template, then reconcile the generated tree.

Only two kinds of failure abort a run: the npm client version probe
(NpmClientNotFoundError) and the template collaborators (TemplateError).
Both are raised before reconciliation starts.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from kickstart.core.config import KickstartConfig
from kickstart.core.models import (
    External,
    GenerationParameters,
    GenerationSource,
    Internal,
    NpmClient,
    ProbeResults,
    ProjectContext,
    RawChoices,
)
from kickstart.core.probes import detect_monorepo_root, get_npm_client_major_version
from kickstart.core.reconcile import Reconciler, ReconcileReport
from kickstart.core.resolve import resolve_parameters, resolve_source, selected_npm_client
from kickstart.git.utils import get_git_info
from kickstart.templates import render
from kickstart.templates.remote import unpack_template

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything a run decided and did."""
    source: GenerationSource
    params: GenerationParameters
    context: ProjectContext
    report: ReconcileReport


def resolve_target(cwd: Path, name: Optional[str]) -> Path:
    """Target directory: cwd/name, or cwd itself when no name is given."""
    cwd = Path(cwd)
    return cwd / name if name else cwd


class ProjectGenerator:
    """Creates one project from finalized RawChoices.

    Collaborators are injectable so tests can substitute fakes:
    - renderer(template_id, destination, data)
    - unpacker(template_ref, destination, registry)
    - installer(params, cwd) -> command
    """

    def __init__(
        self,
        cwd: Optional[Path] = None,
        config: Optional[KickstartConfig] = None,
        renderer: Optional[Callable] = None,
        unpacker: Optional[Callable] = None,
        installer: Optional[Callable] = None,
    ):
        self.cwd = Path(cwd or Path.cwd())
        self.config = config or KickstartConfig()
        self.renderer = renderer or render
        self.unpacker = unpacker or unpack_template
        self.installer = installer

    def probe(
        self,
        npm_client: NpmClient,
        target: Path,
        custom_registry: Optional[str] = None,
    ) -> ProbeResults:
        """Run the environment probes needed for resolution.

        Raises:
            NpmClientNotFoundError: If pnpm is selected but not usable
        """
        monorepo_root = detect_monorepo_root(target)
        if monorepo_root:
            logger.debug("Target is inside monorepo %s", monorepo_root)

        major = None
        if npm_client == NpmClient.PNPM:
            major = get_npm_client_major_version(NpmClient.PNPM)
            logger.debug("Detected pnpm v%d", major)

        username, email = get_git_info(self.cwd)
        return ProbeResults(
            monorepo_root=monorepo_root,
            npm_client_major=major,
            custom_registry=custom_registry,
            username=username,
            email=email,
        )

    def generate(self, source: GenerationSource, params: GenerationParameters, target: Path) -> None:
        """Dispatch to the unpack or render collaborator.

        Raises:
            TemplateError: If the collaborator fails
        """
        if isinstance(source, External):
            self.unpacker(source.template_ref, target, params.registry)
        elif isinstance(source, Internal):
            self.renderer(source.template_id, target, params.to_template_data())
        else:
            raise TypeError(f"Unknown generation source: {source!r}")

    def run(self, choices: RawChoices, custom_registry: Optional[str] = None) -> GenerationResult:
        """Create the project.

        Args:
            choices: Finalized user choices
            custom_registry: Registry found by detect_user_registry(), if any

        Raises:
            NpmClientNotFoundError: Version probe failed
            TemplateError: Render or unpack failed
        """
        target = resolve_target(self.cwd, choices.name)
        source = resolve_source(choices, self.config)

        npm_client = selected_npm_client(choices, self.config)
        probes = self.probe(npm_client, target, custom_registry)
        params = resolve_parameters(choices, probes, self.config, npm_client)

        self.generate(source, params, target)

        context = ProjectContext.for_target(target, probes.monorepo_root)
        report = Reconciler(params, context, installer=self.installer).run()
        return GenerationResult(source=source, params=params, context=context, report=report)


def create_project(
    cwd: Path,
    choices: RawChoices,
    config: Optional[KickstartConfig] = None,
    **collaborators,
) -> GenerationResult:
    """Convenience wrapper around ProjectGenerator.run()."""
    return ProjectGenerator(cwd, config, **collaborators).run(choices)
