"""Post-generation reconciliation.

Brings a freshly rendered project in line with its GenerationParameters.
Steps run in a fixed order and are idempotent:

1. remove .husky when husky is not wanted
2. move .npmrc to the monorepo root
3. git init at the project root
4. install dependencies

Filesystem and subprocess failures in any step are logged as warnings and
never abort the run.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from kickstart.core.models import GenerationParameters, NpmClient, ProjectContext
from kickstart.errors import CommandError
from kickstart.git.utils import has_git_dir, init_repo
from kickstart.shell import run_command

logger = logging.getLogger(__name__)

HUSKY_DIR = ".husky"
NPMRC = ".npmrc"

STEP_DONE = "done"
STEP_SKIPPED = "skipped"
STEP_FAILED = "failed"


@dataclass
class StepResult:
    """Outcome of one reconciliation step."""
    name: str
    status: str
    detail: str = ""


@dataclass
class ReconcileReport:
    """Outcomes of all reconciliation steps, in execution order."""
    steps: List[StepResult] = field(default_factory=list)

    def add(self, name: str, status: str, detail: str = "") -> StepResult:
        result = StepResult(name, status, detail)
        self.steps.append(result)
        return result

    def get(self, name: str) -> Optional[StepResult]:
        for step in self.steps:
            if step.name == name:
                return step
        return None

    @property
    def failed(self) -> List[StepResult]:
        return [s for s in self.steps if s.status == STEP_FAILED]


# =============================================================================
# Steps
# =============================================================================

def remove_husky(context: ProjectContext) -> bool:
    """Delete the .husky directory of the target.

    Returns:
        True if something was removed
    """
    husky = Path(context.target) / HUSKY_DIR
    if not husky.exists():
        return False
    shutil.rmtree(husky)
    return True


def move_npmrc(context: ProjectContext) -> bool:
    """Move the project's .npmrc to the monorepo root.

    An existing root .npmrc is never overwritten; the local copy is always
    removed.

    Returns:
        True if the root .npmrc was created
    """
    source = Path(context.target) / NPMRC
    dest = Path(context.project_root) / NPMRC
    if not source.exists():
        return False

    copied = False
    if not dest.exists():
        shutil.copyfile(source, dest)
        copied = True
    source.unlink()
    return copied


def init_git(context: ProjectContext) -> bool:
    """Run git init at the project root unless it already has .git.

    Returns:
        True if git init was invoked

    Raises:
        CommandError: If git init fails
    """
    root = Path(context.project_root)
    if has_git_dir(root):
        return False
    init_repo(root)
    return True


def install_command(npm_client: NpmClient) -> List[str]:
    """Plain install command for an npm client."""
    client = NpmClient(npm_client)
    if client == NpmClient.YARN:
        return ["yarn"]
    return [client.value, "install"]


def install_deps(params: GenerationParameters, cwd: Path) -> List[str]:
    """Install dependencies in cwd and return the command that was run.

    pnpm 8 resolves the lowest matching versions, so it upgrades every
    dependency to latest instead of running a plain install.

    Raises:
        CommandError: If the install command fails
    """
    if params.is_pnpm8:
        cmd = ["pnpm", "up", "-L"]
    else:
        cmd = install_command(params.npm_client)
    run_command(*cmd, cwd=cwd, capture=False)
    return cmd


# =============================================================================
# Reconciler
# =============================================================================

class Reconciler:
    """Runs the reconciliation steps against one generated project."""

    def __init__(
        self,
        params: GenerationParameters,
        context: ProjectContext,
        installer: Optional[Callable[[GenerationParameters, Path], List[str]]] = None,
    ):
        self.params = params
        self.context = context
        self.installer = installer or install_deps
        self.report = ReconcileReport()

    def run(self) -> ReconcileReport:
        """Run all steps in order."""
        self.remove_husky()
        self.move_npmrc()
        self.init_git()
        self.install()
        return self.report

    def remove_husky(self) -> StepResult:
        if self.params.with_husky:
            return self.report.add("husky", STEP_SKIPPED, "husky kept")
        try:
            removed = remove_husky(self.context)
        except OSError as e:
            logger.warning("Remove %s failed: %s", HUSKY_DIR, e)
            return self.report.add("husky", STEP_FAILED, str(e))
        return self.report.add("husky", STEP_DONE, "removed" if removed else "absent")

    def move_npmrc(self) -> StepResult:
        if not self.context.in_monorepo:
            return self.report.add("npmrc", STEP_SKIPPED, "not in a monorepo")
        try:
            copied = move_npmrc(self.context)
        except OSError as e:
            logger.warning("Move %s to monorepo root failed: %s", NPMRC, e)
            return self.report.add("npmrc", STEP_FAILED, str(e))
        return self.report.add(
            "npmrc", STEP_DONE,
            f"moved to {self.context.project_root}" if copied else "root config kept",
        )

    def init_git(self) -> StepResult:
        if not self.params.init_git:
            logger.info("Skip Git init")
            return self.report.add("git", STEP_SKIPPED, "disabled")
        try:
            invoked = init_git(self.context)
        except (CommandError, OSError) as e:
            logger.warning("Initial the git repo failed: %s", e)
            return self.report.add("git", STEP_FAILED, str(e))
        return self.report.add("git", STEP_DONE, "initialized" if invoked else "already a repo")

    def install(self) -> StepResult:
        if not self.params.install:
            logger.info("Skip install deps")
            if self.params.is_pnpm8:
                logger.warning(
                    "You are currently using pnpm v8, it will install minimal versions of dependencies"
                )
                logger.warning(
                    "Recommended that you run `pnpm up -L` to install latest versions of dependencies"
                )
            return self.report.add("install", STEP_SKIPPED, "disabled")
        try:
            cmd = self.installer(self.params, Path(self.context.target))
        except (CommandError, OSError) as e:
            logger.warning("Install dependencies failed: %s", e)
            return self.report.add("install", STEP_FAILED, str(e))
        return self.report.add("install", STEP_DONE, " ".join(cmd))
