"""Environment probes.

Read-only inspections of the filesystem and the JS toolchain. Every probe
collapses its own failures to None, except get_npm_client_major_version:
install behaviour depends on the pnpm version, so not knowing it aborts
the run.
"""

import logging
from pathlib import Path
from typing import Optional

from kickstart.core.models import MONOREPO_MARKERS, NpmClient
from kickstart.errors import CommandError, NpmClientNotFoundError
from kickstart.shell import run_command

logger = logging.getLogger(__name__)

NPM_REGISTRIES = (
    "registry.npmjs.org",
    "registry.npmjs.com",
    "registry.yarnpkg.com",
)

CHINA_REGISTRIES = (
    "registry.npm.taobao.org",
    "registry.npmmirror.com",
    "r.cnpmjs.org",
    # https://cnodejs.org/topic/61405b76fe0c5109a7aea0ed
    "registry.nlark.com",
)


# =============================================================================
# Monorepo
# =============================================================================

def find_package_json(start: Path) -> Optional[Path]:
    """Find the nearest package.json at or above start."""
    current = Path(start).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "package.json"
        if candidate.is_file():
            return candidate
    return None


def detect_monorepo_root(target: Path) -> Optional[Path]:
    """Find the monorepo root that target would belong to.

    Looks for the nearest package.json above target. Its directory is a
    monorepo root only when it also holds lerna.json or
    pnpm-workspace.yaml.

    Returns:
        The monorepo root, or None
    """
    try:
        root_pkg = find_package_json(Path(target).parent)
        if root_pkg is None:
            return None
        root_dir = root_pkg.parent
        if any((root_dir / marker).exists() for marker in MONOREPO_MARKERS):
            return root_dir
    except OSError as e:
        logger.debug("Monorepo detection failed: %s", e)
    return None


# =============================================================================
# npm client version
# =============================================================================

def parse_major_version(text: str) -> int:
    """Parse the major component of a version string ("8.15.1" -> 8).

    Raises:
        ValueError: If the leading component is not an integer
    """
    return int(text.strip().split(".")[0])


def get_npm_client_major_version(client: NpmClient = NpmClient.PNPM) -> int:
    """Get the major version of an npm client.

    The command is awaited without a timeout: a slow client is not a
    missing one.

    Raises:
        NpmClientNotFoundError: If the client cannot report its version
    """
    name = NpmClient(client).value
    try:
        result = run_command(name, "--version")
        return parse_major_version(result.stdout)
    except (CommandError, ValueError) as e:
        raise NpmClientNotFoundError(f"Please install {name} first") from e


# =============================================================================
# Registry
# =============================================================================

def is_npm_registry(registry: str) -> bool:
    return any(host in registry for host in NPM_REGISTRIES)


def is_china_registry(registry: str) -> bool:
    return any(host in registry for host in CHINA_REGISTRIES)


def classify_registry(registry: str) -> Optional[str]:
    """Return registry if it is neither a public nor a known mirror URL."""
    registry = registry.strip()
    if not registry or is_npm_registry(registry) or is_china_registry(registry):
        return None
    return registry


def detect_user_registry() -> Optional[str]:
    """Detect a custom registry from the user's npm config.

    Returns:
        The configured registry URL when it is a custom one, else None
    """
    try:
        result = run_command("npm", "config", "get", "registry")
    except CommandError as e:
        logger.debug("Registry detection failed: %s", e)
        return None
    return classify_registry(result.stdout)

