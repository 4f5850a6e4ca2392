"""Shared test fixtures for kickstart.

Provides:
- rendered_project: target directory as a bundled template leaves it
- monorepo: pnpm workspace root with an empty packages/ directory
- make_params: factory for GenerationParameters
- fake_renderer / fake_unpacker: recording template collaborators
- mock_toolchain: pytest-subprocess fixture pre-configured for pnpm/npm/git
- cli_runner: Click CliRunner
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from kickstart.core.models import (
    AppTemplate,
    GenerationParameters,
    NpmClient,
    ProjectContext,
    Registry,
)


def write_rendered_tree(target: Path) -> Path:
    """Minimal stand-in for a rendered template."""
    target.mkdir(parents=True, exist_ok=True)
    (target / "package.json").write_text('{"private": true}\n')
    (target / ".npmrc").write_text("registry=https://registry.npmjs.com/\n")
    husky = target / ".husky"
    husky.mkdir(exist_ok=True)
    (husky / "pre-commit").write_text("npx --no-install lint-staged --quiet\n")
    return target


@pytest.fixture
def rendered_project(tmp_path):
    """Target directory with package.json, .npmrc and .husky/."""
    return write_rendered_tree(tmp_path / "my-app")


@pytest.fixture
def monorepo(tmp_path):
    """pnpm workspace root: package.json + pnpm-workspace.yaml + packages/."""
    root = tmp_path / "repo"
    (root / "packages").mkdir(parents=True)
    (root / "package.json").write_text('{"private": true}\n')
    (root / "pnpm-workspace.yaml").write_text("packages:\n  - 'packages/*'\n")
    return root


@pytest.fixture
def monorepo_project(monorepo):
    """ProjectContext for a rendered project inside the pnpm workspace."""
    target = write_rendered_tree(monorepo / "packages" / "app")
    return ProjectContext(target=target, in_monorepo=True, project_root=monorepo)


@pytest.fixture
def make_params():
    """Factory for GenerationParameters with sensible defaults."""
    def _make(**overrides) -> GenerationParameters:
        values = dict(
            template=AppTemplate.APP,
            npm_client=NpmClient.PNPM,
            registry=Registry.NPM.value,
            author="Jane <jane@example.com>",
            email="jane@example.com",
            version="^4.3.0",
            init_git=True,
            with_husky=True,
            extra_npmrc="",
            plugin_name="umi-plugin-demo",
            install=False,
            npm_client_major=9,
        )
        values.update(overrides)
        return GenerationParameters(**values)
    return _make


class RecordingRenderer:
    """Renderer collaborator that records calls and writes a stub tree."""

    def __init__(self):
        self.calls = []

    def __call__(self, template_id, destination, data):
        self.calls.append((template_id, Path(destination), data))
        write_rendered_tree(Path(destination))


class RecordingUnpacker:
    """Unpacker collaborator that records calls and writes a stub tree."""

    def __init__(self):
        self.calls = []

    def __call__(self, template_ref, destination, registry):
        self.calls.append((template_ref, Path(destination), registry))
        write_rendered_tree(Path(destination))


@pytest.fixture
def fake_renderer():
    return RecordingRenderer()


@pytest.fixture
def fake_unpacker():
    return RecordingUnpacker()


@pytest.fixture
def mock_toolchain(fp):
    """Mock pnpm/npm/git probe commands using pytest-subprocess.

    pnpm reports 9.x, npm reports the public registry and git has an
    author configured. Use `fp` directly to register other commands.
    """
    fp.register(["pnpm", "--version"], stdout="9.1.0\n")
    fp.register(["npm", "config", "get", "registry"], stdout="https://registry.npmjs.org/\n")
    fp.register(["git", "config", "--get", "user.name"], stdout="Jane\n")
    fp.register(["git", "config", "--get", "user.email"], stdout="jane@example.com\n")
    return fp


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def missing_executable(monkeypatch):
    """Every subprocess.run raises FileNotFoundError, as for a missing binary."""
    import subprocess

    def _run(cmd, *args, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", _run)
