"""Data model for the scaffolding pipeline.

- RawChoices: user choices as collected by the prompts (builder value)
- GenerationSource: internal template or external package, decided once
- ProbeResults: what the environment probes found
- GenerationParameters: the resolved, immutable parameter set
- ProjectContext: where the rendered project lives
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class NpmClient(str, Enum):
    NPM = "npm"
    CNPM = "cnpm"
    TNPM = "tnpm"
    YARN = "yarn"
    PNPM = "pnpm"


class Registry(str, Enum):
    NPM = "https://registry.npmjs.com/"
    TAOBAO = "https://registry.npmmirror.com/"


class AppTemplate(str, Enum):
    APP = "app"
    MAX = "max"
    VUE_APP = "vue-app"
    PLUGIN = "plugin"


# pnpm 7.0.0 - 7.13.4 warns on unmet peer dependencies unless disabled
# https://pnpm.io/npmrc#strict-peer-dependencies
PNPM_STRICT_PEER_MAJOR = 7
PNPM_STRICT_PEER_NPMRC = "strict-peer-dependencies=false"

# pnpm 8 resolves the lowest matching versions by default
# https://pnpm.io/npmrc#resolution-mode
PNPM_MINIMAL_VERSION_MAJOR = 8

MONOREPO_MARKERS = ("lerna.json", "pnpm-workspace.yaml")


@dataclass
class RawChoices:
    """Choices collected before resolution.

    Filled in place by the prompt phase, then handed to resolve_parameters.
    None means "not chosen, use the default".
    """
    name: Optional[str] = None
    app_template: Optional[AppTemplate] = None
    npm_client: Optional[NpmClient] = None
    registry: Optional[str] = None
    plugin_name: Optional[str] = None
    external_template: Optional[str] = None
    use_defaults: bool = False
    git: bool = True
    install: bool = True


@dataclass(frozen=True)
class External:
    """Generate from a remote template package."""
    template_ref: str


@dataclass(frozen=True)
class Internal:
    """Generate from a bundled template."""
    template_id: AppTemplate


GenerationSource = Union[External, Internal]


@dataclass(frozen=True)
class ProbeResults:
    """Classified results of the environment probes."""
    monorepo_root: Optional[Path] = None
    npm_client_major: Optional[int] = None
    custom_registry: Optional[str] = None
    username: str = ""
    email: str = ""

    @property
    def in_monorepo(self) -> bool:
        return self.monorepo_root is not None

    @property
    def author(self) -> str:
        if self.username and self.email:
            return f"{self.username} <{self.email}>"
        return ""


@dataclass(frozen=True)
class GenerationParameters:
    """Fully resolved parameters for one scaffolding run."""
    template: AppTemplate
    npm_client: NpmClient
    registry: str
    author: str
    email: str
    version: str
    init_git: bool
    with_husky: bool
    extra_npmrc: str
    plugin_name: str
    install: bool
    npm_client_major: Optional[int] = None

    @property
    def is_pnpm8(self) -> bool:
        return (
            self.npm_client == NpmClient.PNPM
            and self.npm_client_major == PNPM_MINIMAL_VERSION_MAJOR
        )

    def to_template_data(self) -> dict:
        """Data handed to the template renderer."""
        return {
            "version": self.version,
            "npmClient": self.npm_client.value,
            "registry": self.registry,
            "author": self.author,
            "email": self.email,
            "withHusky": self.with_husky,
            "extraNpmrc": self.extra_npmrc,
            "pluginName": self.plugin_name,
        }


@dataclass(frozen=True)
class ProjectContext:
    """Location of the generated project.

    project_root is the monorepo root when the target sits inside one,
    otherwise the target itself.
    """
    target: Path
    in_monorepo: bool = False
    project_root: Optional[Path] = None

    def __post_init__(self):
        if self.project_root is None:
            object.__setattr__(self, "project_root", self.target)
        target = Path(self.target).resolve()
        root = Path(self.project_root).resolve()
        if root != target and root not in target.parents:
            raise ValueError(f"{root} is not an ancestor of {target}")

    @classmethod
    def for_target(cls, target: Path, monorepo_root: Optional[Path]) -> "ProjectContext":
        if monorepo_root is None:
            return cls(target=target)
        return cls(target=target, in_monorepo=True, project_root=monorepo_root)
