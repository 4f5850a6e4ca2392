"""Git utilities for kickstart."""

from kickstart.git.utils import (
    GIT_DIR,
    get_config_value,
    get_git_info,
    has_git_dir,
    init_repo,
    run_git,
)

__all__ = [
    "GIT_DIR",
    "get_config_value",
    "get_git_info",
    "has_git_dir",
    "init_repo",
    "run_git",
]
