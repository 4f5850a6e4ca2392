"""Git helpers for kickstart.

Only the handful of operations a freshly scaffolded project needs:
reading the author identity and initializing a repository.
"""

from pathlib import Path
from typing import Optional, Tuple

from kickstart.errors import CommandError
from kickstart.shell import run_command

GIT_DIR = ".git"


def run_git(*args, cwd: Optional[Path] = None, check: bool = True, timeout: Optional[int] = None):
    """Run a git command through the shared process runner."""
    return run_command("git", *args, cwd=cwd, check=check, timeout=timeout)


def has_git_dir(path: Path) -> bool:
    """Check whether path itself holds a .git directory (or file, for worktrees)."""
    return (path / GIT_DIR).exists()


def init_repo(path: Path) -> None:
    """Run `git init` in path.

    Raises:
        CommandError: If git is missing or the command fails
    """
    run_git("init", cwd=path)


def get_config_value(key: str, cwd: Optional[Path] = None) -> str:
    """Read a git config value, empty string when unset or git is unavailable."""
    try:
        result = run_git("config", "--get", key, cwd=cwd, check=False)
    except CommandError:
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def get_git_info(cwd: Optional[Path] = None) -> Tuple[str, str]:
    """Get (username, email) from git config."""
    return get_config_value("user.name", cwd), get_config_value("user.email", cwd)
