"""Process runner shared by probes, git helpers and the reconciler.

Every external command (pnpm, npm, git, install commands) goes through
run_command so failures surface as one family of exceptions.
"""

import subprocess
from pathlib import Path
from typing import Optional

from kickstart.errors import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)


def run_command(
    *cmd,
    cwd: Optional[Path] = None,
    check: bool = True,
    capture: bool = True,
    timeout: Optional[int] = None,
) -> subprocess.CompletedProcess:
    """Run an external command.

    Args:
        *cmd: Executable followed by its arguments
        cwd: Working directory (defaults to cwd)
        check: Raise on non-zero exit status
        capture: Capture stdout/stderr as text; when False output is
            streamed to the terminal (used for installs)
        timeout: Timeout in seconds, None waits indefinitely

    Returns:
        CompletedProcess result

    Raises:
        CommandNotFoundError: If the executable is not installed
        CommandTimeoutError: If the command times out
        CommandFailedError: If check=True and the command fails
    """
    cmd = [str(c) for c in cmd]
    cmd_str = " ".join(cmd)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            capture_output=capture,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise CommandNotFoundError(
            f"{cmd[0]} is not installed or not in PATH",
            cmd=cmd,
        )
    except subprocess.TimeoutExpired:
        raise CommandTimeoutError(
            f"Command timed out after {timeout}s: {cmd_str}",
            timeout=timeout,
            cmd=cmd,
        )

    if check and result.returncode != 0:
        stderr = result.stderr or ""
        raise CommandFailedError(
            f"Command failed: {cmd_str}\n{stderr}".rstrip(),
            returncode=result.returncode,
            stderr=stderr,
            cmd=cmd,
        )
    return result
