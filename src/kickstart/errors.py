"""Exception hierarchy for kickstart.

Fatal errors (probe, template and config failures) propagate to the CLI.
Command errors raised by the process runner are classified by the caller.
"""


class KickstartError(Exception):
    """Base exception for kickstart."""
    pass


# =============================================================================
# Process Errors
# =============================================================================

class CommandError(KickstartError):
    """Base exception for external command invocations."""

    def __init__(self, message: str, cmd: list = None):
        super().__init__(message)
        self.cmd = cmd or []


class CommandNotFoundError(CommandError):
    """Executable is not installed or not in PATH."""
    pass


class CommandTimeoutError(CommandError):
    """Command timed out."""

    def __init__(self, message: str, timeout: int, cmd: list = None):
        super().__init__(message, cmd)
        self.timeout = timeout


class CommandFailedError(CommandError):
    """Command exited with non-zero status."""

    def __init__(self, message: str, returncode: int, stderr: str = "", cmd: list = None):
        super().__init__(message, cmd)
        self.returncode = returncode
        self.stderr = stderr


# =============================================================================
# Pipeline Errors
# =============================================================================

class NpmClientNotFoundError(KickstartError):
    """The selected npm client could not report its version."""
    pass


class TemplateError(KickstartError):
    """Rendering or unpacking a template failed."""
    pass


class ConfigError(KickstartError):
    """Configuration file could not be read."""
    pass
