"""Custom exceptions for cliref."""

from pathlib import Path


class CliRefError(Exception):
    """Base exception for cliref errors."""

    pass


class NoSeedCommandsError(CliRefError):
    """No seed command was supplied to discovery."""

    pass


class InvalidSeedError(CliRefError):
    """A seed path does not name a binary file (e.g. "/")."""

    pass


class CommandFailedError(CliRefError):
    """A help invocation exited with a non-zero status or could not start."""

    def __init__(self, command: str, stderr: str):
        self.command = command
        self.stderr = stderr
        super().__init__(f'Command "{command}" failed:\n{stderr}')


class InvalidOutputError(CliRefError):
    """A help invocation produced output that is not valid UTF-8."""

    pass


class FilesystemError(CliRefError):
    """A directory or file could not be created or written."""

    pass


class ConfigError(CliRefError):
    """Raised when the configuration file cannot be loaded."""

    pass


class MissingIndexMarkersError(CliRefError):
    """The root index file lacks the CLI reference marker lines."""

    def __init__(self, path: Path, start_marker: str, end_marker: str):
        self.path = path
        self.start_marker = start_marker
        self.end_marker = end_marker
        super().__init__(f"Could not find CLI_REFERENCE section in {path}")

    def guidance(self) -> str:
        """Return instructions for adding the missing section."""
        return (
            f"Could not find CLI_REFERENCE section in {self.path}. "
            "Please add the following section to the file:\n"
            f"{self.start_marker}\n"
            "... CLI Reference goes here ...\n\n"
            f"{self.end_marker}"
        )
