"""Help output capture for a single command.

Runs ``<binary> <subcommands...> --help`` and returns its standard output.
The child gets color disabled and a wide, tall terminal so help text is
neither wrapped nor truncated. Its stdin is /dev/null, so a binary that
reads input cannot stall the run.

Usage:
    from cliref.help_runner import run_help

    stdout = run_help(Command(Path("./target/debug/app"), ("db",)))
"""

import logging
import os
import subprocess

from cliref.command import Command
from cliref.errors import CommandFailedError, InvalidOutputError

logger = logging.getLogger(__name__)

HELP_FLAG = "--help"
DEFAULT_COLUMNS = 100
DEFAULT_LINES = 10000


def help_environment(columns: int = DEFAULT_COLUMNS, lines: int = DEFAULT_LINES) -> dict[str, str]:
    """Build the environment for a help invocation.

    Args:
        columns: Terminal width reported to the child
        lines: Terminal height reported to the child

    Returns:
        Copy of the current environment with NO_COLOR, COLUMNS and LINES set
    """
    env = os.environ.copy()
    env["NO_COLOR"] = "1"
    env["COLUMNS"] = str(columns)
    env["LINES"] = str(lines)
    return env


def run_help(
    command: Command,
    *,
    columns: int = DEFAULT_COLUMNS,
    lines: int = DEFAULT_LINES,
) -> str:
    """Return the help output of a command.

    Args:
        command: Command to invoke
        columns: Terminal width reported to the child (default: 100)
        lines: Terminal height reported to the child (default: 10000)

    Returns:
        Captured standard output

    Raises:
        CommandFailedError: Non-zero exit status, or the binary could not be started
        InvalidOutputError: Standard output is not valid UTF-8
    """
    cmd = [str(command.binary), *command.args, HELP_FLAG]
    logger.debug("Running: %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
            env=help_environment(columns, lines),
        )
    except OSError as e:
        raise CommandFailedError(str(command), f"Error executing command: {e!s}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise CommandFailedError(str(command), stderr)

    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidOutputError(f'Output of "{command}" is not valid UTF-8: {e}') from e


__all__ = ["help_environment", "run_help"]
