"""Command tree discovery.

Walks the command tree of one or more binaries by invoking ``--help`` for
every command and following the subcommands each help text lists.

Traversal is pre-order depth-first with an explicit stack: after a command
is processed its first listed subcommand is processed next, before any of
its siblings or its ancestors' siblings. Seeds are visited in the order
given.

Example:
    >>> mapping = discover_commands([Path("./target/debug/app")])
    >>> [str(cmd) for cmd in mapping]
    ['app', 'app db', 'app db stats']
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from cliref.command import Command
from cliref.errors import InvalidSeedError, NoSeedCommandsError
from cliref.help_parser import parse_subcommands
from cliref.help_runner import run_help

logger = logging.getLogger(__name__)

HelpRunner = Callable[[Command], str]
SubcommandsCallback = Callable[[Command, list[str]], None]


class CommandDiscovery:
    """Discover every command reachable from a set of seed binaries.

    The worklist and the result mapping are owned by one discovery run.
    Commands are invoked one at a time.
    """

    def __init__(
        self,
        runner: HelpRunner = run_help,
        on_subcommands: SubcommandsCallback | None = None,
    ):
        """Initialize discovery.

        Args:
            runner: Returns the help output of a command; raises on failure
            on_subcommands: Called with each command that lists subcommands
        """
        self.runner = runner
        self.on_subcommands = on_subcommands

    def discover(self, binaries: Iterable[Path | str]) -> dict[Command, str]:
        """Return every discovered command mapped to its raw help output.

        Args:
            binaries: Seed binary paths, in the order they should be visited

        Returns:
            Mapping in traversal order

        Raises:
            NoSeedCommandsError: If no binary was given
            InvalidSeedError: If a path has no file name (e.g. "/")
            CommandFailedError: If any help invocation fails
            InvalidOutputError: If any help output is not valid text
        """
        seeds = [Command(Path(binary)) for binary in binaries]
        if not seeds:
            raise NoSeedCommandsError("At least one command is required")
        for seed in seeds:
            if not seed.binary.name:
                raise InvalidSeedError(f"Expected a path to a binary, got: {seed.binary}")

        # Reversed so that popping yields the seeds in the given order.
        todo = list(reversed(seeds))
        output: dict[Command, str] = {}

        while todo:
            cmd = todo.pop()
            stdout = self.runner(cmd)
            subcommands = parse_subcommands(stdout)

            if subcommands:
                logger.debug('Found subcommands for "%s": %s', cmd, subcommands)
                if self.on_subcommands is not None:
                    self.on_subcommands(cmd, subcommands)

            for name in reversed(subcommands):
                todo.append(cmd.child(name))

            output[cmd] = stdout

        logger.debug("Discovered %d commands", len(output))
        return output


def discover_commands(
    binaries: Iterable[Path | str],
    runner: HelpRunner = run_help,
    on_subcommands: SubcommandsCallback | None = None,
) -> dict[Command, str]:
    """Discover the command trees of the given binaries.

    See CommandDiscovery.discover.
    """
    return CommandDiscovery(runner=runner, on_subcommands=on_subcommands).discover(binaries)


__all__ = ["CommandDiscovery", "discover_commands"]
