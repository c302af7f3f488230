"""cliref - markdown CLI reference generator

Philosophy:
- Ruthless simplicity
- Brick architecture (self-contained modules)
- The binary's own --help output is the source of truth
- Fail fast with helpful guidance

cliref runs a command-line binary's --help for every subcommand it can find,
then writes one markdown page per command plus a SUMMARY.md index that can be
merged into an existing mdBook summary.

Public API (the "studs"):
    Command: Binary plus subcommand path
    discover_commands: Walk a command tree via --help output
    DocRenderer: Write markdown pages, SUMMARY.md and README.md
    update_root_summary: Merge a summary into a marker-delimited index
"""

from cliref.command import Command
from cliref.discovery import CommandDiscovery, discover_commands
from cliref.index_merger import update_root_summary
from cliref.renderer import DocRenderer

__version__ = "0.1.0"
__all__ = [
    "Command",
    "CommandDiscovery",
    "DocRenderer",
    "__version__",
    "discover_commands",
    "update_root_summary",
]
