"""Help text parsing.

Extracts structure from the plain text a binary prints for ``--help``. The
parser only knows a textual convention: a ``Usage:`` marker, a ``Commands:``
section ending at ``Options:`` or ``Arguments:``, and subcommands listed on
lines indented by exactly two spaces.

Public API (the "studs"):
    parse_subcommands: Immediate subcommand names, in printed order
    parse_description: Split into one-line description and usage body
"""

import re
from functools import lru_cache

COMMANDS_HEADER = "Commands:"
USAGE_MARKER = "Usage:"
SECTION_END_PREFIXES = ("Options:", "Arguments:")

# Two leading spaces followed by the subcommand name.
SUBCOMMAND_LINE_PATTERN = r"^  (\S+)"

# Excluded from discovered subcommands.
HELP_SUBCOMMAND = "help"


@lru_cache(maxsize=None)
def _regex(pattern: str) -> re.Pattern[str]:
    """Compile a pattern once per process."""
    return re.compile(pattern)


def parse_subcommands(help_text: str) -> list[str]:
    """Return the subcommands listed in the help output of a command.

    Args:
        help_text: Raw ``--help`` output

    Returns:
        Subcommand names in the order they are printed, without ``help``.
        Empty when there is no ``Commands:`` section.

    Example:
        >>> parse_subcommands("Commands:\\n  db    manage database\\n  help  Print help\\n")
        ['db']
    """
    _, found, commands_section = help_text.partition(COMMANDS_HEADER)
    if not found:
        return []

    line_re = _regex(SUBCOMMAND_LINE_PATTERN)
    names = []
    for line in commands_section.split("\n"):
        line = line.rstrip("\r")
        if line.startswith(SECTION_END_PREFIXES):
            break
        match = line_re.match(line)
        if match and match.group(1) != HELP_SUBCOMMAND:
            names.append(match.group(1))
    return names


def parse_description(help_text: str) -> tuple[str, str]:
    """Split help output into a short description and the rest.

    The description is the first line of the text before ``Usage:``. The body
    starts at ``Usage:``. Without a ``Usage:`` marker the description is empty
    and the body is the input unchanged.

    Args:
        help_text: Raw ``--help`` output

    Returns:
        Tuple of (description, body)
    """
    idx = help_text.find(USAGE_MARKER)
    if idx == -1:
        return "", help_text

    preamble = help_text[:idx].strip()
    description = preamble.split("\n", 1)[0].strip() if preamble else ""
    return description, help_text[idx:]


__all__ = ["parse_description", "parse_subcommands"]
