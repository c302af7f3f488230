"""Markdown rendering of discovered commands.

Writes one markdown page per command, a SUMMARY.md listing every page as a
nested link list, and optionally a static README.md that includes the
summary.

Layout under the output directory, for ``app`` with ``app db stats``:

    app.md
    app/db.md
    app/db/stats.md
    SUMMARY.md

Philosophy:
- Simple string formatting (no Jinja2)
- Standard library only
- Page order and indentation follow discovery order
"""

import logging
import os
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from cliref.command import Command
from cliref.errors import FilesystemError
from cliref.help_parser import parse_description
from cliref.help_runner import HELP_FLAG

logger = logging.getLogger(__name__)

SUMMARY_FILE = "SUMMARY.md"
README_FILE = "README.md"

README = """# CLI Reference

<!-- Generated by cliref -->

Automatically-generated CLI reference from `--help` output.

{{#include ./SUMMARY.md}}
"""

# (pattern, replacement) pairs applied in order to every help body.
DEFAULT_REPLACEMENTS: tuple[tuple[str, str], ...] = ()


class DocRenderer:
    """Render discovered commands into markdown files.

    Example:
        >>> renderer = DocRenderer(Path("docs/cli"))
        >>> renderer.render_all(mapping)
    """

    def __init__(
        self,
        out_dir: Path | str,
        replacements: Sequence[tuple[str, str]] = DEFAULT_REPLACEMENTS,
        trim_line_endings: bool = False,
    ):
        """Initialize renderer.

        Args:
            out_dir: Directory receiving the generated files
            replacements: Regex substitutions applied to help bodies, in order
            trim_line_endings: Strip trailing whitespace from every written line
        """
        self.out_dir = Path(out_dir)
        self.replacements = [(re.compile(pattern), repl) for pattern, repl in replacements]
        self.trim_line_endings = trim_line_endings

    def preprocess_help(self, text: str) -> str:
        """Apply the configured substitutions to a help body."""
        for pattern, replacement in self.replacements:
            text = pattern.sub(replacement, text)
        return text

    def help_markdown(self, command: Command, help_text: str) -> str:
        """Return the description and fenced help block for a command."""
        description, body = parse_description(help_text)
        return (
            f"{description}\n\n"
            f"```bash\n"
            f"$ {command} {HELP_FLAG}\n"
            f"{self.preprocess_help(body.strip())}\n"
            f"```"
        )

    def command_markdown(self, command: Command, help_text: str) -> str:
        """Return the full markdown page for a command."""
        return f"# {command}\n\n{self.help_markdown(command, help_text)}"

    def command_file(self, command: Command) -> Path:
        """Return the page path for a command (``app db`` -> ``<out>/app/db.md``)."""
        return self.out_dir / f"{command.path}.md"

    def write_command(self, command: Command, help_text: str) -> Path:
        """Write the markdown page for a command.

        Raises:
            FilesystemError: If the page or its directory cannot be written
        """
        path = self.command_file(command)
        self.write_file(path, self.command_markdown(command, help_text))
        return path

    def summary_line(self, command: Command, indent: int = 0, md_root: str | None = None) -> str:
        """Return the SUMMARY.md entry for a command.

        Args:
            command: Command to link
            indent: Base indentation in spaces
            md_root: Directory prefix for the link, relative to the summary file

        Returns:
            Link list entry indented by ``indent`` plus two spaces per subcommand level
        """
        cmd_path = command.path
        if md_root and md_root != ".":
            cmd_path = f"{md_root}/{cmd_path}"
        indent_string = " " * (indent + command.depth * 2)
        return f"{indent_string}- [`{command}`](./{cmd_path}.md)\n"

    def render_summary(
        self,
        commands: Iterable[Command],
        indent: int = 0,
        md_root: str | None = None,
    ) -> str:
        """Return the summary listing for commands, in the given order."""
        return "".join(self.summary_line(cmd, indent, md_root) for cmd in commands)

    def root_summary(
        self,
        commands: Iterable[Command],
        root_dir: Path | str,
        indent: int = 2,
    ) -> str:
        """Return the summary listing with links relative to ``root_dir``."""
        md_root = Path(os.path.relpath(self.out_dir.resolve(), Path(root_dir).resolve())).as_posix()
        return self.render_summary(commands, indent, md_root)

    def write_summary(self, commands: Iterable[Command]) -> Path:
        """Write SUMMARY.md into the output directory."""
        path = self.out_dir / SUMMARY_FILE
        self.write_file(path, self.render_summary(commands) + "\n")
        return path

    def write_readme(self) -> Path:
        """Write the static README.md into the output directory."""
        path = self.out_dir / README_FILE
        logger.debug("Writing README.md to %s", path)
        self.write_file(path, README)
        return path

    def render_all(self, output: dict[Command, str]) -> list[Path]:
        """Write a page per command and SUMMARY.md.

        Args:
            output: Discovered commands mapped to their help output, in order

        Returns:
            Paths of the written files, pages first
        """
        written = [self.write_command(cmd, stdout) for cmd, stdout in output.items()]
        written.append(self.write_summary(output.keys()))
        return written

    def write_file(self, path: Path, content: str) -> None:
        """Write content to path, creating parent directories.

        Raises:
            FilesystemError: If the directory or file cannot be written
        """
        if self.trim_line_endings:
            lines = content.removesuffix("\n").split("\n")
            content = "\n".join(line.rstrip() for line in lines)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)


__all__ = ["README", "SUMMARY_FILE", "DocRenderer"]
