"""CLI entry point for cliref.

Generates a markdown CLI reference from the --help output of one or more
binaries.

Usage:
    cliref --out-dir docs/cli ./target/release/app
    cliref --out-dir docs/cli --readme --root-summary --root-dir docs ./target/release/app
    cliref --config cliref.toml ./target/release/app
"""

import functools
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from cliref import __version__
from cliref.command import Command
from cliref.config import load_config
from cliref.discovery import discover_commands
from cliref.errors import CliRefError, FilesystemError, MissingIndexMarkersError
from cliref.help_runner import run_help
from cliref.index_merger import update_root_summary
from cliref.renderer import DocRenderer

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def _report_subcommands(cmd: Command, subcommands: list[str]) -> None:
    console.print(escape(f'Found subcommands for "{cmd}": {subcommands}'), soft_wrap=True)


@click.command(name="cliref", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("commands", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory",
)
@click.option(
    "--root-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Root directory  [default: .]",
)
@click.option(
    "--root-indentation",
    type=click.IntRange(min=0),
    help="Indentation for the root SUMMARY.md file  [default: 2]",
)
@click.option("--readme", is_flag=True, help="Whether to add a README.md file")
@click.option("--root-summary", is_flag=True, help="Whether to update the root SUMMARY.md file")
@click.option("--verbose", "-v", is_flag=True, help="Print verbose output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="TOML file with default settings",
)
@click.version_option(version=__version__, prog_name="cliref")
def main(
    commands: tuple[Path, ...],
    out_dir: Path | None,
    root_dir: Path | None,
    root_indentation: int | None,
    readme: bool,
    root_summary: bool,
    verbose: bool,
    config_path: Path | None,
) -> None:
    """Generate markdown files from the help output of COMMANDS.

    Every subcommand listed under "Commands:" is visited recursively. One
    page is written per command, plus a SUMMARY.md linking all pages.

    \b
    Examples:
        cliref --out-dir docs/cli ./target/release/app
        cliref --out-dir docs/cli --readme ./target/release/app
        cliref --out-dir docs/cli --root-summary --root-dir docs ./app
    """
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(message)s")

    try:
        config = load_config(config_path)

        out_dir = out_dir or (Path(config.out_dir) if config.out_dir else None)
        if out_dir is None:
            raise click.UsageError("Missing option '--out-dir'.")
        root_dir = root_dir or Path(config.root_dir)
        if root_indentation is None:
            root_indentation = config.root_indentation
        readme = readme or config.readme
        root_summary = root_summary or config.root_summary

        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Failed to create output directory {out_dir}: {e}") from e

        runner = functools.partial(run_help, columns=config.columns, lines=config.lines)
        output = discover_commands(
            commands,
            runner=runner,
            on_subcommands=_report_subcommands if verbose else None,
        )

        renderer = DocRenderer(
            out_dir,
            replacements=config.replacements,
            trim_line_endings=config.trim_line_endings,
        )
        renderer.render_all(output)

        if readme:
            path = renderer.write_readme()
            if verbose:
                console.print(escape(f'Writing README.md to "{path}"'), soft_wrap=True)

        if root_summary:
            if verbose:
                console.print(escape(f'Updating root summary in "{root_dir}"'), soft_wrap=True)
            fragment = renderer.root_summary(output.keys(), root_dir, root_indentation)
            update_root_summary(root_dir, fragment)

        if verbose:
            console.print(
                f"[green]✓[/green] Generated {len(output)} command pages in {escape(str(out_dir))}",
                soft_wrap=True,
            )

    except MissingIndexMarkersError as e:
        err_console.print(e.guidance(), markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)
    except CliRefError as e:
        logger.debug("Generation failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
