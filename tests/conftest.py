"""
Shared test fixtures and configuration for cliref tests.

This module provides common fixtures used across all test types:
- Sample --help output in the clap layout
- A fake help runner that serves those samples instead of spawning processes
"""

from pathlib import Path

import pytest

# ============================================================================
# SAMPLE HELP OUTPUT
# ============================================================================

APP_HELP = """Example application

Usage: app [OPTIONS] <COMMAND>

Commands:
  db    manage database
  help  Print this message or the help of the given subcommand(s)

Options:
  -h, --help     Print help
  -V, --version  Print version
"""

APP_DB_HELP = """Database tools

Usage: app db [OPTIONS] <COMMAND>

Commands:
  stats  show stats
  help   Print this message or the help of the given subcommand(s)

Options:
      --datadir <DATA_DIR>  The path to the data dir
  -h, --help                Print help
"""

APP_DB_STATS_HELP = """Lists all the tables, their entry count and their size

Usage: app db stats [OPTIONS]

Options:
      --detailed-sizes  Show only the total size for static files
  -h, --help            Print help
"""

SAMPLE_HELP = {
    "app": APP_HELP,
    "app db": APP_DB_HELP,
    "app db stats": APP_DB_STATS_HELP,
}


class FakeHelpRunner:
    """Serve help text by rendered command name and record invocations."""

    def __init__(self, help_texts: dict[str, str]):
        self.help_texts = help_texts
        self.calls: list[str] = []

    def __call__(self, command, **kwargs) -> str:
        self.calls.append(str(command))
        return self.help_texts[str(command)]


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def sample_help() -> dict[str, str]:
    """Help output for ``app``, ``app db`` and ``app db stats``."""
    return dict(SAMPLE_HELP)


@pytest.fixture
def fake_runner(sample_help) -> FakeHelpRunner:
    """Fake help runner serving the sample help output."""
    return FakeHelpRunner(sample_help)


@pytest.fixture
def out_dir(tmp_path) -> Path:
    """Output directory for generated documentation."""
    return tmp_path / "docs" / "cli"


@pytest.fixture
def root_summary_file(tmp_path) -> Path:
    """Root SUMMARY.md containing the CLI reference markers."""
    path = tmp_path / "docs" / "SUMMARY.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "# Summary\n"
        "\n"
        "- [Introduction](./intro.md)\n"
        "- [CLI Reference](./cli/README.md)\n"
        "  <!-- CLI_REFERENCE START -->\n"
        "  - old entry\n"
        "  <!-- CLI_REFERENCE END -->\n"
        "- [Developers](./developers.md)\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def make_runner():
    """Factory building a fake help runner from a custom help mapping."""
    return FakeHelpRunner
