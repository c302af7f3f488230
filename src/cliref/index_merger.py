"""Root summary merging.

Replaces the CLI reference section of an existing SUMMARY.md with a freshly
rendered listing. The section is delimited by two marker lines that must
already be present in the file:

    <!-- CLI_REFERENCE START -->
    ... CLI Reference goes here ...
    <!-- CLI_REFERENCE END -->

Only the region from the start marker through the end marker is rewritten,
so merging the same listing twice leaves the file unchanged.
"""

import logging
from pathlib import Path

from cliref.errors import FilesystemError, MissingIndexMarkersError

logger = logging.getLogger(__name__)

SECTION_START = "<!-- CLI_REFERENCE START -->"
SECTION_END = "<!-- CLI_REFERENCE END -->"
SUMMARY_FILE = "SUMMARY.md"


def normalize_fragment(fragment: str) -> str:
    """Trim trailing whitespace and fold each doubled newline into one."""
    return fragment.rstrip().replace("\n\n", "\n")


def merge_summary(content: str, fragment: str, path: Path) -> str:
    """Return content with the CLI reference section replaced by fragment.

    Args:
        content: Current index file content
        fragment: Rendered summary listing
        path: Index file path, used in error messages

    Returns:
        New file content

    Raises:
        MissingIndexMarkersError: If either marker is missing
    """
    start = content.find(SECTION_START)
    end = content.find(SECTION_END, start + len(SECTION_START)) if start != -1 else -1
    if start == -1 or end == -1:
        raise MissingIndexMarkersError(path, SECTION_START, SECTION_END)

    line_start = content.rfind("\n", 0, end) + 1
    end_indent = content[line_start:end]
    if end_indent.strip():
        end_indent = ""

    section = f"{SECTION_START}\n{normalize_fragment(fragment)}\n{end_indent}{SECTION_END}"
    return content[:start] + section + content[end + len(SECTION_END) :]


def update_root_summary(root_dir: Path | str, fragment: str) -> Path:
    """Merge fragment into ``<root_dir>/SUMMARY.md``.

    Args:
        root_dir: Directory containing SUMMARY.md
        fragment: Rendered summary listing

    Returns:
        Path of the updated file

    Raises:
        MissingIndexMarkersError: If the file lacks either marker (file untouched)
        FilesystemError: If the file cannot be read or written
    """
    summary_file = Path(root_dir) / SUMMARY_FILE
    logger.debug("Updating root summary in %s", summary_file)

    try:
        original = summary_file.read_text(encoding="utf-8")
    except OSError as e:
        raise FilesystemError(f"Failed to read {summary_file}: {e}") from e

    updated = merge_summary(original, fragment, summary_file)

    try:
        summary_file.write_text(updated, encoding="utf-8")
    except OSError as e:
        raise FilesystemError(f"Failed to write {summary_file}: {e}") from e
    return summary_file


__all__ = ["SECTION_END", "SECTION_START", "merge_summary", "update_root_summary"]
