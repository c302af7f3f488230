"""Unit tests for index_merger module."""

from pathlib import Path

import pytest

from cliref.errors import MissingIndexMarkersError
from cliref.index_merger import (
    SECTION_END,
    SECTION_START,
    merge_summary,
    update_root_summary,
)

FRAGMENT = "  - [`app`](./cli/app.md)\n    - [`app db`](./cli/app/db.md)\n\n"


class TestMergeSummary:
    """Tests for the pure merge."""

    def test_replaces_marker_region(self):
        """Everything between the markers is replaced; the rest is kept."""
        content = f"# Summary\n{SECTION_START}\nold\n{SECTION_END}\n- [Tail](./tail.md)\n"

        merged = merge_summary(content, "- new\n", Path("SUMMARY.md"))

        assert merged == f"# Summary\n{SECTION_START}\n- new\n{SECTION_END}\n- [Tail](./tail.md)\n"

    def test_idempotent(self):
        """Merging the same fragment twice equals merging once."""
        content = f"head\n  {SECTION_START}\n  stale\n  {SECTION_END}\ntail\n"

        once = merge_summary(content, FRAGMENT, Path("SUMMARY.md"))
        twice = merge_summary(once, FRAGMENT, Path("SUMMARY.md"))

        assert once == twice

    def test_preserves_end_marker_indentation(self):
        """The end marker keeps its leading indentation."""
        content = f"  {SECTION_START}\n  {SECTION_END}\n"
        merged = merge_summary(content, "  - x\n", Path("SUMMARY.md"))
        assert merged == f"  {SECTION_START}\n  - x\n  {SECTION_END}\n"

    def test_fragment_normalized(self):
        """Trailing whitespace is trimmed and doubled newlines are folded."""
        merged = merge_summary(
            f"{SECTION_START}\n{SECTION_END}", "- a\n\n- b\n\n  \n", Path("SUMMARY.md")
        )
        assert merged == f"{SECTION_START}\n- a\n- b\n{SECTION_END}"

    def test_blank_line_run_keeps_one_blank_line(self):
        """Two blank lines in a row shrink to one."""
        merged = merge_summary(
            f"{SECTION_START}\n{SECTION_END}", "- a\n\n\n- b\n", Path("SUMMARY.md")
        )
        assert merged == f"{SECTION_START}\n- a\n\n- b\n{SECTION_END}"

    @pytest.mark.parametrize(
        "content",
        [
            "# Summary\n",
            f"# Summary\n{SECTION_START}\n",
            f"# Summary\n{SECTION_END}\n",
            f"# Summary\n{SECTION_END}\n{SECTION_START}\n",
        ],
    )
    def test_missing_markers(self, content):
        """Either marker missing (or out of order) is fatal."""
        with pytest.raises(MissingIndexMarkersError) as exc_info:
            merge_summary(content, FRAGMENT, Path("docs/SUMMARY.md"))

        guidance = exc_info.value.guidance()
        assert SECTION_START in guidance
        assert SECTION_END in guidance
        assert str(Path("docs/SUMMARY.md")) in guidance


class TestUpdateRootSummary:
    """Tests for merging into SUMMARY.md on disk."""

    def test_updates_file(self, root_summary_file):
        """The section is rewritten in place, outer content untouched."""
        update_root_summary(root_summary_file.parent, FRAGMENT)

        content = root_summary_file.read_text(encoding="utf-8")
        assert content == (
            "# Summary\n"
            "\n"
            "- [Introduction](./intro.md)\n"
            "- [CLI Reference](./cli/README.md)\n"
            "  <!-- CLI_REFERENCE START -->\n"
            "  - [`app`](./cli/app.md)\n"
            "    - [`app db`](./cli/app/db.md)\n"
            "  <!-- CLI_REFERENCE END -->\n"
            "- [Developers](./developers.md)\n"
        )

    def test_rerun_is_byte_identical(self, root_summary_file):
        """A second merge with the same fragment changes nothing."""
        update_root_summary(root_summary_file.parent, FRAGMENT)
        first = root_summary_file.read_bytes()
        update_root_summary(root_summary_file.parent, FRAGMENT)

        assert root_summary_file.read_bytes() == first

    def test_missing_markers_leave_file_unmodified(self, tmp_path):
        """A file without markers is not rewritten."""
        summary = tmp_path / "SUMMARY.md"
        summary.write_text("# Summary\n- [Intro](./intro.md)\n", encoding="utf-8")

        with pytest.raises(MissingIndexMarkersError) as exc_info:
            update_root_summary(tmp_path, FRAGMENT)

        assert exc_info.value.path == summary
        assert summary.read_text(encoding="utf-8") == "# Summary\n- [Intro](./intro.md)\n"
