"""
Tests for the Markdown documentation generator.

Tests cover:
    - Member listing in definition order
    - Simple vs. detailed modes
    - Classes without a record, or without members
    - Table cell escaping
    - Writing to file
"""

import pytest

from deforder.backends.doc_generator import DocMode, generate_doc, save_doc_file
from deforder.examples import JobRecord, build_synthesized_job_record
from deforder.recorder import Ordered


class TestSimpleMode:

    def test_heading_and_summary(self):
        doc = generate_doc(JobRecord)
        assert doc.startswith("## JobRecord\n")
        assert "One job held by a survey respondent." in doc

    def test_members_in_definition_order(self):
        doc = generate_doc(JobRecord, mode=DocMode.SIMPLE)
        positions = [doc.index(f"- `{name}`") for name in
                     ["employer", "title", "start_year", "hours_per_week",
                      "is_full_time", "blank", "describe"]]
        assert positions == sorted(positions)

    def test_bookkeeping_not_listed(self):
        doc = generate_doc(JobRecord)
        assert "__module__" not in doc
        assert "__qualname__" not in doc

    def test_empty_class(self):
        class Empty(Ordered):
            pass

        doc = generate_doc(Empty)
        assert "_No declared members._" in doc

    def test_blank_docstring_has_no_summary(self):
        class Blank(Ordered):
            """   """
            a = 1

        doc = generate_doc(Blank)
        assert doc.startswith("## Blank\n\n- `a`")

    def test_no_record(self):
        doc = generate_doc(build_synthesized_job_record())
        assert "_No definition order recorded._" in doc


class TestDetailedMode:

    def test_table_header(self):
        doc = generate_doc(JobRecord, mode=DocMode.DETAILED)
        assert "| # | Name | Kind | Summary |" in doc

    def test_kinds_and_summaries(self):
        doc = generate_doc(JobRecord, mode=DocMode.DETAILED)
        assert "`is_full_time` | property | True for 35 or more hours a week. |" in doc
        assert "`describe` | method | One-line human-readable summary. |" in doc
        assert "`employer` | data |  |" in doc

    def test_pipe_in_docstring_escaped(self):
        class Piped(Ordered):
            def choose(self):
                """Pick a | b."""

        doc = generate_doc(Piped, mode=DocMode.DETAILED)
        assert "Pick a \\| b." in doc

    def test_slots_and_warnings_rendered(self):
        class Slotted(Ordered):
            __slots__ = ("x",)
            __definition_order__ = ("__slots__", "ghost")

        doc = generate_doc(Slotted, mode=DocMode.DETAILED)
        assert "Slots: `x`" in doc
        assert "**Warnings**" in doc
        assert "ghost" in doc

    def test_clean_class_has_no_warnings_section(self):
        doc = generate_doc(JobRecord, mode=DocMode.DETAILED)
        assert "**Warnings**" not in doc


def test_save_doc_file(tmp_path):
    target = tmp_path / "job_record.md"
    save_doc_file(JobRecord, str(target), mode=DocMode.DETAILED)
    assert target.read_text() == generate_doc(JobRecord, mode=DocMode.DETAILED)


@pytest.mark.parametrize("mode", list(DocMode))
def test_output_ends_with_newline(mode):
    assert generate_doc(JobRecord, mode=mode).endswith("\n")
