"""
Markdown documentation generator for recorded classes.

Lists a class's members in the order they were written, which is the
order a reader of the source expects.

Supports two modes:
    - SIMPLE: Declared member names as a bullet list
    - DETAILED: Table with position, kind and docstring summary, plus warnings
"""

from enum import Enum
from typing import List

from deforder.inspector import TypeReport, inspect_type
from deforder.model import MemberKind


class DocMode(Enum):
    """Rendering modes for documentation output."""
    SIMPLE = "simple"      # Just the member names
    DETAILED = "detailed"  # Table with kinds, docs and warnings


def _escape_cell(s: str) -> str:
    """Escape text for a Markdown table cell."""
    return s.replace("\\", "\\\\").replace("|", "\\|").replace("\n", " ")


def _render_simple(report: TypeReport, lines: List[str]) -> None:
    names = report.declared_names
    if not names:
        lines.append("_No declared members._")
        return
    for name in names:
        lines.append(f"- `{name}`")


def _render_detailed(report: TypeReport, lines: List[str]) -> None:
    lines.append("| # | Name | Kind | Summary |")
    lines.append("|---|------|------|---------|")
    for member in report.members:
        if member.kind is MemberKind.BOOKKEEPING:
            continue
        summary = _escape_cell(member.doc or "")
        lines.append(f"| {member.position} | `{member.name}` | {member.kind.value} | {summary} |")

    if report.slot_names:
        lines.append("")
        lines.append(f"Slots: {', '.join(f'`{s}`' for s in report.slot_names)}")

    if report.warnings:
        lines.append("")
        lines.append("**Warnings**")
        lines.append("")
        for warning in report.warnings:
            lines.append(f"- {warning}")


def generate_doc(cls: type, mode: DocMode = DocMode.SIMPLE) -> str:
    """
    Generate Markdown documentation for a class.

    Args:
        cls: Class to document
        mode: Rendering mode (SIMPLE, DETAILED)

    Returns:
        Markdown text
    """
    report = inspect_type(cls)
    lines = [f"## {report.qualname}", ""]

    doc = (cls.__doc__ or "").strip()
    if doc:
        lines.append(doc.splitlines()[0])
        lines.append("")

    if not report.has_record:
        lines.append("_No definition order recorded._")
        return "\n".join(lines) + "\n"

    if mode == DocMode.DETAILED:
        _render_detailed(report, lines)
    else:
        _render_simple(report, lines)

    return "\n".join(lines) + "\n"


def save_doc_file(cls: type, filename: str, mode: DocMode = DocMode.SIMPLE) -> None:
    """
    Generate documentation and save to file.

    Args:
        cls: Class to document
        filename: Output file path (.md extension recommended)
        mode: Rendering mode
    """
    doc = generate_doc(cls, mode=mode)
    with open(filename, "w") as f:
        f.write(doc)


__all__ = ["DocMode", "generate_doc", "save_doc_file"]
