"""
Type Inspector — diagnostics for recorded classes.

This module provides lightweight analysis of a class's definition order:
    - Member inventory in record order
    - Classification of each member (method, property, data, ...)
    - Names recorded but not defined on the class
    - Public attributes attached outside the class body
    - __slots__ members (never part of the record)

IMPORTANT: This is read-only. It never touches the record or the class.
"""

from __future__ import annotations

import inspect
import types
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from deforder.model import MemberInfo, MemberKind
from deforder.recorder import INTERPRETER_NAMES, definition_order


def classify_member(name: str, value: Any) -> MemberKind:
    """Classify a class __dict__ entry."""
    if name in INTERPRETER_NAMES:
        return MemberKind.BOOKKEEPING
    if isinstance(value, staticmethod):
        return MemberKind.STATICMETHOD
    if isinstance(value, classmethod):
        return MemberKind.CLASSMETHOD
    if isinstance(value, property):
        return MemberKind.PROPERTY
    if isinstance(value, type):
        return MemberKind.NESTED_TYPE
    if isinstance(value, types.FunctionType):
        return MemberKind.METHOD
    if hasattr(type(value), "__get__"):
        return MemberKind.DESCRIPTOR
    return MemberKind.DATA


def _first_doc_line(value: Any) -> Optional[str]:
    target = getattr(value, "__func__", value)
    doc = getattr(target, "__doc__", None)
    if not isinstance(doc, str):
        return None
    doc = inspect.cleandoc(doc)
    return doc.splitlines()[0] if doc else None


def _slot_names(namespace: Dict[str, Any]) -> List[str]:
    slots = namespace.get("__slots__", ())
    if isinstance(slots, str):
        return [slots]
    return list(slots)


@dataclass
class TypeReport:
    """Analysis report for one class."""

    type_name: str
    qualname: str
    module: str
    has_record: bool = False
    record_length: int = 0

    # Record contents
    members: List[MemberInfo] = field(default_factory=list)
    kind_counts: Dict[str, int] = field(default_factory=dict)

    # Consistency between the record and the class __dict__
    missing_names: List[str] = field(default_factory=list)
    unrecorded_names: List[str] = field(default_factory=list)
    slot_names: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def declared_names(self) -> List[str]:
        """Recorded names other than interpreter bookkeeping."""
        return [m.name for m in self.members if m.kind is not MemberKind.BOOKKEEPING]

    def get_member(self, name: str) -> Optional[MemberInfo]:
        for member in self.members:
            if member.name == name:
                return member
        return None


def inspect_type(cls: type) -> TypeReport:
    """
    Analyze the definition-order record of a class.

    Works on any class; classes without a record produce a report with
    has_record False and a warning.

    Raises:
        TypeError: cls is not a class
    """
    if not isinstance(cls, type):
        raise TypeError(f"inspect_type() expects a class, not {type(cls).__name__}")

    report = TypeReport(
        type_name=cls.__name__,
        qualname=cls.__qualname__,
        module=cls.__module__,
    )
    namespace = dict(vars(cls))
    record = definition_order(cls)
    report.slot_names = _slot_names(namespace)

    if record is None:
        report.add_warning(f"No definition order recorded for {cls.__qualname__}")
        return report

    report.has_record = True
    report.record_length = len(record)

    # =========================================================================
    # 1. MEMBER INVENTORY
    # =========================================================================

    for position, name in enumerate(record):
        present = name in namespace
        if name in INTERPRETER_NAMES:
            kind = MemberKind.BOOKKEEPING
        elif not present:
            kind = MemberKind.MISSING
        else:
            kind = classify_member(name, namespace[name])
        doc = None
        if present and kind not in (MemberKind.DATA, MemberKind.BOOKKEEPING):
            doc = _first_doc_line(namespace[name])
        report.members.append(
            MemberInfo(name=name, position=position, kind=kind, present=present, doc=doc)
        )

    report.kind_counts = dict(Counter(m.kind.value for m in report.members))

    # =========================================================================
    # 2. RECORD VS. CLASS __dict__
    # =========================================================================

    report.missing_names = [m.name for m in report.members if m.kind is MemberKind.MISSING]

    recorded = set(record)
    slots = set(report.slot_names)
    report.unrecorded_names = [
        name for name in namespace
        if name not in recorded and name not in slots and not name.startswith("_")
    ]

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.missing_names:
        report.add_warning(
            f"Recorded names not defined on {cls.__qualname__}: {', '.join(report.missing_names)}"
        )

    if report.unrecorded_names:
        report.add_warning(
            f"Attributes added outside the class body: {', '.join(report.unrecorded_names)}"
        )

    return report
