"""
Member Model Objects

Pure data classes describing the members named by a definition-order record.

These objects:
    - Know nothing about how the record was captured
    - Are immutable
    - Represent structure, not behavior

They are produced by the inspector and consumed by the backends.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MemberKind(Enum):
    """What a recorded name is bound to in the class __dict__."""
    BOOKKEEPING = "bookkeeping"    # Inserted by the interpreter (__module__, ...)
    METHOD = "method"
    CLASSMETHOD = "classmethod"
    STATICMETHOD = "staticmethod"
    PROPERTY = "property"
    NESTED_TYPE = "nested_type"
    DESCRIPTOR = "descriptor"      # Any other object with __get__
    DATA = "data"                  # Plain class attribute
    MISSING = "missing"            # Recorded but no longer in the class __dict__


@dataclass(frozen=True)
class MemberInfo:
    """
    One entry of a definition-order record.

    Properties:
        name: Member name as recorded
        position: Zero-based index in the record
        kind: MemberKind classification
        present: Whether the name is still in the class __dict__
            (False for names like __classcell__ that type() consumes,
            or names listed by an explicit record but never defined)
        doc: First line of the member's docstring, if any
    """

    name: str
    position: int
    kind: MemberKind
    present: bool = True
    doc: Optional[str] = None
