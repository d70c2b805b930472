"""
Definition-Order Recorder Package

Captures the order in which names are introduced into a class body and
exposes it as a read-only tuple on the finished class:

    class Job(Ordered):
        employer = None
        title = None

    Job.__definition_order__   # ('__module__', '__qualname__', ..., 'employer', 'title')
    declared_members(Job)      # ('employer', 'title')

ARCHITECTURAL GUARANTEE:
------------------------
The record is fixed when the class is created.
    - It is never inherited from base classes
    - It is never merged with base-class records
    - It cannot be reassigned or deleted afterwards

Consumers (inspector, serialization, documentation backends) only read it.
"""

from deforder.errors import DefinitionOrderTypeError, ReadOnlyDefinitionOrderError
from deforder.config import OrderPolicy, RecorderConfig, get_config, load_config, reset_config
from deforder.namespace import DefinitionNamespace
from deforder.recorder import (
    DEFINITION_ORDER,
    INTERPRETER_NAMES,
    Ordered,
    OrderedABCMeta,
    OrderedType,
    declared_members,
    definition_order,
    make_type,
    validate_definition_order,
)

__version__ = "0.1.0"

__all__ = [
    "DEFINITION_ORDER",
    "INTERPRETER_NAMES",
    "DefinitionNamespace",
    "DefinitionOrderTypeError",
    "Ordered",
    "OrderedABCMeta",
    "OrderedType",
    "OrderPolicy",
    "ReadOnlyDefinitionOrderError",
    "RecorderConfig",
    "declared_members",
    "definition_order",
    "get_config",
    "load_config",
    "make_type",
    "reset_config",
    "validate_definition_order",
]
