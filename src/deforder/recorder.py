"""
Definition-Order Recorder

The metaclass that captures the order of names in a class body and
attaches it to the class as ``__definition_order__``.

Three ways a class gets its record:

    1. Class statement (or types.new_class): __prepare__ supplies a
       DefinitionNamespace, and its key order becomes the record.
    2. Explicit ``__definition_order__`` in the namespace: validated, then
       used as-is instead of the captured order.
    3. Direct synthesis with a plain mapping (OrderedType(name, bases, {...})
       or make_type): no order information, the record is None.

ARCHITECTURAL RULE:
    The record lives in the class's own __dict__ and is read through a data
    descriptor on the metaclass. The descriptor shadows the class attribute,
    so it is never inherited and cannot be rebound or deleted.
"""

import logging
from abc import ABCMeta
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from deforder.config import OrderPolicy, coerce_policy, get_config
from deforder.errors import DefinitionOrderTypeError, ReadOnlyDefinitionOrderError
from deforder.namespace import DefinitionNamespace

logger = logging.getLogger("deforder.recorder")

DEFINITION_ORDER = "__definition_order__"

# Names the interpreter (not the class author) puts into a class body namespace.
# Kept in the raw record; dropped by declared_members().
INTERPRETER_NAMES = frozenset({
    "__module__",
    "__qualname__",
    "__doc__",
    "__firstlineno__",
    "__static_attributes__",
    "__classcell__",
    "__classdictcell__",
    "__annotations__",
    "__annotate__",
    "__annotate_func__",
    "__annotations_cache__",
    "__conditional_annotations__",
    "__type_params__",
    "__orig_bases__",
})

Record = Optional[Tuple[str, ...]]

_UNSET = object()


def validate_definition_order(value: Any) -> Record:
    """
    Check an explicit record.

    Args:
        value: None, or a tuple/list of identifier strings

    Returns:
        None, or the names as a tuple

    Raises:
        DefinitionOrderTypeError: anything else, including a bare string
            (a sequence of characters, not of names), sets and mappings
            (no reliable order), non-string items, non-identifiers and
            repeated names
    """
    if value is None:
        return None
    if not isinstance(value, (tuple, list)):
        raise DefinitionOrderTypeError(
            f"{DEFINITION_ORDER} must be a tuple or list of identifiers or None, "
            f"not {type(value).__name__}"
        )
    for name in value:
        if not isinstance(name, str):
            raise DefinitionOrderTypeError(
                f"{DEFINITION_ORDER} items must be str, not {type(name).__name__} ({name!r})"
            )
        if not name.isidentifier():
            raise DefinitionOrderTypeError(
                f"{DEFINITION_ORDER} item {name!r} is not an identifier"
            )
    if len(set(value)) != len(value):
        raise DefinitionOrderTypeError(
            f"{DEFINITION_ORDER} must name each member once, got {tuple(value)!r}"
        )
    return tuple(value)


def _resolve_policy(order_policy: Union[OrderPolicy, str, None]) -> OrderPolicy:
    if order_policy is None:
        return get_config().order_policy
    return coerce_policy(order_policy)


class OrderedType(type):
    """
    Metaclass recording the definition order of each class body.

    Class keyword:
        order_policy: OrderPolicy (or "first"/"last") for this class only;
            defaults to the configured policy
    """

    @classmethod
    def __prepare__(mcls, name, bases, *, order_policy=None, **kwargs):
        return DefinitionNamespace(policy=_resolve_policy(order_policy))

    def __new__(mcls, name, bases, namespace, *, order_policy=None, **kwargs):
        if DEFINITION_ORDER in namespace:
            record = validate_definition_order(namespace[DEFINITION_ORDER])
            logger.debug(f"{name}: explicit definition order {record!r}")
        elif isinstance(namespace, DefinitionNamespace):
            record = namespace.definition_order()
            logger.debug(f"{name}: captured definition order {record!r}")
        else:
            record = None
            logger.debug(f"{name}: no construction namespace, definition order is None")

        attrs = dict(namespace)
        attrs[DEFINITION_ORDER] = record
        return super().__new__(mcls, name, bases, attrs, **kwargs)

    def __init__(cls, name, bases, namespace, *, order_policy=None, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)

    @property
    def __definition_order__(cls) -> Record:
        """Names of this class body in definition order, or None."""
        return vars(cls).get(DEFINITION_ORDER)

    @__definition_order__.setter
    def __definition_order__(cls, value):
        raise ReadOnlyDefinitionOrderError(
            f"{DEFINITION_ORDER} of {cls.__qualname__} is read-only"
        )

    @__definition_order__.deleter
    def __definition_order__(cls):
        raise ReadOnlyDefinitionOrderError(
            f"{DEFINITION_ORDER} of {cls.__qualname__} cannot be deleted"
        )


class OrderedABCMeta(OrderedType, ABCMeta):
    """OrderedType for abstract base classes."""


class Ordered(metaclass=OrderedType):
    """Base class for classes that record their definition order."""

    __slots__ = ()


def make_type(
    name: str,
    bases: Tuple[type, ...] = (),
    members: Optional[Mapping[str, Any]] = None,
    *,
    definition_order: Any = _UNSET,
    metaclass: type = OrderedType,
) -> type:
    """
    Synthesize a class without a class body.

    There is no construction namespace to observe, so the record is None
    unless ``definition_order`` supplies one. A supplied record is validated
    like an explicit assignment in a class body.

    Raises:
        DefinitionOrderTypeError: definition_order is not a valid record
    """
    attrs: Dict[str, Any] = dict(members or {})
    if definition_order is not _UNSET:
        attrs[DEFINITION_ORDER] = definition_order
    return metaclass(name, bases, attrs)


def definition_order(obj: Any) -> Record:
    """
    Record of a class, or of an instance's class.

    Classes not created by OrderedType (builtins, plain classes) have no
    reliable order and yield None.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    if isinstance(cls, OrderedType):
        return cls.__definition_order__
    return None


def declared_members(obj: Any) -> Record:
    """Record without the interpreter's bookkeeping names (None if no record)."""
    record = definition_order(obj)
    if record is None:
        return None
    return tuple(name for name in record if name not in INTERPRETER_NAMES)
