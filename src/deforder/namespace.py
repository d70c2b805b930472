"""
Construction namespace for class bodies.

A class body executes against the mapping returned by the metaclass's
``__prepare__``. DefinitionNamespace is that mapping: an insertion-ordered
dict whose key order *is* the definition order.

    FIRST_INSERTION:  a, b, a  ->  (a, b)
    LAST_INSERTION:   a, b, a  ->  (b, a)

Deleting a name removes it from the order; inserting it again appends it.
"""

import logging
from typing import Tuple

from deforder.config import DEFAULT_POLICY, OrderPolicy

logger = logging.getLogger("deforder.namespace")


class DefinitionNamespace(dict):
    """
    Order-tracking class-body namespace.

    Every insertion is recorded, including names written through
    ``locals()`` inside the body and names the interpreter inserts itself
    (``__module__``, ``__qualname__``, ...). Nothing is filtered here.
    """

    def __init__(self, policy: OrderPolicy = DEFAULT_POLICY):
        super().__init__()
        self.policy = policy

    def __setitem__(self, key, value):
        if self.policy is OrderPolicy.LAST_INSERTION and key in self:
            # dict keeps the slot on overwrite; drop it so the key moves to the end
            super().__delitem__(key)
        super().__setitem__(key, value)

    def update(self, *args, **kwargs):
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def __ior__(self, other):
        self.update(other)
        return self

    def setdefault(self, key, default=None):
        if key not in self:
            self[key] = default
        return self[key]

    def definition_order(self) -> Tuple[str, ...]:
        """Names in the namespace, in definition order."""
        order = tuple(self)
        logger.debug(f"Captured {len(order)} name(s) under {self.policy.value} policy")
        return order

    def __repr__(self):
        return f"{type(self).__name__}({dict.__repr__(self)}, policy={self.policy.value})"
