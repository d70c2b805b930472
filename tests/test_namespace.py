"""
Tests for the class-body construction namespace.

The namespace's key order is the definition order, so these tests drive
DefinitionNamespace directly, the way a class body would.
"""

from deforder.config import OrderPolicy
from deforder.namespace import DefinitionNamespace


class TestFirstInsertion:
    """Default policy: reassignment keeps the original slot."""

    def test_default_policy(self):
        ns = DefinitionNamespace()
        assert ns.policy is OrderPolicy.FIRST_INSERTION

    def test_insertion_order(self):
        ns = DefinitionNamespace()
        ns["a"] = 1
        ns["b"] = 2
        ns["c"] = 3
        assert ns.definition_order() == ("a", "b", "c")

    def test_overwrite_keeps_position(self):
        ns = DefinitionNamespace()
        ns["a"] = 1
        ns["b"] = 2
        ns["a"] = 3
        assert ns.definition_order() == ("a", "b")
        assert ns["a"] == 3

    def test_delete_removes_name(self):
        ns = DefinitionNamespace()
        ns["a"] = 1
        ns["b"] = 2
        del ns["a"]
        assert ns.definition_order() == ("b",)

    def test_empty_namespace(self):
        assert DefinitionNamespace().definition_order() == ()


class TestLastInsertion:
    """Reassignment moves the name to the end."""

    def test_overwrite_moves_to_end(self):
        ns = DefinitionNamespace(policy=OrderPolicy.LAST_INSERTION)
        ns["a"] = 1
        ns["b"] = 2
        ns["a"] = 3
        assert ns.definition_order() == ("b", "a")
        assert ns["a"] == 3

    def test_update_routes_through_policy(self):
        ns = DefinitionNamespace(policy=OrderPolicy.LAST_INSERTION)
        ns["a"] = 1
        ns["b"] = 2
        ns.update({"a": 3}, c=4)
        assert ns.definition_order() == ("b", "a", "c")

    def test_in_place_union_routes_through_policy(self):
        ns = DefinitionNamespace(policy=OrderPolicy.LAST_INSERTION)
        ns["a"] = 1
        ns["b"] = 2
        ns |= {"a": 3}
        assert ns.definition_order() == ("b", "a")
        assert ns["a"] == 3
        assert isinstance(ns, DefinitionNamespace)

    def test_setdefault_does_not_move_existing(self):
        ns = DefinitionNamespace(policy=OrderPolicy.LAST_INSERTION)
        ns["a"] = 1
        ns["b"] = 2
        assert ns.setdefault("a", 9) == 1
        assert ns.setdefault("c", 3) == 3
        assert ns.definition_order() == ("a", "b", "c")


class TestNamespaceBehaviour:

    def test_is_a_dict(self):
        ns = DefinitionNamespace()
        ns["a"] = 1
        assert isinstance(ns, dict)
        assert dict(ns) == {"a": 1}

    def test_repr_shows_policy(self):
        ns = DefinitionNamespace(policy=OrderPolicy.LAST_INSERTION)
        ns["a"] = 1
        assert repr(ns) == "DefinitionNamespace({'a': 1}, policy=last)"

    def test_order_is_a_snapshot(self):
        ns = DefinitionNamespace()
        ns["a"] = 1
        order = ns.definition_order()
        ns["b"] = 2
        assert order == ("a",)
