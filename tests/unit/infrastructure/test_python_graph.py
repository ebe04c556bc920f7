"""Tests for infrastructure/python_graph.py."""

from mrocollect.infrastructure.operation_table import ClassOperationTable
from mrocollect.infrastructure.python_graph import PythonTypeGraph
from mrocollect.infrastructure.roles import compose
from tests.factories import make_chain, make_class, make_role


class TestLinearizedAncestors:
    """Tests for PythonTypeGraph.linearized_ancestors."""

    def test_starts_with_class_and_drops_object(self) -> None:
        a, b = make_chain("AB")
        assert PythonTypeGraph().linearized_ancestors(b) == (b, a)

    def test_follows_c3(self) -> None:
        root = make_class("Root")
        left = make_class("Left", (root,))
        right = make_class("Right", (root,))
        target = make_class("T", (left, right))
        assert PythonTypeGraph().linearized_ancestors(target) == (target, left, right, root)


class TestComposedCapabilityUnits:
    """Tests for PythonTypeGraph.composed_capability_units."""

    def test_no_roles(self) -> None:
        assert PythonTypeGraph().composed_capability_units(make_class("T")) == ()

    def test_own_roles_before_base_roles(self) -> None:
        base_role, own_role = make_role("BaseRole"), make_role("OwnRole")
        base = compose(make_class("Base"), base_role)
        target = compose(make_class("T", (base,)), own_role)
        assert PythonTypeGraph().composed_capability_units(target) == (own_role, base_role)

    def test_role_shared_with_base_counted_once(self) -> None:
        shared = make_role("Shared")
        base = compose(make_class("Base"), shared)
        target = compose(make_class("T", (base,)), shared)
        assert PythonTypeGraph().composed_capability_units(target) == (shared,)

    def test_deterministic(self) -> None:
        target = compose(make_class("T"), make_role("A"), make_role("B"))
        graph = PythonTypeGraph()
        assert graph.composed_capability_units(target) == graph.composed_capability_units(target)


class TestOperations:
    """Tests for PythonTypeGraph.operations."""

    def test_returns_class_table(self) -> None:
        target = make_class("T")
        table = PythonTypeGraph().operations(target)
        assert isinstance(table, ClassOperationTable)
        assert table.owner is target
