"""Tests for infrastructure/operation_table.py."""

import pytest

from mrocollect.infrastructure.operation_table import ClassOperationTable
from mrocollect.infrastructure.roles import COMPOSED_ATTR, compose
from tests.factories import make_class, make_role, returning


class TestClassOperationTable:
    """Tests for ClassOperationTable."""

    def test_owner_must_be_class(self) -> None:
        with pytest.raises(TypeError, match="owner must be a class"):
            ClassOperationTable(owner="T")  # type: ignore[arg-type]

    def test_own_operation(self) -> None:
        table = ClassOperationTable(make_class("T", values=("t",)))
        assert table.has_operation("items")
        assert callable(table.get_operation("items"))

    def test_inherited_operation_not_own(self) -> None:
        base = make_class("Base", values=("b",))
        table = ClassOperationTable(make_class("T", (base,)))
        assert not table.has_operation("items")

    def test_role_copied_operation_not_own(self) -> None:
        target = compose(make_class("T"), make_role("R", values=("r",)))
        assert not ClassOperationTable(target).has_operation("items")

    def test_get_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            ClassOperationTable(make_class("T")).get_operation("items")

    def test_add_and_remove(self) -> None:
        target = make_class("T")
        table = ClassOperationTable(target)
        body = returning("x")

        table.add_operation("items", body)
        assert target.__dict__["items"] is body

        assert table.remove_operation("items") is body
        assert "items" not in target.__dict__

    def test_remove_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            ClassOperationTable(make_class("T")).remove_operation("items")

    def test_add_takes_over_role_copy(self) -> None:
        target = compose(make_class("T"), make_role("R", values=("r",)))
        table = ClassOperationTable(target)
        table.add_operation("items", returning("own"))
        assert table.has_operation("items")
        assert "items" not in target.__dict__[COMPOSED_ATTR]

    def test_rebound_role_copy_is_own(self) -> None:
        target = compose(make_class("T"), make_role("R", values=("r",)))
        custom = returning("custom")
        target.items = custom  # type: ignore[attr-defined]

        table = ClassOperationTable(target)
        assert table.has_operation("items")
        assert table.get_operation("items") is custom

    def test_remove_rebound_role_copy(self) -> None:
        target = compose(make_class("T"), make_role("R", values=("r",)))
        custom = returning("custom")
        target.items = custom  # type: ignore[attr-defined]

        assert ClassOperationTable(target).remove_operation("items") is custom
        assert "items" not in target.__dict__
