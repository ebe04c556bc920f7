"""Tests for application/conflict_resolver.py."""

import pytest

from mrocollect.application.collect_method import CollectMethod
from mrocollect.application.conflict_resolver import ConflictResolver
from mrocollect.application.invoker import CollectionInvoker
from mrocollect.application.provider_locator import ProviderLocator
from mrocollect.domain.model.config import CollectConfig
from mrocollect.domain.model.enums import Source
from mrocollect.infrastructure.python_graph import PythonTypeGraph
from mrocollect.infrastructure.roles import compose
from tests.factories import make_class, make_role, returning


@pytest.fixture
def resolver() -> ConflictResolver:
    return ConflictResolver(PythonTypeGraph())


def install_collect_method(cls: type, name: str) -> CollectMethod:
    config = CollectConfig(name=name)
    invoker = CollectionInvoker(cls, config, ProviderLocator(PythonTypeGraph()))
    method = CollectMethod(cls, config, invoker)
    setattr(cls, name, method)
    return method


class TestRelocation:
    """Tests for moving a shadowed provider."""

    def test_own_provider_relocated(self, resolver: ConflictResolver) -> None:
        own = returning("own")
        target = type("T", (), {"items": own})

        ref = resolver.prepare(target, "items", "items")

        assert "items" not in target.__dict__
        assert target.__dict__["_collect_items"] is own
        assert ref is not None
        assert ref.source is Source.SELF
        assert ref.name == "_collect_items"
        assert ref.operation is own

    def test_nothing_to_relocate(self, resolver: ConflictResolver) -> None:
        target = make_class("T")
        assert resolver.prepare(target, "items", "items") is None
        assert "_collect_items" not in target.__dict__

    def test_inherited_provider_not_relocated(self, resolver: ConflictResolver) -> None:
        base = make_class("Base", values=("base",))
        target = make_class("T", (base,))
        assert resolver.prepare(target, "items", "items") is None
        assert "items" in base.__dict__

    def test_renamed_provider_not_relocated(self, resolver: ConflictResolver) -> None:
        target = make_class("T", values=("own",))
        assert resolver.prepare(target, "itemz", "items") is None
        assert "items" in target.__dict__

    def test_role_copied_method_not_relocated(self, resolver: ConflictResolver) -> None:
        target = compose(make_class("T"), make_role("R", values=("r",)))
        assert resolver.prepare(target, "items", "items") is None
        assert "_collect_items" not in target.__dict__

    def test_method_rebound_after_compose_relocated(self, resolver: ConflictResolver) -> None:
        target = compose(make_class("T"), make_role("R", values=("r",)))
        custom = returning("custom")
        target.items = custom  # type: ignore[attr-defined]

        ref = resolver.prepare(target, "items", "items")

        assert target.__dict__["_collect_items"] is custom
        assert ref is not None
        assert ref.operation is custom


class TestIdempotence:
    """Tests for repeated declarations."""

    def test_collect_method_not_relocated(self, resolver: ConflictResolver) -> None:
        own = returning("own")
        target = type("T", (), {"items": own})
        resolver.prepare(target, "items", "items")
        method = install_collect_method(target, "items")

        ref = resolver.prepare(target, "items", "items")

        assert target.__dict__["items"] is method
        assert ref is not None
        assert ref.operation is own

    def test_renamed_declaration_reuses_relocation(self, resolver: ConflictResolver) -> None:
        own = returning("own")
        target = type("T", (), {"items": own})
        resolver.prepare(target, "items", "items")

        ref = resolver.prepare(target, "itemz", "items")

        assert ref is not None
        assert ref.operation is own

    def test_redefined_provider_replaces_relocation(self, resolver: ConflictResolver) -> None:
        first, second = returning("first"), returning("second")
        target = type("T", (), {"items": first})
        resolver.prepare(target, "items", "items")
        target.items = second  # type: ignore[attr-defined]

        ref = resolver.prepare(target, "items", "items")

        assert ref is not None
        assert ref.operation is second
