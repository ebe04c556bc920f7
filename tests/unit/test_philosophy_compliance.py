"""Philosophy compliance tests.

Tests verifying adherence to the project's axioms:
- FAIL-FIRST Validation
- Immutability
- Error vs Warning Distinction
"""

from __future__ import annotations

import pytest

from mrocollect import (
    CollectConfig,
    CollectConfigError,
    CollectWarning,
    MroCollectError,
    ProviderRef,
    ReporterConfig,
    RoleCompositionError,
    Source,
    collect,
)
from mrocollect.infrastructure.roles import CompositeRole
from tests.factories import make_class, make_role, returning

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Tests for FAIL-FIRST validation.

    WRONG: if not valid: use_default()  # silent fallback
    RIGHT: if not valid: raise CollectConfigError(...)  # immediate failure
    """

    def test_config_empty_sources_raises(self) -> None:
        """CollectConfig with no sources raises ValueError."""
        with pytest.raises(ValueError, match="sources"):
            CollectConfig(name="items", sources=())

    def test_config_non_callable_aggregator_raises(self) -> None:
        """CollectConfig with non-callable aggregator raises TypeError."""
        with pytest.raises(TypeError, match="aggregator"):
            CollectConfig(name="items", aggregator="tuple")  # type: ignore[arg-type]

    def test_provider_ref_owner_not_class_raises(self) -> None:
        """ProviderRef owner must be a class."""
        with pytest.raises(TypeError, match="owner"):
            ProviderRef(
                source=Source.SELF,
                owner="T",  # type: ignore[arg-type]
                name="items",
                operation=returning(),
            )

    def test_reporter_narrow_width_raises(self) -> None:
        """ReporterConfig below minimum width raises ValueError."""
        with pytest.raises(ValueError, match="width"):
            ReporterConfig(width=10)

    def test_composite_single_role_raises(self) -> None:
        """CompositeRole with one member raises ValueError."""
        with pytest.raises(ValueError, match="at least 2"):
            CompositeRole(roles=(make_role("R"),))

    def test_unknown_option_is_not_ignored(self) -> None:
        """Unknown options raise rather than being dropped."""
        with pytest.raises(CollectConfigError):
            collect(make_class("T"), "items", colector=tuple)


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Tests for immutable value objects."""

    def test_collect_config_frozen(self) -> None:
        """CollectConfig is frozen dataclass."""
        config = CollectConfig(name="items")
        with pytest.raises(AttributeError):
            config.name = "other"  # type: ignore[misc]

    def test_provider_ref_frozen(self) -> None:
        """ProviderRef is frozen dataclass."""
        ref = ProviderRef(
            source=Source.BASES,
            owner=make_class("T"),
            name="items",
            operation=returning(),
        )
        with pytest.raises(AttributeError):
            ref.name = "other"  # type: ignore[misc]

    def test_reporter_config_frozen(self) -> None:
        """ReporterConfig is frozen dataclass."""
        config = ReporterConfig()
        with pytest.raises(AttributeError):
            config.width = 80  # type: ignore[misc]

    def test_composite_role_frozen(self) -> None:
        """CompositeRole is frozen dataclass."""
        composite = CompositeRole(roles=(make_role("A"), make_role("B")))
        with pytest.raises(AttributeError):
            composite.roles = ()  # type: ignore[misc]


# =============================================================================
# Error vs Warning Distinction
# =============================================================================


class TestErrorWarningDistinction:
    """Declaration mistakes are errors; an empty collection is a warning."""

    def test_config_errors_are_library_errors(self) -> None:
        """All declaration errors share MroCollectError."""
        assert issubclass(CollectConfigError, MroCollectError)
        assert issubclass(RoleCompositionError, MroCollectError)

    def test_warning_not_error(self) -> None:
        """CollectWarning is a warning category, not an error."""
        assert issubclass(CollectWarning, UserWarning)
        assert not issubclass(CollectWarning, MroCollectError)
