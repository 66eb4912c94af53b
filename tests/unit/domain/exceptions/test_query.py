"""Tests for domain/exceptions/query.py."""

import pytest

from introspect.domain.exceptions.base import IntrospectError
from introspect.domain.exceptions.query import FilterOverwriteError, ProviderNotConfiguredError


class TestFilterOverwriteError:
    """Tests for FilterOverwriteError."""

    def test_attributes_and_message(self) -> None:
        err = FilterOverwriteError("name")

        assert err.kind == "name"
        assert str(err) == "filter 'name' is already set on this query"

    def test_is_introspect_error(self) -> None:
        assert isinstance(FilterOverwriteError("name"), IntrospectError)

    def test_empty_kind_raises(self) -> None:
        with pytest.raises(ValueError, match="kind must not be empty"):
            FilterOverwriteError("")


class TestProviderNotConfiguredError:
    """Tests for ProviderNotConfiguredError."""

    def test_attributes_and_message(self) -> None:
        err = ProviderNotConfiguredError("jobs")

        assert err.domain == "jobs"
        assert "'jobs'" in str(err)
        assert "jobs=..." in str(err)

    def test_is_introspect_error(self) -> None:
        assert isinstance(ProviderNotConfiguredError("jobs"), IntrospectError)

    def test_empty_domain_raises(self) -> None:
        with pytest.raises(ValueError, match="domain must not be empty"):
            ProviderNotConfiguredError("")
