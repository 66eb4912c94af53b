"""Tests for domain/exceptions/base.py."""

import pytest

from introspect.domain.exceptions.base import IntrospectError


class TestIntrospectError:
    """Tests for IntrospectError base exception."""

    def test_is_exception(self) -> None:
        assert issubclass(IntrospectError, Exception)

    def test_can_raise_and_catch(self) -> None:
        with pytest.raises(IntrospectError, match="test message"):
            raise IntrospectError("test message")

    def test_empty_message(self) -> None:
        assert str(IntrospectError()) == ""
