"""Tests for domain/predicates/bindings.py."""

import functools

from introspect.domain.predicates.bindings import (
    CLOSURE_LISTENER,
    ControllerBinding,
    class_identifier,
    listener_name,
    parse_controller,
)


class OrderListener:
    """Listener used as class, instance and bound method target."""

    def handle(self, event: object) -> None:
        pass


ORDER_LISTENER = f"{OrderListener.__module__}.{OrderListener.__qualname__}"


class TestParseController:
    """Controller action shapes."""

    def test_combined_string(self) -> None:
        assert parse_controller("app.UserController@index") == ControllerBinding(
            "app.UserController", "index"
        )

    def test_invokable_string(self) -> None:
        assert parse_controller("app.Invokable") == ControllerBinding("app.Invokable")

    def test_pair(self) -> None:
        assert parse_controller(("app.UserController", "show")) == ControllerBinding(
            "app.UserController", "show"
        )

    def test_target_only_tuple(self) -> None:
        assert parse_controller(("app.Invokable",)) == ControllerBinding("app.Invokable")

    def test_class_pair(self) -> None:
        assert parse_controller((OrderListener, "handle")) == ControllerBinding(
            ORDER_LISTENER, "handle"
        )

    def test_non_class_target_has_no_binding(self) -> None:
        assert parse_controller((OrderListener(), "handle")) is None

    def test_trailing_at_gives_empty_member(self) -> None:
        assert parse_controller("app.UserController@") == ControllerBinding(
            "app.UserController", ""
        )

    def test_no_controller(self) -> None:
        assert parse_controller(None) is None
        assert parse_controller(lambda: None) is None
        assert parse_controller(()) is None


class TestClassIdentifier:
    """Qualified class names."""

    def test_module_qualified(self) -> None:
        assert class_identifier(OrderListener) == ORDER_LISTENER

    def test_builtin_unqualified(self) -> None:
        assert class_identifier(int) == "int"

    def test_nested_class(self) -> None:
        class Inner:
            pass

        assert class_identifier(Inner).endswith("test_nested_class.<locals>.Inner")


class TestListenerName:
    """Listener shapes reduce to one class name."""

    def test_string(self) -> None:
        assert listener_name("app.listeners.Audit") == "app.listeners.Audit"

    def test_string_pair(self) -> None:
        assert listener_name(("app.listeners.Audit", "handle")) == "app.listeners.Audit"

    def test_class_pair(self) -> None:
        assert listener_name((OrderListener, "handle")) == ORDER_LISTENER

    def test_instance_pair(self) -> None:
        assert listener_name((OrderListener(), "handle")) == ORDER_LISTENER

    def test_class(self) -> None:
        assert listener_name(OrderListener) == ORDER_LISTENER

    def test_instance(self) -> None:
        assert listener_name(OrderListener()) == ORDER_LISTENER

    def test_function_and_lambda(self) -> None:
        def on_order(event: object) -> None:
            pass

        assert listener_name(on_order) == CLOSURE_LISTENER
        assert listener_name(lambda event: None) == CLOSURE_LISTENER

    def test_bound_method(self) -> None:
        assert listener_name(OrderListener().handle) == CLOSURE_LISTENER

    def test_partial_is_instance(self) -> None:
        assert listener_name(functools.partial(print)) == "functools.partial"

    def test_empty_tuple(self) -> None:
        assert listener_name(()) == CLOSURE_LISTENER
