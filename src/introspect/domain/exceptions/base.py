"""Base exceptions for introspect domain."""


class IntrospectError(Exception):
    """Root exception for all introspect errors.

    All domain exceptions inherit from this.
    Allows catching all introspect-specific errors.
    """
