"""introspect - fluent query builders over introspected application metadata."""

__version__ = "0.1.0"

from introspect.presentation.api.dsl import Introspect

__all__ = ["Introspect", "__version__"]
