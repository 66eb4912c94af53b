"""Query configuration."""

from __future__ import annotations

from dataclasses import dataclass

from introspect.domain.model.enums import OverwritePolicy


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Configuration shared by a query and its OR branches.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        on_overwrite: Policy when a filter kind is registered twice.
            Default ALLOW keeps last write wins without notice.
    """

    on_overwrite: OverwritePolicy = OverwritePolicy.ALLOW

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.on_overwrite, OverwritePolicy):
            raise TypeError(
                f"on_overwrite must be OverwritePolicy, got {type(self.on_overwrite).__name__}"
            )


DEFAULT_CONFIG = QueryConfig()
