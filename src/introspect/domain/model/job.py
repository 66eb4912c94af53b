"""Queued job descriptor."""

from dataclasses import dataclass

# Marker contracts a job may implement
SHOULD_BE_UNIQUE = "ShouldBeUnique"
SHOULD_BE_ENCRYPTED = "ShouldBeEncrypted"


@dataclass(frozen=True, slots=True)
class JobDescriptor:
    """Queueable job class.

    Attributes:
        class_name: Fully qualified job class
        queue: Declared queue, None if dynamic or unset
        connection: Declared connection, None if dynamic or unset
        tries: Declared max attempts, None if dynamic or unset
        backoff: Seconds between retries, single value or schedule
        middleware: Job middleware class names
        traits: Traits/mixins used (recursively)
        interfaces: Implemented contracts
    """

    class_name: str
    queue: str | None = None
    connection: str | None = None
    tries: int | None = None
    backoff: int | tuple[int, ...] | None = None
    middleware: tuple[str, ...] = ()
    traits: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if self.tries is not None and self.tries < 0:
            raise ValueError(f"tries must be >= 0, got {self.tries}")
        for name in ("middleware", "traits", "interfaces"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                raise TypeError(f"{name} must be tuple, got {type(value).__name__}")

    @property
    def is_unique(self) -> bool:
        """Implements the unique-job contract."""
        return SHOULD_BE_UNIQUE in self.interfaces

    @property
    def is_encrypted(self) -> bool:
        """Implements the encrypted-job contract."""
        return SHOULD_BE_ENCRYPTED in self.interfaces

    @property
    def has_middleware(self) -> bool:
        """Declares at least one job middleware."""
        return bool(self.middleware)
