"""In-memory descriptor providers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from introspect.domain.ports.descriptor_provider import DescriptorProviderPort


class StaticProvider[T](DescriptorProviderPort[T]):
    """Provider over a fixed collection of records.

    Records are copied into a tuple at construction. Later changes to the
    source iterable are not observed.
    """

    def __init__(self, records: Iterable[T]) -> None:
        """Initialize provider.

        Args:
            records: Records to serve

        Raises:
            TypeError: If records is None
        """
        if records is None:
            raise TypeError("records must not be None")
        self._records: tuple[T, ...] = tuple(records)

    def fetch_all(self) -> Sequence[T]:
        """Return all records in original order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"StaticProvider({len(self._records)} records)"


class CallableProvider[T](DescriptorProviderPort[T]):
    """Provider adapting a zero-argument fetch function.

    The function is called on every fetch, so a provider over live
    metadata sees the registrations current at each terminal call.
    """

    def __init__(self, fetch: Callable[[], Iterable[T]]) -> None:
        """Initialize provider.

        Args:
            fetch: Function returning current records

        Raises:
            TypeError: If fetch is not callable
        """
        if not callable(fetch):
            raise TypeError(f"fetch must be callable, got {type(fetch).__name__}")
        self._fetch = fetch

    def fetch_all(self) -> Sequence[T]:
        """Call fetch function. Its exceptions propagate unchanged."""
        return tuple(self._fetch())
