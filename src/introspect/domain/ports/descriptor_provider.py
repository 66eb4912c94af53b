"""Descriptor provider port (interface)."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class DescriptorProviderPort[T](ABC):
    """Port for acquiring descriptor records of one domain.

    Infrastructure layer must provide implementation.
    The engine never requests a subset: all scoping happens after retrieval.
    """

    @abstractmethod
    def fetch_all(self) -> Sequence[T]:
        """Return every currently registered record.

        Called once per terminal operation. Order is preserved in results.
        Failures propagate to the caller of the terminal operation unchanged.

        Returns:
            All records of this domain
        """
        ...
