from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class PageSource(ABC, Generic[T]):
    """Ordered collection that can be counted and read by range."""

    @abstractmethod
    async def count(self) -> int:
        """Total number of items, independent of any window."""
        ...

    @abstractmethod
    async def fetch(self, skip: int, take: int) -> Sequence[T]:
        """Up to `take` items starting at 0-based `skip`, in stable order.

        A `skip` past the end or a `take` of zero returns an empty sequence.
        """
        ...
