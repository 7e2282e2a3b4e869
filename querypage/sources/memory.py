from typing import Iterable, TypeVar

from querypage.core.exceptions import InvalidArgumentError
from querypage.sources.base import PageSource

T = TypeVar("T")


class MemorySource(PageSource[T]):
    def __init__(self, items: Iterable[T]) -> None:
        self.items = list(items)

    async def count(self) -> int:
        return len(self.items)

    async def fetch(self, skip: int, take: int) -> list[T]:
        if skip < 0 or take < 0:
            raise InvalidArgumentError(
                "skip and take must not be negative",
                details={"skip": skip, "take": take},
            )
        return self.items[skip : skip + take]
