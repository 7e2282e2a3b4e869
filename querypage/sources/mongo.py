"""Page source backed by a Beanie document query."""

from typing import Any, TypeVar

from beanie import Document
from pymongo.errors import PyMongoError

from querypage.core.exceptions import SourceUnavailableError
from querypage.core.logging import get_logger
from querypage.sources.base import PageSource

D = TypeVar("D", bound=Document)

log = get_logger(__name__)


class BeanieSource(PageSource[D]):
    """Documents of `document_model` matching `filters`, ordered by `sort`.

    A fresh query is built for every call since Beanie's FindMany mutates
    itself on skip()/limit(). Pass a `sort` that yields a total order
    (e.g. ending in `+Model.id`), otherwise pages can overlap.
    """

    def __init__(self, document_model: type[D], *filters: Any, sort: Any = None) -> None:
        self.document_model = document_model
        self.filters = filters
        self.sort = sort

    def _query(self):
        return self.document_model.find(*self.filters, sort=self.sort)

    async def count(self) -> int:
        try:
            return await self._query().count()
        except PyMongoError as exc:
            log.warning("source_count_failed", model=self.document_model.__name__, error=str(exc))
            raise SourceUnavailableError(
                "Could not count documents", details={"model": self.document_model.__name__}
            ) from exc

    async def fetch(self, skip: int, take: int) -> list[D]:
        # limit(0) means "no limit" to MongoDB
        if take <= 0:
            return []
        try:
            return await self._query().skip(skip).limit(take).to_list()
        except PyMongoError as exc:
            log.warning(
                "source_fetch_failed",
                model=self.document_model.__name__,
                skip=skip,
                take=take,
                error=str(exc),
            )
            raise SourceUnavailableError(
                "Could not fetch documents",
                details={"model": self.document_model.__name__, "skip": skip, "take": take},
            ) from exc
