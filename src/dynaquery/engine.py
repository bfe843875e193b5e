"""
Entry point wiring a dataset and a collection into queries.

``DynamoEngine`` is the object applications hold on to; every call to
``query`` returns a fresh, independent :class:`~dynaquery.querydsl.Query`.
"""

from typing import Any, Callable, List, Optional

from .abc import Collection, Dataset
from .logger import Logger
from .querydsl.query import Query


class DynamoEngine:
    """Build lazy queries against one table.

    Attributes:
        dataset: Table collaborator
        collection: Record-to-entity mapper
    """

    def __init__(self, dataset: Dataset, collection: Collection) -> None:
        self._dataset = dataset
        self._collection = collection
        self.logger = Logger(self.__class__.__name__)
        self.logger.message(
            "DynamoEngine initialized: dataset=%s table=%s collection=%s",
            dataset.__class__.__name__,
            dataset.table_name,
            collection.__class__.__name__,
        )

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def collection(self) -> Collection:
        return self._collection

    def query(self, blk: Optional[Callable[[Query], Any]] = None) -> Query:
        """Return a new query, optionally configured by ``blk``.

        Examples:
            >>> engine.query().where(language="ruby").all()
            >>> engine.query(lambda q: q.index("by_author").where(author_id=23)).count()
        """
        return Query(self._dataset, self._collection, blk)

    def all(self) -> List[Any]:
        """Every entity in the table (unfiltered scan)."""
        return self.query().all()

    def count(self) -> int:
        return self.query().count()
