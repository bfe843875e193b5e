"""Lazy, chainable DynamoDB query.

All the methods are chainable, which allows advanced composition of options.
Records are fetched only when needed: iterating, calling ``all``, ``count``,
``exists``, ``empty`` or turning the query into a string.

Typical usage:

- ``query.where(language="ruby").and_(framework="lotus").all()``
- ``query.index("by_author").where(author_id=23).count()``
- ``query.where(year=Range(1900, 1982)).desc().limit(10)``

Each terminal call runs a fresh request with the options accumulated so far;
nothing is cached between calls.
"""

from copy import deepcopy
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..abc import Collection, Dataset
from ..constants import (
    ARBITRARY_ORDER_WARNING,
    ConditionalOperator,
    Operation,
    Select,
)
from ..exceptions import InvalidConditionError, UnsupportedOperationError
from ..logger import get_logger
from ..schema import QueryOptions, ResultSet
from .classifier import ConditionClassifier
from .serializer import ConditionSerializer, merge_comparison

__all__ = ("Query",)

logger = get_logger(__name__)


class Query:
    """Accumulate scan/query options and resolve them on demand.

    Attributes:
        operation: ``"Scan"`` until something requires an indexed read, then ``"Query"``
    """

    def __init__(
        self,
        dataset: Dataset,
        collection: Collection,
        blk: Optional[Callable[["Query"], Any]] = None,
    ) -> None:
        """Initialize a query.

        Args:
            dataset: Table collaborator (key schema, value encoding, transport)
            collection: Record-to-entity mapper
            blk: Optional callable applied to the new query
        """
        self._dataset = dataset
        self._collection = collection
        self._serializer = ConditionSerializer(dataset.format_attribute_value)
        self._classifier = ConditionClassifier(dataset)

        self._operation = Operation.SCAN
        self._options: Dict[str, Any] = {}

        if blk is not None:
            blk(self)

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def options(self) -> QueryOptions:
        """Snapshot of the accumulated options."""
        return QueryOptions(**deepcopy(self._options))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def all(self) -> List[Any]:
        """Fetch records and translate them into entities."""
        return self._collection.deserialize(self.run().entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.all())

    def __str__(self) -> str:
        return str(self.all())

    def __repr__(self) -> str:
        return f"<Query: {self._operation} {self.options.to_request()}>"

    def empty(self) -> bool:
        return not self.all()

    def count(self) -> int:
        """Return the number of records matching the current conditions.

        Switches the query to ``Select=COUNT`` and drops any attribute
        projection. The switch is kept on the query after the call.
        """
        self._options["select"] = Select.COUNT
        self._options.pop("attributes_to_get", None)
        return self.run().count

    def exists(self) -> bool:
        """Whether at least one record matches the current conditions."""
        return self.count() != 0

    exist = exists

    def run(self) -> ResultSet:
        """Send the accumulated options to the dataset.

        Transport errors propagate unchanged.
        """
        options = self.options
        logger.debug("%s %s", self._operation, options.to_request())
        if self._operation == Operation.QUERY:
            return self._dataset.query(options)
        return self._dataset.scan(options)

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------
    def query(self) -> "Query":
        """Use Query instead of Scan."""
        self._operation = Operation.QUERY
        return self

    def where(self, condition: Optional[Dict[str, Any]] = None, **filters: Any) -> "Query":
        """Add a condition that behaves like SQL ``WHERE``.

        Accepts a mapping, keyword arguments, or both. Values may be scalars,
        sequences (``IN``) or :class:`~dynaquery.types.Range` (``BETWEEN``).

        Examples:
            >>> query.where(language="ruby")
            >>> query.where(id=[1, 3])
            >>> query.where(year=Range(1900, 1982))
            >>> query.where({"first-name": "Ada"})
        """
        return self._add_conditions(condition, filters, negate=False)

    and_ = where

    def exclude(self, condition: Optional[Dict[str, Any]] = None, **filters: Any) -> "Query":
        """Logical negation of a ``where`` condition.

        Only scalar values can be negated (``NE``).
        """
        return self._add_conditions(condition, filters, negate=True)

    not_ = exclude

    def or_(self) -> "Query":
        """Set ``ConditionalOperator`` to ``OR``. Works query-wide."""
        self._options["conditional_operator"] = ConditionalOperator.OR
        return self

    # ------------------------------------------------------------------
    # Projection, ordering, paging
    # ------------------------------------------------------------------
    def select(self, *columns: Any) -> "Query":
        """Select only the specified columns."""
        self._options["select"] = Select.SPECIFIC_ATTRIBUTES
        self._options["attributes_to_get"] = [str(c) for c in columns]
        return self

    def order(self, *columns: Any) -> "Query":
        """Ascending order, sorted by the range key of the index."""
        return self._sort(True, columns)

    asc = order
    ascending = order

    def desc(self, *columns: Any) -> "Query":
        """Descending order, sorted by the range key of the index."""
        return self._sort(False, columns)

    descending = desc

    def limit(self, number: int) -> "Query":
        self._options["limit"] = number
        return self

    def consistent(self) -> "Query":
        """Use strongly consistent reads."""
        self.query()
        self._options["consistent_read"] = True
        return self

    consistent_read = consistent

    def index(self, name: Any) -> "Query":
        """Query against a secondary index."""
        self.query()
        self._options["index_name"] = str(name)
        return self

    use_index = index

    # ------------------------------------------------------------------
    # Not available in DynamoDB
    # ------------------------------------------------------------------
    def offset(self, number: int) -> "Query":
        raise self._unsupported("offset")

    def sum(self, column: Any) -> Any:
        raise self._unsupported("sum")

    def average(self, column: Any) -> Any:
        raise self._unsupported("average")

    avg = average

    def max(self, column: Any) -> Any:
        raise self._unsupported("max")

    def min(self, column: Any) -> Any:
        raise self._unsupported("min")

    def interval(self, column: Any) -> Any:
        raise self._unsupported("interval")

    def range(self, column: Any) -> Any:
        raise self._unsupported("range")

    def negate(self) -> "Query":
        raise self._unsupported("negate")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def _unsupported(operation: str) -> UnsupportedOperationError:
        return UnsupportedOperationError(f"DynamoDB does not provide {operation}", operation=operation)

    def _sort(self, forward: bool, columns: Tuple[Any, ...]) -> "Query":
        if columns:
            logger.warning("%s: %s", ARBITRARY_ORDER_WARNING, ", ".join(str(c) for c in columns))
        self.query()
        self._options["scan_index_forward"] = forward
        return self

    def _add_conditions(self, condition: Optional[Dict[str, Any]], filters: Dict[str, Any], negate: bool) -> "Query":
        pairs = list((condition or {}).items()) + list(filters.items())
        if not pairs:
            raise InvalidConditionError("A condition needs at least one column=value pair")

        # Serialize everything first so an unsupported pair leaves the query untouched
        serialized = [(str(column), self._serializer.serialize(str(column), value, negate)) for column, value in pairs]

        for column, comparison in serialized:
            bucket, self._operation = self._classifier.classify(
                column, self._operation, self._options.get("index_name")
            )
            entries = self._options.setdefault(bucket, {})
            entries[column] = merge_comparison(entries.get(column), comparison)
        return self
