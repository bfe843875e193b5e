"""Abstract interfaces for the collaborators a query talks to.

A :class:`Dataset` knows the table: which attributes are keys, how values
are typed on the wire, and how to run scans and queries. A
:class:`Collection` turns raw records into entities.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .logger import Logger
from .schema import QueryOptions, ResultSet
from .types import RawRecord, TypedValue


class Dataset(ABC):
    """Table-level transport and schema collaborator."""

    def __init__(self, table_name: str, **kwargs: Any) -> None:
        self.table_name = table_name
        self.logger = Logger(self.__class__.__name__)

    @abstractmethod
    def key(self, attribute: str, index_name: Optional[str] = None) -> bool:
        """Whether ``attribute`` is a hash or range key of the index (or table when no index)."""

    @abstractmethod
    def format_attribute_value(self, value: Any) -> TypedValue:
        """Encode a Python value into the store's typed-value form."""

    @abstractmethod
    def scan(self, options: QueryOptions) -> ResultSet:
        """Run a full-table scan with the given options."""

    @abstractmethod
    def query(self, options: QueryOptions) -> ResultSet:
        """Run an indexed query with the given options."""


class Collection(ABC):
    """Record-to-entity mapping collaborator."""

    @abstractmethod
    def deserialize(self, records: List[RawRecord]) -> List[Any]:
        """Translate raw records into entities."""
