"""
dynaquery: lazy, chainable scan/query builder for DynamoDB.

Exposes the engine, the chainable Query and the collaborator interfaces.
"""

from .abc import Collection, Dataset
from .engine import DynamoEngine
from .exceptions import DynaQueryError, UnsupportedOperationError
from .querydsl import Query
from .schema import Comparison, QueryOptions, ResultSet
from .types import Range

__version__ = "0.1.0"

__all__ = [
    "DynamoEngine",
    "Query",
    "Dataset",
    "Collection",
    "Comparison",
    "QueryOptions",
    "ResultSet",
    "Range",
    "DynaQueryError",
    "UnsupportedOperationError",
]
