"""Type aliases and value shapes for dynaquery.

A condition value is one of three shapes, checked in this order:

- a sequence (``list``, ``tuple``, ``set``, ``frozenset``): set membership
- a :class:`Range`: inclusive range on both ends
- anything else: a scalar
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

OperationType = Literal["Scan", "Query"]
BucketType = Literal["key_conditions", "scan_filter", "query_filter"]

# Store-typed value, e.g. {"S": "ruby"} or {"N": "23"}
TypedValue = Dict[str, Any]
RawRecord = Dict[str, TypedValue]

SEQUENCE_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True)
class Range:
    """Inclusive range used for BETWEEN conditions.

    Example:
        >>> query.where(year=Range(1900, 1982))
    """

    lower: Any
    upper: Any


ConditionValue = Union[List[Any], Range, Any]
