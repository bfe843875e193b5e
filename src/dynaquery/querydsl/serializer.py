"""Condition serializer.

Turns a single ``column=value`` pair into the comparison structure used by
``KeyConditions``, ``ScanFilter`` and ``QueryFilter``:

=================  ==============  =================
value shape        plain           negated
=================  ==============  =================
sequence           ``IN``          unsupported
``Range``          ``BETWEEN``     unsupported
scalar             ``EQ``          ``NE``
=================  ==============  =================
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from ..constants import ComparisonOperator
from ..exceptions import UnsupportedOperationError
from ..types import SEQUENCE_TYPES, ConditionValue, Range, TypedValue

__all__ = (
    "ConditionSerializer",
    "merge_comparison",
)


class ConditionSerializer:
    """Serialize conditions, encoding every operand with ``encode``."""

    def __init__(self, encode: Callable[[Any], TypedValue]) -> None:
        self.encode = encode

    def operator_for(self, value: ConditionValue, negate: bool = False) -> Tuple[Optional[str], List[Any]]:
        """Return the comparison operator and raw operands for ``value``.

        The operator is ``None`` when the shape cannot be negated.
        """
        if isinstance(value, SEQUENCE_TYPES):
            return (None if negate else ComparisonOperator.IN), list(value)
        if isinstance(value, Range):
            return (None if negate else ComparisonOperator.BETWEEN), [value.lower, value.upper]
        return (ComparisonOperator.NE if negate else ComparisonOperator.EQ), [value]

    def serialize(self, column: str, value: ConditionValue, negate: bool = False) -> Dict[str, Any]:
        """Serialize one condition.

        Args:
            column: Attribute name
            value: Scalar, sequence or Range
            negate: True for ``exclude`` conditions

        Returns:
            ``{"comparison_operator": ..., "attribute_value_list": [...]}``

        Raises:
            UnsupportedOperationError: If the shape has no negated operator
        """
        operator, values = self.operator_for(value, negate)
        if operator is None:
            raise UnsupportedOperationError(
                f"Negated {type(value).__name__} conditions are not supported by DynamoDB",
                operation="exclude",
                column=column,
            )
        return {
            "comparison_operator": operator,
            "attribute_value_list": [self.encode(v) for v in values],
        }


def merge_comparison(existing: Optional[Dict[str, Any]], serialized: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a new comparison into the entry already held for a column.

    Operands accumulate in insertion order; the newest operator wins.
    Nothing checks that the result fits the operator: ``EQ`` with two
    operands, or ``BETWEEN`` followed by ``EQ`` (``{EQ, [1, 5, 3]}``), is
    sent as is and DynamoDB rejects the request with a ValidationException.
    """
    if not existing:
        return {
            "comparison_operator": serialized["comparison_operator"],
            "attribute_value_list": list(serialized["attribute_value_list"]),
        }
    return {
        "comparison_operator": serialized["comparison_operator"],
        "attribute_value_list": existing["attribute_value_list"] + list(serialized["attribute_value_list"]),
    }
