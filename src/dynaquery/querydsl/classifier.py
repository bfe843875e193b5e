"""Decide where a condition goes: key conditions, scan filter or query filter."""

from typing import Optional, Tuple

from ..abc import Dataset
from ..constants import KEY_CONDITIONS, QUERY_FILTER, SCAN_FILTER, Operation
from ..types import BucketType, OperationType

__all__ = ("ConditionClassifier",)


class ConditionClassifier:
    """Classify conditions against the key schema known by a dataset.

    A key attribute of the selected index always becomes a key condition and
    turns the request into a Query. Other attributes are filters for the
    current operation; filters already placed are never moved.
    """

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset

    def classify(
        self, column: str, operation: OperationType, index_name: Optional[str] = None
    ) -> Tuple[BucketType, OperationType]:
        """Return ``(bucket, operation)`` for a condition on ``column``."""
        if self.dataset.key(column, index_name):
            return KEY_CONDITIONS, Operation.QUERY
        if operation == Operation.SCAN:
            return SCAN_FILTER, operation
        return QUERY_FILTER, operation
