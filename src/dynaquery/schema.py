"""Pydantic schemas for the request handed to the store and the result it returns."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import RawRecord


class Comparison(BaseModel):
    """A single serialized condition: operator plus typed operand list."""

    model_config = ConfigDict(populate_by_name=True)

    comparison_operator: str = Field(..., alias="ComparisonOperator", description="EQ, NE, IN or BETWEEN.")
    attribute_value_list: List[Any] = Field(
        default_factory=list, alias="AttributeValueList", description="Store-typed operand values."
    )


class QueryOptions(BaseModel):
    """Snapshot of the accumulated options of a query.

    Field names are snake_case; ``to_request`` dumps them with the names the
    DynamoDB API expects, leaving out everything that was never set.
    """

    model_config = ConfigDict(populate_by_name=True)

    key_conditions: Optional[Dict[str, Comparison]] = Field(None, alias="KeyConditions")
    scan_filter: Optional[Dict[str, Comparison]] = Field(None, alias="ScanFilter")
    query_filter: Optional[Dict[str, Comparison]] = Field(None, alias="QueryFilter")
    conditional_operator: Optional[str] = Field(None, alias="ConditionalOperator")
    select: Optional[str] = Field(None, alias="Select")
    attributes_to_get: Optional[List[str]] = Field(None, alias="AttributesToGet")
    scan_index_forward: Optional[bool] = Field(None, alias="ScanIndexForward")
    limit: Optional[int] = Field(None, alias="Limit")
    consistent_read: Optional[bool] = Field(None, alias="ConsistentRead")
    index_name: Optional[str] = Field(None, alias="IndexName")

    def to_request(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ResultSet(BaseModel):
    """Raw records and counters returned by a scan or query."""

    entries: List[RawRecord] = Field(default_factory=list, description="Raw typed records.")
    count: int = Field(0, description="Number of matching items.")
    scanned_count: int = Field(0, description="Number of items evaluated before filtering.")

    def __len__(self) -> int:
        return len(self.entries)
