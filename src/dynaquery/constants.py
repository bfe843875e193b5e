"""
DynamoDB request constants shared by the query builder and the dataset.
"""


class Operation:
    SCAN = "Scan"
    QUERY = "Query"


class ComparisonOperator:
    EQ = "EQ"
    NE = "NE"
    IN = "IN"
    BETWEEN = "BETWEEN"


class ConditionalOperator:
    AND = "AND"
    OR = "OR"


class Select:
    ALL_ATTRIBUTES = "ALL_ATTRIBUTES"
    SPECIFIC_ATTRIBUTES = "SPECIFIC_ATTRIBUTES"
    COUNT = "COUNT"


# Accumulator buckets a condition can land in
KEY_CONDITIONS = "key_conditions"
SCAN_FILTER = "scan_filter"
QUERY_FILTER = "query_filter"

ARBITRARY_ORDER_WARNING = "DynamoDB does not support arbitrary order"
