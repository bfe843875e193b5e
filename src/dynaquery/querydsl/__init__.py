"""Query DSL module.

Exports the chainable :class:`Query` together with the condition serializer
and classifier it is built on.
"""

from .classifier import ConditionClassifier
from .query import Query
from .serializer import ConditionSerializer, merge_comparison

__all__ = (
    "ConditionClassifier",
    "ConditionSerializer",
    "Query",
    "merge_comparison",
)
