"""Pytest configuration and fixtures for dynaquery tests."""

from typing import Any, Dict, List, Optional, Set, Tuple

import pytest
from dotenv import load_dotenv

from dynaquery.abc import Collection, Dataset
from dynaquery.constants import Operation
from dynaquery.engine import DynamoEngine
from dynaquery.querydsl.query import Query
from dynaquery.schema import QueryOptions, ResultSet

# Load environment variables
load_dotenv()


# In-memory collaborators for Query testing
class RecordingDataset(Dataset):
    """Dataset that records every request and answers with canned records.

    - Key schema is a plain dict: index name (None for the table) -> key attributes
    - Values are passed through unencoded so assertions stay readable
    """

    def __init__(self, keys: Optional[Dict[Optional[str], Set[str]]] = None, records: Optional[List[Dict]] = None):
        super().__init__("articles")
        self.keys = keys if keys is not None else {None: {"id"}, "by_author": {"author_id", "created_at"}}
        self.records = records or []
        self.requests: List[Tuple[str, QueryOptions]] = []
        self.key_lookups: List[Tuple[str, Optional[str]]] = []

    def key(self, attribute: str, index_name: Optional[str] = None) -> bool:
        self.key_lookups.append((attribute, index_name))
        return attribute in self.keys.get(index_name, set())

    def format_attribute_value(self, value: Any) -> Any:
        return value

    def _answer(self, operation: str, options: QueryOptions) -> ResultSet:
        self.requests.append((operation, options))
        if options.select == "COUNT":
            return ResultSet(entries=[], count=len(self.records), scanned_count=len(self.records))
        return ResultSet(entries=list(self.records), count=len(self.records), scanned_count=len(self.records))

    def scan(self, options: QueryOptions) -> ResultSet:
        return self._answer(Operation.SCAN, options)

    def query(self, options: QueryOptions) -> ResultSet:
        return self._answer(Operation.QUERY, options)

    @property
    def last_request(self) -> Tuple[str, QueryOptions]:
        return self.requests[-1]


class ListCollection(Collection):
    """Collection returning records unchanged, counting calls."""

    def __init__(self) -> None:
        self.calls = 0

    def deserialize(self, records: List[Dict]) -> List[Dict]:
        self.calls += 1
        return list(records)


@pytest.fixture
def dataset():
    return RecordingDataset(records=[{"id": 1, "title": "Lotus"}, {"id": 2, "title": "Hanami"}])


@pytest.fixture
def empty_dataset():
    return RecordingDataset(records=[])


@pytest.fixture
def collection():
    return ListCollection()


@pytest.fixture
def query(dataset, collection):
    """Fresh query against the recording dataset."""
    return Query(dataset, collection)


@pytest.fixture
def engine(dataset, collection):
    return DynamoEngine(dataset, collection)


@pytest.fixture
def describe_table_response():
    """DescribeTable payload for an articles table with one GSI and one LSI."""
    return {
        "Table": {
            "TableName": "articles",
            "KeySchema": [
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": "by_author",
                    "KeySchema": [
                        {"AttributeName": "author_id", "KeyType": "HASH"},
                        {"AttributeName": "created_at", "KeyType": "RANGE"},
                    ],
                }
            ],
            "LocalSecondaryIndexes": [
                {
                    "IndexName": "by_title",
                    "KeySchema": [
                        {"AttributeName": "id", "KeyType": "HASH"},
                        {"AttributeName": "title", "KeyType": "RANGE"},
                    ],
                }
            ],
        }
    }
