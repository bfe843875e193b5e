"""Tests for EntityCollection."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from dynaquery.mapping import EntityCollection


class Article(BaseModel):
    id: int
    title: str
    tags: List[str] = []
    rating: Optional[float] = None


RECORDS = [
    {"id": {"N": "1"}, "title": {"S": "Lotus"}, "tags": {"L": [{"S": "ruby"}]}, "rating": {"N": "4.5"}},
    {"id": {"N": "2"}, "title": {"S": "Hanami"}},
]


def test_plain_dicts_without_entity():
    result = EntityCollection().deserialize(RECORDS)
    assert result[0] == {"id": Decimal("1"), "title": "Lotus", "tags": ["ruby"], "rating": Decimal("4.5")}
    assert result[1] == {"id": Decimal("2"), "title": "Hanami"}


def test_entities_with_pydantic_model():
    result = EntityCollection(Article).deserialize(RECORDS)
    assert result == [
        Article(id=1, title="Lotus", tags=["ruby"], rating=4.5),
        Article(id=2, title="Hanami"),
    ]


def test_empty_records():
    assert EntityCollection(Article).deserialize([]) == []
