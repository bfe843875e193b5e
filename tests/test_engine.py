"""Tests for DynamoEngine."""

from dynaquery import DynamoEngine, Query
from dynaquery.constants import Operation


def test_engine_exposes_collaborators(engine, dataset, collection):
    assert engine.dataset is dataset
    assert engine.collection is collection


def test_query_returns_fresh_queries(engine):
    first = engine.query().where(category="ruby")
    second = engine.query()
    assert isinstance(first, Query)
    assert first is not second
    assert second.options.scan_filter is None


def test_query_with_block(engine, dataset):
    q = engine.query(lambda q: q.index("by_author").where(author_id=23))
    assert q.operation == Operation.QUERY
    assert q.options.key_conditions["author_id"].attribute_value_list == [23]
    assert dataset.requests == []


def test_all_scans_the_table(engine, dataset):
    assert engine.all() == dataset.records
    operation, options = dataset.last_request
    assert operation == Operation.SCAN
    assert options.to_request() == {}


def test_count(engine, dataset):
    assert engine.count() == 2
    assert dataset.last_request[1].select == "COUNT"


def test_engine_logs_initialization(dataset, collection, caplog):
    with caplog.at_level("INFO"):
        DynamoEngine(dataset, collection)
    assert any("DynamoEngine initialized" in r.getMessage() for r in caplog.records)
