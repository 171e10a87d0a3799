"""Tests for the filter pipeline."""

from decimal import Decimal

import pytest

from txflow.domain.entities import FilterCriteria
from txflow.domain.filters import DEFAULT_BOUNDS, FilterPipeline, pair_key


@pytest.fixture
def transactions(make_txn):
    return [
        make_txn("t1", "A", "B", 100),
        make_txn("t2", "B", "A", 250),
        make_txn("t3", "B", "C", 9500),
        make_txn("t4", "C", "D", 40),
        make_txn("t5", "D", "D", 75),
    ]


@pytest.fixture
def pipeline():
    return FilterPipeline()


def _ids(transactions):
    return [txn.id for txn in transactions]


def test_no_criteria_is_identity(pipeline, transactions):
    assert _ids(pipeline.apply(transactions)) == ["t1", "t2", "t3", "t4", "t5"]
    assert _ids(pipeline.apply(transactions, FilterCriteria())) == [
        "t1",
        "t2",
        "t3",
        "t4",
        "t5",
    ]


def test_amount_range_is_inclusive(pipeline, transactions):
    criteria = FilterCriteria(amount_range=(Decimal("75"), Decimal("250")))

    assert _ids(pipeline.apply(transactions, criteria)) == ["t1", "t2", "t5"]


def test_flow_range_uses_unordered_pair_volume(pipeline, transactions):
    # A<->B moved 350 in total; B->C 9500; C->D 40; D->D 75.
    criteria = FilterCriteria(flow_range=(Decimal("300"), Decimal("1000")))

    assert _ids(pipeline.apply(transactions, criteria)) == ["t1", "t2"]


def test_flow_range_measured_before_amount_range(pipeline, transactions):
    criteria = FilterCriteria(
        amount_range=(Decimal("0"), Decimal("150")),
        flow_range=(Decimal("350"), Decimal("350")),
    )

    assert _ids(pipeline.apply(transactions, criteria)) == ["t1"]


def test_active_accounts(pipeline, transactions):
    criteria = FilterCriteria(active_accounts=frozenset({"C"}))

    assert _ids(pipeline.apply(transactions, criteria)) == ["t3", "t4"]


def test_all_dimensions_combine(pipeline, transactions):
    criteria = FilterCriteria(
        amount_range=(Decimal("50"), Decimal("10000")),
        flow_range=(Decimal("0"), Decimal("400")),
        active_accounts=frozenset({"A", "D"}),
    )

    assert _ids(pipeline.apply(transactions, criteria)) == ["t1", "t2", "t5"]


def test_no_matches_is_empty_list(pipeline, transactions):
    criteria = FilterCriteria(amount_range=(Decimal("100000"), Decimal("200000")))

    assert pipeline.apply(transactions, criteria) == []
    assert pipeline.apply([], criteria) == []


def test_pair_volumes(pipeline, transactions):
    volumes = pipeline.pair_volumes(transactions)

    assert volumes[pair_key("A", "B")] == Decimal("350")
    assert volumes[pair_key("B", "A")] == Decimal("350")
    assert volumes[("D", "D")] == Decimal("75")


def test_bounds(pipeline, transactions):
    assert pipeline.amount_bounds(transactions) == (Decimal("40"), Decimal("9500"))
    assert pipeline.flow_bounds(transactions) == (Decimal("0"), Decimal("9500"))


def test_bounds_default_when_empty(pipeline):
    assert pipeline.amount_bounds([]) == DEFAULT_BOUNDS
    assert pipeline.flow_bounds([]) == DEFAULT_BOUNDS
