"""Shared pytest fixtures for txflow tests."""

from datetime import date
from decimal import Decimal

import pytest

from txflow.config import EngineConfig
from txflow.domain.entities import Account, Transaction
from txflow.domain.investigation import InvestigationService
from txflow.domain.store import TransactionStore
from txflow.sample_data import load_sample_store

DEFAULT_DAY = date(2024, 7, 1)


def _make_txn(
    txn_id: str,
    source: str,
    destination: str,
    amount,
    day=DEFAULT_DAY,
    txn_type: str = "DEFT",
    is_flagged: bool = False,
) -> Transaction:
    """Build a Transaction with sensible defaults."""
    return Transaction(
        id=txn_id,
        date=day,
        source=source,
        destination=destination,
        amount=Decimal(str(amount)),
        type=txn_type,
        is_flagged=is_flagged,
        raw_date=day.isoformat() if day is not None else "not-a-date",
    )


@pytest.fixture
def make_txn():
    """Factory for Transactions with sensible defaults."""
    return _make_txn


@pytest.fixture
def chain_transactions():
    """A sends to B, B forwards to C on the same day."""
    return [
        _make_txn("t1", "A", "B", 100),
        _make_txn("t2", "B", "C", 100),
    ]


@pytest.fixture
def round_trip_transactions():
    """A sends 50 to B, B returns 30 to A on the same day."""
    return [
        _make_txn("t1", "A", "B", 50),
        _make_txn("t2", "B", "A", 30),
    ]


@pytest.fixture
def directory():
    return [
        Account(id="A", name="Alpha"),
        Account(id="B", name="Beta"),
        Account(id="C", name="Gamma"),
    ]


@pytest.fixture
def store(chain_transactions, directory):
    """Create a TransactionStore over the chain transactions."""
    return TransactionStore(chain_transactions, directory)


@pytest.fixture
def sample_store():
    """Create a fresh store holding the bundled sample dataset."""
    return load_sample_store()


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def investigation_service(sample_store, config):
    """Create an InvestigationService over the sample dataset."""
    return InvestigationService(sample_store, config)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
