"""Temporal flow aggregation: day-bucketed bands and running balances."""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from txflow.config import EngineConfig
from txflow.domain.entities import (
    AccountBalanceSample,
    DayWindow,
    FlowBand,
    FlowView,
    Transaction,
)
from txflow.utils.date_parser import pad_day_range

logger = logging.getLogger(__name__)

BandKey = tuple[str, str, date]


class TemporalFlowAggregator:
    """Service converting transactions into flow bands and balance histories."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def aggregate(self, transactions: Sequence[Transaction]) -> FlowView:
        """Aggregate transactions into a chronological flow view.

        Transactions without a parsed date are left out and reported through
        ``FlowView.skipped_transaction_ids``.

        Args:
            transactions: Filtered transactions

        Returns:
            FlowView with bands sorted by day and per-account histories
        """
        bands, skipped = self.build_bands(transactions)
        if skipped:
            logger.warning(
                "Skipped %d transaction(s) with malformed dates: %s",
                len(skipped),
                ", ".join(skipped),
            )
        return FlowView(
            bands=tuple(bands),
            histories=self.replay(bands),
            skipped_transaction_ids=tuple(skipped),
        )

    def build_bands(
        self, transactions: Sequence[Transaction]
    ) -> tuple[list[FlowBand], list[str]]:
        """Bucket transactions by (source, destination, day).

        Returns:
            Tuple of (bands sorted by day, ids of transactions without a date)
        """
        buckets: dict[BandKey, list[Transaction]] = {}
        skipped = []
        for txn in transactions:
            if txn.date is None:
                skipped.append(txn.id)
                continue
            buckets.setdefault((txn.source, txn.destination, txn.date), []).append(txn)

        bands = [
            FlowBand(
                source=source,
                destination=destination,
                day=day,
                amount=sum((txn.amount for txn in members), Decimal(0)),
                transactions=tuple(members),
            )
            for (source, destination, day), members in buckets.items()
        ]
        # Stable: bands on the same day keep first-encountered order.
        bands.sort(key=lambda band: band.day)
        return bands, skipped

    def replay(
        self, bands: Sequence[FlowBand]
    ) -> dict[str, tuple[AccountBalanceSample, ...]]:
        """Apply bands in order and sample every touched account's balance.

        Balances start at zero and may go negative. A self-transfer band
        yields one sample with equal inflow and outflow.
        """
        balances: dict[str, Decimal] = defaultdict(Decimal)
        histories: dict[str, list[AccountBalanceSample]] = defaultdict(list)
        zero = Decimal(0)

        for band in bands:
            balances[band.source] -= band.amount
            balances[band.destination] += band.amount

            if band.is_self_transfer:
                histories[band.source].append(
                    AccountBalanceSample(
                        account_id=band.source,
                        day=band.day,
                        balance=balances[band.source],
                        inflow=band.amount,
                        outflow=band.amount,
                    )
                )
                continue

            histories[band.source].append(
                AccountBalanceSample(
                    account_id=band.source,
                    day=band.day,
                    balance=balances[band.source],
                    inflow=zero,
                    outflow=band.amount,
                )
            )
            histories[band.destination].append(
                AccountBalanceSample(
                    account_id=band.destination,
                    day=band.day,
                    balance=balances[band.destination],
                    inflow=band.amount,
                    outflow=zero,
                )
            )

        return {account_id: tuple(samples) for account_id, samples in histories.items()}

    def account_volumes(self, transactions: Sequence[Transaction]) -> list[tuple[str, Decimal]]:
        """Total volume per account, largest first.

        Each transaction counts toward both its source and destination. Ties
        keep first-encountered order.
        """
        volumes: dict[str, Decimal] = {}
        for txn in transactions:
            volumes[txn.source] = volumes.get(txn.source, Decimal(0)) + txn.amount
            volumes[txn.destination] = volumes.get(txn.destination, Decimal(0)) + txn.amount
        return sorted(volumes.items(), key=lambda item: -item[1])

    def default_window(self, bands: Sequence[FlowBand]) -> Optional[DayWindow]:
        """Window covering every band, padded by the configured number of days."""
        if not bands:
            return None
        days = [band.day for band in bands]
        start, end = pad_day_range(min(days), max(days), self.config.date_padding_days)
        return DayWindow(start=start, end=end)
