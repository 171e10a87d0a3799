"""Filter pipeline narrowing the full record set before aggregation."""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from txflow.domain.entities import AmountRange, FilterCriteria, Transaction

logger = logging.getLogger(__name__)

# Slider bounds when there is nothing to measure.
DEFAULT_BOUNDS: AmountRange = (Decimal(0), Decimal(10000))

PairKey = tuple[str, str]


def pair_key(source: str, destination: str) -> PairKey:
    """Return the key of the unordered account pair."""
    return (source, destination) if source <= destination else (destination, source)


def _in_range(value: Decimal, bounds: Optional[AmountRange]) -> bool:
    if bounds is None:
        return True
    low, high = bounds
    return low <= value <= high


class FilterPipeline:
    """Service narrowing transactions by amount, pair flow and active accounts."""

    def apply(
        self,
        transactions: Sequence[Transaction],
        criteria: Optional[FilterCriteria] = None,
    ) -> list[Transaction]:
        """Return the transactions matching every active criterion.

        Pair volumes for the flow range are measured over the full input, so
        narrowing by amount does not shift which pairs pass the flow range.

        Args:
            transactions: Full transaction list
            criteria: Filter criteria. None or empty criteria keep everything

        Returns:
            Matching transactions in their original order; possibly empty
        """
        if criteria is None or criteria.is_empty:
            return list(transactions)

        volumes = None
        if criteria.flow_range is not None:
            volumes = self.pair_volumes(transactions)

        active = criteria.active_accounts
        result = []
        for txn in transactions:
            if not _in_range(txn.amount, criteria.amount_range):
                continue
            if volumes is not None and not _in_range(
                volumes[pair_key(txn.source, txn.destination)], criteria.flow_range
            ):
                continue
            if active and txn.source not in active and txn.destination not in active:
                continue
            result.append(txn)

        logger.debug("Filtered %d of %d transactions", len(result), len(transactions))
        return result

    def pair_volumes(self, transactions: Sequence[Transaction]) -> dict[PairKey, Decimal]:
        """Total amount moved between each unordered account pair, both directions."""
        volumes: dict[PairKey, Decimal] = {}
        for txn in transactions:
            key = pair_key(txn.source, txn.destination)
            volumes[key] = volumes.get(key, Decimal(0)) + abs(txn.amount)
        return volumes

    def amount_bounds(self, transactions: Sequence[Transaction]) -> AmountRange:
        """Smallest and largest single amount, for the amount range control."""
        if not transactions:
            return DEFAULT_BOUNDS
        amounts = [txn.amount for txn in transactions]
        return (min(amounts), max(amounts))

    def flow_bounds(self, transactions: Sequence[Transaction]) -> AmountRange:
        """Zero and the largest pair volume, for the flow range control."""
        volumes = self.pair_volumes(transactions)
        if not volumes:
            return DEFAULT_BOUNDS
        return (Decimal(0), max(volumes.values()))
