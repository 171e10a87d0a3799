"""Directional relationship tree builder.

The tree is rooted at a focus account and split into an outgoing side
(accounts the root sends to, their recipients, ...) and an incoming side
(accounts the root receives from, their senders, ...).
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Optional, Sequence

from txflow.config import EngineConfig, TieBreak
from txflow.domain.entities import Transaction, TreeDirection, TreeNode

logger = logging.getLogger(__name__)


@dataclass
class CounterpartyEdge:
    """Transactions between an account and one counterparty, in one direction."""

    account_id: str
    value: Decimal = Decimal(0)
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)


def _counterparty(txn: Transaction, account_id: str, direction: TreeDirection) -> Optional[str]:
    if direction == TreeDirection.OUTGOING and txn.source == account_id:
        return txn.destination
    if direction == TreeDirection.INCOMING and txn.destination == account_id:
        return txn.source
    return None


def aggregate_edges(
    transactions: Sequence[Transaction],
    account_id: str,
    direction: TreeDirection,
) -> list[CounterpartyEdge]:
    """Aggregate an account's transactions by counterparty.

    Self-transfers never become edges: the counterparty would be the account
    itself. Edges come back in first-encountered order.
    """
    return index_edges(transactions, direction).get(account_id, [])


def index_edges(
    transactions: Sequence[Transaction],
    direction: TreeDirection,
) -> dict[str, list[CounterpartyEdge]]:
    """Aggregate every account's transactions by counterparty in one pass.

    Returns:
        Map of account id to its edges in first-encountered order
    """
    index: dict[str, dict[str, CounterpartyEdge]] = {}
    for txn in transactions:
        if txn.is_self_transfer:
            continue
        if direction == TreeDirection.OUTGOING:
            account_id, counterparty = txn.source, txn.destination
        else:
            account_id, counterparty = txn.destination, txn.source
        edges = index.setdefault(account_id, {})
        edge = edges.get(counterparty)
        if edge is None:
            edge = edges[counterparty] = CounterpartyEdge(counterparty)
        edge.value += txn.amount
        edge.transactions.append(txn)
    return {account_id: list(edges.values()) for account_id, edges in index.items()}


class DirectionalTreeBuilder:
    """Service building bounded, cycle-free relationship trees."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        account_name: Optional[Callable[[str], str]] = None,
    ):
        """Initialize tree builder.

        Args:
            config: Depth, fan-out and tie-break settings
            account_name: Display name lookup. Defaults to the raw id
        """
        self.config = config or EngineConfig()
        self.account_name = account_name or (lambda account_id: account_id)

    def build(self, transactions: Sequence[Transaction], root_account: str) -> TreeNode:
        """Build the two-sided tree for a root account.

        The returned node is a synthetic root (direction ROOT) holding every
        transaction touching the account. Its children are the outgoing and
        the incoming subtree, each omitted when the root has no counterparty
        on that side.

        Args:
            transactions: Filtered transactions
            root_account: Account the tree is centred on

        Returns:
            Synthetic root node; never None
        """
        root_transactions = [
            txn
            for txn in transactions
            if txn.touches(root_account)
            and (self.config.self_transfers_in_root or not txn.is_self_transfer)
        ]
        if not root_transactions:
            logger.warning(
                "Account %s has no transactions in the current selection", root_account
            )

        sides = (
            self.build_subtree(transactions, root_account, TreeDirection.OUTGOING),
            self.build_subtree(transactions, root_account, TreeDirection.INCOMING),
        )
        return TreeNode(
            account_id=root_account,
            name=self.account_name(root_account),
            direction=TreeDirection.ROOT,
            value=sum((txn.amount for txn in root_transactions), Decimal(0)),
            transactions=tuple(root_transactions),
            children=tuple(side for side in sides if side is not None),
        )

    def build_subtree(
        self,
        transactions: Sequence[Transaction],
        root_account: str,
        direction: TreeDirection,
    ) -> Optional[TreeNode]:
        """Build one side of the tree, or None if the root has no counterparty there."""
        index = index_edges(transactions, direction)
        edges = index.get(root_account)
        if not edges:
            return None

        # Rank each account's edges once; a node then only skips accounts on its path.
        ranked = {
            account_id: self.order(account_edges) for account_id, account_edges in index.items()
        }
        side_transactions = [
            txn
            for txn in transactions
            if not txn.is_self_transfer
            and _counterparty(txn, root_account, direction) is not None
        ]
        return TreeNode(
            account_id=root_account,
            name=self.account_name(root_account),
            direction=direction,
            value=sum((txn.amount for txn in side_transactions), Decimal(0)),
            transactions=tuple(side_transactions),
            children=self._expand(ranked, root_account, direction, frozenset({root_account}), 0),
            depth=0,
        )

    def order(self, edges: Sequence[CounterpartyEdge]) -> list[CounterpartyEdge]:
        """Order edges by value descending.

        sorted() is stable, so equal keys stay in first-encountered order.
        """
        if self.config.tie_break == TieBreak.TRANSACTION_COUNT:
            return sorted(edges, key=lambda e: (-e.value, -e.transaction_count))
        return sorted(edges, key=lambda e: -e.value)

    def _expand(
        self,
        ranked: dict[str, list[CounterpartyEdge]],
        account_id: str,
        direction: TreeDirection,
        path: frozenset[str],
        depth: int,
    ) -> tuple[TreeNode, ...]:
        # path holds the accounts from the subtree root down to account_id;
        # each child gets its own extended copy, so siblings never prune each other.
        if depth >= self.config.max_depth:
            return ()

        children = []
        for edge in ranked.get(account_id, ()):
            if len(children) == self.config.max_children_per_node:
                break
            if edge.account_id in path:
                continue
            children.append(
                TreeNode(
                    account_id=edge.account_id,
                    name=self.account_name(edge.account_id),
                    direction=direction,
                    value=edge.value,
                    transactions=tuple(edge.transactions),
                    children=self._expand(
                        ranked,
                        edge.account_id,
                        direction,
                        path | {edge.account_id},
                        depth + 1,
                    ),
                    parent_id=account_id,
                    depth=depth + 1,
                )
            )
        return tuple(children)
