"""Domain model entities for txflow.

Transaction and Account are the records handed over by the loading layer.
TreeNode, FlowBand and AccountBalanceSample are derived views: they carry no
identity of their own and are rebuilt on every recomputation.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Iterator, Optional

from txflow.domain.flags import any_flagged

AmountRange = tuple[Decimal, Decimal]


@dataclass(frozen=True)
class Account:
    """Account directory entry."""

    id: str
    name: str


@dataclass
class Transaction:
    """Transfer of a positive amount from one account to another.

    Only ``is_flagged`` is mutated after load, and only through
    TransactionStore.toggle_flag. ``date`` is None when ``raw_date`` could
    not be parsed; such records are skipped by temporal aggregation.
    """

    id: str
    date: Optional[date]
    source: str
    destination: str
    amount: Decimal
    type: str = "Other"
    description: Optional[str] = None
    is_flagged: bool = False
    raw_date: Optional[str] = None

    @property
    def is_self_transfer(self) -> bool:
        return self.source == self.destination

    def touches(self, account_id: str) -> bool:
        """Return True if the account is the source or the destination."""
        return self.source == account_id or self.destination == account_id


class TreeDirection(Enum):
    """Side of the relationship tree a node belongs to."""

    ROOT = "root"
    OUTGOING = "out"
    INCOMING = "in"


@dataclass(frozen=True)
class TreeNode:
    """Node of a directional relationship tree.

    For the synthetic root, ``transactions`` holds every transaction touching
    the account. For any other node it holds the transactions between the node
    and its tree parent.
    """

    account_id: str
    name: str
    direction: TreeDirection
    value: Decimal
    transactions: tuple[Transaction, ...] = ()
    children: tuple["TreeNode", ...] = ()
    parent_id: Optional[str] = None
    depth: int = 0

    @property
    def is_flagged(self) -> bool:
        return any_flagged(self.transactions)

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    def child(self, direction: TreeDirection) -> Optional["TreeNode"]:
        """Return the first child on the given side, if any."""
        for node in self.children:
            if node.direction == direction:
                return node
        return None

    def walk(self) -> Iterator["TreeNode"]:
        """Yield this node and its descendants depth-first."""
        yield self
        for node in self.children:
            yield from node.walk()

    def paths(self) -> Iterator[tuple[str, ...]]:
        """Yield the account ids along every path from this node to a leaf."""
        if not self.children:
            yield (self.account_id,)
            return
        for node in self.children:
            for path in node.paths():
                yield (self.account_id,) + path


@dataclass(frozen=True)
class FlowBand:
    """Amount moved from one account to another within one calendar day."""

    source: str
    destination: str
    day: date
    amount: Decimal
    transactions: tuple[Transaction, ...] = ()

    @property
    def is_flagged(self) -> bool:
        return any_flagged(self.transactions)

    @property
    def is_self_transfer(self) -> bool:
        return self.source == self.destination


@dataclass(frozen=True)
class AccountBalanceSample:
    """Running balance of an account after one band has been applied."""

    account_id: str
    day: date
    balance: Decimal
    inflow: Decimal
    outflow: Decimal


@dataclass(frozen=True)
class DayWindow:
    """Inclusive range of calendar days. A missing bound is open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


@dataclass(frozen=True)
class FlowView:
    """Chronological bands plus per-account balance histories."""

    bands: tuple[FlowBand, ...] = ()
    histories: dict[str, tuple[AccountBalanceSample, ...]] = field(default_factory=dict)
    skipped_transaction_ids: tuple[str, ...] = ()

    def history(self, account_id: str) -> tuple[AccountBalanceSample, ...]:
        """Return the balance history of an account (empty if untouched)."""
        return self.histories.get(account_id, ())

    def final_balances(self) -> dict[str, Decimal]:
        """Return the last sampled balance of every account."""
        return {
            account_id: samples[-1].balance
            for account_id, samples in self.histories.items()
            if samples
        }

    def restrict(self, window: Optional[DayWindow]) -> "FlowView":
        """Return the bands and samples that fall inside the window.

        Balances are not recomputed: a sample keeps the running balance
        accumulated from all earlier bands, including those before the window.
        Accounts without samples inside the window are dropped.
        """
        if window is None:
            return self

        histories = {}
        for account_id, samples in self.histories.items():
            visible = tuple(s for s in samples if window.contains(s.day))
            if visible:
                histories[account_id] = visible

        return replace(
            self,
            bands=tuple(b for b in self.bands if window.contains(b.day)),
            histories=histories,
        )


@dataclass(frozen=True)
class FilterCriteria:
    """Narrowing criteria applied before any aggregation.

    Attributes:
        amount_range: Inclusive (min, max) on each transaction amount
        flow_range: Inclusive (min, max) on the total volume moved between the
            transaction's unordered account pair
        active_accounts: If non-empty, keep only transactions touching one
    """

    amount_range: Optional[AmountRange] = None
    flow_range: Optional[AmountRange] = None
    active_accounts: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return (
            self.amount_range is None
            and self.flow_range is None
            and not self.active_accounts
        )


@dataclass(frozen=True)
class ViewState:
    """Everything the caller has chosen for one recomputation.

    A new ViewState is derived for every user action; the engine never holds
    view state of its own.
    """

    filters: FilterCriteria = field(default_factory=FilterCriteria)
    root_account: Optional[str] = None
    window: Optional[DayWindow] = None

    def with_filters(self, **changes) -> "ViewState":
        """Return a copy with some FilterCriteria fields replaced."""
        return replace(self, filters=replace(self.filters, **changes))

    def with_root(self, root_account: Optional[str]) -> "ViewState":
        return replace(self, root_account=root_account)

    def with_window(self, window: Optional[DayWindow]) -> "ViewState":
        return replace(self, window=window)

    def with_active_account(self, account_id: str) -> "ViewState":
        """Return a copy with one more account in the active set."""
        active = self.filters.active_accounts | {account_id}
        return self.with_filters(active_accounts=frozenset(active))
