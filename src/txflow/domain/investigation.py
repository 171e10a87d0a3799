"""Investigation service tying the store, filters and builders together."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from txflow.config import EngineConfig
from txflow.domain.entities import FlowView, Transaction, TreeNode, ViewState
from txflow.domain.filters import FilterPipeline
from txflow.domain.flow import TemporalFlowAggregator
from txflow.domain.store import TransactionStore
from txflow.domain.tree import DirectionalTreeBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvestigationSnapshot:
    """Everything the rendering layer needs for one ViewState.

    Aggregates share the store's Transaction objects, so their is_flagged
    values are read live and follow later flag toggles. Filtering, tree shape
    and bands are fixed at the time the snapshot was taken.

    Attributes:
        view_state: State the snapshot was computed for
        transactions: Filtered transactions, in load order
        tree: Two-sided tree for the selected root, or None without a root
        flow: Flow view restricted to the visible day window
        full_flow: Flow view over every filtered day
    """

    view_state: ViewState
    transactions: tuple[Transaction, ...] = ()
    tree: Optional[TreeNode] = None
    flow: FlowView = field(default_factory=FlowView)
    full_flow: FlowView = field(default_factory=FlowView)

    @property
    def is_empty(self) -> bool:
        return not self.transactions


class InvestigationService:
    """Service recomputing every derived view from an explicit ViewState.

    Nothing is cached between calls: after a flag toggle or any view change
    the caller requests a new snapshot.
    """

    def __init__(self, store: TransactionStore, config: Optional[EngineConfig] = None):
        """Initialize investigation service.

        Args:
            store: TransactionStore instance
            config: Engine limits. Defaults to EngineConfig()
        """
        self.store = store
        self.config = config or EngineConfig()
        self.filters = FilterPipeline()
        self.tree_builder = DirectionalTreeBuilder(self.config, store.account_name)
        self.flow_aggregator = TemporalFlowAggregator(self.config)

    def filtered_transactions(self, view_state: ViewState) -> list[Transaction]:
        return self.filters.apply(self.store.all_transactions(), view_state.filters)

    def build_tree(self, view_state: ViewState) -> Optional[TreeNode]:
        """Build the tree for the view's root account, or None without one."""
        if view_state.root_account is None:
            return None
        return self.tree_builder.build(
            self.filtered_transactions(view_state), view_state.root_account
        )

    def build_flow(self, view_state: ViewState) -> FlowView:
        """Build the flow view restricted to the view's day window."""
        full = self.flow_aggregator.aggregate(self.filtered_transactions(view_state))
        return full.restrict(view_state.window)

    def snapshot(self, view_state: ViewState) -> InvestigationSnapshot:
        """Recompute every derived view for a ViewState."""
        transactions = self.filtered_transactions(view_state)

        tree = None
        if view_state.root_account is not None:
            tree = self.tree_builder.build(transactions, view_state.root_account)

        full_flow = self.flow_aggregator.aggregate(transactions)
        logger.debug(
            "Snapshot: %d transactions, %d bands, root=%s",
            len(transactions),
            len(full_flow.bands),
            view_state.root_account,
        )
        return InvestigationSnapshot(
            view_state=view_state,
            transactions=tuple(transactions),
            tree=tree,
            flow=full_flow.restrict(view_state.window),
            full_flow=full_flow,
        )

    def toggle_flag(self, transaction_id: str) -> bool:
        """Flip a transaction's flag. Snapshots must be recomputed afterwards."""
        return self.store.toggle_flag(transaction_id)

    def reset_flags(self) -> int:
        return self.store.reset_flags()
