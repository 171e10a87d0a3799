"""Domain layer for txflow.

Services live in their own modules (store, filters, tree, flow,
investigation); this package exports the shared entities and errors.
"""

from txflow.domain.entities import (
    Account,
    AccountBalanceSample,
    DayWindow,
    FilterCriteria,
    FlowBand,
    FlowView,
    Transaction,
    TreeDirection,
    TreeNode,
    ViewState,
)
from txflow.domain.errors import (
    ConfigurationError,
    ConflictError,
    DomainError,
    MalformedDateError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "Account",
    "AccountBalanceSample",
    "DayWindow",
    "FilterCriteria",
    "FlowBand",
    "FlowView",
    "Transaction",
    "TreeDirection",
    "TreeNode",
    "ViewState",
    "ConfigurationError",
    "ConflictError",
    "DomainError",
    "MalformedDateError",
    "NotFoundError",
    "ValidationError",
]
