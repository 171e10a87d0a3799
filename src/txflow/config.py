"""Engine configuration.

Limits and policies are validated once, when an EngineConfig is constructed,
so the aggregation functions themselves never have to reject a call.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from txflow.domain.errors import ConfigurationError, non_positive_limit

DEFAULT_MAX_DEPTH = 8
DEFAULT_MAX_CHILDREN_PER_NODE = 12
DEFAULT_DATE_PADDING_DAYS = 2


class TieBreak(Enum):
    """Ordering of counterparties whose aggregate values are equal."""

    FIRST_SEEN = "first-seen"
    TRANSACTION_COUNT = "transaction-count"


@dataclass(frozen=True)
class EngineConfig:
    """Limits and policies shared by the tree and flow builders.

    Attributes:
        max_depth: Maximum number of edges on any root-to-leaf tree path
        max_children_per_node: Maximum fan-out kept per tree node
        tie_break: How counterparties with equal value are ordered
        self_transfers_in_root: Whether the synthetic tree root counts
            transactions whose source and destination are both the root
        date_padding_days: Days added on each side of the default day window
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_children_per_node: int = DEFAULT_MAX_CHILDREN_PER_NODE
    tie_break: TieBreak = TieBreak.FIRST_SEEN
    self_transfers_in_root: bool = True
    date_padding_days: int = DEFAULT_DATE_PADDING_DAYS

    def __post_init__(self):
        for name in ("max_depth", "max_children_per_node"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(non_positive_limit(name, value))
        if not isinstance(self.tie_break, TieBreak):
            raise ConfigurationError(f"tie_break must be a TieBreak, got {self.tie_break!r}")
        if not isinstance(self.date_padding_days, int) or self.date_padding_days < 0:
            raise ConfigurationError(
                f"date_padding_days must be zero or positive, got {self.date_padding_days!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a configuration from TXFLOW_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ

        Returns:
            EngineConfig with defaults for every unset variable

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        for env_name, field_name in (
            ("TXFLOW_MAX_DEPTH", "max_depth"),
            ("TXFLOW_MAX_CHILDREN", "max_children_per_node"),
            ("TXFLOW_DATE_PADDING_DAYS", "date_padding_days"),
        ):
            raw = environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                kwargs[field_name] = int(raw)
            except ValueError:
                raise ConfigurationError(f"{env_name} must be an integer, got '{raw}'")

        tie_break = environ.get("TXFLOW_TIE_BREAK")
        if tie_break:
            kwargs["tie_break"] = parse_tie_break(tie_break)

        return cls(**kwargs)


def parse_tie_break(value: str) -> TieBreak:
    """Parse a tie-break policy name such as 'first-seen'."""
    normalized = value.strip().lower().replace("_", "-")
    for option in TieBreak:
        if option.value == normalized:
            return option
    choices = ", ".join(option.value for option in TieBreak)
    raise ConfigurationError(f"Unknown tie-break '{value}'. Supported: {choices}")
