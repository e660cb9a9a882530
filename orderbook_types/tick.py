"""Per-tick liquidity state for both sides of the book."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from .order import OrderDirection


def _zero() -> Decimal:
    return Decimal(0)


@dataclass
class TickValues:
    """Liquidity accounting for one direction of a tick."""

    # Total amount of liquidity at the tick.
    total_amount_of_liquidity: Decimal = field(default_factory=_zero)
    # Cumulative total value of limits placed at the tick.
    cumulative_total_value: Decimal = field(default_factory=_zero)
    # Effective total amount swapped (ETAS).
    effective_total_amount_swapped: Decimal = field(default_factory=_zero)
    # Cancellations checkpointed on the sumtree.
    cumulative_realized_cancels: Decimal = field(default_factory=_zero)
    # ETAS after the most recent tick sync.
    last_tick_sync_etas: Decimal = field(default_factory=_zero)


@dataclass
class TickState:
    """State of a price tick, split into ask and bid values."""

    ask_values: TickValues = field(default_factory=TickValues)
    bid_values: TickValues = field(default_factory=TickValues)

    def get_values(self, direction: OrderDirection) -> TickValues:
        """A copy of the values for the given direction."""
        values = self.ask_values if direction is OrderDirection.ASK else self.bid_values
        return replace(values)

    def set_values(self, direction: OrderDirection, values: TickValues) -> None:
        """Replace the values for the given direction."""
        if direction is OrderDirection.ASK:
            self.ask_values = values
        else:
            self.bid_values = values