"""Order directions and order records."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

_UINT128_MAX = (1 << 128) - 1


def _check_uint128(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _UINT128_MAX:
        raise OverflowError(f"{name} {value} does not fit in 128 unsigned bits")


class OrderDirection(Enum):
    """Side of the book an order sits on."""

    BID = "bid"
    ASK = "ask"

    def opposite(self) -> "OrderDirection":
        """The other side of the book."""
        return OrderDirection.ASK if self is OrderDirection.BID else OrderDirection.BID

    def __str__(self) -> str:
        return self.value


@dataclass
class LimitOrder:
    """A resting order at a tick; placed_quantity defaults to the quantity."""

    tick_id: int
    order_id: int
    order_direction: OrderDirection
    owner: str
    quantity: int
    etas: Decimal
    claim_bounty: Optional[Decimal] = None
    placed_quantity: Optional[int] = None

    def __post_init__(self) -> None:
        _check_uint128("quantity", self.quantity)
        if self.placed_quantity is None:
            self.placed_quantity = self.quantity
        else:
            _check_uint128("placed_quantity", self.placed_quantity)


@dataclass
class MarketOrder:
    """An order filled immediately against the book."""

    quantity: int
    order_direction: OrderDirection
    owner: str

    def __post_init__(self) -> None:
        _check_uint128("quantity", self.quantity)

    @classmethod
    def from_limit_order(cls, limit_order: LimitOrder) -> "MarketOrder":
        """Market order with the limit order's quantity, direction and owner."""
        return cls(
            quantity=limit_order.quantity,
            order_direction=limit_order.order_direction,
            owner=limit_order.owner,
        )


@dataclass(frozen=True)
class FilterOwnerOrders:
    """Filter for an owner's orders, optionally narrowed to one tick."""

    owner: str
    tick_id: Optional[int] = None

    @classmethod
    def all(cls, owner: str) -> "FilterOwnerOrders":
        """All orders of the owner."""
        return cls(owner=owner)

    @classmethod
    def by_tick(cls, tick_id: int, owner: str) -> "FilterOwnerOrders":
        """The owner's orders on a single tick."""
        return cls(owner=owner, tick_id=tick_id)