"""Orderbook description: denominations and tick pointers."""

from __future__ import annotations

from dataclasses import dataclass

from .order import OrderDirection


class InvalidPairError(ValueError):
    """The token pair does not belong to the orderbook."""

    def __init__(self, token_in_denom: str, token_out_denom: str) -> None:
        super().__init__(
            f"Invalid pair: token in {token_in_denom!r}, token out {token_out_denom!r}"
        )
        self.token_in_denom = token_in_denom
        self.token_out_denom = token_out_denom


@dataclass
class Orderbook:
    """Denominations of a book and its current, next bid and next ask ticks."""

    quote_denom: str
    base_denom: str
    current_tick: int
    next_bid_tick: int
    next_ask_tick: int

    def get_expected_denom(self, order_direction: OrderDirection) -> str:
        """Denomination an order of the given direction pays in."""
        return self.quote_denom if order_direction is OrderDirection.BID else self.base_denom

    def get_opposite_denom(self, order_direction: OrderDirection) -> str:
        """Denomination an order of the given direction receives."""
        return self.base_denom if order_direction is OrderDirection.BID else self.quote_denom

    def direction_from_pair(self, token_in_denom: str, token_out_denom: str) -> OrderDirection:
        """Order direction for a swap from token_in to token_out."""
        pair = (token_in_denom, token_out_denom)
        if pair == (self.base_denom, self.quote_denom):
            return OrderDirection.ASK
        if pair == (self.quote_denom, self.base_denom):
            return OrderDirection.BID
        raise InvalidPairError(token_in_denom, token_out_denom)