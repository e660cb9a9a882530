from decimal import Decimal

import pytest

from orderbook_types.order import OrderDirection
from orderbook_types.tick import TickState, TickValues


def test_default_values_are_zero():
    values = TickValues()
    assert values.total_amount_of_liquidity == Decimal(0)
    assert values.cumulative_total_value == Decimal(0)
    assert values.effective_total_amount_swapped == Decimal(0)
    assert values.cumulative_realized_cancels == Decimal(0)
    assert values.last_tick_sync_etas == Decimal(0)


def test_default_state_has_default_values():
    state = TickState()
    assert state.ask_values == TickValues()
    assert state.bid_values == TickValues()


@pytest.mark.parametrize("direction", list(OrderDirection))
def test_set_then_get_round_trip(direction):
    state = TickState()
    values = TickValues(total_amount_of_liquidity=Decimal("12.5"))
    state.set_values(direction, values)
    assert state.get_values(direction) == values
    assert state.get_values(direction.opposite()) == TickValues()


def test_set_ask_does_not_touch_bid():
    state = TickState()
    state.set_values(OrderDirection.ASK, TickValues(cumulative_total_value=Decimal(3)))
    assert state.ask_values.cumulative_total_value == Decimal(3)
    assert state.bid_values == TickValues()


def test_get_values_returns_copy():
    state = TickState()
    copy = state.get_values(OrderDirection.BID)
    copy.effective_total_amount_swapped = Decimal(9)
    assert state.bid_values.effective_total_amount_swapped == Decimal(0)


def test_states_do_not_share_defaults():
    first, second = TickState(), TickState()
    first.ask_values.total_amount_of_liquidity = Decimal(1)
    assert second.ask_values.total_amount_of_liquidity == Decimal(0)