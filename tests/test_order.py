from decimal import Decimal

import pytest

from orderbook_types.order import FilterOwnerOrders, LimitOrder, MarketOrder, OrderDirection


def _limit(**overrides):
    values = dict(
        tick_id=-5,
        order_id=3,
        order_direction=OrderDirection.ASK,
        owner="owner",
        quantity=100,
        etas=Decimal(0),
    )
    values.update(overrides)
    return LimitOrder(**values)


def test_opposite():
    assert OrderDirection.BID.opposite() is OrderDirection.ASK
    assert OrderDirection.ASK.opposite() is OrderDirection.BID


@pytest.mark.parametrize("value", ["bid", "ask"])
def test_opposite_is_involution(value):
    direction = OrderDirection(value)
    opposite = OrderDirection.opposite(direction)
    assert str(opposite) != value
    assert OrderDirection.opposite(opposite) is direction


def test_direction_strings():
    assert str(OrderDirection.BID) == "bid"
    assert str(OrderDirection.ASK) == "ask"
    assert OrderDirection("ask") is OrderDirection.ASK


def test_limit_order_placed_quantity_defaults_to_quantity():
    order = _limit(quantity=77)
    assert order.placed_quantity == 77
    assert order.claim_bounty is None


def test_limit_order_explicit_placed_quantity():
    assert _limit(quantity=10, placed_quantity=50).placed_quantity == 50


def test_limit_order_rejects_negative_quantity():
    with pytest.raises(OverflowError):
        _limit(quantity=-1)


def test_market_order_from_limit_order():
    order = _limit(quantity=9, order_direction=OrderDirection.BID, owner="alice")
    market = MarketOrder.from_limit_order(order)
    assert market == MarketOrder(quantity=9, order_direction=OrderDirection.BID, owner="alice")


def test_filter_all():
    f = FilterOwnerOrders.all("bob")
    assert f.owner == "bob"
    assert f.tick_id is None


def test_filter_by_tick():
    f = FilterOwnerOrders.by_tick(-3, "bob")
    assert (f.tick_id, f.owner) == (-3, "bob")
    assert f != FilterOwnerOrders.all("bob")