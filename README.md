# orderbook_types

Plain Python value types for a limit orderbook whose liquidity is tracked
per price tick. Token amounts are Python integers; decimal quantities such
as ETAS and tick liquidity are `decimal.Decimal`.

## Modules

- `orderbook_types.coin`
  - `Coin256(amount, denom)`: a frozen coin whose amount must be an
    unsigned integer of at most 256 bits. Anything else raises `TypeError`
    or `OverflowError`.
  - `coin_u256(amount, denom)`: shorthand for `Coin256`.
  - `Coin256.to_proto_coin()` returns `{"denom": ..., "amount": "<decimal string>"}`.
  - `Coin256.to_coin()` returns `{"denom": ..., "amount": <int>}`. It raises
    `OverflowError` if the amount does not fit in 128 bits.
  - `MsgSend256(amount, to_address, from_address)`: a bank send message with a
    list of `Coin256`.
    - `to_msg_send()` returns a dict with `from_address`, `to_address` and the
      coins in their proto form.
    - `encode()` returns the protobuf wire bytes of the message.
    - `to_cosmos_msg()` returns
      `{"stargate": {"type_url": "/cosmos.bank.v1beta1.MsgSend", "value": <bytes>}}`.
- `orderbook_types.order`
  - `OrderDirection`: `BID` / `ASK`, with `opposite()`. `str()` gives `"bid"` or `"ask"`.
  - `LimitOrder`: tick, order id, direction, owner, quantity, ETAS, an
    optional claim bounty and `placed_quantity`. `placed_quantity` defaults to
    the quantity. Quantities must fit in 128 unsigned bits.
  - `MarketOrder`, with `MarketOrder.from_limit_order(order)`.
  - `FilterOwnerOrders`: `FilterOwnerOrders.all(owner)` or
    `FilterOwnerOrders.by_tick(tick_id, owner)`.
- `orderbook_types.orderbook`
  - `Orderbook(quote_denom, base_denom, current_tick, next_bid_tick, next_ask_tick)`.
    - `get_expected_denom(direction)` gives the denom an order pays in: quote
      for bids, base for asks.
    - `get_opposite_denom(direction)` gives the denom the order receives.
    - `direction_from_pair(token_in, token_out)` gives the direction of a swap.
      A pair that does not belong to the book raises `InvalidPairError`, a
      `ValueError`.
- `orderbook_types.reply_id`
  - `ReplyId`: an `IntEnum` with `REFUND`, `CLAIM`, `CLAIM_BOUNTY`, `MAKER_FEE`
    and `SUDO_SWAP_EXACT_IN`, numbered 1 to 5.
- `orderbook_types.tick`
  - `TickValues`: total liquidity, cumulative total value, effective total
    amount swapped, cumulative realized cancels and the last sync ETAS. All
    default to zero.
  - `TickState`: holds one `TickValues` for each direction.
    - `get_values(direction)` returns a copy.
    - `set_values(direction, values)` replaces the values.

## Example

```python
from orderbook_types.coin import MsgSend256, coin_u256
from orderbook_types.order import OrderDirection
from orderbook_types.orderbook import Orderbook

book = Orderbook("quote", "base", 0, -1, 1)
assert book.direction_from_pair("base", "quote") is OrderDirection.ASK
assert book.get_expected_denom(OrderDirection.BID) == "quote"

msg = MsgSend256([coin_u256(100, "base")], to_address="receiver", from_address="sender")
assert msg.to_msg_send()["amount"] == [{"denom": "base", "amount": "100"}]
```

## What this package does not do

It only defines the types. The package has no order placement, no matching
engine, no sumtree and no storage. It also has no command-line entry point.

## Tests

```
pip install -e ".[test]"
pytest
```