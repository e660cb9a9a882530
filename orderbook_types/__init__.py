"""Value types for a tick-based limit orderbook: coins, orders, orderbook pairs, reply ids and tick state."""

__version__ = "0.1.0"
__all__ = ["coin", "order", "orderbook", "reply_id", "tick"]