"""Identifiers for replies to sub-messages."""

from enum import IntEnum


class ReplyId(IntEnum):
    """Reply identifiers used when dispatching sub-messages."""

    REFUND = 1
    CLAIM = 2
    CLAIM_BOUNTY = 3
    MAKER_FEE = 4
    SUDO_SWAP_EXACT_IN = 5