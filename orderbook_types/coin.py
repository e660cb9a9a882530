"""Coin and bank-send message types with 256-bit amounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

UINT128_MAX = (1 << 128) - 1
UINT256_MAX = (1 << 256) - 1

MSG_SEND_TYPE_URL = "/cosmos.bank.v1beta1.MsgSend"


def _check_uint256(amount: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
    if not 0 <= amount <= UINT256_MAX:
        raise OverflowError(f"amount {amount} does not fit in 256 unsigned bits")
    return amount


def _varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _length_delimited(field_number: int, payload: bytes) -> bytes:
    """Encode a length-delimited protobuf field; empty payloads are omitted."""
    if not payload:
        return b""
    return _varint((field_number << 3) | 2) + _varint(len(payload)) + payload


def coin_u256(amount: int, denom: str) -> "Coin256":
    """Build a Coin256 from an amount and a denomination."""
    return Coin256(amount=amount, denom=denom)


@dataclass(frozen=True)
class Coin256:
    """A coin whose amount may hold any unsigned 256-bit value."""

    amount: int
    denom: str

    def __post_init__(self) -> None:
        _check_uint256(self.amount)

    def to_proto_coin(self) -> dict[str, str]:
        """Protobuf-style coin: the amount rendered as a decimal string."""
        return {"denom": self.denom, "amount": str(self.amount)}

    def to_coin(self) -> dict[str, Any]:
        """Standard coin with a 128-bit amount; raises OverflowError if it does not fit."""
        if self.amount > UINT128_MAX:
            raise OverflowError(f"amount {self.amount} does not fit in 128 unsigned bits")
        return {"denom": self.denom, "amount": self.amount}

    def _encode(self) -> bytes:
        return _length_delimited(1, self.denom.encode()) + _length_delimited(
            2, str(self.amount).encode()
        )


@dataclass(frozen=True)
class MsgSend256:
    """A bank send message carrying Coin256 amounts."""

    amount: list[Coin256] = field(default_factory=list)
    to_address: str = ""
    from_address: str = ""

    def to_msg_send(self) -> dict[str, Any]:
        """Bank MsgSend with protobuf-style coins."""
        return {
            "from_address": self.from_address,
            "to_address": self.to_address,
            "amount": [coin.to_proto_coin() for coin in self.amount],
        }

    def encode(self) -> bytes:
        """Protobuf wire encoding of the MsgSend."""
        parts = [
            _length_delimited(1, self.from_address.encode()),
            _length_delimited(2, self.to_address.encode()),
        ]
        for coin in self.amount:
            encoded = coin._encode()
            parts.append(_varint((3 << 3) | 2) + _varint(len(encoded)) + encoded)
        return b"".join(parts)

    def to_cosmos_msg(self) -> dict[str, Any]:
        """Stargate message wrapping the encoded MsgSend."""
        return {"stargate": {"type_url": MSG_SEND_TYPE_URL, "value": self.encode()}}