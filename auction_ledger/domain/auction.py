"""
Auction domain model
"""

from dataclasses import dataclass, replace
from enum import IntEnum, auto
from typing import NewType, Any, Final

import msgpack  # type: ignore

from auction_ledger.model import Address

# assigned by the ledger, starting at 0, never reused
AuctionId = NewType("AuctionId", int)

# msgpack ext type for integers outside the range msgpack encodes natively: [-2**63, 2**64)
BIG_INT_EXT_TYPE: Final[int] = 1


def pack_int(value: int) -> int | msgpack.ExtType:
    """
    Integers that msgpack cannot encode are packed as signed big-endian bytes
    """
    if -(2**63) <= value < 2**64:
        return value
    return msgpack.ExtType(
        BIG_INT_EXT_TYPE,
        value.to_bytes((value.bit_length() + 8) // 8, "big", signed=True),
    )


def ext_hook(code: int, data: bytes) -> Any:
    """
    msgpack unpack hook for :func:`pack_int`
    """
    if code == BIG_INT_EXT_TYPE:
        return int.from_bytes(data, "big", signed=True)
    return msgpack.ExtType(code, data)


class AuctionStatus(IntEnum):
    """
    When an auction is created, it starts out in the `OPEN` state.

    - Bids are only accepted while the auction is `OPEN`.
    - Closing the auction selects the winner. Anyone may close an auction.
    - Cancelling the auction does not select a winner. Only the seller may cancel an auction.
    - Either way the auction ends up `CLOSED`, which is terminal.
    """

    OPEN = auto()
    CLOSED = auto()

    def __repr__(self) -> str:
        return f"{self.name}({self.value})"


@dataclass(slots=True, frozen=True)
class Bid:
    """
    Bid
    """

    bidder: Address
    amount: int


@dataclass(slots=True, frozen=True)
class Auction:
    """
    Auction record

    Records are immutable. Changes are made by deriving a new record, which is then written back to the store
    in place of the old one.
    """

    seller: Address
    item: str
    min_bid: int

    # arrival order
    bids: tuple[Bid, ...] = ()
    status: AuctionStatus = AuctionStatus.OPEN

    # set when the auction is closed, if any bid is above zero
    winner: Address | None = None

    @property
    def is_open(self) -> bool:
        return self.status == AuctionStatus.OPEN

    def highest_bid(self) -> Bid | None:
        """
        Scans the bids in arrival order.
        A later bid replaces the current highest bid only if its amount is strictly greater,
        i.e., ties are won by the earliest bid.

        :return: None if there are no bids with an amount greater than zero
        """
        highest: Bid | None = None
        highest_amount = 0
        for bid in self.bids:
            if bid.amount > highest_amount:
                highest_amount = bid.amount
                highest = bid
        return highest

    def with_bid(self, bid: Bid) -> "Auction":
        return replace(self, bids=self.bids + (bid,))

    def close(self, winner: Address | None = None) -> "Auction":
        return replace(self, status=AuctionStatus.CLOSED, winner=winner)

    def pack(self) -> bytes:
        """
        Serializes the auction using msgpack
        """
        return msgpack.packb(
            (
                self.seller,
                self.item,
                pack_int(self.min_bid),
                [(bid.bidder, pack_int(bid.amount)) for bid in self.bids],
                self.status.value,
                self.winner,
            )
        )

    @classmethod
    def unpack(cls, packed: bytes) -> "Auction":
        """
        deserializes the auction
        """
        (seller, item, min_bid, bids, status, winner) = msgpack.unpackb(
            packed, use_list=False, ext_hook=ext_hook
        )
        return cls(
            seller=Address(seller),
            item=item,
            min_bid=min_bid,
            bids=tuple(Bid(Address(bidder), amount) for bidder, amount in bids),
            status=AuctionStatus(status),
            winner=None if winner is None else Address(winner),
        )
