"""
Creates a new auction
"""
from dataclasses import dataclass

from auction_ledger.commands import LedgerSupport
from auction_ledger.core.command import Command
from auction_ledger.domain.auction import Auction, AuctionId


@dataclass(slots=True, frozen=True)
class CreateAuctionArgs:
    """
    CreateAuction args
    """

    item: str
    min_bid: int


class CreateAuction(Command[CreateAuctionArgs, AuctionId], LedgerSupport):
    """
    Creates an OPEN auction with no bids. The caller is the seller.

    The auction is stored under the next AuctionId, and then the AuctionId counter is incremented.
    Args are not validated.
    """

    def __call__(self, args: CreateAuctionArgs) -> AuctionId:
        auction_id = self._get_next_auction_id()
        auction = Auction(
            seller=self._caller_identity.caller,
            item=args.item,
            min_bid=args.min_bid,
        )
        self._put_auction(auction_id, auction)
        self._put_next_auction_id(AuctionId(auction_id + 1))

        self.get_logger().info(
            "auction created: auction_id=%s seller=%s item=%r min_bid=%s",
            auction_id,
            auction.seller,
            auction.item,
            auction.min_bid,
        )
        return auction_id
