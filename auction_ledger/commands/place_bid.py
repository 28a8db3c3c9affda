"""
Places a bid on an auction
"""
from dataclasses import dataclass

from auction_ledger.commands import LedgerSupport
from auction_ledger.core.command import Command
from auction_ledger.domain.auction import AuctionId, Bid
from auction_ledger.errors import InvalidBidError


@dataclass(slots=True, frozen=True)
class PlaceBidArgs:
    """
    PlaceBid args
    """

    auction_id: AuctionId
    amount: int


class PlaceBid(Command[PlaceBidArgs, None], LedgerSupport):
    """
    Appends the caller's bid to the auction.

    The bid amount is only checked against the auction's minimum bid. It is not checked against previous bids,
    i.e., a bid that is lower than the current highest bid is accepted as long as it is above the minimum bid.
    The winner is determined when the auction is closed.

    :exception AuctionNotFoundError: if the auction does not exist
    :exception InvalidAuctionStateError: if the auction is not open
    :exception InvalidBidError: if amount <= min_bid
    """

    def __call__(self, args: PlaceBidArgs) -> None:
        auction = self._get_open_auction(args.auction_id)
        if args.amount <= auction.min_bid:
            self.get_logger().debug(
                "bid rejected: auction_id=%s amount=%s min_bid=%s",
                args.auction_id,
                args.amount,
                auction.min_bid,
            )
            raise InvalidBidError(args.auction_id, args.amount, auction.min_bid)

        bid = Bid(bidder=self._caller_identity.caller, amount=args.amount)
        self._put_auction(args.auction_id, auction.with_bid(bid))

        self.get_logger().info(
            "bid placed: auction_id=%s bidder=%s amount=%s",
            args.auction_id,
            bid.bidder,
            bid.amount,
        )
