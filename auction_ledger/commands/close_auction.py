"""
Closes an auction and selects the winner
"""
from auction_ledger.commands import LedgerSupport
from auction_ledger.core.command import Command
from auction_ledger.domain.auction import AuctionId
from auction_ledger.model import Address


class CloseAuction(Command[AuctionId, Address | None], LedgerSupport):
    """
    Closes the auction. Any caller may close an auction.

    The winner is the bidder with the highest bid. If more than one bid has the highest amount,
    then the earliest of those bids wins. The closed auction is stored with its winner.

    :return: None if the auction has no bids above zero
    :exception AuctionNotFoundError: if the auction does not exist
    :exception InvalidAuctionStateError: if the auction is not open
    """

    def __call__(self, auction_id: AuctionId) -> Address | None:
        auction = self._get_open_auction(auction_id)
        highest_bid = auction.highest_bid()
        winner = highest_bid.bidder if highest_bid else None
        self._put_auction(auction_id, auction.close(winner))

        self.get_logger().info(
            "auction closed: auction_id=%s winner=%s highest_bid=%s",
            auction_id,
            winner,
            highest_bid.amount if highest_bid else None,
        )
        return winner
