"""
Cancels an auction
"""
from auction_ledger.commands import LedgerSupport
from auction_ledger.core.command import Command
from auction_ledger.domain.auction import AuctionId
from auction_ledger.errors import UnauthorizedError


class CancelAuction(Command[AuctionId, None], LedgerSupport):
    """
    Closes the auction without selecting a winner. Only the seller can cancel the auction.

    :exception AuctionNotFoundError: if the auction does not exist
    :exception InvalidAuctionStateError: if the auction is not open
    :exception UnauthorizedError: if the caller is not the seller
    """

    def __call__(self, auction_id: AuctionId) -> None:
        auction = self._get_open_auction(auction_id)
        caller = self._caller_identity.caller
        if caller != auction.seller:
            self.get_logger().debug(
                "cancel rejected: auction_id=%s caller=%s", auction_id, caller
            )
            raise UnauthorizedError(auction_id, caller)

        self._put_auction(auction_id, auction.close())
        self.get_logger().info("auction cancelled: auction_id=%s", auction_id)
