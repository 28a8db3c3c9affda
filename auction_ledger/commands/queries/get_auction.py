"""
Retrieves an Auction from the store
"""
from auction_ledger.commands import StoreSupport
from auction_ledger.domain.auction import AuctionId, Auction


class GetAuction(StoreSupport):
    """
    Retrieves Auction from the store by its AuctionId
    """

    def __call__(self, auction_id: AuctionId) -> Auction | None:
        return self._get_auction(auction_id)
