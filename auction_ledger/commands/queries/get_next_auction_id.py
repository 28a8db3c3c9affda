"""
Provides query to retrieve the next AuctionId
"""
from auction_ledger.commands import StoreSupport
from auction_ledger.domain.auction import AuctionId


class GetNextAuctionId(StoreSupport):
    """
    Returns the AuctionId that will be assigned to the next auction that is created.
    All AuctionIds below it have been assigned.
    """

    def __call__(self) -> AuctionId:
        return self._get_next_auction_id()
