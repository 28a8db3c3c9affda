"""
AuctionLedger
"""
from auction_ledger.commands.cancel_auction import CancelAuction
from auction_ledger.commands.close_auction import CloseAuction
from auction_ledger.commands.create_auction import CreateAuction, CreateAuctionArgs
from auction_ledger.commands.place_bid import PlaceBid, PlaceBidArgs
from auction_ledger.commands.queries.get_auction import GetAuction
from auction_ledger.commands.queries.get_next_auction_id import GetNextAuctionId
from auction_ledger.domain.auction import AuctionId, Auction
from auction_ledger.model import Address
from auction_ledger.protocols.caller_identity import CallerIdentity
from auction_ledger.protocols.store import Store


class AuctionLedger:
    """
    Owns the auction records and enforces the auction lifecycle:

        OPEN --close_auction--> CLOSED (winner selected)
        OPEN --cancel_auction--> CLOSED (seller only, no winner)

    Notes
    -----
    - The store is the single source of truth. Nothing is cached.
    - Each operation reads the record, then writes back a replacement record. There is no locking.
      Concurrent requests on the same auction can overwrite each other's changes.
    """

    def __init__(self, store: Store, caller_identity: CallerIdentity):
        self._create_auction = CreateAuction(store, caller_identity)
        self._place_bid = PlaceBid(store, caller_identity)
        self._close_auction = CloseAuction(store, caller_identity)
        self._cancel_auction = CancelAuction(store, caller_identity)
        self._get_auction = GetAuction(store)
        self._get_next_auction_id = GetNextAuctionId(store)

    def create_auction(self, item: str, min_bid: int) -> AuctionId:
        """
        :return: AuctionId assigned to the new auction
        """
        return self._create_auction(CreateAuctionArgs(item=item, min_bid=min_bid))

    def place_bid(self, auction_id: AuctionId, amount: int):
        """
        :exception AuctionNotFoundError:
        :exception InvalidAuctionStateError:
        :exception InvalidBidError:
        """
        self._place_bid(PlaceBidArgs(auction_id=auction_id, amount=amount))

    def close_auction(self, auction_id: AuctionId) -> Address | None:
        """
        :return: winning bidder, or None if there is no winner
        :exception AuctionNotFoundError:
        :exception InvalidAuctionStateError:
        """
        return self._close_auction(auction_id)

    def cancel_auction(self, auction_id: AuctionId):
        """
        :exception AuctionNotFoundError:
        :exception InvalidAuctionStateError:
        :exception UnauthorizedError:
        """
        self._cancel_auction(auction_id)

    def get_auction(self, auction_id: AuctionId) -> Auction | None:
        return self._get_auction(auction_id)

    def next_auction_id(self) -> AuctionId:
        return self._get_next_auction_id()
