"""
Ledger commands

Ledger state is kept in the store under two kinds of keys:

- NEXT_AUCTION_ID_KEY -> msgpack encoded int, the AuctionId that will be assigned to the next auction
- AuctionId -> msgpack encoded Auction
"""
from typing import Final

import msgpack  # type: ignore

from auction_ledger.domain.auction import Auction, AuctionId, pack_int, ext_hook
from auction_ledger.errors import AuctionNotFoundError, InvalidAuctionStateError
from auction_ledger.protocols.caller_identity import CallerIdentity
from auction_ledger.protocols.store import Store

NEXT_AUCTION_ID_KEY: Final[str] = "auction_id"


class StoreSupport:
    """
    Reads and writes ledger records
    """

    def __init__(self, store: Store):
        self._store = store

    def _get_auction(self, auction_id: AuctionId) -> Auction | None:
        packed = self._store.get(auction_id)
        if packed is None:
            return None
        return Auction.unpack(packed)

    def _put_auction(self, auction_id: AuctionId, auction: Auction):
        self._store.set(auction_id, auction.pack())

    def _get_next_auction_id(self) -> AuctionId:
        packed = self._store.get(NEXT_AUCTION_ID_KEY)
        if packed is None:
            return AuctionId(0)
        return AuctionId(msgpack.unpackb(packed, ext_hook=ext_hook))

    def _put_next_auction_id(self, auction_id: AuctionId):
        self._store.set(NEXT_AUCTION_ID_KEY, msgpack.packb(pack_int(auction_id)))


class LedgerSupport(StoreSupport):
    """
    Adds caller identity to StoreSupport
    """

    def __init__(self, store: Store, caller_identity: CallerIdentity):
        super().__init__(store)
        self._caller_identity = caller_identity

    def _get_open_auction(self, auction_id: AuctionId) -> Auction:
        """
        :exception AuctionNotFoundError: if the auction does not exist
        :exception InvalidAuctionStateError: if the auction is not open
        """
        auction = self._get_auction(auction_id)
        if auction is None:
            raise AuctionNotFoundError(auction_id)
        if not auction.is_open:
            raise InvalidAuctionStateError(auction_id, auction.status)
        return auction
