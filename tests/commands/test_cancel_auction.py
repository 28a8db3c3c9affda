import unittest

from auction_ledger.commands.cancel_auction import CancelAuction
from auction_ledger.commands.close_auction import CloseAuction
from auction_ledger.commands.create_auction import CreateAuction, CreateAuctionArgs
from auction_ledger.commands.place_bid import PlaceBid, PlaceBidArgs
from auction_ledger.domain.auction import Auction, AuctionId, AuctionStatus
from auction_ledger.errors import (
    AuctionNotFoundError,
    InvalidAuctionStateError,
    UnauthorizedError,
)
from auction_ledger.identity import RequestCallerIdentity
from tests.test_support import LedgerTestCase, RecordingStore, generate_address


class CancelAuctionTestCase(LedgerTestCase):
    def setUp(self) -> None:
        self.store = RecordingStore()
        self.identity = RequestCallerIdentity()
        self.cancel_auction = CancelAuction(self.store, self.identity)

        self.seller = generate_address()
        with self.identity.bind(self.seller):
            self.auction_id = CreateAuction(self.store, self.identity)(
                CreateAuctionArgs(item="Lamp", min_bid=50)
            )
        self.store.writes.clear()

    def get_auction(self) -> Auction:
        return Auction.unpack(self.store.get(self.auction_id))

    def test_cancel_auction(self):
        bidder = generate_address()
        with self.identity.bind(bidder):
            PlaceBid(self.store, self.identity)(PlaceBidArgs(self.auction_id, 75))

        with self.identity.bind(self.seller):
            self.cancel_auction(self.auction_id)

        auction = self.get_auction()
        self.assertEqual(AuctionStatus.CLOSED, auction.status)
        # no winner is selected when the auction is cancelled
        self.assertIsNone(auction.winner)

    def test_caller_is_not_the_seller(self):
        caller = generate_address()
        with self.identity.bind(caller):
            with self.assertRaises(UnauthorizedError) as err:
                self.cancel_auction(self.auction_id)
        self.assertEqual(caller, err.exception.caller)
        self.assertEqual(AuctionStatus.OPEN, self.get_auction().status)
        self.assertEqual([], self.store.writes)

    def test_auction_closed(self):
        with self.identity.bind(self.seller):
            CloseAuction(self.store, self.identity)(self.auction_id)
        self.store.writes.clear()

        with self.identity.bind(self.seller):
            with self.assertRaises(InvalidAuctionStateError):
                self.cancel_auction(self.auction_id)

        with self.subTest("state is checked before the caller"):
            with self.identity.bind(generate_address()):
                with self.assertRaises(InvalidAuctionStateError):
                    self.cancel_auction(self.auction_id)

        self.assertEqual([], self.store.writes)

    def test_auction_not_found(self):
        with self.identity.bind(self.seller):
            with self.assertRaises(AuctionNotFoundError):
                self.cancel_auction(AuctionId(42))
        self.assertEqual([], self.store.writes)


if __name__ == "__main__":
    unittest.main()
