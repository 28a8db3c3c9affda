import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from sqlalchemy.orm import close_all_sessions

from auction_ledger.config import LedgerConfig
from auction_ledger.core.health_check import HealthCheckStatus
from auction_ledger.domain.auction import AuctionStatus
from auction_ledger.errors import InvalidBidError, UnauthorizedError
from auction_ledger.shell.app import App, CallerNotLoggedIn
from tests.test_support import LedgerTestCase, generate_address


class AppTestCase(LedgerTestCase):
    def tearDown(self) -> None:
        close_all_sessions()

    def test_app(self):
        app = App(LedgerConfig())
        seller = generate_address()
        bidder = generate_address()

        with self.subTest("caller must be logged in"):
            self.assertIsNone(app.caller)
            with self.assertRaises(CallerNotLoggedIn):
                app.create_auction("Vase", 100)

        with self.subTest("caller must be a valid address"):
            with self.assertRaises(ValueError):
                app.login("seller")
            self.assertIsNone(app.caller)

        with self.subTest("auction lifecycle"):
            app.login(seller)
            self.assertEqual(seller, app.caller)
            auction_id = app.create_auction("Vase", 100)

            app.login(bidder)
            with self.assertRaises(InvalidBidError):
                app.place_bid(auction_id, 100)
            app.place_bid(auction_id, 150)
            with self.assertRaises(UnauthorizedError):
                app.cancel_auction(auction_id)
            self.assertEqual(bidder, app.close_auction(auction_id))

            auction = app.get_auction(auction_id)
            self.assertEqual(seller, auction.seller)
            self.assertEqual(AuctionStatus.CLOSED, auction.status)
            self.assertEqual(bidder, auction.winner)

        with self.subTest("logout"):
            app.logout()
            self.assertIsNone(app.caller)
            with self.assertRaises(CallerNotLoggedIn):
                app.cancel_auction(auction_id)
            # reads do not require a logged in caller
            self.assertIsNotNone(app.get_auction(auction_id))

        with self.subTest("health check"):
            self.assertEqual(HealthCheckStatus.GREEN, app.health_check().status)

    def test_from_config_file(self):
        seller = generate_address()
        with TemporaryDirectory() as tmp_dir:
            config_file = Path(tmp_dir) / "ledger.toml"
            config_file.write_text(
                f"""
[database]
url = "sqlite:///{Path(tmp_dir) / 'ledger.db'}"

[logging]
level = "DEBUG"
"""
            )

            app = App.from_config_file(config_file)
            app.login(seller)
            self.assertEqual(0, app.create_auction("Vase", 100))
            close_all_sessions()

            # ledger state is persisted in the database
            app = App.from_config_file(config_file)
            app.login(seller)
            self.assertEqual(1, app.create_auction("Lamp", 50))
            self.assertEqual("Vase", app.get_auction(0).item)
            close_all_sessions()


if __name__ == "__main__":
    unittest.main()
