"""
Auction ledger shell app
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from auction_ledger.config import LedgerConfig
from auction_ledger.core.health_check import HealthCheckResult
from auction_ledger.core.logging import configure_logging
from auction_ledger.data.store import SqlAlchemyStore, create_session_factory
from auction_ledger.domain.auction import AuctionId, Auction
from auction_ledger.healthchecks.database_healthcheck import DatabaseHealthCheck
from auction_ledger.identity import RequestCallerIdentity
from auction_ledger.ledger import AuctionLedger
from auction_ledger.model import Address, to_address


class CallerNotLoggedIn(Exception):
    """
    Ledger requests that change state require a logged in caller
    """

    def __init__(self):
        super().__init__("caller is not logged in")


class App:
    """
    Auction ledger shell app

    The logged in caller's address is bound as the caller identity for each ledger request.
    """

    def __init__(self, config: LedgerConfig):
        configure_logging(level=config.log_level)

        self.config = config
        self.session_factory = create_session_factory(config.database_url)
        self.caller_identity = RequestCallerIdentity()
        self.ledger = AuctionLedger(
            SqlAlchemyStore(self.session_factory),
            self.caller_identity,
        )
        self.database_healthcheck = DatabaseHealthCheck(self.session_factory)
        self._caller: Address | None = None

    @classmethod
    def from_config_file(cls, file: Path) -> "App":
        """
        Constructs a new app instance from the specified TOML config file
        """
        return cls(LedgerConfig.from_config_file(file))

    def login(self, caller: str):
        """
        :exception ValueError: if caller is not a valid Algorand address
        """
        self._caller = to_address(caller)

    def logout(self):
        self._caller = None

    @property
    def caller(self) -> Address | None:
        """
        :return: logged in caller
        """
        return self._caller

    @contextmanager
    def _request(self) -> Iterator[None]:
        if self._caller is None:
            raise CallerNotLoggedIn
        with self.caller_identity.bind(self._caller):
            yield

    def create_auction(self, item: str, min_bid: int) -> AuctionId:
        with self._request():
            return self.ledger.create_auction(item, min_bid)

    def place_bid(self, auction_id: AuctionId, amount: int):
        with self._request():
            self.ledger.place_bid(auction_id, amount)

    def close_auction(self, auction_id: AuctionId) -> Address | None:
        with self._request():
            return self.ledger.close_auction(auction_id)

    def cancel_auction(self, auction_id: AuctionId):
        with self._request():
            self.ledger.cancel_auction(auction_id)

    def get_auction(self, auction_id: AuctionId) -> Auction | None:
        return self.ledger.get_auction(auction_id)

    def health_check(self) -> HealthCheckResult:
        return self.database_healthcheck()
