"""
Auction ledger errors

Errors are raised before anything is written to the store, i.e., a failed operation leaves the auction unchanged.
"""

from auction_ledger.domain.auction import AuctionId, AuctionStatus
from auction_ledger.model import Address


class AuctionLedgerError(Exception):
    """
    AuctionLedger base exception
    """

    def __init__(self, auction_id: AuctionId, message: str):
        super().__init__(message)
        self.auction_id = auction_id


class AuctionNotFoundError(AuctionLedgerError):
    """
    Auction does not exist
    """

    def __init__(self, auction_id: AuctionId):
        super().__init__(auction_id, f"auction does not exist: auction_id={auction_id}")


class InvalidAuctionStateError(AuctionLedgerError):
    """
    Operation is not valid for the auction's current status, i.e., the auction is closed
    """

    def __init__(self, auction_id: AuctionId, status: AuctionStatus):
        super().__init__(
            auction_id,
            f"auction is not open: auction_id={auction_id} status={status.name}",
        )
        self.status = status


class InvalidBidError(AuctionLedgerError):
    """
    Bid amount must be greater than the auction's minimum bid
    """

    def __init__(self, auction_id: AuctionId, amount: int, min_bid: int):
        super().__init__(
            auction_id,
            "bid amount must be greater than the minimum bid: "
            f"auction_id={auction_id} amount={amount} min_bid={min_bid}",
        )
        self.amount = amount
        self.min_bid = min_bid


class UnauthorizedError(AuctionLedgerError):
    """
    Only the seller can cancel the auction
    """

    def __init__(self, auction_id: AuctionId, caller: Address):
        super().__init__(
            auction_id,
            "only the seller can cancel the auction: "
            f"auction_id={auction_id} caller={caller}",
        )
        self.caller = caller
