"""
Store Protocol
"""
from typing import Protocol

# the ledger uses a single str key for its AuctionId counter and AuctionId keys for auction records
StoreKey = str | int


class Store(Protocol):
    """
    Key-value store that holds all ledger state.

    Only single-key atomicity is assumed. The ledger reads and then writes records without any locking,
    which means concurrent requests against the same key can overwrite each other (last write wins).
    """

    def get(self, key: StoreKey) -> bytes | None:
        """
        :return: None if the key does not exist
        """
        ...

    def set(self, key: StoreKey, value: bytes) -> None:
        """
        Inserts or replaces the value stored under the key.
        """
        ...
