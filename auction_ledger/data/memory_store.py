"""
In-memory Store
"""
from auction_ledger.protocols.store import StoreKey


class InMemoryStore:
    """
    dict backed Store, used for embedding the ledger and for testing
    """

    def __init__(self):
        self._entries: dict[StoreKey, bytes] = {}

    def get(self, key: StoreKey) -> bytes | None:
        return self._entries.get(key)

    def set(self, key: StoreKey, value: bytes) -> None:
        self._entries[key] = value

    def __contains__(self, key: StoreKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
