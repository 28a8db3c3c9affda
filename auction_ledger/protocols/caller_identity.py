"""
CallerIdentity Protocol
"""
from typing import Protocol

from auction_ledger.model import Address


class CallerIdentity(Protocol):
    """
    Resolves the party that is making the current request.
    """

    @property
    def caller(self) -> Address:
        """
        :return: address of the account making the current request
        """
        ...
