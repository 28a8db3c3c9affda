"""
CallerIdentity implementations
"""
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from auction_ledger.model import Address


class CallerNotBoundError(Exception):
    """
    The caller was looked up outside of a request scope
    """


@dataclass(slots=True, frozen=True)
class StaticCallerIdentity:
    """
    Every request is made by the same caller.
    """

    address: Address

    @property
    def caller(self) -> Address:
        return self.address


class RequestCallerIdentity:
    """
    The caller is bound for the duration of a request:

    >>> identity = RequestCallerIdentity()
    >>> with identity.bind(Address("seller")):
    ...     identity.caller
    'seller'

    Bindings are tracked per context, i.e., per thread and per asyncio task.
    """

    def __init__(self):
        self._caller: ContextVar[Address | None] = ContextVar(
            f"{self.__class__.__name__}.caller", default=None
        )

    @property
    def caller(self) -> Address:
        """
        :exception CallerNotBoundError: if no caller is bound to the current context
        """
        caller = self._caller.get()
        if caller is None:
            raise CallerNotBoundError
        return caller

    @contextmanager
    def bind(self, caller: Address) -> Iterator[None]:
        token = self._caller.set(caller)
        try:
            yield
        finally:
            self._caller.reset(token)
