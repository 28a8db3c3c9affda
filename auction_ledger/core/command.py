"""
Provides support for the Command pattern
"""
from abc import ABC, abstractmethod
from logging import Logger
from typing import TypeVar, Generic

from auction_ledger.core.logging import get_logger

Args = TypeVar("Args")

Result = TypeVar("Result")


class Command(Generic[Args, Result], ABC):
    """
    Commands are invoked as functions
    """

    @abstractmethod
    def __call__(self, args: Args) -> Result:
        """
        Executes the command
        """

    def get_logger(self, name: str | None = None) -> Logger:
        """
        Returns a logger named after the command class.
        If `name` is specified, then it is appended as a child logger: `{self.__class__.__name__}.{name}`
        """
        return get_logger(self, name)
