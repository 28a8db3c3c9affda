"""
SQLAlchemy backed key-value Store
"""
from typing import cast

import msgpack  # type: ignore
from sqlalchemy import create_engine
from sqlalchemy.orm import Mapped, mapped_column, sessionmaker

from auction_ledger.data import Base
from auction_ledger.protocols.store import StoreKey


class TStoreEntry(Base):
    """
    Store entry database table model
    """

    __tablename__ = "store_entry"

    # msgpack encoded StoreKey
    key: Mapped[bytes] = mapped_column(primary_key=True)
    value: Mapped[bytes] = mapped_column()


def encode_key(key: StoreKey) -> bytes:
    """
    Keys are msgpack encoded, which keeps str and int keys distinct, e.g., "0" != 0
    """
    return msgpack.packb(key)


def create_session_factory(url: str, echo: bool = False) -> sessionmaker:
    """
    Creates the database engine and the store tables, if they do not already exist.
    """
    engine = create_engine(url, echo=echo)
    Base.metadata.create_all(engine)
    return sessionmaker(engine)


class SqlAlchemyStore:
    """
    Each get and set runs within its own database transaction.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: StoreKey) -> bytes | None:
        with self._session_factory() as session:
            entry: TStoreEntry | None = session.get(TStoreEntry, encode_key(key))
            if entry is None:
                return None
            return entry.value

    def set(self, key: StoreKey, value: bytes) -> None:
        encoded_key = encode_key(key)
        with self._session_factory.begin() as session:
            entry: TStoreEntry | None = session.get(TStoreEntry, encoded_key)
            if entry:
                entry.value = cast(Mapped[bytes], value)
            else:
                session.add(
                    TStoreEntry(
                        key=cast(Mapped[bytes], encoded_key),
                        value=cast(Mapped[bytes], value),
                    )
                )
