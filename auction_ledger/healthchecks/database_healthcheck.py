"""
Ledger database healthcheck
"""
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from auction_ledger.core.health_check import HealthCheck, HealthCheckImpact
from auction_ledger.data.store import TStoreEntry


class DatabaseHealthCheck(HealthCheck):
    """
    Queries the store table
    """

    def __init__(self, session_factory: sessionmaker):
        super().__init__(
            name="ledger_database",
            impact=HealthCheckImpact.HIGH,
            description="Queries the ledger store table",
            tags={"database"},
        )

        self.__session_factory = session_factory

    def execute(self):
        with self.__session_factory() as session:
            session.scalar(select(TStoreEntry).limit(1))
