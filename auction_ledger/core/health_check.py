"""
Health Checks
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, UTC
from enum import IntEnum, auto


class HealthCheckStatus(IntEnum):
    """
    HealthCheckStatus
    """

    GREEN = auto()
    # functioning, but needs attention
    YELLOW = auto()
    # unavailable
    RED = auto()


class HealthCheckImpact(IntEnum):
    """
    How much of the ledger is affected when the health check fails.
    """

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class YellowHealthCheck(Exception):
    """
    Indicates HealthCheck is in a YELLOW state
    """


class RedHealthCheck(Exception):
    """
    Indicates HealthCheck is in a RED state
    """


@dataclass(slots=True)
class HealthCheckResult:
    """
    Outcome of a single health check run
    """

    name: str
    status: HealthCheckStatus

    # when the health check was run
    timestamp: datetime
    duration: timedelta

    error: Exception | None = None

    @property
    def healthy(self) -> bool:
        return self.status == HealthCheckStatus.GREEN


@dataclass(slots=True)
class HealthCheck(ABC):
    """
    Runs :meth:`execute` and maps its outcome to a :class:`HealthCheckResult`.

    - returns normally -> GREEN
    - raises YellowHealthCheck -> YELLOW
    - raises anything else -> RED
    """

    name: str

    # used to categorize healthchecks, e.g., database
    tags: set[str]
    description: str

    impact: HealthCheckImpact

    last_result: HealthCheckResult | None = field(default=None, init=False)

    def __call__(self) -> HealthCheckResult:
        start = datetime.now(UTC)
        status = HealthCheckStatus.GREEN
        error: Exception | None = None
        try:
            self.execute()
        except YellowHealthCheck as err:
            status = HealthCheckStatus.YELLOW
            error = err
        except Exception as err:  # pylint: disable=broad-exception-caught
            status = HealthCheckStatus.RED
            error = err

        self.last_result = HealthCheckResult(
            name=self.name,
            status=status,
            timestamp=start,
            duration=datetime.now(UTC) - start,
            error=error,
        )
        return self.last_result

    @abstractmethod
    def execute(self):
        """
        Execute the health check

        :exception YellowHealthCheck: indicates healthcheck current status is `YELLOW`
        :exception RedHealthCheck: indicates healthcheck current status is `RED`
        :exception Exception: any other exception is treated as `RED`
        """
