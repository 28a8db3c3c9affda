"""
Ledger configuration

Configuration is loaded from a TOML file:

.. code-block:: toml

    [database]
    url = "sqlite:///auction-ledger.db"

    [logging]
    level = "INFO"
"""
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

DEFAULT_DATABASE_URL: Final[str] = "sqlite:///:memory:"


@dataclass(slots=True, frozen=True)
class LedgerConfig:
    """
    LedgerConfig
    """

    database_url: str = DEFAULT_DATABASE_URL
    log_level: int = logging.WARNING

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "LedgerConfig":
        """
        :exception ValueError: if the log level is not a standard logging level name
        """
        database_url = config.get("database", {}).get("url", DEFAULT_DATABASE_URL)

        log_level = logging.WARNING
        if level_name := config.get("logging", {}).get("level"):
            levels = logging.getLevelNamesMapping()
            if level_name.upper() not in levels:
                raise ValueError(f"invalid log level: {level_name}")
            log_level = levels[level_name.upper()]

        return cls(database_url=database_url, log_level=log_level)

    @classmethod
    def from_config_file(cls, file: Path) -> "LedgerConfig":
        """
        Loads the config from the specified TOML config file
        """
        with open(file, "rb") as config_file:
            config = tomllib.load(config_file)
        return cls.from_dict(config)

    def to_dict(self) -> dict[str, Any]:
        return {
            "database": {"url": self.database_url},
            "logging": {"level": logging.getLevelName(self.log_level)},
        }
