from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "attendance_tracker"
    charset: str = "utf8mb4"
    connection_timeout: int = 10

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "DBConfig":
        """Build from a settings ``DB_CONFIG`` dict; unknown keys are ignored."""
        raw = dict(raw or {})
        base = cls()
        return cls(
            host=str(raw.get("host") or base.host),
            port=int(raw.get("port") or base.port),
            user=str(raw.get("user") or base.user),
            password=str(raw.get("password", base.password) or ""),
            database=str(raw.get("database") or base.database),
            charset=str(raw.get("charset") or base.charset),
            connection_timeout=int(raw.get("connection_timeout") or base.connection_timeout),
        )

    def connect_kwargs(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "database": self.database,
            "charset": self.charset,
            "connection_timeout": self.connection_timeout,
        }


def as_db_config(db_config: Optional[Mapping[str, Any]]) -> DBConfig:
    return DBConfig.from_mapping(db_config)


class DatabaseConnection:
    """Process-wide connection factory.

    Each store call opens a short-lived connection; ``db_cursor`` closes it.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        # A changed config replaces the cached factory.
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def connect(self):
        return mysql.connector.connect(**self._config.connect_kwargs())
