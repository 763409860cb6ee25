"""Optional persistence of :class:`MySQLConfig` outside the environment.

``ConfigStore`` describes the contract; no file format is defined yet, so the
only shipped store refuses every call.
"""
from __future__ import annotations

from typing import Protocol

from .mysql_config import MySQLConfig, NotImplementedConfigError


class ConfigStore(Protocol):
    """Persistence interface for connection configurations.

    Inputs:
        path: filesystem location of the stored configuration
    Outputs:
        load returns a populated MySQLConfig; save returns nothing
    """

    def load(self, path: str) -> MySQLConfig:  # pragma: no cover - interface
        ...

    def save(self, config: MySQLConfig, path: str) -> None:  # pragma: no cover - interface
        ...


class UnimplementedConfigStore:
    """Store used until a file format is chosen; every call fails."""

    def load(self, path: str) -> MySQLConfig:
        raise NotImplementedConfigError()

    def save(self, config: MySQLConfig, path: str) -> None:
        raise NotImplementedConfigError()


DEFAULT_CONFIG_STORE: ConfigStore = UnimplementedConfigStore()
