"""MySQL connection configuration and pooled engine factory."""

from .mysql_config import (
    DEFAULT_MYSQL_HOST,
    DEFAULT_MYSQL_PORT,
    MYSQL_PASSWORD_VARIABLE,
    MYSQL_USERNAME_VARIABLE,
    MissingCredentialError,
    MySQLConfig,
    NotImplementedConfigError,
)
from .persistence import ConfigStore, UnimplementedConfigStore
from .pool import DEFAULT_POOL_POLICY, PoolPolicy, open_pool, ping

__all__ = [
    "MySQLConfig",
    "MissingCredentialError",
    "NotImplementedConfigError",
    "ConfigStore",
    "UnimplementedConfigStore",
    "PoolPolicy",
    "DEFAULT_POOL_POLICY",
    "open_pool",
    "ping",
    "DEFAULT_MYSQL_HOST",
    "DEFAULT_MYSQL_PORT",
    "MYSQL_USERNAME_VARIABLE",
    "MYSQL_PASSWORD_VARIABLE",
]
