"""mysqlcfg - MySQL connection configuration.

Reads credentials from the environment, builds connection descriptors and
opens pooled SQLAlchemy engines backed by mysql-connector-python.
"""

__version__ = "0.1.0"
__author__ = "mysqlcfg Contributors"

from mysqlcfg.connection.mysql_config import (
    MissingCredentialError,
    MySQLConfig,
    NotImplementedConfigError,
)
from mysqlcfg.connection.pool import DEFAULT_POOL_POLICY, PoolPolicy, ping

__all__ = [
    "MySQLConfig",
    "MissingCredentialError",
    "NotImplementedConfigError",
    "PoolPolicy",
    "DEFAULT_POOL_POLICY",
    "ping",
]
