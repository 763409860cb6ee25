"""Settings for the mysqlcfg command-line tool."""

from .schema import LoggingConfig, MySQLSettings, MysqlcfgConfig

__all__ = ["LoggingConfig", "MySQLSettings", "MysqlcfgConfig"]
