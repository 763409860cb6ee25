"""Command-line interface for mysqlcfg."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

import yaml

from mysqlcfg.config.schema import LoggingConfig, MysqlcfgConfig
from mysqlcfg.connection.mysql_config import MySQLConfig
from mysqlcfg.connection.pool import ping


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default.yml"


def main(argv: Optional[list] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if getattr(args, "command", None) not in ("dsn", "ping"):
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        config = _apply_overrides(config, args)

        setup_logging(config.logging)

        mysql_config = _build_mysql_config(config, environ)
        database = config.mysql.database

        if args.command == "dsn":
            print(mysql_config.dsn(database, mask_password=not args.show_password))
            return 0

        engine = mysql_config.open(database)
        try:
            ping(engine)
        finally:
            engine.dispose()
        logger.info("MySQL server at %s:%s is reachable", mysql_config.host, mysql_config.port)
        print("OK")
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="mysqlcfg",
        description="MySQL connection configuration - build descriptors and check connectivity"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    dsn_parser = subparsers.add_parser("dsn", help="Print the connection descriptor")
    _add_connection_arguments(dsn_parser)
    dsn_parser.add_argument(
        "--show-password",
        dest="show_password",
        action="store_true",
        help="Print the password instead of masking it"
    )

    ping_parser = subparsers.add_parser("ping", help="Open a pool and verify the server answers")
    _add_connection_arguments(ping_parser)

    return parser


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--database",
        dest="database",
        help="Database name (empty for a server-level connection)"
    )
    parser.add_argument(
        "--host",
        dest="host",
        help="MySQL server hostname"
    )
    parser.add_argument(
        "--port",
        dest="port",
        help="MySQL server port"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Override the configured logging level"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML settings file (default: built-in settings)"
    )


def load_config(config_path: Optional[Path]) -> MysqlcfgConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file, or None for the packaged defaults

    Returns:
        Loaded MysqlcfgConfig instance

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the config file is invalid YAML
        ValueError: If the config data is invalid
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config_data = yaml.safe_load(f) or {}

    return MysqlcfgConfig(**config_data)


def _apply_overrides(config: MysqlcfgConfig, args: argparse.Namespace) -> MysqlcfgConfig:
    """Apply CLI overrides to a copy of the loaded configuration."""

    updated = config.model_copy(deep=True)

    mysql_settings = updated.mysql
    if getattr(args, "host", None):
        mysql_settings.host = args.host
    if getattr(args, "port", None):
        mysql_settings.port = str(args.port)
    if getattr(args, "database", None) is not None:
        mysql_settings.database = args.database
    if getattr(args, "log_level", None):
        updated.logging.level = args.log_level

    return updated


def setup_logging(logging_config: LoggingConfig) -> Optional[Path]:
    """Configure root logging to stderr and, when configured, a log file."""

    level_value = getattr(logging, logging_config.level.upper(), None)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    handlers = [logging.StreamHandler()]

    log_path = None
    if logging_config.file:
        log_path = Path(logging_config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level_value,
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    return log_path


def _build_mysql_config(
    config: MysqlcfgConfig, environ: Optional[Mapping[str, str]] = None
) -> MySQLConfig:
    """Construct a MySQLConfig from the credential variables and the settings file."""

    settings = config.mysql
    return MySQLConfig.from_env(
        os.environ if environ is None else environ,
        host=settings.host,
        port=settings.port,
        logging=settings.logging,
    )


if __name__ == "__main__":
    sys.exit(main())
