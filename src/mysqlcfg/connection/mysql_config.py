"""Connection configuration for a MySQL server sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Optional

from sqlalchemy.engine import URL

from .pool import open_pool

if TYPE_CHECKING:  # pragma: no cover
    from sqlalchemy.engine import Engine

    from .persistence import ConfigStore

# Names of the environment variables holding the credentials.
MYSQL_USERNAME_VARIABLE = "MYSQL_USERNAME"
MYSQL_PASSWORD_VARIABLE = "MYSQL_PASSWORD"

DEFAULT_MYSQL_HOST = "localhost"
# MySQL X Protocol port; classic-protocol servers listen on 3306.
DEFAULT_MYSQL_PORT = "33060"

MYSQL_DRIVER_NAME = "mysql+mysqlconnector"


class MissingCredentialError(ValueError):
    """Raised when a required credential environment variable is unset or empty."""

    def __init__(self, variable: str, description: str) -> None:
        self.variable = variable
        super().__init__(
            f"environment variable {variable} for MySQL {description} not found"
        )


class NotImplementedConfigError(NotImplementedError):
    """Raised by configuration persistence that has no file format yet."""

    def __init__(self, message: str = "not implemented") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class MySQLConfig:
    """Credentials and network location of a MySQL server.

    Parameters
    ----------
    username:
        Username used to authenticate with the server.
    password:
        Password used to authenticate with the server. Never shown in ``repr``.
    host:
        Hostname or IP address of the server. Defaults to ``localhost``.
    port:
        TCP port of the server, kept as text. Defaults to ``33060``.
    logging:
        When ``True`` engines opened from this configuration echo their SQL
        through the ``sqlalchemy.engine`` logger.
    """

    username: str
    password: str = field(repr=False)
    host: str = DEFAULT_MYSQL_HOST
    port: str = DEFAULT_MYSQL_PORT
    logging: bool = False

    def __post_init__(self) -> None:
        if not self.username:
            raise MissingCredentialError(MYSQL_USERNAME_VARIABLE, "username")
        if not self.password:
            raise MissingCredentialError(MYSQL_PASSWORD_VARIABLE, "password")
        # Empty overrides fall back to the defaults so host/port are never blank.
        if not self.host:
            object.__setattr__(self, "host", DEFAULT_MYSQL_HOST)
        if not self.port:
            object.__setattr__(self, "port", DEFAULT_MYSQL_PORT)
        else:
            object.__setattr__(self, "port", str(self.port))

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        host: Optional[str] = None,
        port: Optional[str] = None,
        logging: bool = False,
    ) -> "MySQLConfig":
        """Build a configuration object from the credential environment variables.

        Parameters
        ----------
        environ:
            Mapping to read the variables from. Defaults to ``os.environ``;
            tests pass a plain ``dict`` instead.
        host, port:
            Optional explicit network location. The environment is never
            consulted for these; ``None`` or ``""`` selects the defaults.
        logging:
            Enables SQL echo on engines opened from the configuration.

        Raises
        ------
        MissingCredentialError
            If ``MYSQL_USERNAME`` or ``MYSQL_PASSWORD`` is unset or empty.
        """

        source = os.environ if environ is None else environ

        username = source.get(MYSQL_USERNAME_VARIABLE)
        if not username:
            raise MissingCredentialError(MYSQL_USERNAME_VARIABLE, "username")
        password = source.get(MYSQL_PASSWORD_VARIABLE)
        if not password:
            raise MissingCredentialError(MYSQL_PASSWORD_VARIABLE, "password")

        return cls(
            username=username,
            password=password,
            host=host or DEFAULT_MYSQL_HOST,
            port=port or DEFAULT_MYSQL_PORT,
            logging=logging,
        )

    def auth(self) -> str:
        """Return the ``username:password`` part of the descriptor."""

        return f"{self.username}:{self.password}"

    def dsn(self, database: str = "", *, mask_password: bool = False) -> str:
        """Return the connection descriptor including a database name.

        Using ``""`` for the database name describes a server-level connection
        that can list and choose between databases. Values are inserted as-is;
        credentials containing ``@``, ``:`` or ``/`` produce an ambiguous string.
        """

        password = "***" if mask_password else self.password
        return f"{self.username}:{password}@tcp({self.host}:{self.port}/{database})"

    def url(self, database: str = "") -> URL:
        """Return the SQLAlchemy URL carrying the same fields as :meth:`dsn`."""

        return URL.create(
            drivername=MYSQL_DRIVER_NAME,
            username=self.username,
            password=self.password,
            host=self.host,
            port=int(self.port),
            database=database or None,
        )

    def open(self, database: str = "") -> "Engine":
        """Open a pooled engine for ``database``.

        The engine is safe for concurrent use and keeps its own pool of idle
        connections, so open it once per database and reuse it. Opening does
        not contact the server; use :func:`mysqlcfg.connection.pool.ping` to
        verify reachability.

        Driver errors from ``create_engine`` are raised unchanged. A non-numeric
        ``port`` fails earlier with ``ValueError`` while the URL is built, before
        the driver is called.
        """

        return open_pool(self, database)

    @classmethod
    def load(cls, path: str, store: Optional["ConfigStore"] = None) -> "MySQLConfig":
        """Load a configuration from ``path`` through ``store``.

        The default store has no file format and always raises
        :class:`NotImplementedConfigError`.
        """

        from .persistence import DEFAULT_CONFIG_STORE

        return (store or DEFAULT_CONFIG_STORE).load(path)

    def save(self, path: str, store: Optional["ConfigStore"] = None) -> None:
        """Persist this configuration to ``path`` through ``store``.

        The default store has no file format and always raises
        :class:`NotImplementedConfigError`.
        """

        from .persistence import DEFAULT_CONFIG_STORE

        (store or DEFAULT_CONFIG_STORE).save(self, path)
