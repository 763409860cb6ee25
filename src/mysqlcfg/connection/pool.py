"""Pooled engine helpers for MySQL connections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

if TYPE_CHECKING:  # pragma: no cover
    from .mysql_config import MySQLConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolPolicy:
    """Limits applied to every pooled engine.

    ``max_open`` bounds checked-out plus idle connections and ``max_idle``
    bounds the connections kept in the pool between checkouts. SQLAlchemy
    expresses these as ``pool_size`` plus ``max_overflow``.
    """

    max_lifetime_seconds: int = 180
    max_open: int = 10
    max_idle: int = 10

    def as_engine_kwargs(self) -> Dict[str, object]:
        """Return keyword arguments compatible with ``sqlalchemy.create_engine``."""

        return {
            "pool_recycle": self.max_lifetime_seconds,
            "pool_size": min(self.max_idle, self.max_open),
            "max_overflow": max(self.max_open - self.max_idle, 0),
        }


DEFAULT_POOL_POLICY = PoolPolicy()


def open_pool(config: "MySQLConfig", database: str = "") -> Engine:
    """Create an engine for ``database`` with :data:`DEFAULT_POOL_POLICY` applied.

    ``create_engine`` validates the URL and loads the ``mysql.connector``
    driver but does not connect; its errors are raised unchanged.
    """

    policy = DEFAULT_POOL_POLICY
    logger.info(
        "Opening MySQL pool %s (lifetime=%ss, max_open=%s, max_idle=%s)",
        config.dsn(database, mask_password=True),
        policy.max_lifetime_seconds,
        policy.max_open,
        policy.max_idle,
    )
    return create_engine(
        config.url(database),
        echo=config.logging,
        **policy.as_engine_kwargs(),
    )


def ping(engine: Engine) -> None:
    """Check out one connection from ``engine`` and run ``SELECT 1``."""

    logger.debug("Pinging %s", engine.url.render_as_string(hide_password=True))
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
