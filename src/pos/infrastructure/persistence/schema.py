"""Relational schema and the Store that owns the engine.

Three tables: ``products``, ``sales`` and ``sale_items``, the last one
pointing at the other two.  Prices and totals are NUMERIC with two
decimal places; sale dates are ISO-8601 text in UTC.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from pos.domain.exceptions import StorageInitError

logger = logging.getLogger(__name__)

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("code", String, nullable=False, unique=True),
    Column("description", String, nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
)

sales = Table(
    "sales",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("code", String, nullable=False, unique=True),
    Column("date", String, nullable=False),
    Column("total", Numeric(12, 2), nullable=False),
)

sale_items = Table(
    "sale_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("sale_id", Integer, ForeignKey("sales.id"), nullable=False),
    Column("product_id", Integer, ForeignKey("products.id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    """Owns the engine, the schema and the single-writer lock.

    Every unit of work handed out by ``unit_of_work()`` holds ``lock``
    for its whole lifetime, so transactions never interleave.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = make_url(url)
        self.lock = threading.RLock()
        self.engine = self._create_engine(echo)

    def _create_engine(self, echo: bool) -> Engine:
        kwargs: dict = {"echo": echo}
        is_sqlite = self.url.get_backend_name() == "sqlite"
        if is_sqlite and self.url.database in (None, "", ":memory:"):
            # One shared connection, otherwise each checkout would see a
            # brand-new empty in-memory database.
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}

        engine = create_engine(self.url, **kwargs)
        if is_sqlite:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    def initialize(self) -> None:
        """Create any missing tables. Safe to call on every start-up."""
        try:
            self._ensure_directory()
            with self.lock:
                metadata.create_all(self.engine, checkfirst=True)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Could not initialize store at %s: %s", self._safe_url, exc)
            raise StorageInitError(f"Could not initialize store: {exc}") from exc
        logger.info("Store ready at %s", self._safe_url)

    def unit_of_work(self):
        from pos.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork

        return SqlUnitOfWork(self)

    def dispose(self) -> None:
        self.engine.dispose()

    # --- Helpers --------------------------------------------------------------

    @property
    def _safe_url(self) -> str:
        return self.url.render_as_string(hide_password=True)

    def _ensure_directory(self) -> None:
        if self.url.get_backend_name() != "sqlite":
            return
        database = self.url.database
        if database and database != ":memory:" and not database.startswith("file:"):
            Path(database).parent.mkdir(parents=True, exist_ok=True)
