"""SQL implementation of UnitOfWork.

Entering opens a connection from the Store and begins a transaction
while holding the Store's lock; leaving rolls back anything not yet
committed, closes the connection and releases the lock.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.engine import Connection, Transaction
from sqlalchemy.exc import SQLAlchemyError

from pos.domain.exceptions import StorageError
from pos.domain.repository.unit_of_work import UnitOfWork
from pos.infrastructure.persistence.sql_product_repository import SqlProductRepository
from pos.infrastructure.persistence.sql_sale_repository import SqlSaleRepository

if TYPE_CHECKING:
    from pos.infrastructure.persistence.schema import Store

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, store: Store) -> None:
        self._store = store
        self._connection: Connection | None = None
        self._transaction: Transaction | None = None

    def __enter__(self) -> SqlUnitOfWork:
        self._store.lock.acquire()
        try:
            self._connection = self._store.engine.connect()
            self._transaction = self._connection.begin()
        except SQLAlchemyError as exc:
            self._close()
            logger.error("Could not open a transaction: %s", exc)
            raise StorageError(f"Could not open a transaction: {exc}") from exc

        self.products = SqlProductRepository(self._connection)
        self.sales = SqlSaleRepository(self._connection)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._close()

    def commit(self) -> None:
        if self._transaction is None or not self._transaction.is_active:
            raise StorageError("No active transaction to commit")
        try:
            self._transaction.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed: %s", exc)
            raise StorageError(f"Could not commit: {exc}") from exc

    def rollback(self) -> None:
        if self._transaction is not None and self._transaction.is_active:
            try:
                self._transaction.rollback()
            except SQLAlchemyError as exc:
                logger.error("Rollback failed: %s", exc)
                raise StorageError(f"Could not roll back: {exc}") from exc

    def _close(self) -> None:
        try:
            if self._connection is not None:
                self._connection.close()
        finally:
            self._connection = None
            self._transaction = None
            self._store.lock.release()
