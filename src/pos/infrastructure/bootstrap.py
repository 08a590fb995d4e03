"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  The CLI asks this
module for a Store once per process and a fresh unit of work per use
case; a register session asks it for its Cart.
"""

from __future__ import annotations

from pos.domain.model.cart import Cart
from pos.domain.repository.unit_of_work import UnitOfWork
from pos.infrastructure.persistence.schema import Store
from pos.infrastructure.settings import Settings, get_settings


def open_store(settings: Settings | None = None) -> Store:
    """Open and initialize the store. Raises StorageInitError on failure."""
    settings = settings or get_settings()
    result = Store(settings.database_url, echo=settings.sql_echo)
    result.initialize()
    return result


def unit_of_work(store: Store) -> UnitOfWork:
    return store.unit_of_work()


def new_cart() -> Cart:
    return Cart()
