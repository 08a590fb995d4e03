"""Per-invocation state shared by every CLI command."""

from __future__ import annotations

import click

from pos.domain.exceptions import StorageInitError
from pos.domain.repository.unit_of_work import UnitOfWork
from pos.infrastructure.bootstrap import open_store, unit_of_work
from pos.infrastructure.persistence.schema import Store
from pos.infrastructure.settings import Settings


class CliContext:
    """Opens the store on first use and hands out units of work.

    A store that cannot be initialized is fatal: the command stops with
    the error instead of running without storage.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._store: Store | None = None

    def ensure_open(self) -> Store:
        if self._store is None:
            try:
                self._store = open_store(self.settings)
            except StorageInitError as exc:
                raise click.ClickException(str(exc))
        return self._store

    @property
    def store(self) -> Store:
        return self.ensure_open()

    def uow(self) -> UnitOfWork:
        return unit_of_work(self.store)

    def close(self) -> None:
        if self._store is not None:
            self._store.dispose()
            self._store = None
