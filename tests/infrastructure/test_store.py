"""Tests for the Store: schema creation, foreign keys and the unit of work."""

import threading

import pytest
from sqlalchemy import inspect, select, text

from pos.domain.exceptions import StorageError, StorageInitError
from pos.domain.model.product import Product
from pos.infrastructure.persistence.schema import Store, products


class TestInitialize:

    def test_creates_all_tables(self, store):
        names = set(inspect(store.engine).get_table_names())
        assert {"products", "sales", "sale_items"} <= names

    def test_is_idempotent(self, store):
        with store.unit_of_work() as uow:
            uow.products.add(Product.create("A1", "Widget", "10"))
            uow.commit()

        store.initialize()
        store.initialize()

        with store.unit_of_work() as uow:
            assert [p.code for p in uow.products.list_all()] == ["A1"]

    def test_creates_missing_directory(self, tmp_path):
        db_file = tmp_path / "nested" / "dir" / "pos.db"
        s = Store(f"sqlite:///{db_file}")
        s.initialize()
        s.dispose()
        assert db_file.exists()

    def test_unopenable_storage_raises_init_error(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        s = Store(f"sqlite:///{blocker / 'pos.db'}")
        with pytest.raises(StorageInitError):
            s.initialize()

    def test_init_error_is_a_storage_error(self):
        assert issubclass(StorageInitError, StorageError)

    def test_in_memory_database_is_shared_between_units_of_work(self):
        s = Store("sqlite://")
        s.initialize()
        with s.unit_of_work() as uow:
            uow.products.add(Product.create("A1", "Widget", "10"))
            uow.commit()
        with s.unit_of_work() as uow:
            assert uow.products.get_by_code("A1") is not None
        s.dispose()

    def test_foreign_keys_are_enforced(self, store):
        with store.engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


class TestUnitOfWork:

    def test_uncommitted_writes_are_rolled_back(self, store):
        with store.unit_of_work() as uow:
            uow.products.add(Product.create("A1", "Widget", "10"))

        with store.unit_of_work() as uow:
            assert uow.products.list_all() == []

    def test_exception_rolls_back(self, store):
        with pytest.raises(RuntimeError):
            with store.unit_of_work() as uow:
                uow.products.add(Product.create("A1", "Widget", "10"))
                raise RuntimeError("boom")

        with store.engine.connect() as conn:
            assert conn.execute(select(products)).all() == []

    def test_commit_outside_transaction_fails(self, store):
        uow = store.unit_of_work()
        with pytest.raises(StorageError):
            uow.commit()

    def test_lock_is_released_after_exit(self, store):
        with store.unit_of_work():
            pass
        acquired = store.lock.acquire(blocking=False)
        assert acquired
        store.lock.release()

    def test_units_of_work_are_serialized(self, store):
        other_entered = threading.Event()

        def other():
            with store.unit_of_work():
                other_entered.set()

        with store.unit_of_work():
            worker = threading.Thread(target=other)
            worker.start()
            # The second unit of work must wait for this one to finish.
            assert not other_entered.wait(timeout=0.2)

        worker.join(timeout=5)
        assert other_entered.is_set()
