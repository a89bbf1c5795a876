"""记录存储测试

MemoryRecordStore 与 ORMRecordStore 的查询语义应当一致。
"""

from dataclasses import dataclass
from typing import Optional

import pytest
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sortkit.orm import CoreModel
from sortkit.sortable import (
    InvalidArgumentError,
    MemoryRecordStore,
    OrderBy,
    OrderFilter,
    ORMRecordStore,
    RecordNotFoundError,
    SortableConfigError,
)


@dataclass
class Item:
    id: int
    order_column: Optional[int] = None


class StoreCard(CoreModel):
    """普通模型（不带 SortableMixin），只用于存储测试"""
    __tablename__ = "test_store_card"

    name: Mapped[str] = mapped_column(String(50))
    order_column: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


VALUES = [(1, 30), (2, 10), (3, 20), (4, None)]


@pytest.fixture
def memory_store():
    return MemoryRecordStore([Item(pk, value) for pk, value in VALUES])


@pytest.fixture
def orm_store(db_session):
    for pk, value in VALUES:
        db_session.add(StoreCard(id=pk, name=f"card{pk}", order_column=value))
    db_session.commit()
    return ORMRecordStore(StoreCard, db_session)


@pytest.fixture(params=["memory", "orm"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


class TestOrderFilter:
    """过滤条件测试"""

    def test_unknown_operator(self):
        with pytest.raises(InvalidArgumentError):
            OrderFilter("order_column", "between", 1)

    def test_matches_skips_none(self):
        assert OrderFilter("order_column", "lt", 5).matches(Item(1, 3)) is True
        assert OrderFilter("order_column", "lt", 5).matches(Item(1, None)) is False


class TestStoreContract:
    """两种存储共同的行为"""

    def test_max_min(self, store):
        assert store.max("order_column") == 30
        assert store.min("order_column") == 10

    def test_find(self, store):
        assert store.find(3).order_column == 20

    def test_find_missing(self, store):
        with pytest.raises(RecordNotFoundError) as exc_info:
            store.find(404)
        assert exc_info.value.record_id == 404

    def test_query_filter_order_limit(self, store):
        found = store.query(
            where=OrderFilter("order_column", "gt", 10),
            order_by=OrderBy("order_column"),
        )
        assert [r.id for r in found] == [3, 1]

        found = store.query(
            where=OrderFilter("order_column", "lt", 30),
            order_by=OrderBy("order_column", descending=True),
            limit=1,
        )
        assert [r.id for r in found] == [3]

    def test_query_filter_ge_le_eq(self, store):
        assert {r.id for r in store.query(where=OrderFilter("order_column", "ge", 20))} == {1, 3}
        assert {r.id for r in store.query(where=OrderFilter("order_column", "le", 20))} == {2, 3}
        assert [r.id for r in store.query(where=OrderFilter("order_column", "eq", 10))] == [2]

    def test_query_nulls_first_ascending(self, store):
        found = store.query(order_by=OrderBy("order_column"))
        assert [r.id for r in found] == [4, 2, 3, 1]

    @pytest.mark.parametrize("descending, expected", [(False, [4, 1, 2, 3]), (True, [3, 2, 1, 4])])
    def test_query_ties_ordered_by_id(self, store, descending, expected):
        record = store.find(1)
        record.order_column = 10
        store.save(record)

        found = store.query(order_by=OrderBy("order_column", descending=descending))

        assert [r.id for r in found] == expected

    def test_save_persists_change(self, store):
        record = store.find(2)
        record.order_column = 99
        store.save(record)

        assert store.max("order_column") == 99


class TestEmptyStores:
    """空表测试"""

    def test_memory_empty_aggregates(self):
        store = MemoryRecordStore()
        assert store.max("order_column") == 0
        assert store.min("order_column") == 0
        assert store.query(limit=1) == []

    def test_orm_empty_aggregates(self, db_session):
        store = ORMRecordStore(StoreCard, db_session)
        assert store.max("order_column") == 0
        assert store.query(order_by=OrderBy("order_column"), limit=1) == []


class TestMemoryRecordStore:
    """内存存储特有行为"""

    def test_save_requires_id(self):
        with pytest.raises(ValueError):
            MemoryRecordStore().save(Item(None, 1))

    def test_len_and_all(self, memory_store):
        assert len(memory_store) == 4
        assert [r.id for r in memory_store.all()] == [1, 2, 3, 4]


class TestORMRecordStore:
    """SQLAlchemy 存储特有行为"""

    def test_unknown_column(self, orm_store):
        with pytest.raises(SortableConfigError):
            orm_store.max("nope")

    def test_non_column_attribute_rejected(self, orm_store):
        with pytest.raises(SortableConfigError):
            orm_store.column("query")

    def test_save_flushes_without_commit(self, orm_store, db_session):
        record = orm_store.find(1)
        record.order_column = 5
        orm_store.save(record)

        db_session.rollback()
        assert orm_store.find(1).order_column == 30

    def test_save_with_commit(self, orm_store, db_session):
        orm_store.commit = True
        record = orm_store.find(1)
        record.order_column = 5
        orm_store.save(record)

        db_session.rollback()
        assert orm_store.find(1).order_column == 5

    def test_atomic_restores_commit_flag(self, orm_store):
        orm_store.commit = True
        with orm_store.atomic():
            assert orm_store.commit is False
        assert orm_store.commit is True

    def test_atomic_reraises_and_rolls_back(self, orm_store):
        with pytest.raises(RuntimeError):
            with orm_store.atomic():
                record = orm_store.find(2)
                record.order_column = 1000
                orm_store.save(record)
                raise RuntimeError("boom")

        assert orm_store.max("order_column") == 30
