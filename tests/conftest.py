"""Shared fixtures: a users resource, its engine and an in-memory database."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timedelta
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from list_query import FieldWhitelist, ListQueryEngine, SortOrder, SortSpec

FIELD_MAP = {
    "isActive": "is_active",
    "createdAt": "created_at",
    "deletedAt": "deleted_at",
}

ROLES = ("admin", "manager", "viewer")


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str]
    role: Mapped[str]
    is_active: Mapped[bool]
    age: Mapped[int | None]
    created_at: Mapped[datetime]
    deleted_at: Mapped[datetime | None]


def seed_rows() -> list[dict[str, Any]]:
    """25 active users, 5 inactive admins and 2 soft-deleted active admins."""
    start = datetime(2024, 1, 1)
    rows: list[dict[str, Any]] = []
    for i in range(32):
        rows.append(
            {
                "id": i + 1,
                "email": f"user{i:02d}@example.com",
                "role": ROLES[i % 3] if i < 25 else "admin",
                "is_active": i < 25 or i >= 30,
                "age": 20 + i,
                "created_at": start + timedelta(days=i),
                "deleted_at": start + timedelta(days=60) if i >= 30 else None,
            }
        )
    return rows


def make_whitelist() -> FieldWhitelist:
    return FieldWhitelist(
        sort_fields={"email", "createdAt", "age"},
        filter_fields={"email", "role", "isActive", "age", "createdAt", "deletedAt"},
        default_sort=SortSpec("createdAt", SortOrder.DESC),
    )


@pytest.fixture
def whitelist() -> FieldWhitelist:
    return make_whitelist()


@pytest.fixture
def users_engine() -> ListQueryEngine:
    return ListQueryEngine(make_whitelist())


@pytest.fixture()
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(User(**row) for row in seed_rows())
        await session.commit()
    yield factory
    await engine.dispose()
