"""Shared fixtures: an in-memory SQLite database built from the ORM metadata."""
import uuid

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from contactdb.models import Base, CustomerContact


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest_asyncio.fixture
async def make_contact(session):
    """Factory that persists a CustomerContact and returns it."""

    async def _make(customer_id=None, full_name="Jane Doe", **kwargs) -> CustomerContact:
        contact = CustomerContact(
            id=uuid.uuid4(),
            customer_id=customer_id or uuid.uuid4(),
            full_name=full_name,
            **kwargs,
        )
        session.add(contact)
        await session.flush()
        return contact

    return _make
