import sys
import os
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure project root is on sys.path so `import core` works
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from database.base import Base
from database.models import Appointment
from core.dto import AppointmentDTO


# In-memory SQLite shared across one engine's connections
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    """Create async engine for tests."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
def session_maker(async_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def appointment_date() -> datetime:
    return datetime(2026, 3, 10, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def appointment_dto(appointment_date) -> AppointmentDTO:
    """Transfer object for a typical cleaning visit."""
    return AppointmentDTO(
        date=appointment_date,
        patient_name="John Doe",
        dentist="Dr. Smith",
        procedure="Cleaning",
    )


@pytest_asyncio.fixture
async def sample_appointment(db_session: AsyncSession, appointment_date) -> Appointment:
    """Create sample appointment for tests."""
    appointment = Appointment(
        date=appointment_date,
        patient_name="John Doe",
        dentist="Dr. Smith",
        procedure="Cleaning",
    )
    db_session.add(appointment)
    await db_session.commit()
    await db_session.refresh(appointment)
    return appointment
