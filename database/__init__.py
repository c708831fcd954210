"""Database package: engine, session management, models and repositories."""
from database.base import Base, engine, async_session_maker, get_db, DBSession, init_db, close_db

__all__ = [
    "Base",
    "engine",
    "async_session_maker",
    "get_db",
    "DBSession",
    "init_db",
    "close_db",
]
