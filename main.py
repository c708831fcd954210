"""Prepare the appointments database: configure logging and create tables."""
import asyncio
import logging

from core.config import settings
from core.logging_config import setup_logging
from database import async_session_maker, init_db, close_db
from database.repositories import AppointmentRepository

logger = logging.getLogger(__name__)


async def main():
    setup_logging()
    logger.info(f"Environment: {settings.environment}")

    await init_db()
    try:
        async with async_session_maker() as session:
            total = await AppointmentRepository(session).count()
        logger.info(f"Database ready, {total} appointments stored")
    finally:
        await close_db()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
