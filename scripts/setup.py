#!/usr/bin/env python3
"""Setup script for the hotel booking API: migrate and seed sample data."""

import asyncio
import logging
import sys
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command
from alembic.config import Config

from hotel_booking.core.database import async_session_factory, close_db
from hotel_booking.seed import DEMO_USER_EMAIL, seed_sample_data

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def setup_database() -> None:
    """Run Alembic migrations up to head."""
    logger.info("Running database migrations...")

    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(server_dir / "db" / "alembic"))
    command.upgrade(alembic_cfg, "head")

    logger.info("Database migrations completed")


async def create_sample_data() -> None:
    """Create hotels, rooms, ticket types and a demo user for local testing."""
    logger.info("Creating sample data...")

    try:
        async with async_session_factory() as db:
            token = await seed_sample_data(db)
    finally:
        await close_db()

    if token:
        logger.info(f"Demo user {DEMO_USER_EMAIL} can book with: Authorization: Bearer {token}")


def main() -> None:
    """Main setup function."""
    logger.info("Starting hotel booking API setup...")

    setup_database()
    asyncio.run(create_sample_data())

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn hotel_booking.main:app --reload")


if __name__ == "__main__":
    main()
