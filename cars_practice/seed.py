"""Seed sample passages: `python -m cars_practice.seed`."""
import asyncio

from cars_practice.core.logging import configure_logging
from cars_practice.db.base import Base
from cars_practice.db.session import AsyncSessionLocal, engine
from cars_practice.services.seeding import seed_passages


async def main() -> int:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as db:
        created = await seed_passages(db)
    await engine.dispose()
    return created


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
