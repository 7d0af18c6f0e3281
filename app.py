#!/usr/bin/env python3
import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from config import Config
from models import Database
from store import BirthdayStore

LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


def setup_logging(config: Config):
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE))

    logging.basicConfig(
        level=logging.getLevelName(config.LOG_LEVEL),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    if config.SQL_LOGGING:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


@asynccontextmanager
async def open_store(config: Config) -> AsyncIterator[BirthdayStore]:
    """Bring the database up, hand out a store, and always tear it down again"""
    database = Database(config.DATABASE_CONNECTION)
    try:
        await database.init()
        yield BirthdayStore(database)
    finally:
        await database.close()


async def main(config_path: str = "config.yaml"):
    config = Config(config_path)
    setup_logging(config)

    async with open_store(config):
        logging.info("Birthday store initialised")


if __name__ == "__main__":
    asyncio.run(main(*sys.argv[1:2]))
