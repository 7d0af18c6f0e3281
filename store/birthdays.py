import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.birthday import Birthday, BirthdayList, BirthdayRecord, NewBirthday
from models.models import Database

BIRTHDAY_COLUMNS = (Birthday.id, Birthday.name, Birthday.date, Birthday.user_id)


async def get_birthdays(user_id: str, session: AsyncSession) -> BirthdayList:
    """All birthdays owned by user_id, in whatever order the backend gives them"""
    try:
        result = await session.execute(
            select(*BIRTHDAY_COLUMNS).where(Birthday.user_id == user_id)
        )
    except SQLAlchemyError as e:
        logging.exception(e)
        raise

    birthdays = tuple(BirthdayRecord.from_row(row) for row in result.mappings())
    logging.debug(f"Found {len(birthdays)} birthdays for user {user_id}")
    return BirthdayList(birthdays=birthdays)


async def add_birthday(birthday: NewBirthday, session: AsyncSession) -> BirthdayRecord:
    """Insert a birthday and return it as the backend stored it"""
    try:
        result = await session.execute(
            insert(Birthday)
            .values(name=birthday.name, date=birthday.date, user_id=birthday.user_id)
            .returning(*BIRTHDAY_COLUMNS)
        )
        row = result.mappings().one()
    except SQLAlchemyError as e:
        logging.exception(e)
        raise

    record = BirthdayRecord.from_row(row)
    logging.info(f"Added birthday {record.id} for user {record.user_id}")
    return record


async def delete_birthday(id: str, session: AsyncSession) -> str | None:
    """
    Delete a birthday by id, whoever owns it.
    Returns the id that was removed, or None if nothing matched.
    """
    try:
        result = await session.execute(
            delete(Birthday).where(Birthday.id == id).returning(Birthday.id)
        )
        deleted = result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logging.exception(e)
        raise

    if deleted is None:
        logging.debug(f"No birthday {id} to delete")
    else:
        logging.info(f"Deleted birthday {deleted}")
    return deleted


class BirthdayStore:
    """Runs each birthday operation in its own session and transaction"""

    def __init__(self, database: Database):
        self.database = database

    async def list(self, user_id: str) -> BirthdayList:
        async with self.database.session() as session, session.begin():
            return await get_birthdays(user_id, session)

    async def create(self, birthday: NewBirthday) -> BirthdayRecord:
        async with self.database.session() as session, session.begin():
            return await add_birthday(birthday, session)

    async def delete(self, id: str) -> str | None:
        async with self.database.session() as session, session.begin():
            return await delete_birthday(id, session)
