import datetime
from dataclasses import dataclass
from typing import Any, Mapping
from uuid import uuid4

from sqlalchemy.orm import Mapped, mapped_column

from models.models import Base, StrPk, UserId
from utils.exceptions import BirthdayDecodeError


def new_birthday_id() -> str:
    return str(uuid4())


class Birthday(Base):
    __tablename__ = "birthdays"
    id: Mapped[StrPk] = mapped_column(init=False, insert_default=new_birthday_id)
    name: Mapped[str]
    date: Mapped[datetime.date]
    user_id: Mapped[UserId]


@dataclass(frozen=True)
class NewBirthday:
    """A birthday that has not been stored yet, so has no id"""

    name: str
    date: datetime.date
    user_id: str


@dataclass(frozen=True)
class BirthdayRecord:
    id: str
    name: str
    date: datetime.date
    user_id: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "BirthdayRecord":
        """
        Build a record from a backend row, checking every column is present and
        of the expected type rather than trusting the row's shape.
        """
        values = {}
        for column, expected in (
            ("id", str),
            ("name", str),
            ("date", datetime.date),
            ("user_id", str),
        ):
            if column not in row:
                raise BirthdayDecodeError(column, "missing from row")
            value = row[column]
            if value is None:
                raise BirthdayDecodeError(column, "is null")
            # datetime is a subclass of date but carries a time we never store
            if not isinstance(value, expected) or (
                expected is datetime.date and isinstance(value, datetime.datetime)
            ):
                raise BirthdayDecodeError(
                    column, f"expected {expected.__name__}, got {type(value).__name__}"
                )
            values[column] = value
        return cls(**values)


@dataclass(frozen=True)
class BirthdayList:
    birthdays: tuple[BirthdayRecord, ...]
