from models.birthday import Birthday, BirthdayList, BirthdayRecord, NewBirthday
from models.models import Base, Database

__all__ = [
    "Base",
    "Birthday",
    "BirthdayList",
    "BirthdayRecord",
    "Database",
    "NewBirthday",
]
