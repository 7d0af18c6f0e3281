from store.birthdays import (
    BirthdayStore,
    add_birthday,
    delete_birthday,
    get_birthdays,
)

__all__ = ["BirthdayStore", "add_birthday", "delete_birthday", "get_birthdays"]
