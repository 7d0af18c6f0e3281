from utils.exceptions import BirthdayDecodeError

__all__ = ["BirthdayDecodeError"]
