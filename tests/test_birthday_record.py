from datetime import date, datetime

import pytest

from models import BirthdayRecord
from utils import BirthdayDecodeError

GOOD_ROW = {"id": "b1", "name": "Ada", "date": date(1815, 12, 10), "user_id": "u1"}


def test_from_row():
    assert BirthdayRecord.from_row(GOOD_ROW) == BirthdayRecord(
        id="b1", name="Ada", date=date(1815, 12, 10), user_id="u1"
    )


def test_from_row_ignores_extra_columns():
    record = BirthdayRecord.from_row({**GOOD_ROW, "created_at": datetime.now()})
    assert record.id == "b1"


def without(column):
    return {k: v for k, v in GOOD_ROW.items() if k != column}


BAD_ROWS = {
    "Missing id": (without("id"), "id"),
    "Missing date": (without("date"), "date"),
    "Null name": ({**GOOD_ROW, "name": None}, "name"),
    "Null owner": ({**GOOD_ROW, "user_id": None}, "user_id"),
    "Integer id": ({**GOOD_ROW, "id": 7}, "id"),
    "Date as text": ({**GOOD_ROW, "date": "1815-12-10"}, "date"),
    "Date with a time": ({**GOOD_ROW, "date": datetime(1815, 12, 10, 9)}, "date"),
}


@pytest.mark.parametrize(["row", "column"], BAD_ROWS.values(), ids=BAD_ROWS.keys())
def test_from_row_rejects(row, column):
    with pytest.raises(BirthdayDecodeError) as e:
        BirthdayRecord.from_row(row)

    assert e.value.column == column
    assert isinstance(e.value, ValueError)
