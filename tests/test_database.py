import io

import pytest

from beltworks.condition import parse_condition
from beltworks.database import Database
from beltworks.dates import Date


def _predicate(text):
    condition = parse_condition(text)
    return condition.evaluate


def _printed(db):
    out = io.StringIO()
    db.print_to(out)
    return out.getvalue()


@pytest.fixture
def holidays():
    db = Database()
    db.add(Date(2017, 1, 1), "New Year")
    db.add(Date(2017, 3, 8), "Holiday")
    db.add(Date(2017, 1, 1), "Holiday")
    return db


def test_last_before_first_entry_raises(holidays):
    with pytest.raises(LookupError):
        holidays.last(Date(2016, 12, 31))


def test_last_returns_latest_added_on_nearest_date(holidays):
    assert holidays.last(Date(2017, 1, 1)) == "2017-01-01 Holiday"
    assert holidays.last(Date(2017, 6, 1)) == "2017-03-08 Holiday"


def test_last_sees_new_entries(holidays):
    holidays.add(Date(2017, 5, 9), "Holiday")
    assert holidays.last(Date(2017, 6, 1)) == "2017-05-09 Holiday"


def test_print_orders_by_date_and_skips_duplicates():
    db = Database()
    db.add(Date(2017, 1, 1), "Holiday")
    db.add(Date(2017, 3, 8), "Holiday")
    db.add(Date(2017, 1, 1), "New Year")
    db.add(Date(2017, 1, 1), "New Year")
    assert _printed(db) == "2017-01-01 Holiday\n2017-01-01 New Year\n2017-03-08 Holiday\n"


def test_print_empty():
    assert _printed(Database()) == ""


def test_find_if():
    db = Database()
    db.add(Date(2017, 1, 1), "Holiday")
    db.add(Date(2017, 3, 8), "Holiday")
    db.add(Date(2017, 1, 1), "New Year")
    entries = db.find_if(_predicate('event != "working day"'))
    assert entries == [
        (Date(2017, 1, 1), "Holiday"),
        (Date(2017, 1, 1), "New Year"),
        (Date(2017, 3, 8), "Holiday"),
    ]


def test_find_if_does_not_modify(holidays):
    before = _printed(holidays)
    holidays.find_if(lambda date, event: True)
    assert _printed(holidays) == before


def test_remove_if():
    db = Database()
    db.add(Date(2017, 6, 1), "1st of June")
    db.add(Date(2017, 7, 8), "8th of July")
    db.add(Date(2017, 7, 8), "Someone's birthday")
    removed = db.remove_if(_predicate("date == 2017-07-08"))
    assert removed == 2
    assert _printed(db) == "2017-06-01 1st of June\n"
    assert db.last(Date(2017, 12, 31)) == "2017-06-01 1st of June"


def test_removed_entry_can_be_added_again(holidays):
    holidays.remove_if(_predicate('event == "Holiday"'))
    assert holidays.find_if(lambda date, event: True) == [(Date(2017, 1, 1), "New Year")]
    holidays.add(Date(2017, 3, 8), "Holiday")
    assert holidays.last(Date(2017, 6, 1)) == "2017-03-08 Holiday"


def test_remove_all_then_last_raises(holidays):
    assert holidays.remove_if(_predicate("")) == 3
    with pytest.raises(LookupError):
        holidays.last(Date(2100, 1, 1))