from datetime import datetime, timedelta, timezone

from awkit.models import Event
from awkit.sort import sort_by_duration, sort_by_timestamp


def _dt(second: int) -> datetime:
    return datetime(2000, 1, 1, 0, 0, second, tzinfo=timezone.utc)


def test_sort_by_timestamp():
    e1 = Event(timestamp=_dt(0), duration=timedelta(seconds=1), data={"test": 1})
    e2 = Event(timestamp=_dt(3), duration=timedelta(seconds=1), data={"test": 1})
    assert sort_by_timestamp([e2, e1]) == [e1, e2]


def test_sort_by_duration():
    e1 = Event(timestamp=_dt(0), duration=timedelta(seconds=2), data={"test": 1})
    e2 = Event(timestamp=_dt(3), duration=timedelta(seconds=1), data={"test": 1})
    assert sort_by_duration([e2, e1]) == [e1, e2]


def test_sort_does_not_modify_input():
    e1 = Event(timestamp=_dt(0), duration=timedelta(seconds=2))
    e2 = Event(timestamp=_dt(3), duration=timedelta(seconds=1))
    original = [e2, e1]
    sort_by_timestamp(original)
    assert original == [e2, e1]


def test_sort_by_duration_is_stable():
    a = Event(timestamp=_dt(1), duration=timedelta(seconds=1), data={"n": 1})
    b = Event(timestamp=_dt(2), duration=timedelta(seconds=1), data={"n": 2})
    assert sort_by_duration([a, b]) == [a, b]