import dataclasses
from datetime import datetime, timedelta, timezone

from awkit.chunk import chunk_events_by_key
from awkit.models import Event


def _base() -> Event:
    return Event(
        timestamp=datetime(2000, 1, 1, 0, 0, 1, tzinfo=timezone.utc),
        duration=timedelta(seconds=1),
        data={"test": 1},
    )


def test_chunk_events_by_key():
    e1 = _base()
    e2 = dataclasses.replace(e1, data={"test2": 1})
    e3 = dataclasses.replace(e1)
    e4 = dataclasses.replace(e1, data={"test": 2})

    res = chunk_events_by_key([e1, e2, e3, e4], "test")
    assert len(res) == 2
    assert res[0].duration == timedelta(seconds=2)
    assert res[1].duration == timedelta(seconds=1)


def test_chunk_does_not_modify_input():
    e1 = _base()
    e2 = dataclasses.replace(e1)
    chunk_events_by_key([e1, e2], "test")
    assert e1.duration == timedelta(seconds=1)


def test_chunk_without_key_is_empty():
    assert chunk_events_by_key([_base()], "missing") == []