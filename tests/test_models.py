from datetime import datetime, timedelta, timezone

from awkit.models import Bucket, BucketMetadata, Event, TimeInterval


def _dt(second: int) -> datetime:
    return datetime(2000, 1, 1, 0, 0, second, tzinfo=timezone.utc)


def test_event_endtime():
    e = Event(timestamp=_dt(1), duration=timedelta(seconds=1))
    assert e.endtime() == _dt(2)


def test_event_interval_matches_endtime():
    e = Event(timestamp=_dt(3), duration=timedelta(seconds=4))
    iv = e.interval()
    assert iv.start == e.timestamp
    assert iv.end == e.endtime()
    assert iv.duration() == e.duration


def test_event_defaults():
    e = Event()
    assert e.duration == timedelta(0)
    assert e.data == {}
    assert e.id is None


def test_event_equality_depends_on_data():
    a = Event(timestamp=_dt(1), duration=timedelta(seconds=1), data={"test": 1})
    b = Event(timestamp=_dt(1), duration=timedelta(seconds=1), data={"test": 1})
    c = Event(timestamp=_dt(1), duration=timedelta(seconds=1), data={"test": 2})
    assert a == b
    assert not a == c


def test_intervals_touching_do_not_intersect():
    a = TimeInterval(_dt(1), _dt(2))
    b = TimeInterval(_dt(2), _dt(3))
    assert a.intersects(b) is False
    assert b.intersects(a) is False


def test_overlapping_intervals_intersect():
    a = TimeInterval(_dt(1), _dt(3))
    b = TimeInterval(_dt(2), _dt(4))
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_union_of_touching_intervals():
    a = TimeInterval(_dt(1), _dt(2))
    b = TimeInterval(_dt(2), _dt(3))
    assert a.union(b) == TimeInterval(_dt(1), _dt(3))
    assert b.union(a) == TimeInterval(_dt(1), _dt(3))


def test_union_with_gap_is_none():
    a = TimeInterval(_dt(1), _dt(2))
    b = TimeInterval(_dt(3), _dt(4))
    assert a.union(b) is None


def test_union_of_contained_interval():
    outer = TimeInterval(_dt(1), _dt(10))
    inner = TimeInterval(_dt(2), _dt(3))
    assert outer.union(inner) == outer


def test_bucket_defaults():
    b = Bucket(id="bucket-0", type="test", client="test", hostname="device-0")
    assert b.metadata == BucketMetadata()
    assert b.metadata.end is None
    assert b.data == {}
    assert b.events is None