import pytest

from awkit.accessmethod import (
    AccessMethod,
    BucketAlreadyExists,
    DatastoreError,
    NoSuchBucket,
)
from awkit.models import Bucket, Event


class _DictStore(AccessMethod):
    def __init__(self):
        self.buckets = {}
        self.events = {}
        self.closed = False

    def get_buckets(self):
        return dict(self.buckets)

    def get_bucket(self, bucket_id):
        try:
            return self.buckets[bucket_id]
        except KeyError:
            raise NoSuchBucket(bucket_id) from None

    def create_bucket(self, bucket):
        if bucket.id in self.buckets:
            raise BucketAlreadyExists(bucket.id)
        self.buckets[bucket.id] = bucket
        self.events[bucket.id] = []

    def get_events(self, bucket_id, start=None, end=None, limit=None):
        return list(self.events[bucket_id])[:limit]

    def insert_events(self, bucket_id, events):
        self.events[bucket_id].extend(events)

    def get_event_count(self, bucket_id):
        return len(self.events[bucket_id])

    def heartbeat(self, bucket_id, event, duration):
        self.events[bucket_id].append(event)

    def close(self):
        self.closed = True


def _bucket(bucket_id="b"):
    return Bucket(id=bucket_id, type="test", client="test", hostname="device-0")


def test_access_method_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AccessMethod()


def test_incomplete_subclass_cannot_be_instantiated():
    class Partial(AccessMethod):
        def get_buckets(self):
            return {"b": _bucket("b")}

    with pytest.raises(TypeError):
        Partial()

    complete = _DictStore()
    complete.create_bucket(_bucket("b"))
    assert list(complete.get_buckets()) == ["b"]


def test_no_such_bucket_carries_id():
    err = NoSuchBucket("bucket-0")
    assert isinstance(err, DatastoreError)
    assert err.bucket_id == "bucket-0"
    assert "bucket-0" in str(err)


def test_bucket_already_exists_carries_id():
    err = BucketAlreadyExists("bucket-1")
    assert isinstance(err, DatastoreError)
    assert err.bucket_id == "bucket-1"


def test_context_manager_closes():
    store = _DictStore()
    with store as entered:
        assert entered is store
        store.create_bucket(_bucket("ctx"))
        assert not store.closed
    assert store.closed
    assert store.get_bucket("ctx").hostname == "device-0"


def test_context_manager_closes_on_error():
    store = _DictStore()
    bucket = Bucket(id="present", type="test", client="test", hostname="device-1")
    with pytest.raises(NoSuchBucket) as excinfo:
        with store:
            store.create_bucket(bucket)
            store.get_bucket("missing")
    assert excinfo.value.bucket_id == "missing"
    assert isinstance(excinfo.value, DatastoreError)
    assert store.closed
    assert store.get_bucket("present").hostname == "device-1"


def test_default_close_returns_none():
    store = _DictStore()
    assert AccessMethod.close(store) is None
    assert store.closed is False


def test_subclass_errors_are_datastore_errors():
    store = _DictStore()
    bucket = _bucket("b")
    store.create_bucket(bucket)
    with pytest.raises(DatastoreError):
        store.create_bucket(bucket)
    with pytest.raises(NoSuchBucket):
        store.get_bucket("missing")
    store.insert_events("b", [Event(), Event()])
    assert store.get_event_count("b") == 2