"""A common interface over local datastores and remote servers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from types import TracebackType

from awkit.models import Bucket, Event


class DatastoreError(Exception):
    """Base class of errors reported by a datastore."""


class NoSuchBucket(DatastoreError):
    """The requested bucket does not exist."""

    def __init__(self, bucket_id: str) -> None:
        super().__init__(f"No such bucket: {bucket_id}")
        self.bucket_id = bucket_id


class BucketAlreadyExists(DatastoreError):
    """A bucket with the given id already exists."""

    def __init__(self, bucket_id: str) -> None:
        super().__init__(f"Bucket already exists: {bucket_id}")
        self.bucket_id = bucket_id


class AccessMethod(ABC):
    """Read and write access to buckets and events, wherever they are stored.

    Usable as a context manager; leaving the block closes it.
    """

    @abstractmethod
    def get_buckets(self) -> dict[str, Bucket]:
        """All buckets, keyed by id."""

    @abstractmethod
    def get_bucket(self, bucket_id: str) -> Bucket:
        """The bucket with the given id; raises NoSuchBucket if there is none."""

    @abstractmethod
    def create_bucket(self, bucket: Bucket) -> None:
        """Store a new bucket; raises BucketAlreadyExists if its id is taken."""

    @abstractmethod
    def get_events(
        self,
        bucket_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> list[Event]:
        """Events of a bucket within the given range, most recent first."""

    @abstractmethod
    def insert_events(self, bucket_id: str, events: list[Event]) -> None:
        """Store the events in the bucket."""

    @abstractmethod
    def get_event_count(self, bucket_id: str) -> int:
        """Number of events stored in the bucket."""

    @abstractmethod
    def heartbeat(self, bucket_id: str, event: Event, duration: float) -> None:
        """Merge the event into the last one of the bucket if within ``duration`` seconds."""

    def close(self) -> None:
        """Release held resources. Does nothing unless overridden."""

    def __enter__(self) -> AccessMethod:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()