"""Core data types: events, time intervals and buckets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TimeInterval:
    """A half-open span of time between ``start`` and ``end``."""

    start: datetime
    end: datetime

    def duration(self) -> timedelta:
        """Length of the interval."""
        return self.end - self.start

    def intersects(self, other: TimeInterval) -> bool:
        """True if the two intervals share a span of non-zero length."""
        return self.start < other.end and other.start < self.end

    def union(self, other: TimeInterval) -> TimeInterval | None:
        """The interval covering both, or None if there is a gap between them."""
        if self.start <= other.end and other.start <= self.end:
            return TimeInterval(min(self.start, other.start), max(self.end, other.end))
        return None


@dataclass
class Event:
    """A timestamped event with a duration and arbitrary JSON data."""

    timestamp: datetime = field(default_factory=_utcnow)
    duration: timedelta = field(default_factory=timedelta)
    data: dict[str, Any] = field(default_factory=dict)
    id: int | None = None

    def endtime(self) -> datetime:
        """The moment the event ends."""
        return self.timestamp + self.duration

    def interval(self) -> TimeInterval:
        """The span of time the event covers."""
        return TimeInterval(self.timestamp, self.endtime())


@dataclass
class BucketMetadata:
    """Time range covered by the events of a bucket, if known."""

    start: datetime | None = None
    end: datetime | None = None


@dataclass
class Bucket:
    """A named container of events produced by one client on one host."""

    id: str
    type: str
    client: str
    hostname: str
    created: datetime | None = None
    data: dict[str, Any] = field(default_factory=dict)
    metadata: BucketMetadata = field(default_factory=BucketMetadata)
    events: list[Event] | None = None
    last_updated: datetime | None = None
    bid: int | None = None