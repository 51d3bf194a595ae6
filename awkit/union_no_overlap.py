"""Merging of two event lists without overlap, the first taking precedence."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from datetime import datetime

from awkit.models import Event


def split_event(event: Event, timestamp: datetime) -> tuple[Event, Event | None]:
    """Split ``event`` at ``timestamp`` if it lies strictly inside it.

    Returns the part before and the part after; if no split happens the
    second item is None and the first is a copy of the event.
    """
    if event.timestamp < timestamp < event.endtime():
        before = Event(
            timestamp=event.timestamp,
            duration=timestamp - event.timestamp,
            data=dict(event.data),
        )
        after = Event(
            timestamp=timestamp,
            duration=event.duration - (timestamp - event.timestamp),
            data=dict(event.data),
        )
        return before, after
    return Event(
        timestamp=event.timestamp, duration=event.duration, data=dict(event.data), id=event.id
    ), None


def union_no_overlap(events1: Iterable[Event], events2: Iterable[Event]) -> list[Event]:
    """Merge two timestamp-ordered event lists, cutting ``events2`` where it overlaps ``events1``."""
    first = deque(events1)
    second = deque(events2)
    union: list[Event] = []

    while first and second:
        e1 = first[0]
        e2 = second[0]

        if e1.interval().intersects(e2.interval()):
            if e1.timestamp <= e2.timestamp:
                union.append(first.popleft())
                # Keep only the part of e2 that continues after e1.
                _, rest = split_event(e2, e1.endtime())
                if rest is not None:
                    second[0] = rest
                else:
                    second.popleft()
            else:
                head, rest = split_event(e2, e1.timestamp)
                union.append(head)
                second.popleft()
                if rest is not None:
                    second.appendleft(rest)
        elif e1.timestamp <= e2.timestamp:
            union.append(first.popleft())
        else:
            union.append(second.popleft())

    union.extend(first)
    union.extend(second)
    return union