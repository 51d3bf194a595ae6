"""Union of the time periods covered by two event lists."""

from __future__ import annotations

from collections.abc import Iterable

from awkit.models import Event
from awkit.sort import sort_by_timestamp


def period_union(events1: Iterable[Event], events2: Iterable[Event]) -> list[Event]:
    """Return events covering the union of the periods of both lists, without overlap.

    Touching or overlapping periods are joined. The data of every returned
    event is emptied, as it cannot be kept consistent.
    """
    union: list[Event] = []
    for event in sort_by_timestamp([*events1, *events2]):
        if union:
            joined = event.interval().union(union[-1].interval())
            if joined is not None:
                union[-1].duration = joined.duration()
                continue
        union.append(Event(timestamp=event.timestamp, duration=event.duration, id=event.id))
    return union