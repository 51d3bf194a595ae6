"""Intersection of events with a set of filtering periods."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from datetime import timedelta

from awkit.models import Event
from awkit.sort import sort_by_timestamp


def _copies(events: Iterable[Event]) -> Iterator[Event]:
    for event in events:
        yield dataclasses.replace(event, data=dict(event.data))


def filter_period_intersect(
    events: Iterable[Event], filter_events: Iterable[Event]
) -> list[Event]:
    """Keep only the parts of ``events`` that lie within some of ``filter_events``.

    Events are cut at the boundaries of the filter events, so one event may
    yield several pieces. Zero-length events are dropped. The input events are
    left unchanged.
    """
    sorted_events = sort_by_timestamp(events)
    sorted_filters = sort_by_timestamp(filter_events)
    if not sorted_events or not sorted_filters:
        return []

    event_iter = _copies(sorted_events)
    filter_iter = iter(sorted_filters)
    current = next(event_iter)
    current_filter = next(filter_iter)
    filtered: list[Event] = []

    while True:
        event_end = current.endtime()
        filter_end = current_filter.endtime()

        if current.duration == timedelta(0) or event_end <= current_filter.timestamp:
            following = next(event_iter, None)
            if following is None:
                return filtered
            current = following
            continue

        if current.timestamp >= filter_end:
            following_filter = next(filter_iter, None)
            if following_filter is None:
                return filtered
            current_filter = following_filter
            continue

        start = max(current.timestamp, current_filter.timestamp)
        end = min(event_end, filter_end)
        filtered.append(
            dataclasses.replace(
                current, timestamp=start, duration=end - start, data=dict(current.data)
            )
        )

        # Trim the part already emitted from the current event.
        current.timestamp = end
        current.duration = event_end - end