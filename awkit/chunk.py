"""Chunking of consecutive events sharing a key value."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from awkit.models import Event


def chunk_events_by_key(events: Iterable[Event], key: str) -> list[Event]:
    """Join runs of consecutive events that have the same value at ``key``.

    Events without ``key`` are dropped. The durations of a run are summed into
    its first event.
    """
    chunked: list[Event] = []
    for event in events:
        if key not in event.data:
            continue
        value = event.data[key]
        if chunked and chunked[-1].data[key] == value:
            chunked[-1].duration += event.duration
        else:
            chunked.append(dataclasses.replace(event))
    return chunked