"""Merging of events by the values of chosen keys."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable

from awkit.models import Event


def _value_key(value: object) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def merge_events_by_keys(events: Iterable[Event], keys: list[str]) -> list[Event]:
    """Merge all events that have equal values at every one of ``keys``.

    Events missing any of the keys are dropped. Each merged event keeps the
    timestamp and data of the first event of its group and the summed duration.
    An empty key list yields no events.
    """
    if not keys:
        return []
    merged: dict[tuple[str, ...], Event] = {}
    for event in events:
        if any(key not in event.data for key in keys):
            continue
        group = tuple(_value_key(event.data[key]) for key in keys)
        if group in merged:
            merged[group].duration += event.duration
        else:
            merged[group] = dataclasses.replace(event, id=None, data=dict(event.data))
    return list(merged.values())