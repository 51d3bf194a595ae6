"""Filtering of events by the value stored at a key."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any

from awkit.models import Event


def _json_equal(a: Any, b: Any) -> bool:
    # Booleans and numbers are distinct JSON values even though Python equates them.
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def _matches_any(event: Event, key: str, vals: Sequence[Any]) -> bool:
    if key not in event.data:
        return False
    value = event.data[key]
    return any(_json_equal(val, value) for val in vals)


def filter_keyvals(events: Iterable[Event], key: str, vals: Sequence[Any]) -> list[Event]:
    """Keep only the events whose value at ``key`` equals one of ``vals``."""
    return [event for event in events if _matches_any(event, key, vals)]


def filter_keyvals_regex(
    events: Iterable[Event], key: str, regex: re.Pattern[str] | str
) -> list[Event]:
    """Keep only the events whose string value at ``key`` contains a match of ``regex``."""
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    return [
        event
        for event in events
        if isinstance(value := event.data.get(key), str) and pattern.search(value)
    ]


def exclude_keyvals(events: Iterable[Event], key: str, vals: Sequence[Any]) -> list[Event]:
    """Drop the events whose value at ``key`` equals one of ``vals``."""
    return [event for event in events if not _matches_any(event, key, vals)]