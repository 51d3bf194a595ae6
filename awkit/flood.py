"""Flooding of small gaps between events and merging of neighbours with equal data."""

from __future__ import annotations

import dataclasses
import logging
from collections import deque
from collections.abc import Iterable
from datetime import timedelta

from awkit.models import Event
from awkit.sort import sort_by_timestamp

logger = logging.getLogger(__name__)

# Negative gaps smaller than this between events with different data are tolerated silently.
_NEGATIVE_GAP_TRIM_THRESHOLD = timedelta(milliseconds=100)


def _merge_into(e1: Event, e2: Event) -> None:
    start = min(e1.timestamp, e2.timestamp)
    end = max(e1.endtime(), e2.endtime())
    e1.timestamp = start
    e1.duration = end - start


def flood(events: Iterable[Event], pulsetime: timedelta | float) -> list[Event]:
    """Fill gaps shorter than ``pulsetime`` between events and merge equal neighbours.

    Events are processed in timestamp order. Two neighbouring events with equal
    data are merged if they overlap or the gap between them is shorter than
    ``pulsetime``. Otherwise a short gap is split in half, each event growing
    into its half. ``pulsetime`` is a timedelta or a number of seconds.
    The input events are left unchanged.
    """
    if not isinstance(pulsetime, timedelta):
        pulsetime = timedelta(seconds=pulsetime)

    pending = deque(
        dataclasses.replace(e, data=dict(e.data)) for e in sort_by_timestamp(events)
    )
    flooded: list[Event] = []
    gap_prev: timedelta | None = None
    warned_negative_gap_safe = False
    warned_negative_gap_unsafe = False

    while pending:
        e1 = pending.popleft()
        if gap_prev is not None:
            half = gap_prev / 2
            e1.timestamp -= half
            e1.duration += half
            gap_prev = None

        if not pending:
            flooded.append(e1)
            break
        e2 = pending[0]

        gap = e2.timestamp - e1.endtime()

        if gap < timedelta(0):
            if e1.data == e2.data:
                if not warned_negative_gap_safe:
                    logger.warning(
                        "Gap was of negative duration (%ss), but could be safely merged. "
                        "This error will only show once per batch.",
                        gap.total_seconds(),
                    )
                    warned_negative_gap_safe = True
                _merge_into(e1, e2)
                pending.popleft()
                # Retry the merged event so it can also merge with the one after.
                pending.appendleft(e1)
                continue
            if gap < -_NEGATIVE_GAP_TRIM_THRESHOLD and not warned_negative_gap_unsafe:
                logger.warning(
                    "Gap was of negative duration and could NOT be safely merged (%ss). "
                    "This warning will only show once per batch.",
                    gap.total_seconds(),
                )
                warned_negative_gap_unsafe = True
        elif gap < pulsetime:
            if e1.data == e2.data:
                _merge_into(e1, e2)
                pending.popleft()
                pending.appendleft(e1)
                continue
            e1.duration += gap / 2
            gap_prev = gap

        flooded.append(e1)
    return flooded