"""Merging of heartbeat events into the last stored event."""

from __future__ import annotations

import logging
from datetime import timedelta

from awkit.models import Event

logger = logging.getLogger(__name__)


def heartbeat(last_event: Event, heartbeat_event: Event, pulsetime: float) -> Event | None:
    """Merge two events with equal data lying within ``pulsetime`` seconds.

    Returns the merged event, or None if they cannot be merged.
    """
    if heartbeat_event.data != last_event.data:
        logger.debug("Can't merge, data is different")
        return None

    last_endtime = last_event.endtime()
    heartbeat_endtime = heartbeat_event.endtime()

    last_endtime_allowed = last_endtime + timedelta(seconds=pulsetime)
    if last_event.timestamp > heartbeat_event.timestamp:
        logger.debug("Can't merge, last event timestamp is after heartbeat timestamp")
        return None
    if heartbeat_event.timestamp > last_endtime_allowed:
        logger.debug("Can't merge, heartbeat timestamp is after last event endtime")
        return None

    starttime = min(heartbeat_event.timestamp, last_event.timestamp)
    endtime = max(last_endtime, heartbeat_endtime)
    duration = endtime - starttime
    if duration < timedelta(0):
        logger.debug("Merging heartbeats would result in a negative duration, refusing to merge!")
        return None

    return Event(
        timestamp=starttime,
        duration=duration,
        data=dict(last_event.data),
    )