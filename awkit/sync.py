"""Syncing of buckets and their events between two datastores.

The sync folder holds one staging datastore per device. Local buckets are
pushed into the staging datastore of this device. Buckets from the staging
datastores of other devices are pulled into the local one under the id
``{bucket}-synced-from-{origin}``.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from awkit.accessmethod import AccessMethod, NoSuchBucket
from awkit.models import Bucket, Event

logger = logging.getLogger(__name__)

SYNC_ORIGIN_KEY = "$aw.sync.origin"
SYNCED_FROM = "-synced-from-"
BATCH_SIZE = 5000


class SyncMode(enum.Enum):
    """Which directions a sync pass covers."""

    PUSH = "push"
    PULL = "pull"
    BOTH = "both"

    @property
    def pulls(self) -> bool:
        """True if remote buckets are pulled in this mode."""
        return self in (SyncMode.PULL, SyncMode.BOTH)

    @property
    def pushes(self) -> bool:
        """True if local buckets are pushed in this mode."""
        return self in (SyncMode.PUSH, SyncMode.BOTH)


@dataclass
class SyncSpec:
    """What to sync and where."""

    path: Path = field(default_factory=lambda: Path("/tmp/aw-sync"))
    """Path of the sync folder."""
    path_db: Path | None = None
    """Path of a single sync database; all are used if None."""
    buckets: list[str] | None = None
    """Ids of the buckets to sync; all are synced if None."""
    start: datetime | None = None
    """Start of the time range to sync."""


def _copy_bucket(bucket: Bucket) -> Bucket:
    return dataclasses.replace(bucket, data=dict(bucket.data))


def _sort_key_by_end(bucket: Bucket) -> tuple[bool, datetime | None]:
    end = bucket.metadata.end
    # Buckets without a known end come first.
    return (end is not None, end)


def _destination_id(bucket_from: Bucket, is_push: bool) -> str:
    if is_push:
        return bucket_from.id
    original_id = bucket_from.id.split(SYNCED_FROM, 1)[0]
    origin = bucket_from.data.get(SYNC_ORIGIN_KEY, bucket_from.hostname)
    if not isinstance(origin, str):
        raise TypeError(
            f"Sync origin of bucket {bucket_from.id!r} must be a string, got {origin!r}"
        )
    return f"{original_id}{SYNCED_FROM}{origin}"


def _get_or_create_sync_bucket(
    bucket_from: Bucket, ds_to: AccessMethod, is_push: bool
) -> Bucket:
    """The destination bucket for ``bucket_from``, created if it does not exist."""
    new_id = _destination_id(bucket_from, is_push)
    try:
        return ds_to.get_bucket(new_id)
    except NoSuchBucket:
        pass
    bucket_new = _copy_bucket(bucket_from)
    bucket_new.id = new_id
    bucket_new.data[SYNC_ORIGIN_KEY] = bucket_from.hostname
    ds_to.create_bucket(bucket_new)
    return ds_to.get_bucket(new_id)


def _source_buckets(
    ds_from: AccessMethod, src_did: str | None, sync_spec: SyncSpec
) -> list[Bucket]:
    wanted = sync_spec.buckets
    buckets: list[Bucket] = []
    for bucket in ds_from.get_buckets().values():
        if wanted is not None and bucket.id not in wanted:
            continue
        bucket = _copy_bucket(bucket)
        if bucket.hostname == "unknown":
            if src_did is None:
                raise ValueError(
                    f"Bucket {bucket.id!r} has an unknown hostname and no source device id was given"
                )
            logger.warning(
                " ! Bucket hostname/device ID was invalid, setting to device ID/hostname"
            )
            bucket.hostname = src_did
        buckets.append(bucket)

    if wanted is not None:
        found = {bucket.id for bucket in buckets}
        for bucket_id in wanted:
            if bucket_id not in found:
                logger.error(' ! Bucket "%s" not found in source datastore', bucket_id)
    return buckets


def sync_datastores(
    ds_from: AccessMethod,
    ds_to: AccessMethod,
    is_push: bool,
    src_did: str | None,
    sync_spec: SyncSpec,
) -> None:
    """Sync all selected buckets of ``ds_from`` into ``ds_to``.

    ``is_push`` tells whether local buckets are pushed to the sync folder
    (keeping their ids) rather than pulled from a remote (ids get a
    ``-synced-from-{origin}`` suffix). ``src_did`` is the source device id,
    used for buckets whose hostname is ``unknown``. Buckets are synced in
    order of their most recent event.
    """
    logger.info("Syncing %r to %r", ds_from, ds_to)
    buckets_from = sorted(_source_buckets(ds_from, src_did, sync_spec), key=_sort_key_by_end)
    for bucket_from in buckets_from:
        bucket_to = _get_or_create_sync_bucket(bucket_from, ds_to, is_push)
        _sync_one(ds_from, ds_to, bucket_from, bucket_to)


def _batches(events: list[Event], size: int) -> Iterator[list[Event]]:
    for start in range(0, len(events), size):
        yield events[start : start + size]


def _sync_one(
    ds_from: AccessMethod, ds_to: AccessMethod, bucket_from: Bucket, bucket_to: Bucket
) -> None:
    """Copy the events of one bucket not yet present in its destination."""
    count_before = ds_to.get_event_count(bucket_to.id)
    logger.info(" ⟳  Syncing bucket '%s'", bucket_to.id)

    most_recent = ds_to.get_events(bucket_to.id, None, None, 1)
    resume_at = most_recent[0].endtime() if most_recent else None
    if resume_at is not None:
        logger.info("   + Resuming at %s", resume_at)
    else:
        logger.info("   + Starting from beginning")

    # Event ids are not globally unique, so they are dropped.
    events = sorted(
        (
            dataclasses.replace(e, id=None, data=dict(e.data))
            for e in ds_from.get_events(bucket_from.id, resume_at, None, None)
        ),
        key=lambda e: e.timestamp,
    )

    if events:
        # The first event goes through a heartbeat so it merges with the last synced one.
        first, rest = events[0], events[1:]
        ds_to.heartbeat(bucket_to.id, first, 0.0)
        sent = 1
        for batch in _batches(rest, BATCH_SIZE):
            ds_to.insert_events(bucket_to.id, batch)
            sent += len(batch)
            logger.debug("%s (%d/%d)", batch[-1].timestamp, sent, len(events))

    new_count = ds_to.get_event_count(bucket_to.id) - count_before
    if new_count < 0:
        raise RuntimeError(
            f"Event count of bucket {bucket_to.id!r} decreased by {-new_count} during sync"
        )
    if new_count > 0:
        logger.info("  = Synced %d new events", new_count)
    else:
        logger.info("  ✓ Already up to date!")