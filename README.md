# awkit

Tools for working with activity-tracking events. It transforms events and
syncs buckets of events between two datastores.

An event is a `timestamp`, a `duration` and a `data` mapping. It is defined in
`awkit.models.Event`, which also provides `endtime()` and `interval()`. A bucket,
`awkit.models.Bucket`, groups the events that come from one client on one host.
`awkit.models.TimeInterval` provides `duration()`, `intersects()` and `union()`.

## Installation

```
pip install awkit
```

## Transforms

| Module | Functions |
| --- | --- |
| `awkit.sort` | `sort_by_timestamp`, `sort_by_duration` (longest first) |
| `awkit.heartbeat` | `heartbeat(last_event, heartbeat_event, pulsetime)` merges two events when their data is equal and the heartbeat falls within `pulsetime` seconds of the end of the last event. It returns the merged event, or `None` |
| `awkit.flood` | `flood(events, pulsetime)` closes gaps shorter than `pulsetime` and merges neighbours that carry equal data. `pulsetime` is a `timedelta` or a number of seconds |
| `awkit.merge` | `merge_events_by_keys(events, keys)` sums the durations of events that share values at all of `keys`. Events that lack a key are dropped |
| `awkit.chunk` | `chunk_events_by_key(events, key)` joins consecutive runs of events that have equal values at `key` |
| `awkit.filter_keyvals` | `filter_keyvals`, `exclude_keyvals`, and `filter_keyvals_regex`, which takes a pattern or a string |
| `awkit.filter_period` | `filter_period_intersect(events, filter_events)` keeps only the parts of events that overlap the filter events |
| `awkit.period_union` | `period_union(events1, events2)` returns the union of the time periods of both lists. The data of the returned events is emptied |
| `awkit.union_no_overlap` | `union_no_overlap(events1, events2)` combines two lists without overlap, and the first list takes precedence. `split_event(event, timestamp)` splits one event |
| `awkit.split_url` | `split_url_event(event)` adds `$protocol`, `$domain`, `$path` and `$params` to the event's data, taken from its `url`. It changes the event in place |
| `awkit.find_bucket` | `find_bucket(bucket_filter, hostname_filter, buckets)` returns the id of the first bucket with the given prefix. If a hostname is given, the bucket must also be on that host |
| `awkit.classify` | `categorize` and `tag`, with the rules `RegexRule` and `NoneRule` (both subclasses of `Rule`) |

All of these leave their input events unchanged, except `split_url_event`.

```python
from datetime import datetime, timedelta, timezone

from awkit.models import Event
from awkit.flood import flood

t0 = datetime(2000, 1, 1, tzinfo=timezone.utc)
events = [
    Event(timestamp=t0, duration=timedelta(seconds=1), data={"app": "editor"}),
    Event(timestamp=t0 + timedelta(seconds=3), duration=timedelta(seconds=1), data={"app": "editor"}),
]
merged = flood(events, timedelta(seconds=5))
# one event, starting at t0 and lasting 4 seconds
```

The next example classifies events with regular-expression rules:

```python
from awkit.classify import RegexRule, categorize, tag

rules = [
    (["Work"], RegexRule("editor")),
    (["Work", "Coding"], RegexRule("editor")),
]
categorized = categorize(events, rules)
# each event now has data["$category"] == ["Work", "Coding"]
```

A `RegexRule` matches an event when the regex finds a match in any of the
event's string values. Pass `ignore_case=True` to make the match ignore case.
When several categories match, the deepest one is chosen. Events that match no
rule get `["Uncategorized"]`. `tag` writes the names of the matching rules into
`data["$tags"]`, sorted and without duplicates.

## Syncing

`awkit.accessmethod.AccessMethod` is the abstract interface that a datastore
implements. It has the following methods:

- `get_buckets`
- `get_bucket`
- `create_bucket`
- `get_events`
- `insert_events`
- `get_event_count`
- `heartbeat`
- `close`

It also works as a context manager, and leaving the block closes it. Errors are
reported as `DatastoreError`, `NoSuchBucket` or `BucketAlreadyExists`.

`awkit.sync.sync_datastores(ds_from, ds_to, is_push, src_did, sync_spec)` copies
buckets and their events from one `AccessMethod` to another:

- When pushing (`is_push=True`), bucket ids are kept. When pulling, the
  destination bucket is named `<bucket>-synced-from-<origin>`. The origin is
  recorded in the bucket data under `$aw.sync.origin`.
- Missing destination buckets are created.
- Syncing resumes after the most recent event already present at the
  destination. Event ids are dropped. The first new event goes through
  `heartbeat`, and the rest are inserted in batches of 5000.
- Buckets whose hostname is `unknown` take `src_did` as their hostname. If no
  `src_did` is given, a `ValueError` is raised.
- Buckets are synced in order of their metadata `end`.

`awkit.sync.SyncSpec` has the fields `path`, `path_db`, `buckets` and `start`.
`sync_datastores` uses only `buckets`, which limits the sync to the listed bucket
ids. If a listed bucket is missing from the source, an error is logged.
`awkit.sync.SyncMode` (`PUSH`, `PULL`, `BOTH`) names the directions of a sync
pass.

### Sync folder helpers

- `awkit.dirs.get_sync_dir()` returns `$AW_SYNC_DIR`, or `~/ActivityWatchSync`
  when that variable is not set.
- `awkit.dirs.get_config_dir()` returns the user configuration directory for
  sync and creates it if needed.
- The sync folder is laid out as `<host>/<device id>/*.db`.
  `awkit.util.get_remotes()` lists the host names in it.
- `awkit.util.find_remotes(sync_directory)` lists the `.db` files one level
  down.
- `awkit.util.find_remotes_nonlocal(sync_directory, device_id, sync_db)` lists
  those files whose path does not contain `device_id`. If `sync_db` is given,
  only files under that path are listed.
- `awkit.util.get_server_port(config_path, testing)` reads an integer `port`
  from a TOML file. It falls back to 5601, or to 5667 when `testing`.

## What this package does not do

The package contains no datastore and no client for an activity server. Nothing
implements `AccessMethod`, so you supply both sides of a sync yourself. The
package has no command-line program and no daemon. It also does not copy the
sync folder between machines, which is left to a file-synchronisation tool of
your choice.

## Running the tests

```
pip install -e ".[test]"
pytest
```