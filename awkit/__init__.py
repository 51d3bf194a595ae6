"""Activity event transforms and syncing of event buckets between datastores."""

__version__ = "0.1.0"