"""Splitting of an event's URL into protocol, domain, path and params."""

from __future__ import annotations

from urllib.parse import urlsplit

from awkit.models import Event

_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss", "file"})


def split_url_event(event: Event) -> None:
    """Add ``$protocol``, ``$domain``, ``$path`` and ``$params`` to the event's data.

    Does nothing if the event has no string ``url`` or it cannot be parsed.
    """
    url = event.data.get("url")
    if not isinstance(url, str):
        return
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return
    if not parts.scheme:
        return
    if parts.scheme in _SPECIAL_SCHEMES - {"file"} and not hostname:
        return

    domain = hostname or ""
    while domain.startswith("www."):
        domain = domain[len("www."):]

    path = parts.path
    if not path and parts.scheme in _SPECIAL_SCHEMES:
        path = "/"

    event.data["$protocol"] = parts.scheme
    event.data["$domain"] = domain
    event.data["$path"] = path
    event.data["$params"] = parts.query