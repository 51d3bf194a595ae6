"""Classification of events into categories and tags by matching rules."""

from __future__ import annotations

import dataclasses
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from awkit.models import Event

UNCATEGORIZED = "Uncategorized"


class Rule(ABC):
    """A condition an event either matches or not."""

    @abstractmethod
    def matches(self, event: Event) -> bool:
        """True if the event satisfies the rule."""


class NoneRule(Rule):
    """A rule that matches no event."""

    def matches(self, event: Event) -> bool:
        return False


class RegexRule(Rule):
    """Matches events that have a string value in which the regex finds a match."""

    def __init__(self, regex: str | re.Pattern[str], ignore_case: bool = False) -> None:
        if isinstance(regex, re.Pattern):
            if ignore_case and not regex.flags & re.IGNORECASE:
                regex = re.compile(regex.pattern, regex.flags | re.IGNORECASE)
            self.regex = regex
        else:
            self.regex = re.compile(regex, re.IGNORECASE if ignore_case else 0)

    def matches(self, event: Event) -> bool:
        return any(
            isinstance(value, str) and self.regex.search(value) is not None
            for value in event.data.values()
        )


def _categorize_one(event: Event, rules: Sequence[tuple[Sequence[str], Rule]]) -> Event:
    category: list[str] = [UNCATEGORIZED]
    for cat, rule in rules:
        # A deeper (or equally deep, later) category wins over the current one.
        if rule.matches(event) and len(cat) >= len(category):
            category = list(cat)
    data = dict(event.data)
    data["$category"] = category
    return dataclasses.replace(event, data=data)


def categorize(
    events: Iterable[Event], rules: Sequence[tuple[Sequence[str], Rule]]
) -> list[Event]:
    """Set the ``$category`` of each event to the deepest category whose rule matches.

    Events matching no rule get ``["Uncategorized"]``. The input events are left unchanged.
    """
    return [_categorize_one(event, rules) for event in events]


def _tag_one(event: Event, rules: Sequence[tuple[str, Rule]]) -> Event:
    tags = sorted({name for name, rule in rules if rule.matches(event)})
    data = dict(event.data)
    data["$tags"] = tags
    return dataclasses.replace(event, data=data)


def tag(events: Iterable[Event], rules: Sequence[tuple[str, Rule]]) -> list[Event]:
    """Set the ``$tags`` of each event to the sorted, distinct names of matching rules.

    The input events are left unchanged.
    """
    return [_tag_one(event, rules) for event in events]