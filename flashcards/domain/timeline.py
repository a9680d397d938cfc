"""
Timeline bucketing of flashcards by time until their next review.

Cards are classified into ten fixed periods anchored at ``now``. Each period
covers the half-open window ``(previous_bound, bound]``; ``due`` holds every
card with ``next_review_at <= now`` and ``36_months`` holds everything past
the 24 month bound. The result always contains all ten periods so clients can
render a fixed layout.

Anything with ``id`` and ``next_review_at`` attributes can be bucketed: ORM
rows and :class:`CardState` both work. Cards are never mutated.
"""
import math
from bisect import bisect_left
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from ..config import TIMELINE_PERIODS
from ..utils.time import as_utc

DUE = TIMELINE_PERIODS[0][0]


@dataclass
class CardState:
    id: Any
    next_review_at: datetime
    step: int = 0
    review_count: int = 0
    deck_id: Optional[UUID] = None
    front_content: str = ""
    back_content: str = ""

    @property
    def is_new(self):
        return self.review_count == 0


@dataclass
class TimelinePeriod:
    period: str
    cards: List[Any] = field(default_factory=list)

    @property
    def count(self):
        return len(self.cards)


@dataclass
class Timeline:
    periods: List[TimelinePeriod]
    total_upcoming: int
    next_due_at: Optional[datetime]

    def period(self, name):
        for p in self.periods:
            if p.period == name:
                return p
        raise KeyError(name)


def _sort_key(card):
    return (as_utc(card.next_review_at), str(card.id))


def classify(next_review_at: datetime, now: datetime) -> str:
    """Name of the period that ``next_review_at`` falls into relative to ``now``."""
    delta = as_utc(next_review_at) - as_utc(now)
    bounds = [bound for _, bound in TIMELINE_PERIODS]
    index = bisect_left(bounds, delta)
    if index >= len(TIMELINE_PERIODS):
        index = len(TIMELINE_PERIODS) - 1
    return TIMELINE_PERIODS[index][0]


def bucket(cards, now: datetime) -> List[TimelinePeriod]:
    periods = {name: TimelinePeriod(name) for name, _ in TIMELINE_PERIODS}
    for card in sorted(cards, key=_sort_key):
        periods[classify(card.next_review_at, now)].cards.append(card)
    return [periods[name] for name, _ in TIMELINE_PERIODS]


def select_due(cards, now: datetime) -> list:
    now = as_utc(now)
    return sorted(
        (card for card in cards if as_utc(card.next_review_at) <= now),
        key=_sort_key,
    )


def next_due_at(periods) -> Optional[datetime]:
    """Soonest review time in the first non-due period that has cards."""
    for period in periods:
        if period.period == DUE or period.count == 0:
            continue
        return min(as_utc(card.next_review_at) for card in period.cards)
    return None


def build_timeline(cards, now: datetime) -> Timeline:
    periods = bucket(cards, now)
    total_upcoming = sum(p.count for p in periods if p.period != DUE)
    return Timeline(periods, total_upcoming, next_due_at(periods))


def describe_next_due(when: Optional[datetime], now: datetime) -> Optional[str]:
    if when is None:
        return None
    seconds = (as_utc(when) - as_utc(now)).total_seconds()
    if seconds <= 0:
        return None

    hours = math.ceil(seconds / 3600)
    days = math.ceil(seconds / 86400)
    if hours <= 1:
        return "in 1 hour"
    if hours < 24:
        return f"in {hours} hours"
    if days == 1:
        return "tomorrow"
    return f"in {days} days"
