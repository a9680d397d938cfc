from datetime import datetime, timedelta
from typing import NamedTuple, Optional

from ..config import DEFAULT_DELAY, DELAYS, MAX_STEP, STEP_LADDER
from ..exceptions import InvalidDelayError, InvalidStepError
from ..utils.time import as_utc, utc_now
from .enums import ReviewOutcome


class ScheduleResult(NamedTuple):
    new_step: int
    next_review_at: datetime


def validate_step(step) -> int:
    # bool is an int subclass but never a valid step
    if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step <= MAX_STEP:
        raise InvalidStepError(step)
    return step


def ladder_duration(step: int) -> timedelta:
    return STEP_LADDER[validate_step(step)]


def next_step(step: int, outcome) -> int:
    step = validate_step(step)
    outcome = ReviewOutcome.coerce(outcome)

    if outcome is ReviewOutcome.GOOD:
        return min(step + 1, MAX_STEP)
    if outcome is ReviewOutcome.HARD:
        return step
    return 0


def schedule(step: int, outcome, now: Optional[datetime] = None) -> ScheduleResult:
    """Compute the card's new step and next due time for a review outcome.

    FORGOT resets to step 0, HARD keeps the current step and GOOD advances one
    step, stopping at the top of the ladder. Unrecognized outcomes count as
    FORGOT. The due time is ``now`` plus the ladder duration of the new step,
    always in UTC.
    """
    new_step = next_step(step, outcome)
    now = as_utc(now) if now is not None else utc_now()
    return ScheduleResult(new_step, now + ladder_duration(new_step))


def place(delay: Optional[str] = None, now: Optional[datetime] = None) -> ScheduleResult:
    """Initial step and due time for a card created directly in a timeline tier."""
    label = DEFAULT_DELAY if delay is None else delay
    try:
        step, offset = DELAYS[label]
    except (KeyError, TypeError):
        raise InvalidDelayError(delay) from None
    now = as_utc(now) if now is not None else utc_now()
    return ScheduleResult(step, now + offset)
