from enum import Enum


class ReviewOutcome(str, Enum):
    FORGOT = "forgot"
    HARD = "hard"
    GOOD = "good"

    @classmethod
    def coerce(cls, value):
        """Map any incoming value onto an outcome; unrecognized values become FORGOT."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.FORGOT


OUTCOME_LABELS = {
    ReviewOutcome.FORGOT: "Forgot",
    ReviewOutcome.HARD: "Hard",
    ReviewOutcome.GOOD: "Good",
}

# Swipe direction on the review card -> outcome
SWIPE_OUTCOMES = {
    "left": ReviewOutcome.FORGOT,
    "up": ReviewOutcome.HARD,
    "right": ReviewOutcome.GOOD,
}


def outcome_from_swipe(direction) -> ReviewOutcome:
    try:
        return SWIPE_OUTCOMES.get(direction, ReviewOutcome.FORGOT)
    except TypeError:
        return ReviewOutcome.FORGOT
