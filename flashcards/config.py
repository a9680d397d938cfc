from datetime import timedelta

# Step ladder: index is the card's step, value is the spacing until the next review.
STEP_LADDER = (
    timedelta(0),           # due immediately
    timedelta(days=1),
    timedelta(weeks=1),
    timedelta(days=30),     # 1 month
    timedelta(days=90),     # 3 months
    timedelta(days=180),    # 6 months
    timedelta(days=365),    # 12 months
    timedelta(days=545),    # 18 months
    timedelta(days=730),    # 24 months
)
MAX_STEP = len(STEP_LADDER) - 1

# Top timeline tier; never produced by a review, only by an explicit delay.
CEILING_DURATION = timedelta(days=1095)  # 36 months

# Upper bound of each timeline period, relative to "now".
TIMELINE_PERIODS = (
    ("due", timedelta(0)),
    ("1_day", STEP_LADDER[1]),
    ("1_week", STEP_LADDER[2]),
    ("1_month", STEP_LADDER[3]),
    ("3_months", STEP_LADDER[4]),
    ("6_months", STEP_LADDER[5]),
    ("12_months", STEP_LADDER[6]),
    ("18_months", STEP_LADDER[7]),
    ("24_months", STEP_LADDER[8]),
    ("36_months", CEILING_DURATION),
)
PERIOD_NAMES = tuple(name for name, _ in TIMELINE_PERIODS)

# Initial placement of a new card: delay label -> (step, offset from now)
DELAYS = {
    "now": (0, STEP_LADDER[0]),
    "1_day": (1, STEP_LADDER[1]),
    "1_week": (2, STEP_LADDER[2]),
    "1_month": (3, STEP_LADDER[3]),
    "3_months": (4, STEP_LADDER[4]),
    "6_months": (5, STEP_LADDER[5]),
    "12_months": (6, STEP_LADDER[6]),
    "18_months": (7, STEP_LADDER[7]),
    "24_months": (8, STEP_LADDER[8]),
    "36_months": (MAX_STEP, CEILING_DURATION),
}
DEFAULT_DELAY = "now"

IDEMPOTENCY_KEY_MAX_LENGTH = 64
