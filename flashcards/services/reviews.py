from typing import NamedTuple, Optional

from django.db import transaction
from django.utils import timezone
import structlog

from ..data.models import Flashcard, ReviewLog
from ..data.repos import (
    get_card_for_update,
    get_existing_idempotent,
    persist_review,
)
from ..domain.enums import ReviewOutcome
from ..domain.logic import schedule
from ..utils.time import to_display_iso

logger = structlog.get_logger()


class ReviewResult(NamedTuple):
    card: Flashcard
    log: ReviewLog
    idempotent: bool


def record_review(owner, card_id, outcome, idempotency_key: Optional[str] = None, now=None):
    outcome = ReviewOutcome.coerce(outcome)
    logger.info("review_received",
        user_id=str(owner.pk),
        card_id=str(card_id),
        outcome=outcome.value,
        idempotency_key=idempotency_key,
    )

    # Fast path: return previous result if same idempotency_key
    existing = get_existing_idempotent(owner, card_id, idempotency_key)
    if existing:
        logger.info("idempotent_reuse",
            user_id=str(owner.pk),
            card_id=str(card_id),
            next_review_utc=existing.next_review_at.isoformat(),
            next_review_local=to_display_iso(existing.next_review_at),
        )
        return ReviewResult(existing.card, existing, True)

    now = now or timezone.now()
    with transaction.atomic():
        # Serialize schedule updates per card
        card = get_card_for_update(owner, card_id)
        step_before = card.step
        new_step, next_dt = schedule(step_before, outcome, now)

        log, was_idempotent = persist_review(
            owner, card, outcome.value, step_before, new_step,
            idempotency_key, now, next_dt,
        )
        if was_idempotent:
            return ReviewResult(log.card, log, True)

        card.step = new_step
        card.next_review_at = next_dt
        card.review_count += 1
        card.last_reviewed_at = now
        card.save(update_fields=[
            "step", "next_review_at", "review_count", "last_reviewed_at", "updated_at",
        ])

    logger.info("review_scheduled",
        user_id=str(owner.pk),
        card_id=str(card.pk),
        outcome=outcome.value,
        step_before=step_before,
        step_after=new_step,
        next_review_utc=next_dt.isoformat(),
        next_review_local=to_display_iso(next_dt),
    )

    return ReviewResult(card, log, False)
