import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from ..config import IDEMPOTENCY_KEY_MAX_LENGTH, MAX_STEP
from ..domain.enums import ReviewOutcome

OUTCOME_CHOICES = [(o.value, o.value) for o in ReviewOutcome]


class Deck(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="decks"
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]


class Flashcard(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    deck = models.ForeignKey(Deck, on_delete=models.CASCADE, related_name="cards")
    front_content = models.TextField()
    back_content = models.TextField()
    step = models.PositiveSmallIntegerField(default=0)
    review_count = models.PositiveIntegerField(default=0)
    next_review_at = models.DateTimeField(default=timezone.now)  # UTC
    last_reviewed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["next_review_at", "id"]
        indexes = [
            models.Index(fields=["deck", "next_review_at"], name="flashcard_deck_due_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(step__lte=MAX_STEP), name="flashcard_step_lte_max"
            ),
        ]

    @property
    def is_new(self):
        return self.review_count == 0


class ReviewLog(models.Model):
    card = models.ForeignKey(Flashcard, on_delete=models.CASCADE, related_name="reviews")
    outcome = models.CharField(max_length=16, choices=OUTCOME_CHOICES)
    step_before = models.PositiveSmallIntegerField()
    step_after = models.PositiveSmallIntegerField()
    idempotency_key = models.CharField(
        max_length=IDEMPOTENCY_KEY_MAX_LENGTH, null=True, blank=True
    )
    reviewed_at = models.DateTimeField(default=timezone.now)
    next_review_at = models.DateTimeField()

    class Meta:
        unique_together = (("card", "idempotency_key"),)
        indexes = [
            models.Index(fields=["card", "reviewed_at"], name="reviewlog_card_time_idx"),
        ]
