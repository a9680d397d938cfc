from typing import Iterable, List, Mapping, Optional

from django.db import transaction
from django.utils import timezone
import structlog

from ..data.models import Deck, Flashcard
from ..data.repos import cards_for_owner, decks_with_stats, due_cards_for_owner, get_deck
from ..domain.logic import place
from ..domain.timeline import Timeline, build_timeline, select_due

logger = structlog.get_logger()


def create_deck(owner, name: str, description: str = "") -> Deck:
    deck = Deck.objects.create(owner=owner, name=name, description=description)
    logger.info("deck_created", user_id=str(owner.pk), deck_id=str(deck.pk))
    return deck


def list_decks(owner, now=None):
    return list(decks_with_stats(owner, now or timezone.now()))


def _new_card(deck, front, back, delay, now):
    step, next_review_at = place(delay, now)
    return Flashcard(
        deck=deck,
        front_content=front,
        back_content=back,
        step=step,
        next_review_at=next_review_at,
    )


def create_card(deck: Deck, front: str, back: str, delay: Optional[str] = None, now=None) -> Flashcard:
    card = _new_card(deck, front, back, delay, now or timezone.now())
    card.save()
    logger.info("card_created",
        deck_id=str(deck.pk),
        card_id=str(card.pk),
        step=card.step,
        next_review_utc=card.next_review_at.isoformat(),
    )
    return card


def bulk_create_cards(deck: Deck, cards: Iterable[Mapping], now=None) -> int:
    """Create many cards at once; each item has ``front``, ``back`` and optional ``delay``."""
    now = now or timezone.now()
    # Validate every delay before anything is written
    rows = [_new_card(deck, c["front"], c["back"], c.get("delay"), now) for c in cards]
    with transaction.atomic():
        created = Flashcard.objects.bulk_create(rows)
    logger.info("cards_bulk_created", deck_id=str(deck.pk), created=len(created))
    return len(created)


def update_card(card: Flashcard, front=None, back=None, delay=None, now=None) -> Flashcard:
    fields = ["updated_at"]
    if front is not None:
        card.front_content = front
        fields.append("front_content")
    if back is not None:
        card.back_content = back
        fields.append("back_content")
    if delay is not None:
        card.step, card.next_review_at = place(delay, now or timezone.now())
        fields += ["step", "next_review_at"]
    card.save(update_fields=fields)
    logger.info("card_updated", card_id=str(card.pk), fields=fields[1:])
    return card


def delete_card(card: Flashcard) -> None:
    card_id = str(card.pk)
    card.delete()
    logger.info("card_deleted", card_id=card_id)


def get_due_cards(owner, deck_id=None, now=None) -> List[Flashcard]:
    now = now or timezone.now()
    if deck_id is not None:
        get_deck(owner, deck_id)
    return select_due(due_cards_for_owner(owner, now, deck_id), now)


def get_timeline(owner, deck_id=None, now=None) -> Timeline:
    now = now or timezone.now()
    if deck_id is not None:
        get_deck(owner, deck_id)
    timeline = build_timeline(cards_for_owner(owner, deck_id), now)
    logger.info("timeline_built",
        user_id=str(owner.pk),
        deck_id=str(deck_id) if deck_id else None,
        total_upcoming=timeline.total_upcoming,
        due=timeline.period("due").count,
    )
    return timeline
