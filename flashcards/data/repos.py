from django.db import IntegrityError, transaction
from django.db.models import Count, Q

from ..exceptions import CardNotFound, DeckNotFound
from .models import Deck, Flashcard, ReviewLog


def get_card_for_update(owner, card_id):
    """
    Fetch the owner's card and lock it for update so reviews of the same
    card are applied one at a time. Must run inside a transaction.
    """
    try:
        return (Flashcard.objects
                .select_for_update(of=("self",))
                .get(pk=card_id, deck__owner=owner))
    except Flashcard.DoesNotExist:
        raise CardNotFound(card_id) from None


def get_card(owner, card_id):
    try:
        return Flashcard.objects.select_related("deck").get(pk=card_id, deck__owner=owner)
    except Flashcard.DoesNotExist:
        raise CardNotFound(card_id) from None


def get_deck(owner, deck_id):
    try:
        return Deck.objects.get(pk=deck_id, owner=owner)
    except Deck.DoesNotExist:
        raise DeckNotFound(deck_id) from None


def get_existing_idempotent(owner, card_id, idem_key):
    if not idem_key:
        return None
    return (ReviewLog.objects
            .select_related("card")
            .filter(card_id=card_id, card__deck__owner=owner, idempotency_key=idem_key)
            .first())


def persist_review(owner, card, outcome, step_before, step_after, idem_key, reviewed_at, next_review_at):
    """
    Insert ReviewLog; if a concurrent duplicate slips in, return the existing one.
    """
    try:
        with transaction.atomic():
            return ReviewLog.objects.create(
                card=card, outcome=outcome, step_before=step_before,
                step_after=step_after, idempotency_key=idem_key or None,
                reviewed_at=reviewed_at, next_review_at=next_review_at,
            ), False
    except IntegrityError:
        # Duplicate idempotency key safeguard
        existing = get_existing_idempotent(owner, card.pk, idem_key)
        if existing is None:
            raise
        return existing, True


def cards_for_owner(owner, deck_id=None):
    qs = Flashcard.objects.filter(deck__owner=owner)
    if deck_id is not None:
        qs = qs.filter(deck_id=deck_id)
    return qs.order_by("next_review_at", "id")


def due_cards_for_owner(owner, now, deck_id=None):
    return cards_for_owner(owner, deck_id).filter(next_review_at__lte=now)


def decks_with_stats(owner, now):
    return (Deck.objects
            .filter(owner=owner)
            .annotate(
                card_count=Count("cards"),
                due_count=Count("cards", filter=Q(cards__next_review_at__lte=now)),
                new_count=Count("cards", filter=Q(cards__review_count=0)),
            )
            .order_by("created_at", "id"))
