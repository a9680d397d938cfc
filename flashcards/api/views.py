from django.utils import timezone
from rest_framework import status, views
from rest_framework.response import Response
import structlog
import uuid

from ..data.repos import get_card, get_deck
from ..domain.enums import OUTCOME_LABELS, ReviewOutcome, outcome_from_swipe
from ..domain.timeline import describe_next_due
from ..services import cards as card_service
from ..services.reviews import record_review
from ..utils.time import to_display_iso
from .serializers import (
    BulkCreateSerializer,
    CardCreateSerializer,
    CardSerializer,
    CardUpdateSerializer,
    DeckCreateSerializer,
    DeckSerializer,
    DeckWithStatsSerializer,
    DueQuerySerializer,
    ReviewInSerializer,
    serialize_timeline,
)

base_logger = structlog.get_logger()


def request_logger():
    return base_logger.bind(request_id=str(uuid.uuid4()))


class ReviewView(views.APIView):
    def post(self, request, card_id):
        logger = request_logger()

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        if "rating" not in s.validated_data and "swipe" in s.validated_data:
            outcome = outcome_from_swipe(s.validated_data["swipe"])
        else:
            outcome = ReviewOutcome.coerce(s.validated_data.get("rating"))
        idem = s.validated_data.get("idempotency_key")

        card, log, was_idem = record_review(request.user, card_id, outcome, idem)
        status_code = status.HTTP_200_OK if was_idem else status.HTTP_201_CREATED

        logger.info(
            "review_api_response",
            user_id=str(request.user.pk),
            card_id=str(card_id),
            outcome=log.outcome,
            idempotent=was_idem,
            step=log.step_after,
            next_review_utc=log.next_review_at.isoformat(),
            next_review_local=to_display_iso(log.next_review_at),
            status=status_code,
        )

        return Response(
            {
                "id": str(card.pk),
                "rating": log.outcome,
                "rating_label": OUTCOME_LABELS[ReviewOutcome(log.outcome)],
                "step": log.step_after,
                # Live total; a replay still echoes the logged step and due time
                "review_count": card.review_count,
                "next_review_at": log.next_review_at.isoformat(),
                "idempotent": was_idem,
            },
            status=status_code,
        )


class DueCardsView(views.APIView):
    def get(self, request):
        logger = request_logger()

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        deck_id = qs.validated_data.get("deck_id")

        now = timezone.now()
        cards = card_service.get_due_cards(request.user, deck_id, now)

        logger.info(
            "due_cards_api_response",
            user_id=str(request.user.pk),
            deck_id=str(deck_id) if deck_id else None,
            now_utc=now.isoformat(),
            card_count=len(cards),
        )

        return Response(
            {
                "cards": CardSerializer(cards, many=True).data,
                "total_due": len(cards),
            }
        )


class TimelineView(views.APIView):
    def get(self, request, deck_id=None):
        logger = request_logger()

        now = timezone.now()
        timeline = card_service.get_timeline(request.user, deck_id, now)
        label = describe_next_due(timeline.next_due_at, now)

        logger.info(
            "timeline_api_response",
            user_id=str(request.user.pk),
            deck_id=str(deck_id) if deck_id else None,
            total_upcoming=timeline.total_upcoming,
            next_due_utc=timeline.next_due_at.isoformat() if timeline.next_due_at else None,
        )

        return Response(serialize_timeline(timeline, label))


class CardListView(views.APIView):
    def post(self, request):
        s = CardCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        deck = get_deck(request.user, data["deck_id"])
        card = card_service.create_card(
            deck, data["front_content"], data["back_content"], data.get("delay")
        )
        return Response(CardSerializer(card).data, status=status.HTTP_201_CREATED)


class CardBulkView(views.APIView):
    def post(self, request):
        s = BulkCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        deck = get_deck(request.user, s.validated_data["deck_id"])
        created = card_service.bulk_create_cards(deck, s.validated_data["cards"])
        return Response(
            {"deck_id": str(deck.pk), "created": created},
            status=status.HTTP_201_CREATED,
        )


class CardDetailView(views.APIView):
    def patch(self, request, card_id):
        card = get_card(request.user, card_id)

        s = CardUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        card = card_service.update_card(
            card,
            front=data.get("front_content"),
            back=data.get("back_content"),
            delay=data.get("delay"),
        )
        return Response(CardSerializer(card).data)

    def delete(self, request, card_id):
        card_service.delete_card(get_card(request.user, card_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class DeckListView(views.APIView):
    def get(self, request):
        decks = card_service.list_decks(request.user)
        return Response({"decks": DeckWithStatsSerializer(decks, many=True).data})

    def post(self, request):
        s = DeckCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        deck = card_service.create_deck(
            request.user, s.validated_data["name"], s.validated_data["description"]
        )
        return Response(DeckSerializer(deck).data, status=status.HTTP_201_CREATED)
