from rest_framework import serializers

from ..config import DELAYS, IDEMPOTENCY_KEY_MAX_LENGTH
from ..data.models import Deck, Flashcard

DELAY_CHOICES = list(DELAYS)


class ReviewInSerializer(serializers.Serializer):
    # Any JSON value is accepted; unknown ratings are scored as "forgot"
    rating = serializers.JSONField(required=False, allow_null=True)
    swipe = serializers.JSONField(required=False, allow_null=True)
    idempotency_key = serializers.CharField(
        required=False, allow_null=True, max_length=IDEMPOTENCY_KEY_MAX_LENGTH
    )


class DueQuerySerializer(serializers.Serializer):
    deck_id = serializers.UUIDField(required=False)


class CardSerializer(serializers.ModelSerializer):
    deck_id = serializers.UUIDField(read_only=True)
    is_new = serializers.BooleanField(read_only=True)

    class Meta:
        model = Flashcard
        fields = [
            "id", "deck_id", "front_content", "back_content",
            "step", "review_count", "is_new", "next_review_at",
        ]


class CardCreateSerializer(serializers.Serializer):
    deck_id = serializers.UUIDField()
    front_content = serializers.CharField()
    back_content = serializers.CharField()
    delay = serializers.ChoiceField(choices=DELAY_CHOICES, required=False)


class CardUpdateSerializer(serializers.Serializer):
    front_content = serializers.CharField(required=False)
    back_content = serializers.CharField(required=False)
    delay = serializers.ChoiceField(choices=DELAY_CHOICES, required=False)


class BulkCardSerializer(serializers.Serializer):
    front = serializers.CharField()
    back = serializers.CharField()
    delay = serializers.ChoiceField(choices=DELAY_CHOICES, required=False)


class BulkCreateSerializer(serializers.Serializer):
    deck_id = serializers.UUIDField()
    cards = BulkCardSerializer(many=True, allow_empty=False)


class DeckCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(allow_blank=True, default="")


class DeckSerializer(serializers.ModelSerializer):
    class Meta:
        model = Deck
        fields = ["id", "name", "description", "created_at"]


class DeckWithStatsSerializer(DeckSerializer):
    card_count = serializers.IntegerField(read_only=True)
    due_count = serializers.IntegerField(read_only=True)
    new_count = serializers.IntegerField(read_only=True)

    class Meta(DeckSerializer.Meta):
        fields = DeckSerializer.Meta.fields + ["card_count", "due_count", "new_count"]


def serialize_timeline(timeline, label):
    return {
        "periods": [
            {
                "period": p.period,
                "count": p.count,
                "cards": CardSerializer(p.cards, many=True).data,
            }
            for p in timeline.periods
        ],
        "total_upcoming": timeline.total_upcoming,
        "next_due_at": timeline.next_due_at.isoformat() if timeline.next_due_at else None,
        "next_due_label": label,
    }
