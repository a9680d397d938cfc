import uuid
from datetime import timedelta

import pytest
from django.urls import reverse

from flashcards.config import MAX_STEP, PERIOD_NAMES
from flashcards.data.models import Flashcard
from flashcards.exceptions import DeckNotFound, InvalidDelayError
from flashcards.services.cards import (
    bulk_create_cards,
    create_card,
    create_deck,
    get_due_cards,
    get_timeline,
    list_decks,
    update_card,
)


def period_counts(payload):
    return {p["period"]: p["count"] for p in payload["periods"]}


@pytest.mark.django_db
class TestDeckEndpoints:
    def test_create_and_list_decks_with_stats(self, api_client, user):
        resp = api_client.post(reverse("deck-list"), {"name": "Kanji"}, format="json")
        assert resp.status_code == 201
        deck_id = resp.json()["id"]

        deck = user.decks.get(pk=deck_id)
        card = create_card(deck, "水", "water")
        create_card(deck, "火", "fire", delay="1_week")
        card.review_count = 3
        card.save()

        decks = api_client.get(reverse("deck-list")).json()["decks"]
        assert len(decks) == 1
        assert decks[0]["name"] == "Kanji"
        assert decks[0]["card_count"] == 2
        assert decks[0]["due_count"] == 1
        assert decks[0]["new_count"] == 1

    def test_empty_deck_has_zero_stats(self, api_client, deck):
        decks = api_client.get(reverse("deck-list")).json()["decks"]
        assert decks == [
            {
                "id": str(deck.id),
                "name": "Spanish",
                "description": "",
                "created_at": decks[0]["created_at"],
                "card_count": 0,
                "due_count": 0,
                "new_count": 0,
            }
        ]

    def test_decks_are_private(self, api_client, other_user):
        create_deck(other_user, "Not yours")
        assert api_client.get(reverse("deck-list")).json()["decks"] == []

    def test_deck_name_required(self, api_client):
        resp = api_client.post(reverse("deck-list"), {}, format="json")
        assert resp.status_code == 400
        assert "name" in resp.json()


@pytest.mark.django_db
class TestCardEndpoints:
    def test_create_card_defaults_to_due_now(self, api_client, deck):
        resp = api_client.post(
            reverse("flashcard-list"),
            {"deck_id": str(deck.id), "front_content": "hola", "back_content": "hello"},
            format="json",
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["step"] == 0
        assert data["review_count"] == 0
        assert data["is_new"] is True
        assert data["deck_id"] == str(deck.id)

    def test_create_card_with_delay(self, api_client, deck):
        resp = api_client.post(
            reverse("flashcard-list"),
            {
                "deck_id": str(deck.id),
                "front_content": "hola",
                "back_content": "hello",
                "delay": "3_months",
            },
            format="json",
        )
        assert resp.json()["step"] == 4

    def test_create_card_rejects_unknown_delay(self, api_client, deck):
        resp = api_client.post(
            reverse("flashcard-list"),
            {"deck_id": str(deck.id), "front_content": "a", "back_content": "b", "delay": "2_days"},
            format="json",
        )
        assert resp.status_code == 400
        assert "delay" in resp.json()

    def test_create_card_in_foreign_deck_returns_404(self, api_client, other_user):
        foreign = create_deck(other_user, "Private")
        resp = api_client.post(
            reverse("flashcard-list"),
            {"deck_id": str(foreign.id), "front_content": "a", "back_content": "b"},
            format="json",
        )
        assert resp.status_code == 404

    def test_bulk_create(self, api_client, deck):
        resp = api_client.post(
            reverse("flashcard-bulk"),
            {
                "deck_id": str(deck.id),
                "cards": [
                    {"front": "uno", "back": "one"},
                    {"front": "dos", "back": "two", "delay": "1_day"},
                    {"front": "tres", "back": "three", "delay": "36_months"},
                ],
            },
            format="json",
        )
        assert resp.status_code == 201
        assert resp.json()["created"] == 3
        assert sorted(deck.cards.values_list("step", flat=True)) == [0, 1, MAX_STEP]

    def test_bulk_create_rejects_empty_list(self, api_client, deck):
        resp = api_client.post(
            reverse("flashcard-bulk"), {"deck_id": str(deck.id), "cards": []}, format="json"
        )
        assert resp.status_code == 400

    def test_patch_content_keeps_schedule(self, api_client, deck):
        card = create_card(deck, "hola", "hi", delay="1_month")
        due_before = card.next_review_at

        resp = api_client.patch(
            reverse("flashcard-detail", kwargs={"card_id": str(card.id)}),
            {"back_content": "hello"},
            format="json",
        )
        assert resp.status_code == 200
        card.refresh_from_db()
        assert card.back_content == "hello"
        assert card.front_content == "hola"
        assert card.step == 3
        assert card.next_review_at == due_before

    def test_patch_delay_moves_card(self, api_client, deck):
        card = create_card(deck, "hola", "hello")

        resp = api_client.patch(
            reverse("flashcard-detail", kwargs={"card_id": str(card.id)}),
            {"delay": "12_months"},
            format="json",
        )
        assert resp.json()["step"] == 6

    def test_delete_card(self, api_client, deck):
        card = create_card(deck, "hola", "hello")

        resp = api_client.delete(reverse("flashcard-detail", kwargs={"card_id": str(card.id)}))

        assert resp.status_code == 204
        assert not Flashcard.objects.filter(pk=card.pk).exists()

    def test_delete_unknown_card_returns_404(self, api_client):
        resp = api_client.delete(reverse("flashcard-detail", kwargs={"card_id": str(uuid.uuid4())}))
        assert resp.status_code == 404


@pytest.mark.django_db
class TestTimelineEndpoints:
    def test_empty_timeline_has_fixed_shape(self, api_client):
        data = api_client.get(reverse("flashcard-timeline")).json()

        assert [p["period"] for p in data["periods"]] == list(PERIOD_NAMES)
        assert all(p["count"] == 0 and p["cards"] == [] for p in data["periods"])
        assert data["total_upcoming"] == 0
        assert data["next_due_at"] is None
        assert data["next_due_label"] is None

    def test_timeline_groups_cards(self, api_client, deck):
        create_card(deck, "a", "a")
        create_card(deck, "b", "b", delay="1_day")
        create_card(deck, "c", "c", delay="1_week")
        create_card(deck, "d", "d", delay="1_week")
        create_card(deck, "e", "e", delay="36_months")

        data = api_client.get(reverse("flashcard-timeline")).json()
        counts = period_counts(data)

        assert counts["due"] == 1
        assert counts["1_day"] == 1
        assert counts["1_week"] == 2
        assert counts["36_months"] == 1
        assert sum(counts.values()) == 5
        assert data["total_upcoming"] == 4
        assert data["next_due_at"] is not None
        assert data["next_due_label"] in ("in 23 hours", "in 24 hours", "tomorrow")

    def test_deck_timeline_is_scoped(self, api_client, user, deck):
        other = create_deck(user, "French")
        create_card(deck, "a", "a", delay="1_day")
        create_card(other, "b", "b", delay="1_day")

        data = api_client.get(reverse("deck-timeline", kwargs={"deck_id": str(other.id)})).json()

        assert data["total_upcoming"] == 1
        assert period_counts(data)["1_day"] == 1

    def test_deck_timeline_unknown_deck(self, api_client):
        resp = api_client.get(reverse("deck-timeline", kwargs={"deck_id": str(uuid.uuid4())}))
        assert resp.status_code == 404


@pytest.mark.django_db
class TestCardServices:
    def test_timeline_after_reviews(self, user, deck, now):
        create_card(deck, "a", "a", now=now)
        create_card(deck, "b", "b", delay="3_months", now=now)

        timeline = get_timeline(user, now=now)

        assert timeline.period("due").count == 1
        assert timeline.period("3_months").count == 1
        assert timeline.next_due_at == now + timedelta(days=90)

    def test_get_due_cards_orders_by_due_time(self, user, deck, now):
        later = create_card(deck, "late", "x", now=now - timedelta(hours=1))
        earlier = create_card(deck, "early", "x", now=now - timedelta(days=2))
        create_card(deck, "future", "x", delay="1_day", now=now)

        assert get_due_cards(user, now=now) == [earlier, later]

    def test_bulk_create_validates_before_writing(self, deck, now):
        with pytest.raises(InvalidDelayError):
            bulk_create_cards(
                deck,
                [{"front": "ok", "back": "ok"}, {"front": "bad", "back": "bad", "delay": "soon"}],
                now=now,
            )
        assert deck.cards.count() == 0

    def test_update_card_rejects_unknown_delay(self, deck):
        card = create_card(deck, "a", "b")
        with pytest.raises(InvalidDelayError):
            update_card(card, delay="forever")

    def test_list_decks_stats_at_given_time(self, user, deck, now):
        create_card(deck, "a", "a", delay="1_day", now=now)

        assert list_decks(user, now=now)[0].due_count == 0
        assert list_decks(user, now=now + timedelta(days=1))[0].due_count == 1

    def test_timeline_for_foreign_deck(self, other_user, deck):
        with pytest.raises(DeckNotFound):
            get_timeline(other_user, deck_id=deck.id)
