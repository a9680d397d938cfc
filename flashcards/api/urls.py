from django.urls import path
from .views import (
    CardBulkView,
    CardDetailView,
    CardListView,
    DeckListView,
    DueCardsView,
    ReviewView,
    TimelineView,
)

urlpatterns = [
    path("flashcards", CardListView.as_view(), name="flashcard-list"),
    path("flashcards/bulk", CardBulkView.as_view(), name="flashcard-bulk"),
    path("flashcards/due", DueCardsView.as_view(), name="flashcard-due"),
    path("flashcards/timeline", TimelineView.as_view(), name="flashcard-timeline"),
    path("flashcards/<uuid:card_id>", CardDetailView.as_view(), name="flashcard-detail"),
    path("flashcards/<uuid:card_id>/review", ReviewView.as_view(), name="flashcard-review"),
    path("decks", DeckListView.as_view(), name="deck-list"),
    path("decks/<uuid:deck_id>/timeline", TimelineView.as_view(), name="deck-timeline"),
]
