from .data.models import Deck, Flashcard, ReviewLog  # noqa: F401
