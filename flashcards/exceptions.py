from .config import MAX_STEP


class SchedulingError(Exception):
    """Base class for errors raised while scheduling or placing cards."""


class InvalidStepError(SchedulingError, ValueError):
    def __init__(self, step):
        self.step = step
        super().__init__(f"step must be an integer in 0..{MAX_STEP}, got {step!r}")


class InvalidDelayError(SchedulingError, ValueError):
    def __init__(self, delay):
        self.delay = delay
        super().__init__(f"unknown delay label: {delay!r}")


class CardNotFound(Exception):
    def __init__(self, card_id):
        self.card_id = card_id
        super().__init__(f"flashcard {card_id} not found")


class DeckNotFound(Exception):
    def __init__(self, deck_id):
        self.deck_id = deck_id
        super().__init__(f"deck {deck_id} not found")
